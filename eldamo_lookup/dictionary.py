"""
Dictionary loading for eldamo-lookup.

This module owns the process-wide query engine:
- compile_or_load() parses the Eldamo XML and compiles it
- load_dictionary() installs the compiled dictionary behind a QueryEngine
- lookup() / lookup_json() answer queries once the dictionary is loaded

Loading is the only blocking step and is done once, at startup. If it
fails, no dictionary is installed and lookups return no results.
"""

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from eldamo_lookup.cache import DEFAULT_CACHE_SIZE, RecencyCache
from eldamo_lookup.compiler import CompiledDictionary, compile_dictionary
from eldamo_lookup.engine import QueryEngine
from eldamo_lookup.lexicon import LexiconParseError, parse_lexicon

logger = logging.getLogger(__name__)


class DictionaryLoadError(Exception):
    """Raised when the raw dictionary is missing or cannot be parsed."""
    pass


# ============================================================================
# Paths
# ============================================================================

def get_dictionary_path() -> Path:
    """Get the default raw dictionary path."""
    return Path(__file__).parent / "data" / "eldamo-data.xml"


# ============================================================================
# Compilation
# ============================================================================

def compile_or_load(source: Union[str, Path, bytes]) -> CompiledDictionary:
    """
    Parse and compile a raw Eldamo dictionary.

    Compiling the same source twice gives equal results.

    Args:
        source: Path to the XML file, or its content as bytes

    Returns:
        The compiled dictionary (possibly with zero entries)

    Raises:
        DictionaryLoadError: If the source cannot be read or parsed
    """
    t0 = time.perf_counter()
    try:
        root = parse_lexicon(source)
    except LexiconParseError as e:
        raise DictionaryLoadError(str(e)) from e

    compiled = compile_dictionary(root)
    elapsed = (time.perf_counter() - t0) * 1000
    logger.info(
        f"Loaded {len(compiled.entries):,} entries "
        f"({len(compiled.gloss_table):,} short glosses) in {elapsed:.1f}ms"
    )
    return compiled


# ============================================================================
# Process-wide Engine
# ============================================================================

_ENGINE: Optional[QueryEngine] = None


def is_dictionary_loaded() -> bool:
    """Check if a dictionary is loaded and ready for queries."""
    return _ENGINE is not None


def load_dictionary(
    path: Optional[Union[str, Path]] = None,
    cache_size: int = DEFAULT_CACHE_SIZE,
) -> QueryEngine:
    """
    Load the dictionary and install the process-wide query engine.

    Does nothing if a dictionary is already loaded.

    Args:
        path: Path to the Eldamo XML file. Uses default if not specified.
        cache_size: Number of query results to keep cached

    Returns:
        The installed QueryEngine

    Raises:
        DictionaryLoadError: If the dictionary cannot be loaded
    """
    global _ENGINE

    if _ENGINE is not None:
        return _ENGINE

    if path is None:
        path = get_dictionary_path()

    if not Path(path).exists():
        raise DictionaryLoadError(
            f"Dictionary not found at {path}. "
            "Download eldamo-data.xml from https://eldamo.org and pass it "
            f"with --dictionary, or copy it to {get_dictionary_path()}."
        )

    try:
        compiled = compile_or_load(Path(path))
    except DictionaryLoadError:
        logger.error(f"Error loading dictionary from {path}")
        raise

    _ENGINE = QueryEngine(compiled, RecencyCache(cache_size))
    return _ENGINE


def get_engine() -> Optional[QueryEngine]:
    """Get the installed query engine, if any."""
    return _ENGINE


def lookup_json(text: str) -> str:
    """
    Look up raw query text, returning the results as a JSON array.

    Returns "[]" when no dictionary is loaded.
    """
    if _ENGINE is None:
        logger.warning("Lookup before the dictionary was loaded")
        return "[]"
    return _ENGINE.lookup(text)


def lookup(text: str) -> List[Dict[str, Any]]:
    """
    Look up raw query text.

    Args:
        text: The query as typed; it is folded and lowercased here

    Returns:
        Matching entries as dictionaries, in dictionary order.
        Empty when nothing matches or no dictionary is loaded.
    """
    return json.loads(lookup_json(text))


def get_dictionary_size() -> int:
    """Get the number of entries in the loaded dictionary."""
    if _ENGINE is None:
        return 0
    return len(_ENGINE.dictionary)


def unload_dictionary():
    """Unload the dictionary and drop the cached results."""
    global _ENGINE
    _ENGINE = None
