"""
eldamo-lookup: Fuzzy lookup in the Eldamo Elvish dictionary

Compiles the Eldamo XML lexicon into flat, scorable entries and answers
fuzzy queries against headwords and glosses, ranked by a relevance score.

Basic Usage:
    import eldamo_lookup

    eldamo_lookup.warm_up()
    for entry in eldamo_lookup.lookup("Nolofinwë"):
        print(f"{entry['headword']} [{entry['score']}] {entry['gloss']}")
"""

import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from eldamo_lookup.cache import RecencyCache
from eldamo_lookup.compiler import DictionaryEntry
from eldamo_lookup.dictionary import DictionaryLoadError
from eldamo_lookup.engine import QueryEngine, ResultEntry
from eldamo_lookup.folding import fold
from eldamo_lookup.lexicon import LexiconNode, find_word, parse_lexicon

__version__ = "0.1.0"


# =============================================================================
# Main API
# =============================================================================

def lookup(text: str) -> List[Dict[str, Any]]:
    """
    Look up a word or gloss in the loaded dictionary.

    Args:
        text: Query text; accents and case are ignored

    Returns:
        Matching entries (dicts with headword, score, language,
        part_of_speech, gloss, stem, notes, tengwar, elements), in
        dictionary order. Empty if nothing matches or no dictionary is
        loaded.

    Example:
        >>> eldamo_lookup.lookup("aragorn")[0]["score"]
        100
    """
    from eldamo_lookup.dictionary import lookup as _lookup
    return _lookup(text)


def lookup_json(text: str) -> str:
    """Same as lookup(), serialized as a JSON array."""
    from eldamo_lookup.dictionary import lookup_json as _lookup_json
    return _lookup_json(text)


def warm_up(path: Optional[Union[str, Path]] = None, verbose: bool = False) -> Tuple[float, dict]:
    """
    Load and compile the dictionary before the first query.

    Args:
        path: Path to the Eldamo XML file. Uses default if not specified.
        verbose: If True, print timing information

    Returns:
        Tuple of (total_time_seconds, timing_details_dict)

    Raises:
        DictionaryLoadError: If the dictionary cannot be loaded
    """
    from eldamo_lookup.dictionary import load_dictionary, get_dictionary_size

    timings = {}
    total_start = time.perf_counter()

    if verbose:
        print("Loading Eldamo dictionary...")

    t0 = time.perf_counter()
    load_dictionary(path)
    timings['dictionary'] = (time.perf_counter() - t0) * 1000

    if verbose:
        print(f"  Dictionary:     {timings['dictionary']:>7.1f}ms ({get_dictionary_size():,} entries)")

    total_time = time.perf_counter() - total_start
    timings['total'] = total_time * 1000

    if verbose:
        print(f"Total warm-up:    {timings['total']:>7.1f}ms")

    return total_time, timings


def get_version() -> str:
    """Get the library version."""
    return __version__


# =============================================================================
# Module-level exports
# =============================================================================

__all__ = [
    # Data classes
    "DictionaryEntry",
    "ResultEntry",
    "RecencyCache",
    "QueryEngine",
    "LexiconNode",
    # API
    "fold",
    "lookup",
    "lookup_json",
    "parse_lexicon",
    "find_word",
    "warm_up",
    "get_version",
    # Exceptions
    "DictionaryLoadError",
    # Version
    "__version__",
]
