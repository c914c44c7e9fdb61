"""
Query engine for eldamo-lookup.

Scores every dictionary entry against a folded query and resolves the
elements of matching compound words to their short glosses. Serialized
results are kept in a RecencyCache so repeated queries are cheap.
"""

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from eldamo_lookup.cache import RecencyCache
from eldamo_lookup.compiler import CompiledDictionary, DictionaryEntry
from eldamo_lookup.folding import fold_query
from eldamo_lookup.scoring import score

logger = logging.getLogger(__name__)


# =============================================================================
# Result Data Structures
# =============================================================================

@dataclass(frozen=True, slots=True)
class ElementGloss:
    """A compound element with its short gloss."""
    headword: str
    short_gloss: str

    def to_dict(self) -> Dict[str, str]:
        return {"headword": self.headword, "short_gloss": self.short_gloss}


@dataclass(frozen=True, slots=True)
class ResultEntry:
    """A dictionary entry matching a query, with its score."""
    headword: str
    score: int
    language: Optional[str]
    part_of_speech: str
    gloss: Optional[str]
    stem: Optional[str]
    notes: Optional[str]
    tengwar: Optional[str]
    elements: Tuple[ElementGloss, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form of the result."""
        return {
            "headword": self.headword,
            "score": self.score,
            "language": self.language,
            "part_of_speech": self.part_of_speech,
            "gloss": self.gloss,
            "stem": self.stem,
            "notes": self.notes,
            "tengwar": self.tengwar,
            "elements": [element.to_dict() for element in self.elements],
        }


# =============================================================================
# Engine
# =============================================================================

class QueryEngine:
    """
    Match queries against a compiled dictionary.

    Args:
        dictionary: The compiled entries and gloss table
        cache: Cache of serialized results keyed by folded query.
            A private cache is created if not given.
    """

    def __init__(self, dictionary: CompiledDictionary, cache: Optional[RecencyCache] = None):
        self.dictionary = dictionary
        self.cache = cache if cache is not None else RecencyCache()

    @property
    def is_empty(self) -> bool:
        return len(self.dictionary) == 0

    def resolve(self, entry: DictionaryEntry, entry_score: int) -> ResultEntry:
        gloss_table = self.dictionary.gloss_table
        return ResultEntry(
            headword=entry.headword,
            score=entry_score,
            language=entry.language,
            part_of_speech=entry.part_of_speech,
            gloss=entry.gloss,
            stem=entry.stem,
            notes=entry.notes,
            tengwar=entry.tengwar,
            elements=tuple(
                ElementGloss(element, gloss_table.get(element))
                for element in entry.elements
            ),
        )

    def match(self, query: str) -> List[ResultEntry]:
        """
        Find all entries matching an already folded query.

        Results are in dictionary order; sorting by score is left to the
        caller.
        """
        results = []
        for entry in self.dictionary.entries:
            entry_score = score(entry.tokens, query)
            if entry_score > 0:
                results.append(self.resolve(entry, entry_score))
        return results

    def lookup(self, text: str) -> str:
        """
        Look up raw query text and return the results serialized as JSON.

        The text is folded first, and the folded form is the cache key.
        """
        query = fold_query(text)

        cached = self.cache.get(query)
        if cached is not None:
            logger.debug(f'Definition "{query}" from cache')
            return cached

        t0 = time.perf_counter()
        results = self.match(query)
        serialized = json.dumps([r.to_dict() for r in results], ensure_ascii=False)
        self.cache.put(query, serialized)

        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug(f'Definition "{query}": {len(results)} results in {elapsed:.1f}ms')
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Cache: {self.cache.dump()}")

        return serialized
