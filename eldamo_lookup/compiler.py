"""
Dictionary compiler for eldamo-lookup.

Turns the raw lexicon tree into:
- a flat list of DictionaryEntry records, one per lexical word
- a ShortGlossTable mapping headwords to merged glosses, used to annotate
  the elements of compound words at query time

The gloss table is stored as a marisa_trie.BytesTrie: it is built once and
only read afterwards.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import marisa_trie

from eldamo_lookup.indexer import compute_index
from eldamo_lookup.lexicon import LexiconNode
from eldamo_lookup.tengwar import correct_spelling

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

# Parts of speech that describe structure rather than words
EXCLUDED_SPEECH = frozenset([
    'suf', 'pref', 'phoneme', 'phonetics',
    'phonetic-rule', 'phonetic-group', 'grammar',
])

# Gloss placeholder for words without a known meaning
UNGLOSSED = '[unglossed]'

# Placeholder headword used for unknown elements
UNKNOWN_HEADWORD = '?'

GLOSS_SEPARATOR = ' / '


# ============================================================================
# Entry Record
# ============================================================================

@dataclass(frozen=True, slots=True)
class DictionaryEntry:
    """
    A compiled dictionary entry.

    Attributes:
        headword: Headword, with the tengwar spelling applied
        tokens: Folded index terms (headword words, then gloss words)
        language: Language code (e.g. "q" for Quenya, "s" for Sindarin)
        part_of_speech: Part of speech tag
        gloss: Definition
        stem: Inflection stem
        notes: Text of the entry notes
        tengwar: Tengwar spelling hint
        elements: Headwords of the compound elements, unresolved
        source_headword: Headword as written in the lexicon, before the
            tengwar spelling (elements refer to words by this form)
    """
    headword: str
    tokens: Tuple[str, ...]
    language: Optional[str] = None
    part_of_speech: str = ""
    gloss: Optional[str] = None
    stem: Optional[str] = None
    notes: Optional[str] = None
    tengwar: Optional[str] = None
    elements: Tuple[str, ...] = ()
    source_headword: Optional[str] = None


# ============================================================================
# Short Gloss Table
# ============================================================================

def merge_gloss(existing: Optional[str], gloss: str) -> str:
    """
    Merge a gloss into the glosses already known for a headword.

    Glosses already present are not repeated, including the parts of an
    incoming gloss that is itself a merged one.

    Example:
        >>> merge_gloss("star", "star")
        'star'
        >>> merge_gloss("star", "sky")
        'star / sky'
        >>> merge_gloss("star", "star / sky")
        'star / sky'
    """
    if not existing:
        return gloss

    parts = existing.split(GLOSS_SEPARATOR)
    for part in gloss.split(GLOSS_SEPARATOR):
        if part and part not in parts:
            parts.append(part)
    return GLOSS_SEPARATOR.join(parts)


class ShortGlossTable:
    """Read-only headword -> merged gloss mapping."""

    def __init__(self, glosses: Optional[Dict[str, str]] = None):
        glosses = glosses or {}
        self._trie = marisa_trie.BytesTrie(
            (headword, gloss.encode('utf-8')) for headword, gloss in glosses.items()
        )
        self._size = len(glosses)

    @classmethod
    def build(cls, entries: Iterable[DictionaryEntry]) -> "ShortGlossTable":
        """
        Collect the glosses of all entries, skipping unglossed ones.

        An entry whose displayed headword differs from its lexicon spelling
        is reachable under both forms.
        """
        glosses: Dict[str, str] = {}
        for entry in entries:
            if not entry.gloss or entry.gloss == UNGLOSSED:
                continue
            keys = {entry.headword}
            if entry.source_headword:
                keys.add(entry.source_headword)
            for key in sorted(keys):
                glosses[key] = merge_gloss(glosses.get(key), entry.gloss)
        return cls(glosses)

    def get(self, headword: str) -> str:
        """Short gloss of a headword, empty if unknown."""
        if headword == UNKNOWN_HEADWORD:
            return ""
        values = self._trie.get(headword)
        if not values:
            return ""
        return values[0].decode('utf-8')

    def items(self) -> List[Tuple[str, str]]:
        return sorted((key, value.decode('utf-8')) for key, value in self._trie.items())

    def __contains__(self, headword: str) -> bool:
        return headword in self._trie

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShortGlossTable):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"ShortGlossTable({self._size} headwords)"


# ============================================================================
# Compiler
# ============================================================================

@dataclass(frozen=True, slots=True)
class CompiledDictionary:
    """Output of DictionaryCompiler.compile()."""
    entries: Tuple[DictionaryEntry, ...]
    gloss_table: ShortGlossTable

    def __len__(self) -> int:
        return len(self.entries)


def is_lexical(node: LexiconNode) -> bool:
    """True if the node is a word that belongs in the dictionary."""
    return node.kind == 'word' and (node.speech or '') not in EXCLUDED_SPEECH


class DictionaryCompiler:
    """
    Compile a raw lexicon tree into dictionary entries.

    Every node is visited, including the children of words, since words
    nested in other words (derivations, variants) are dictionary entries
    on their own.
    """

    def __init__(self):
        self.skipped = 0

    def compile(self, root: LexiconNode) -> CompiledDictionary:
        self.skipped = 0
        entries: List[DictionaryEntry] = []
        self._compile_node(root, entries)

        if self.skipped:
            logger.debug(f"Skipped {self.skipped} words without a headword")

        return CompiledDictionary(
            entries=tuple(entries),
            gloss_table=ShortGlossTable.build(entries),
        )

    def _compile_node(self, node: LexiconNode, entries: List[DictionaryEntry]):
        if is_lexical(node):
            entry = self.build_entry(node)
            if entry is None:
                self.skipped += 1
            else:
                entries.append(entry)

        for child in node.children:
            self._compile_node(child, entries)

    def build_entry(self, node: LexiconNode) -> Optional[DictionaryEntry]:
        """Build the entry of a word node, or None if it has no headword."""
        if not node.headword:
            return None

        elements = tuple(
            child.headword for child in node.children_of_kind('element')
            if child.headword is not None
        )
        notes = node.first_child_of_kind('notes')

        return DictionaryEntry(
            headword=correct_spelling(node.headword, node.tengwar),
            tokens=tuple(compute_index(node)),
            language=node.language,
            part_of_speech=node.speech or '',
            gloss=node.gloss,
            stem=node.stem,
            notes=notes.text if notes is not None else None,
            tengwar=node.tengwar,
            elements=elements,
            source_headword=node.headword,
        )


def compile_dictionary(root: LexiconNode) -> CompiledDictionary:
    """Compile a lexicon tree with a fresh DictionaryCompiler."""
    return DictionaryCompiler().compile(root)
