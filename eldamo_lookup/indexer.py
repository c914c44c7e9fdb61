"""
Index term extraction for eldamo-lookup.

Each dictionary entry is matched through a flat list of folded tokens: the
words of its headword followed by the meaningful words of its gloss.
"""

from typing import List

from eldamo_lookup.folding import fold
from eldamo_lookup.lexicon import LexiconNode


# ============================================================================
# Constants
# ============================================================================

# Gloss words that carry no meaning on their own
STOP_WORDS = frozenset([
    '?', '[]', '[=', '&', '=', '-', '*-', '/', '>>}',
    'a', 'b', 'c.', 'am', 'an', 'as', 'at', 'be', 'by', 'do', 'f.', 'go',
    'he', 'i', 'if', 'in', 'it', 'is', 'm.', 'me', 'my', 'n.', 'no', 'o',
    'of', 'on', 'or', 'q.', 'sg', 'so', 't.', 'to', 'the', 'up', 'us', 'we',
    '(lit.',  # "*(lit.)" once the leading * is gone
    'lit.',   # "(lit.)" once the leading ( is gone
    '...',
])

# Markers removed from the start or end of a gloss word (one character each)
LEADING_MARKERS = frozenset('*?({[')
TRAILING_MARKERS = frozenset('])')


# ============================================================================
# Index Computation
# ============================================================================

def clean_gloss_word(word: str) -> str:
    """Strip one leading marker and one trailing bracket from a gloss word."""
    if word and word[0] in LEADING_MARKERS:
        word = word[1:]
    if word and word[-1] in TRAILING_MARKERS:
        word = word[:-1]
    return word


def is_index_word(word: str) -> bool:
    """True if a cleaned gloss word is worth indexing."""
    return bool(word) and not word.isdigit() and word not in STOP_WORDS


def gloss_source(node: LexiconNode) -> str:
    """The gloss to index: the neo-gloss when present, else the plain gloss."""
    if node.ngloss is not None:
        return node.ngloss
    if node.gloss is not None:
        return node.gloss
    return ""


def compute_index(node: LexiconNode) -> List[str]:
    """
    Compute the folded index tokens of a word node.

    Every word of the headword is kept. Gloss words are split on commas,
    semicolons and whitespace, stripped of markers, and dropped when empty,
    numeric or a stop word. Duplicates are allowed.

    Example:
        >>> compute_index(LexiconNode("word", headword="Nolofinwë",
        ...                           gloss="*son of Finwë, the proud"))
        ['nolofinwe', 'son', 'finwe', 'proud']
    """
    index = [word for word in fold(node.headword or "").lower().split() if word]

    gloss = fold(gloss_source(node)).lower()
    for phrase in gloss.replace(';', ',').split(','):
        for word in phrase.split():
            word = clean_gloss_word(word)
            if is_index_word(word):
                index.append(word)

    return index
