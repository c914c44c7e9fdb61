"""
ASCII folding for eldamo-lookup.

Queries and indexed text are both passed through fold() so that a query
typed on a plain keyboard ("nolofinwe") can match a headword written with
diacritics ("nolofinwë").
"""

import unicodedata
from typing import Dict


# ============================================================================
# Letters Without a Decomposition
# ============================================================================
# NFKD takes care of accents, diaeresis, macrons and the like. These letters
# are distinct code points with no combining-mark form, so they are
# transliterated explicitly.

SPECIAL_LETTERS: Dict[str, str] = {
    'þ': 'th', 'Þ': 'Th',
    'ð': 'dh', 'Ð': 'Dh',
    'æ': 'ae', 'Æ': 'Ae',
    'œ': 'oe', 'Œ': 'Oe',
    'ø': 'o', 'Ø': 'O',
    'ß': 'ss', 'ẞ': 'SS',
    'ł': 'l', 'Ł': 'L',
    'đ': 'd', 'Đ': 'D',
    'ƀ': 'b', 'Ƀ': 'B',
    'ǥ': 'g', 'Ǥ': 'G',
    'ı': 'i',
    'ŋ': 'ng', 'Ŋ': 'Ng',
    # Phonetic letters used in primitive and early forms
    'ə': 'a', 'Ə': 'A',
    'ʒ': 'z', 'Ʒ': 'Z',
    'ɛ': 'e', 'Ɛ': 'E',
    'ɔ': 'o', 'Ɔ': 'O',
    'ɨ': 'i', 'Ɨ': 'I',
    'ʉ': 'u', 'Ʉ': 'U',
    'ɣ': 'g', 'Ɣ': 'G',
    'ʃ': 's', 'Ʃ': 'S',
    'ĸ': 'q',
    'ħ': 'h', 'Ħ': 'H',
    'ŧ': 't', 'Ŧ': 'T',
    'ƒ': 'f',
}

_TRANSLATION = str.maketrans(SPECIAL_LETTERS)


def fold(text: str) -> str:
    """
    Map accented and special letters to their closest ASCII form.

    Characters that are neither letters with a known ASCII base nor
    combining marks (digits, punctuation, other scripts) are kept as-is.

    Example:
        >>> fold("Nolofinwë")
        'Nolofinwe'
        >>> fold("þúlë")
        'thule'
    """
    if text.isascii():
        return text

    # Decompose first: ǿ is ø + acute, and only the bare ø is in the table
    decomposed = unicodedata.normalize('NFKD', text)
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.translate(_TRANSLATION)


def fold_query(text: str) -> str:
    """Fold and lowercase a raw query the same way indexed text is."""
    return fold(text).lower().strip()
