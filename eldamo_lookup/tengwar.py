"""
Tengwar spelling hints.

Some Eldamo words carry a `tengwar` attribute telling how they are written in
Tengwar: an initial "n" written with noldo rather than númen, or an "s"
written with súle (thorn) rather than silme. The displayed headword is
adjusted so the distinction shows up in the results.
"""

from typing import Dict, Optional


# ============================================================================
# Hint Values
# ============================================================================

NASAL_HINTS = frozenset(['ñ', 'ñ-'])
SIBILANT_HINTS = frozenset(['þ', 'þ-'])

# Hints that replace the whole headword with a fixed spelling
WORD_OVERRIDES: Dict[str, str] = {
    'noldo': 'Ñoldo',
}


def correct_spelling(headword: Optional[str], hint: Optional[str]) -> Optional[str]:
    """
    Apply a tengwar hint to a headword.

    At most one substitution is made:
    - nasal hint: an initial n/N becomes ñ/Ñ (noldo can only be initial)
    - sibilant hint: the first s/S becomes þ/Þ
    - override hint: the headword is replaced by a fixed spelling

    Args:
        headword: The headword as found in the lexicon
        hint: The tengwar hint, if any

    Returns:
        The corrected headword (unchanged if either argument is missing)

    Example:
        >>> correct_spelling("Noldo", "ñ")
        'Ñoldo'
        >>> correct_spelling("isil", "þ")
        'iþil'
    """
    if not headword or not hint:
        return headword

    if hint in NASAL_HINTS:
        if headword[0] == 'n':
            return 'ñ' + headword[1:]
        if headword[0] == 'N':
            return 'Ñ' + headword[1:]
    elif hint in SIBILANT_HINTS:
        for index, char in enumerate(headword):
            if char in 'sS':
                glyph = 'Þ' if char == 'S' else 'þ'
                return headword[:index] + glyph + headword[index + 1:]
    elif hint in WORD_OVERRIDES:
        return WORD_OVERRIDES[hint]

    return headword
