# verse/analysis/syllables.py

"""
Heuristic English syllable estimation.

No pronunciation dictionary is consulted: a word's syllables are approximated
by its vowel groups after silent endings are removed. Estimates are commonly
off by one on a full line, which is why form rules compare against a target
with a tolerance band instead of exactly.
"""

import re

_NON_ALPHA = re.compile(r'[^a-z]')
# Silent "e", "es" and "ed" endings (a preceding "l" keeps its "e", as in "table")
_SILENT_ENDING = re.compile(r'(?:[^laeiouy]es|ed|[^laeiouy]e)$')
_LEADING_Y = re.compile(r'^y')
_VOWEL_GROUP = re.compile(r'[aeiouy]{1,2}')


def count_syllables(word: str) -> int:
    """
    Estimate the number of syllables in a single word.

    Args:
        word: A word, possibly carrying punctuation or mixed case

    Returns:
        Syllable estimate; at least 1 for any word containing a letter and
        0 for tokens with no letters at all (e.g. a lone dash)
    """
    word = _NON_ALPHA.sub('', word.lower().strip())
    if not word:
        return 0
    if len(word) <= 3:
        return 1

    word = _SILENT_ENDING.sub('', word)
    word = _LEADING_Y.sub('', word)
    groups = _VOWEL_GROUP.findall(word)
    return len(groups) if groups else 1


def count_line_syllables(line: str) -> int:
    """Sum the syllable estimates of every whitespace-separated word in a line."""
    return sum(count_syllables(word) for word in line.split() if word)
