# verse/evaluation/form_validator.py

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from verse.analysis.text import split_lines, get_last_word, first_letters
from verse.analysis.syllables import count_line_syllables
from verse.analysis.rhyme import sounds_similar
from verse.models.form import PoemForm
from verse.models.validation import StructureValidationResult

EMPTY_POEM_MESSAGE = "Poem cannot be empty"

# Zero-based line pairs whose end words must rhyme
SHAKESPEAREAN_PAIRS: Tuple[Tuple[int, int], ...] = ((0, 2), (1, 3), (4, 6), (5, 7), (12, 13))
PETRARCHAN_PAIRS: Tuple[Tuple[int, int], ...] = ((0, 3), (1, 2), (4, 7), (5, 6))
LIMERICK_PAIRS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, 4), (2, 3))

HAIKU_SYLLABLE_TARGETS = (5, 7, 5)
_ORDINALS = ("First", "Second", "Third")

FormRule = Callable[[List[str], Optional[str]], Optional[str]]


class FormValidator:
    """
    Checks poem text against the structural rules of its poetic form.

    Every check is a pure function of the poem text, the form and (for
    acrostics) the topic the poem was written about. Rules short-circuit:
    only the first violated constraint is reported. Forms with no structural
    constraint, and identifiers that name no known form, are always valid.
    """

    def __init__(self, syllable_tolerance: int = 1):
        tolerance = int(syllable_tolerance)
        if tolerance < 0:
            raise ValueError(f"syllable_tolerance must not be negative, got {syllable_tolerance}")
        self.syllable_tolerance = tolerance
        self.logger = logging.getLogger(__name__)
        self._rules: Dict[PoemForm, FormRule] = {
            PoemForm.SONNET: self._check_sonnet,
            PoemForm.HAIKU: self._check_haiku,
            PoemForm.LIMERICK: self._check_limerick,
            PoemForm.VILLANELLE: self._check_villanelle,
            PoemForm.ACROSTIC: self._check_acrostic,
            PoemForm.BALLAD: self._check_ballad,
            PoemForm.ODE: self._check_unconstrained,
            PoemForm.EPIC: self._check_unconstrained,
            PoemForm.FREE_VERSE: self._check_unconstrained,
        }

    @property
    def supported_forms(self) -> List[PoemForm]:
        return list(self._rules)

    def check(self, text: Optional[str], form: Union[PoemForm, str, None],
              original_topic: Optional[str] = None) -> Optional[str]:
        """
        Validate a poem's structure.

        Args:
            text: Raw poem text
            form: Form identifier, as a PoemForm or its string value
            original_topic: Topic the poem was generated for (used by acrostics)

        Returns:
            None if the poem is valid, otherwise a human-readable description
            of the first violated rule
        """
        lines = split_lines(text) if isinstance(text, str) else []
        if not lines:
            return EMPTY_POEM_MESSAGE

        parsed = PoemForm.parse(form)
        if parsed is None:
            self.logger.debug(f"No structural rules for form {form!r}, accepting poem")
            return None

        topic = original_topic if isinstance(original_topic, str) else None
        error = self._rules[parsed](lines, topic)
        if error:
            self.logger.debug(f"{parsed.value} rejected: {error}")
        return error

    def validate(self, text: Optional[str], form: Union[PoemForm, str, None],
                 original_topic: Optional[str] = None) -> StructureValidationResult:
        """Same as check(), wrapped in a StructureValidationResult."""
        parsed = PoemForm.parse(form)
        form_value = parsed.value if parsed else (form if isinstance(form, str) else None)
        line_count = len(split_lines(text)) if isinstance(text, str) else 0

        error = self.check(text, form, original_topic)
        if error is None:
            summary = f"Valid {form_value or 'poem'} structure ({line_count} lines)"
        else:
            summary = error

        return StructureValidationResult(
            form=form_value,
            is_valid=error is None,
            line_count=line_count,
            validation_summary=summary,
            error_details=error
        )

    def _check_sonnet(self, lines: List[str], topic: Optional[str]) -> Optional[str]:
        if len(lines) != 14:
            return f"A sonnet must have exactly 14 lines. Current: {len(lines)} lines"

        end_words = [get_last_word(line) for line in lines]
        shakespearean = self._follows_scheme(end_words, SHAKESPEAREAN_PAIRS)
        petrarchan = self._follows_scheme(end_words, PETRARCHAN_PAIRS)
        if not shakespearean and not petrarchan:
            return ("A sonnet must follow either Shakespearean (ABAB CDCD EFEF GG) "
                    "or Petrarchan (ABBA ABBA...) rhyme scheme")
        return None

    def _check_haiku(self, lines: List[str], topic: Optional[str]) -> Optional[str]:
        if len(lines) != 3:
            return f"A haiku must have exactly 3 lines. Current: {len(lines)} lines"

        for ordinal, line, target in zip(_ORDINALS, lines, HAIKU_SYLLABLE_TARGETS):
            syllables = count_line_syllables(line)
            if abs(syllables - target) > self.syllable_tolerance:
                return f"{ordinal} line should have ~{target} syllables. Current: {syllables} syllables"
        return None

    def _check_limerick(self, lines: List[str], topic: Optional[str]) -> Optional[str]:
        if len(lines) != 5:
            return f"A limerick must have exactly 5 lines. Current: {len(lines)} lines"

        end_words = [get_last_word(line) for line in lines]
        if not self._follows_scheme(end_words, LIMERICK_PAIRS):
            return "A limerick should follow AABBA rhyme scheme"
        return None

    def _check_villanelle(self, lines: List[str], topic: Optional[str]) -> Optional[str]:
        # Refrains and the two-rhyme pattern are not checked
        if len(lines) != 19:
            return f"A villanelle must have exactly 19 lines. Current: {len(lines)} lines"
        return None

    def _check_acrostic(self, lines: List[str], topic: Optional[str]) -> Optional[str]:
        if not topic or not topic.strip():
            return None

        expected = topic.strip()
        actual = first_letters(lines)
        if actual != expected.lower():
            return f"An acrostic poem's first letters must spell \"{expected}\". Current: \"{actual.upper()}\""
        return None

    def _check_ballad(self, lines: List[str], topic: Optional[str]) -> Optional[str]:
        if len(lines) < 8:
            return f"A ballad must have at least 8 lines (2 stanzas). Current: {len(lines)} lines"
        if len(lines) % 4 != 0:
            return f"A ballad's lines should be in groups of 4. Current: {len(lines)} lines"
        return None

    def _check_unconstrained(self, lines: List[str], topic: Optional[str]) -> Optional[str]:
        return None

    @staticmethod
    def _follows_scheme(end_words: List[str], pairs: Sequence[Tuple[int, int]]) -> bool:
        return all(sounds_similar(end_words[a], end_words[b]) for a, b in pairs)


_default_validator = FormValidator()


def validate_poem(text: Optional[str], form: Union[PoemForm, str, None],
                  original_topic: Optional[str] = None) -> Optional[str]:
    """
    Validate poem text against the rules of a form.

    Returns None when the poem is valid, otherwise the first violation as a
    message suitable for showing to the user. Never raises.
    """
    return _default_validator.check(text, form, original_topic)
