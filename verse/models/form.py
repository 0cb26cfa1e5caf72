# verse/models/form.py

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


class PoemForm(Enum):
    """Poetic forms the application can generate and validate"""
    SONNET = "sonnet"
    HAIKU = "haiku"
    LIMERICK = "limerick"
    VILLANELLE = "villanelle"
    ODE = "ode"
    BALLAD = "ballad"
    EPIC = "epic"
    ACROSTIC = "acrostic"
    FREE_VERSE = "free-verse"

    @classmethod
    def parse(cls, identifier: Union["PoemForm", str, None]) -> Optional["PoemForm"]:
        """
        Resolve a form identifier.

        Args:
            identifier: A PoemForm member or its string value (case insensitive)

        Returns:
            The matching PoemForm, or None when the identifier is unknown
        """
        if isinstance(identifier, cls):
            return identifier
        if not isinstance(identifier, str):
            return None
        try:
            return cls(identifier.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class FormSpec:
    """Human-facing description of a poetic form"""

    form: PoemForm
    name: str
    lines: str
    description: str
    structure: str
    example: str
    generation_structure: str = "a poem"

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for serialization"""
        return {
            "form": self.form.value,
            "name": self.name,
            "lines": self.lines,
            "description": self.description,
            "structure": self.structure,
            "example": self.example,
            "generation_structure": self.generation_structure
        }


FORM_SPECS: Dict[PoemForm, FormSpec] = {
    PoemForm.SONNET: FormSpec(
        form=PoemForm.SONNET,
        name="Sonnet",
        lines="14 lines",
        description="A classic poetic form usually exploring themes of love, beauty, or reflection. "
                    "The sonnet has endured for centuries as one of poetry's most elegant structures.",
        structure="Shakespearean: ABAB CDCD EFEF GG or Petrarchan: ABBA ABBA CDE CDE",
        example="Shall I compare thee to a summer's day?\nThou art more lovely and more temperate...",
        generation_structure="a 14-line sonnet with Shakespearean rhyme scheme (ABAB CDCD EFEF GG)"
    ),
    PoemForm.HAIKU: FormSpec(
        form=PoemForm.HAIKU,
        name="Haiku",
        lines="3 lines (5-7-5 syllables)",
        description="A Japanese form capturing a single moment in time, often centered on nature, "
                    "seasons, or a fleeting observation with profound simplicity.",
        structure="First line: 5 syllables, Second line: 7 syllables, Third line: 5 syllables",
        example="An old silent pond...\nA frog jumps into the pond\nSplash! Silence again.",
        generation_structure="a traditional haiku with 3 lines following the 5-7-5 syllable pattern"
    ),
    PoemForm.LIMERICK: FormSpec(
        form=PoemForm.LIMERICK,
        name="Limerick",
        lines="5 lines",
        description="A humorous and often nonsensical verse form known for its bouncy rhythm "
                    "and witty wordplay. Perfect for lighthearted entertainment.",
        structure="AABBA rhyme scheme with a distinctive bouncing meter",
        example="There once was a man from Nantucket...\nWho kept all his cash in a bucket...",
        generation_structure="a humorous limerick with 5 lines and AABBA rhyme scheme"
    ),
    PoemForm.VILLANELLE: FormSpec(
        form=PoemForm.VILLANELLE,
        name="Villanelle",
        lines="19 lines",
        description="A complex form featuring repeating lines that create a haunting, musical quality. "
                    "The repetition builds emotional intensity throughout the poem.",
        structure="Two rhymes with repeating lines (A1bA2 abA1 abA2 abA1 abA2 abA1A2)",
        example="Do not go gentle into that good night,\nOld age should burn and rave at close of day...",
        generation_structure="a 19-line villanelle with repeating lines and two rhymes throughout"
    ),
    PoemForm.ODE: FormSpec(
        form=PoemForm.ODE,
        name="Ode",
        lines="Variable length",
        description="A lyrical poem of praise and celebration, often addressing its subject with "
                    "elevated language and deep admiration. Odes honor people, places, things, or ideas.",
        structure="Formal structure with stanzas, often using elevated diction and imagery",
        example="\"Ode to a Nightingale\" or \"Ode on a Grecian Urn\"",
        generation_structure="a formal ode with multiple stanzas using elevated, lyrical language and "
                             "consistent meter, addressing the subject with reverence"
    ),
    PoemForm.BALLAD: FormSpec(
        form=PoemForm.BALLAD,
        name="Ballad",
        lines="Variable length (usually quatrains)",
        description="A narrative poem telling a story, often dramatic or romantic, passed down through "
                    "oral tradition. Ballads combine storytelling with musical rhythm.",
        structure="Usually quatrains with ABCB or ABAB rhyme scheme and strong rhythm",
        example="\"The Rime of the Ancient Mariner\" - a tale of a sailor's curse",
        generation_structure="a narrative ballad with rhythm and rhyme, telling a dramatic story"
    ),
    PoemForm.EPIC: FormSpec(
        form=PoemForm.EPIC,
        name="Epic",
        lines="Extensive length",
        description="A grand, sweeping narrative poem chronicling the adventures of a hero on an "
                    "extraordinary journey. Epics explore themes of courage, fate, and the human condition.",
        structure="Extended narrative with elevated style, often featuring a hero's journey",
        example="\"The Odyssey\" by Homer - Odysseus's ten-year journey home",
        generation_structure="an epic poem with multiple stanzas in heroic verse, using elevated diction, "
                             "grand imagery, and formal meter to tell an expansive story"
    ),
    PoemForm.ACROSTIC: FormSpec(
        form=PoemForm.ACROSTIC,
        name="Acrostic",
        lines="One line per letter of the topic",
        description="A poem whose first letters, read top to bottom, spell out its subject.",
        structure="The first letter of each line spells the topic",
        example="Curled by the fire\nAlways asleep\nTail twitching in dreams"
    ),
    PoemForm.FREE_VERSE: FormSpec(
        form=PoemForm.FREE_VERSE,
        name="Free Verse",
        lines="Variable length",
        description="Poetry released from fixed meter and rhyme, shaped by the natural cadence of speech.",
        structure="No fixed meter, rhyme scheme, or line count",
        example="\"Song of Myself\" by Walt Whitman"
    ),
}


def get_form_spec(form: Union[PoemForm, str]) -> FormSpec:
    """
    Look up the catalogue entry for a form.

    Raises:
        KeyError: If the identifier does not name a known form
    """
    parsed = PoemForm.parse(form)
    if parsed is None:
        raise KeyError(f"Unknown poem form: {form}")
    return FORM_SPECS[parsed]
