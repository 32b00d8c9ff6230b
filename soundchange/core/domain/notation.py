# soundchange\core\domain\notation.py
"""
Notation configuration.

The glyphs used by the rule notation (arrow, null symbol, subscript digits,
polarity letters and phoneme-class abbreviations) are not module globals:
they live on an immutable ``NotationConfig`` value that is passed to the
parser, the rule compiler and the rule-set expander.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from soundchange.core.domain.models import FeatureDiff

DEFAULT_ARROW = "→"
DEFAULT_NULL_SYMBOL = "Ø"
DEFAULT_SUBSCRIPT_DIGITS = "₀₁₂₃₄₅₆₇₈₉"
DEFAULT_GREEK_LETTERS = "αβγδ"
DEFAULT_PHONEME_CLASSES: Dict[str, str] = {"C": "-syll", "V": "+syll"}

BOUNDARY = "#"
FOCUS = "_"
STAR = "*"


class NotationConfig(BaseModel):
    """
    Read-only notation settings shared by every rule compiled with it.

    Attributes:
        arrow:
            Token separating the input from the output (``a → b / _``).
        null_symbol:
            Glyph for "nothing" (deletion in outputs, empty pattern in inputs).
        subscript_digits:
            Exactly ten glyphs; the glyph at position *n* stands for digit *n*
            in a minimum-count quantifier such as ``i₂``.
        greek_letters:
            Polarity variables; each one expands a rule into a ``+`` and a
            ``-`` variant.
        phoneme_classes:
            Single-character abbreviations mapped to feature specs, e.g.
            ``{"V": "+syll"}``.
    """
    model_config = ConfigDict(frozen=True)

    arrow: str = DEFAULT_ARROW
    null_symbol: str = DEFAULT_NULL_SYMBOL
    subscript_digits: str = DEFAULT_SUBSCRIPT_DIGITS
    greek_letters: str = DEFAULT_GREEK_LETTERS
    phoneme_classes: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_PHONEME_CLASSES))

    @field_validator("subscript_digits")
    @classmethod
    def _ten_distinct_digits(cls, value: str) -> str:
        if len(value) != 10 or len(set(value)) != 10:
            raise ValueError("subscript_digits must contain exactly ten distinct glyphs")
        return value

    @field_validator("arrow", "null_symbol")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("notation tokens must not be blank")
        return value

    def __hash__(self) -> int:
        return hash((
            self.arrow,
            self.null_symbol,
            self.subscript_digits,
            self.greek_letters,
            tuple(sorted(self.phoneme_classes.items())),
        ))

    def subscript_value(self, char: str) -> int:
        """Digit value of a subscript glyph, or -1 if ``char`` is not one."""
        return self.subscript_digits.find(char) if char else -1

    def to_subscript(self, number: int) -> str:
        return "".join(self.subscript_digits[int(d)] for d in str(number))

    def is_quantifier(self, char: str) -> bool:
        return char == STAR or (len(char) == 1 and char in self.subscript_digits)

    def phoneme_class(self, char: str) -> Optional[FeatureDiff]:
        spec = self.phoneme_classes.get(char)
        return FeatureDiff.parse(spec) if spec is not None else None
