# soundchange\__init__.py
"""
soundchange - compile and apply historical sound-change rules.

Rules are written in the usual linguistic notation,

    [-high] → [+high] / _#

compiled against a language's phoneme inventory, and applied to words
given as phoneme sequences or raw strings.
"""

from soundchange.core.domain.canonical import canonicalize
from soundchange.core.domain.exceptions import (
    InventoryFormatError,
    LanguageNotFoundError,
    NotationSyntaxError,
    OutputLengthMismatchError,
    SoundChangeError,
    UnknownPhonemeError,
)
from soundchange.core.domain.models import FeatureDiff, Language, Phoneme
from soundchange.core.domain.notation import NotationConfig
from soundchange.core.domain.parser import PatternParser
from soundchange.core.domain.rule import Rule
from soundchange.core.domain.ruleset import RuleSet, make_rule_list
from soundchange.core.domain.segmentation import segment_word

__version__ = "0.3.0"

__all__ = [
    "FeatureDiff",
    "InventoryFormatError",
    "Language",
    "LanguageNotFoundError",
    "NotationConfig",
    "NotationSyntaxError",
    "OutputLengthMismatchError",
    "PatternParser",
    "Phoneme",
    "Rule",
    "RuleSet",
    "SoundChangeError",
    "UnknownPhonemeError",
    "canonicalize",
    "make_rule_list",
    "segment_word",
]
