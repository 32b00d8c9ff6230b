# soundchange\core\domain\models.py
from typing import FrozenSet, Iterable, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = structlog.get_logger()

# --- Value Objects ---

class Phoneme(BaseModel):
    """
    Minimal unit of sound: a symbol plus the set of features it carries.
    Two phonemes are the same phoneme when symbol and features are equal.
    """
    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., description="Text used to write the phoneme, conventionally one character")
    features: FrozenSet[str] = Field(default_factory=frozenset)

    def __init__(self, symbol: Optional[str] = None, features: Iterable[str] = (), **data):
        # Positional form for code; a missing symbol is left for validation to report.
        if symbol is not None:
            data["symbol"] = symbol
        super().__init__(features=features, **data)

    @field_validator("features", mode="before")
    @classmethod
    def _feature_names(cls, value):
        if isinstance(value, str):
            raise ValueError("features must be a list of names, not a single string")
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(value)
        return value

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return f"Phoneme({self.symbol!r}, {sorted(self.features)!r})"


class FeatureDiff(BaseModel):
    """
    A pair of feature sets. As a constraint, a phoneme satisfies it when it has
    every present feature and none of the absent ones. As a rewrite, it adds the
    present features and removes the absent ones.

    Example:
        FeatureDiff.parse("+high -front") -> [+high -front]
    """
    model_config = ConfigDict(frozen=True)

    present: FrozenSet[str] = Field(default_factory=frozenset)
    absent: FrozenSet[str] = Field(default_factory=frozenset)

    @classmethod
    def parse(cls, spec: str) -> "FeatureDiff":
        """Builds a diff from whitespace-separated `+feature` / `-feature` tokens."""
        tokens = spec.split()
        return cls(
            present=frozenset(t[1:] for t in tokens if t.startswith("+")),
            absent=frozenset(t[1:] for t in tokens if t.startswith("-")),
        )

    def matches(self, phoneme: Phoneme) -> bool:
        return self.present <= phoneme.features and self.absent.isdisjoint(phoneme.features)

    def apply_to(self, features: Iterable[str]) -> FrozenSet[str]:
        return (frozenset(features) | self.present) - self.absent

    def __str__(self) -> str:
        parts = [f"+{f}" for f in sorted(self.present)] + [f"-{f}" for f in sorted(self.absent)]
        return f"[{' '.join(parts)}]"


# --- Entities ---

class Language(BaseModel):
    """
    A language, represented by its complete phoneme inventory.
    The inventory order is preserved and decides ties on lookups.
    """
    model_config = ConfigDict(frozen=True)

    phonemes: Tuple[Phoneme, ...] = Field(default_factory=tuple)
    code: Optional[str] = Field(None, description="Optional identifier (e.g. 'pie', 'lat')")

    def __init__(self, phonemes: Iterable[Phoneme] = (), **data):
        super().__init__(phonemes=tuple(phonemes), **data)

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(p.symbol for p in self.phonemes)

    def find_symbol(self, symbol: str) -> Optional[Phoneme]:
        return next((p for p in self.phonemes if p.symbol == symbol), None)

    def find_features(self, features: Iterable[str]) -> Optional[Phoneme]:
        wanted = frozenset(features)
        return next((p for p in self.phonemes if p.features == wanted), None)

    def apply_changes(self, base: Phoneme, changes: FeatureDiff) -> Phoneme:
        """
        Applies a FeatureDiff to a phoneme and returns the inventory phoneme
        carrying the resulting feature set.

        If the inventory has no such phoneme, a placeholder with the symbol '?'
        is returned and a warning is logged. This never raises.
        """
        features = changes.apply_to(base.features)
        phoneme = self.find_features(features)
        if phoneme is not None:
            return phoneme
        logger.warning(
            "phoneme_not_in_inventory",
            lang=self.code,
            base=base.symbol,
            features=sorted(features),
        )
        return Phoneme("?", features)
