# soundchange\shared\config.py
from enum import Enum
from typing import Dict, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from soundchange.core.domain.notation import (
    DEFAULT_ARROW,
    DEFAULT_GREEK_LETTERS,
    DEFAULT_NULL_SYMBOL,
    DEFAULT_PHONEME_CLASSES,
    DEFAULT_SUBSCRIPT_DIGITS,
    NotationConfig,
)

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    Every field can be overridden with a SOUNDCHANGE_-prefixed environment variable.
    """

    # --- Application Meta ---
    # APP_ENV and OTEL_SERVICE_NAME are stamped on every log event
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    # Overrides LOG_LEVEL with DEBUG
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"
    OTEL_SERVICE_NAME: str = "soundchange"

    # --- Persistence ---
    # Directory holding one <code>.json phoneme inventory per language
    INVENTORY_DIR: str = "data/inventories"

    # --- Notation ---
    # Must be fixed before any rule is compiled; rules keep the config they were built with.
    ARROW: str = DEFAULT_ARROW
    NULL_SYMBOL: str = DEFAULT_NULL_SYMBOL
    SUBSCRIPT_DIGITS: str = DEFAULT_SUBSCRIPT_DIGITS
    GREEK_LETTERS: str = DEFAULT_GREEK_LETTERS
    PHONEME_CLASSES: Dict[str, str] = dict(DEFAULT_PHONEME_CLASSES)

    # Optional ASCII fallback for the arrow (e.g. "="); replaces ARROW when set.
    # It must not contain "<" or ">", which mark alternative groups.
    ASCII_ARROW: Optional[str] = None

    def notation(self) -> NotationConfig:
        """Builds the immutable notation config handed to parsers and rule sets."""
        return NotationConfig(
            arrow=self.ASCII_ARROW or self.ARROW,
            null_symbol=self.NULL_SYMBOL,
            subscript_digits=self.SUBSCRIPT_DIGITS,
            greek_letters=self.GREEK_LETTERS,
            phoneme_classes=self.PHONEME_CLASSES,
        )

    model_config = SettingsConfigDict(env_file=".env", env_prefix="SOUNDCHANGE_", extra="ignore")

settings = Settings()
