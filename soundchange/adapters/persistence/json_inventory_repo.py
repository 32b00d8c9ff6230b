# soundchange/adapters/persistence/json_inventory_repo.py
import json
from pathlib import Path
from typing import Any, Dict, List

import structlog
from pydantic import ValidationError

from soundchange.core.ports.inventory_repository import IInventoryRepository
from soundchange.core.domain.models import Language, Phoneme
from soundchange.core.domain.exceptions import InventoryFormatError, LanguageNotFoundError

logger = structlog.get_logger()

class JsonInventoryRepository(IInventoryRepository):
    """
    Concrete implementation of the Inventory Repository using local JSON files.

    Layout: <base_path>/<lang_code>.json, each file shaped like

        {
          "phonemes": [
            {"symbol": "a", "features": ["syll"]},
            {"symbol": "p", "features": []}
          ]
        }
    """

    def __init__(self, base_path: str):
        self.base_path = Path(base_path)

    def _get_file_path(self, lang_code: str) -> Path:
        return self.base_path / f"{lang_code}.json"

    def _load_file(self, lang_code: str) -> Dict[str, Any]:
        """Helper to load raw JSON data for a language."""
        path = self._get_file_path(lang_code)
        if not path.is_file():
            raise LanguageNotFoundError(lang_code)

        try:
            with open(path, mode="r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("inventory_read_failed", lang=lang_code, error=str(e))
            raise InventoryFormatError(lang_code, f"invalid JSON ({e.msg})")

        if not isinstance(data, dict) or not isinstance(data.get("phonemes"), list):
            raise InventoryFormatError(lang_code, "expected an object with a 'phonemes' list")
        return data

    # --- Interface Implementation ---

    def get_language(self, lang_code: str) -> Language:
        data = self._load_file(lang_code)
        if not all(isinstance(raw, dict) for raw in data["phonemes"]):
            raise InventoryFormatError(lang_code, "every phoneme entry must be an object")
        try:
            phonemes = [Phoneme.model_validate(raw) for raw in data["phonemes"]]
        except ValidationError as e:
            raise InventoryFormatError(lang_code, str(e))

        symbols = [p.symbol for p in phonemes]
        duplicates = sorted({s for s in symbols if symbols.count(s) > 1})
        if duplicates:
            raise InventoryFormatError(lang_code, f"duplicate symbols {duplicates}")

        logger.info("inventory_loaded", lang=lang_code, phonemes=len(phonemes))
        return Language(phonemes, code=lang_code)

    def list_languages(self) -> List[str]:
        if not self.base_path.is_dir():
            return []
        return sorted(p.stem for p in self.base_path.glob("*.json"))
