# soundchange\core\ports\inventory_repository.py
from typing import List, Protocol

from soundchange.core.domain.models import Language

class IInventoryRepository(Protocol):
    """
    Port for accessing phoneme inventories.
    Implementations could read JSON files, a database, or an in-memory fixture.
    """

    def get_language(self, lang_code: str) -> Language:
        """
        Loads the phoneme inventory of a language.

        Args:
            lang_code: Identifier of the inventory (e.g. 'pie', 'lat').

        Returns:
            The Language, with phonemes in inventory order.

        Raises:
            LanguageNotFoundError: no inventory exists for `lang_code`.
            InventoryFormatError: the stored inventory is malformed.
        """
        ...

    def list_languages(self) -> List[str]:
        """Returns the codes of all available inventories, sorted."""
        ...
