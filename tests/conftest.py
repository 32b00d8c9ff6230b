# tests\conftest.py
import pytest
from unittest.mock import MagicMock

from soundchange.core.domain.models import Language, Phoneme
from soundchange.core.domain.notation import NotationConfig
from soundchange.core.ports.inventory_repository import IInventoryRepository
from soundchange.shared.container import Container

# Four-vowel system: a, u (high), e (front), i (front high)
A = Phoneme("a", [])
U = Phoneme("u", ["high"])
E = Phoneme("e", ["front"])
I = Phoneme("i", ["front", "high"])

# Same vowels marked syllabic, plus two consonants for lenition tests
SA = Phoneme("a", ["syll"])
SU = Phoneme("u", ["syll", "high"])
SE = Phoneme("e", ["syll", "front"])
SI = Phoneme("i", ["syll", "front", "high"])
P = Phoneme("p", [])
F = Phoneme("f", ["continuant"])

@pytest.fixture
def vowels():
    """The four-vowel language a/u/e/i, without a syllabic feature."""
    return Language([A, U, E, I], code="smol")

@pytest.fixture
def lenition_language():
    """Syllabic vowels plus p/f, so that the default C and V classes apply."""
    return Language([SA, SE, SI, SU, P, F], code="lessmol")

@pytest.fixture
def notation():
    return NotationConfig()

@pytest.fixture(scope="function")
def mock_repo(vowels):
    """Returns a mock Inventory Repository serving the four-vowel language."""
    repo = MagicMock(spec=IInventoryRepository)
    repo.get_language.return_value = vowels
    repo.list_languages.return_value = ["smol"]
    return repo

@pytest.fixture(scope="function")
def container(mock_repo):
    """
    Sets up the Dependency Injection Container for testing.
    It overrides the filesystem repository with the mock defined above.
    """
    container = Container()
    container.inventory_repository.override(mock_repo)

    yield container

    container.inventory_repository.reset_override()
