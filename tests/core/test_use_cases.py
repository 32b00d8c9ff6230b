# tests\core\test_use_cases.py
import pytest

from soundchange.core.domain.exceptions import (
    LanguageNotFoundError,
    NotationSyntaxError,
    SoundChangeError,
)
from soundchange.core.use_cases.apply_sound_changes import ApplySoundChanges, SoundChangeResult

class TestApplySoundChanges:

    def test_execute_success(self, container, mock_repo):
        """
        Scenario: Two rule sets are applied to two words.
        Expected: Each result records the form after every rule set.
        """
        # Arrange
        use_case = container.apply_sound_changes_use_case()
        rules = ["[-high] → [+high] / _#", "u → [+front] / _"]

        # Act
        results = use_case.execute("smol", rules, ["aa", "ue"])

        # Assert
        assert results == [
            SoundChangeResult(source="aa", result="ai", history=["au", "ai"]),
            SoundChangeResult(source="ue", result="ii", history=["ui", "ii"]),
        ]
        mock_repo.get_language.assert_called_once_with("smol")

    def test_execute_without_rules(self, mock_repo):
        use_case = ApplySoundChanges(mock_repo)
        results = use_case.execute("smol", [], ["ia"])
        assert results == [SoundChangeResult(source="ia", result="ia", history=[])]

    def test_execute_invalid_notation(self, container):
        """
        Scenario: One of the rules is malformed.
        Expected: The domain error propagates before any word is processed (Fail Fast).
        """
        use_case = container.apply_sound_changes_use_case()

        with pytest.raises(NotationSyntaxError):
            use_case.execute("smol", ["a → e / _", "[+high → e / _"], ["aa"])

    def test_execute_unknown_language(self, container, mock_repo):
        mock_repo.get_language.side_effect = LanguageNotFoundError("xyz")
        use_case = container.apply_sound_changes_use_case()

        with pytest.raises(LanguageNotFoundError):
            use_case.execute("xyz", ["a → e / _"], ["aa"])

    def test_execute_repository_failure(self, container, mock_repo):
        """
        Scenario: The repository throws an unexpected infrastructure exception.
        Expected: The Use Case catches it and wraps it in a SoundChangeError.
        """
        mock_repo.get_language.side_effect = OSError("disk unavailable")
        use_case = container.apply_sound_changes_use_case()

        with pytest.raises(SoundChangeError) as excinfo:
            use_case.execute("smol", ["a → e / _"], ["aa"])

        assert "Unexpected sound change failure" in str(excinfo.value)
