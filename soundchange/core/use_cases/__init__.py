# soundchange\core\use_cases\__init__.py
from .apply_sound_changes import ApplySoundChanges, SoundChangeResult

__all__ = ["ApplySoundChanges", "SoundChangeResult"]
