"""Convention rule engines for scripts and scenes."""

from .scene_validator import SceneValidator
from .script_validator import ScriptValidator

__all__ = ["SceneValidator", "ScriptValidator"]
