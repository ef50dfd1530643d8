"""godotcheck: a convention linter for Godot projects.

godotcheck reads every GDScript and scene file of a project and reports
naming, inheritance, static typing and scene structure conventions that
are broken. It never modifies files.
"""

from .checker import CheckReport, ProjectChecker
from .config import GodotCheckSettings, get_logger, get_settings
from .parser import Problem, Scene, Script, ScriptKind

__version__ = "0.1.0"

__all__ = [
    "CheckReport",
    "GodotCheckSettings",
    "Problem",
    "ProjectChecker",
    "Scene",
    "Script",
    "ScriptKind",
    "__version__",
    "get_logger",
    "get_settings",
]
