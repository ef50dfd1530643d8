"""Godot script and scene parsing for godotcheck."""

from __future__ import annotations

from .header import HeaderLineError, parse_header_line
from .models import Problem, Scene, Script, ScriptKind, split_lines
from .scene_parser import SceneParser, index_scripts
from .script_parser import ScriptParser

__all__ = [
    "HeaderLineError",
    "Problem",
    "Scene",
    "SceneParser",
    "Script",
    "ScriptKind",
    "ScriptParser",
    "index_scripts",
    "parse_header_line",
    "split_lines",
]
