"""Data models for Godot script and scene files."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from godotcheck.exceptions import ParseError, RuleViolation


def split_lines(text: str) -> list[str]:
    """Split text on LF and CRLF line endings only.

    Other characters ``str.splitlines`` treats as breaks (form feed, vertical
    tab, U+2028 ...) stay inside their line. A trailing newline does not
    produce an empty last line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class ScriptKind(str, Enum):
    """Role of a script, derived from its file name prefix."""

    BEHAVIOUR = "Behaviour"
    VALUE = "Value"
    REFERENCE = "Reference"

    @classmethod
    def from_file_name(cls, file_name: str) -> ScriptKind:
        """Classify a script by the first two characters of its file name."""
        prefix = file_name[:2]
        if prefix == "v_":
            return cls.VALUE
        if prefix == "r_":
            return cls.REFERENCE
        return cls.BEHAVIOUR


@dataclass(frozen=True)
class Script:
    """Represents one script source file."""

    full_name: str
    name: str
    path: Path
    gd_path: str
    contents: str
    kind: ScriptKind
    class_name: str | None = None
    extends: str | None = None

    def lines(self) -> list[str]:
        """Return the file contents split into lines."""
        return split_lines(self.contents)


@dataclass(frozen=True)
class Scene:
    """Represents one scene file.

    ``script`` is the script whose ``gd_path`` matches the scene's script
    resource, if any.
    """

    full_name: str
    name: str
    path: Path
    contents: str
    gd_type: str
    has_children: bool = False
    script: Script | None = None


@dataclass(frozen=True)
class Problem:
    """A single reported problem, either a construction failure or a violation."""

    file: str
    path: str
    code: str
    message: str

    @classmethod
    def from_error(cls, error: ParseError | RuleViolation, path: Path) -> Problem:
        """Build a problem from a parse error or rule violation."""
        if isinstance(error, RuleViolation):
            code = error.rule
        else:
            code = error.code
        return cls(
            file=error.file or path.name,
            path=str(path),
            code=code,
            message=error.message,
        )
