"""Line classifier for ``class_name`` and ``extends`` script headers."""

from __future__ import annotations

CLASS_NAME_PREFIX = "class_name "
EXTENDS_PREFIX = "extends"


class HeaderLineError(ValueError):
    """A header line has tokens the line grammar does not allow."""


def parse_header_line(line: str) -> tuple[str | None, str | None]:
    """Extract a declared class name and inheritance target from one line.

    Recognized forms::

        class_name Foo
        class_name Foo extends Node
        extends Node

    Any other line yields ``(None, None)``.

    Args:
        line: A single line of script text

    Returns:
        Tuple of (class_name, extends), either of which may be None

    Raises:
        HeaderLineError: If a header line carries unexpected trailing tokens
    """
    stripped = line.strip()

    if stripped.startswith(CLASS_NAME_PREFIX):
        class_name = stripped[len(CLASS_NAME_PREFIX) :].strip()
        if " " not in class_name:
            return class_name, None
        class_name, rest = class_name.split(" ", 1)
        if rest.startswith("extends "):
            return class_name, rest[len("extends ") :].strip()
        raise HeaderLineError(
            "there was another word after the class_name but no extends"
        )

    if stripped.startswith(EXTENDS_PREFIX):
        extends = stripped[len(EXTENDS_PREFIX) :].strip()
        if " " not in extends:
            return None, extends
        raise HeaderLineError("there was another word after the extends")

    return None, None
