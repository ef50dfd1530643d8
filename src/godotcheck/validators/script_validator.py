"""Convention rules for GDScript files."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import ClassVar

from godotcheck.config import get_logger
from godotcheck.exceptions import RuleViolation
from godotcheck.parser.models import Script, ScriptKind

logger = get_logger(__name__)

# "var " after a space, a tab or at the start of a line
VAR_DECLARATION = re.compile(r"(?:^|(?<=[ \t]))var ", re.MULTILINE)

ScriptCheck = Callable[[Script], None]


def is_untyped_declaration(segment: str) -> bool:
    """Return True if ``=`` comes before any ``:`` in a declaration segment."""
    for letter in segment:
        if letter == ":":
            return False
        if letter == "=":
            return True
    return False


def declaration_segments(contents: str) -> list[str]:
    """Split contents on variable declarations.

    The text before the first declaration is kept as the first segment.
    """
    return VAR_DECLARATION.split(contents)


class ScriptValidator:
    """Evaluate the project conventions against a single script."""

    REQUIRED_BASE: ClassVar[str] = "Node"
    EXPORT_PREFIX: ClassVar[str] = "@export var "
    EXPORT_SKIP_PREFIXES: ClassVar[tuple[str, ...]] = ("class_name", "extends", "#")

    def __init__(self, fail_fast: bool = True) -> None:
        """Initialize the validator.

        Args:
            fail_fast: Stop at the first violation of a script
        """
        self.fail_fast = fail_fast

    def validate(self, script: Script) -> list[RuleViolation]:
        """Validate a script.

        Args:
            script: Script to validate

        Returns:
            The violations found, at most one when fail_fast is set
        """
        violations: list[RuleViolation] = []
        for check in self.checks_for(script.kind):
            try:
                check(script)
            except RuleViolation as violation:
                violations.append(violation)
                if self.fail_fast:
                    break

        logger.debug(
            "Validated script",
            script=script.full_name,
            violations=len(violations),
        )
        return violations

    def checks_for(self, kind: ScriptKind) -> list[ScriptCheck]:
        """Return the ordered checks applied to scripts of a kind."""
        checks: list[ScriptCheck] = [
            self.check_name_is_upper_camel_case,
            self.check_no_node_path_shorthand,
            self.check_static_typing,
        ]
        if kind is ScriptKind.REFERENCE:
            checks += [
                self.check_no_class_name,
                self.check_extends_node,
                self.check_export_only,
            ]
        elif kind is ScriptKind.VALUE:
            checks += [
                self.check_class_name_matches,
                self.check_extends_node,
                self.check_export_only,
            ]
        else:
            checks += [self.check_class_name_matches, self.check_extends_node]
        return checks

    def check_name_is_upper_camel_case(self, script: Script) -> None:
        name = script.name
        if (name and name[0] != name[0].upper()) or "_" in name:
            raise RuleViolation(
                f"{script.full_name} name not upper camel case",
                file=script.full_name,
                rule="naming",
            )

    def check_no_node_path_shorthand(self, script: Script) -> None:
        if "$" in script.contents:
            raise RuleViolation(
                f"{script.full_name} contains $",
                file=script.full_name,
                rule="node-path-shorthand",
                hint="Use an exported node reference instead of $NodePath",
            )

    def check_static_typing(self, script: Script) -> None:
        for segment in declaration_segments(script.contents):
            if is_untyped_declaration(segment):
                raise RuleViolation(
                    f"{script.full_name} doesn't use static typing properly",
                    file=script.full_name,
                    rule="static-typing",
                    hint="Declare variables as 'var name: Type = value'",
                )

    def check_class_name_matches(self, script: Script) -> None:
        if script.class_name is None:
            raise RuleViolation(
                f"{script.full_name} doesn't have a class_name",
                file=script.full_name,
                rule="class-name",
            )
        if script.class_name != script.name:
            raise RuleViolation(
                f"{script.full_name} script name and class_name don't match",
                file=script.full_name,
                rule="class-name",
            )

    def check_no_class_name(self, script: Script) -> None:
        if script.class_name is not None:
            raise RuleViolation(
                f"{script.full_name} reference script has class_name",
                file=script.full_name,
                rule="reference-class-name",
            )

    def check_extends_node(self, script: Script) -> None:
        if script.extends is None:
            raise RuleViolation(
                f"{script.full_name} doesn't extend anything "
                f"(should extend {self.REQUIRED_BASE})",
                file=script.full_name,
                rule="extends",
            )
        if script.extends != self.REQUIRED_BASE:
            raise RuleViolation(
                f"{script.full_name} doesn't extend {self.REQUIRED_BASE}",
                file=script.full_name,
                rule="extends",
            )

    def check_export_only(self, script: Script) -> None:
        """Value and reference scripts may only declare exported fields."""
        for line in script.lines():
            trimmed = line.strip()
            if not trimmed or trimmed.startswith(self.EXPORT_SKIP_PREFIXES):
                continue
            if not trimmed.startswith(self.EXPORT_PREFIX):
                raise RuleViolation(
                    f"{script.full_name} contains a non @export var statement",
                    file=script.full_name,
                    rule="export-only",
                )
