"""Convention rules for Godot scene files."""

from __future__ import annotations

from collections.abc import Callable

from godotcheck.config import get_logger
from godotcheck.exceptions import RuleViolation
from godotcheck.parser.models import Scene, ScriptKind

logger = get_logger(__name__)

DEFAULT_MASTER_TYPES = ("Node", "Node2D", "Node3D")

SceneCheck = Callable[[Scene], None]


class SceneValidator:
    """Evaluate structural and script compatibility rules against a scene."""

    def __init__(
        self,
        allowed_master_types: tuple[str, ...] | list[str] = DEFAULT_MASTER_TYPES,
        fail_fast: bool = True,
    ) -> None:
        """Initialize the validator.

        Args:
            allowed_master_types: Node types a scene's master node may have
            fail_fast: Stop at the first violation of a scene
        """
        self.allowed_master_types = tuple(allowed_master_types)
        self.fail_fast = fail_fast

    @property
    def checks(self) -> list[SceneCheck]:
        return [
            self.check_children_without_script,
            self.check_master_type,
            self.check_attached_script,
        ]

    def validate(self, scene: Scene) -> list[RuleViolation]:
        """Validate a scene.

        Args:
            scene: Scene to validate

        Returns:
            The violations found, at most one when fail_fast is set
        """
        violations: list[RuleViolation] = []
        for check in self.checks:
            try:
                check(scene)
            except RuleViolation as violation:
                violations.append(violation)
                if self.fail_fast:
                    break

        logger.debug(
            "Validated scene",
            scene=scene.full_name,
            violations=len(violations),
        )
        return violations

    def check_children_without_script(self, scene: Scene) -> None:
        if scene.has_children and scene.script is not None:
            raise RuleViolation(
                f"{scene.full_name} scene has children and script",
                file=scene.full_name,
                rule="children-with-script",
            )

    def check_master_type(self, scene: Scene) -> None:
        if scene.gd_type not in self.allowed_master_types:
            raise RuleViolation(
                f"{scene.full_name} scene master node is not of type "
                f"{_join_types(self.allowed_master_types)}",
                file=scene.full_name,
                rule="master-type",
            )

    def check_attached_script(self, scene: Scene) -> None:
        script = scene.script
        if script is None:
            return
        if script.kind is ScriptKind.REFERENCE:
            raise RuleViolation(
                f"{scene.full_name} reference script should not be on scene master",
                file=scene.full_name,
                rule="reference-on-master",
            )
        if scene.gd_type != "Node":
            raise RuleViolation(
                f"{scene.full_name} isn't type Node but has a behaviour "
                "or value script",
                file=scene.full_name,
                rule="script-on-typed-master",
            )


def _join_types(types: tuple[str, ...]) -> str:
    """Join type names as "A, B, or C"."""
    if len(types) <= 1:
        return "".join(types)
    if len(types) == 2:
        return f"{types[0]} or {types[1]}"
    return f"{', '.join(types[:-1])}, or {types[-1]}"
