"""Runs every convention check over a Godot project."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from godotcheck.common.file_source import discover_files
from godotcheck.config import GodotCheckSettings, get_logger, get_settings
from godotcheck.exceptions import ParseError
from godotcheck.parser.models import Problem, Scene, Script
from godotcheck.parser.scene_parser import SceneParser, index_scripts
from godotcheck.parser.script_parser import ScriptParser
from godotcheck.validators.scene_validator import SceneValidator
from godotcheck.validators.script_validator import ScriptValidator

logger = get_logger(__name__)


@dataclass
class CheckReport:
    """Result of checking a project."""

    project_root: Path
    scripts: list[Script] = field(default_factory=list)
    scenes: list[Scene] = field(default_factory=list)
    general_problems: list[Problem] = field(default_factory=list)
    script_problems: list[Problem] = field(default_factory=list)
    scene_problems: list[Problem] = field(default_factory=list)

    @property
    def total_problems(self) -> int:
        return (
            len(self.general_problems)
            + len(self.script_problems)
            + len(self.scene_problems)
        )

    @property
    def has_problems(self) -> bool:
        return self.total_problems > 0

    def to_dict(self) -> dict[str, Any]:
        """Machine readable form of the report."""
        return {
            "project_root": str(self.project_root),
            "scripts_checked": len(self.scripts),
            "scenes_checked": len(self.scenes),
            "general_problems": [vars(p) for p in self.general_problems],
            "script_problems": [vars(p) for p in self.script_problems],
            "scene_problems": [vars(p) for p in self.scene_problems],
        }


class ProjectChecker:
    """Build script and scene models for a project and validate them.

    Scripts are all built before any scene so that scene to script
    links see the complete script collection.
    """

    def __init__(self, settings: GodotCheckSettings | None = None) -> None:
        """Initialize the checker.

        Args:
            settings: Settings to use, defaults to the global settings
        """
        self.settings = settings or get_settings()
        self.script_parser = ScriptParser(resource_prefix=self.settings.resource_prefix)
        self.script_validator = ScriptValidator(fail_fast=self.settings.fail_fast)
        self.scene_validator = SceneValidator(
            allowed_master_types=self.settings.allowed_master_types,
            fail_fast=self.settings.fail_fast,
        )

    def check(self, project_root: Path | None = None) -> CheckReport:
        """Check every script and scene below the project root.

        Args:
            project_root: Overrides the configured project root

        Returns:
            Report with general, script and scene problems

        Raises:
            DiscoveryError: If the project tree can't be walked
        """
        root = project_root or self.settings.project_root
        report = CheckReport(project_root=root)
        skip_dirs = self.settings.skip_dirs

        script_paths = discover_files(root, self.settings.script_extension, skip_dirs)
        scene_paths = discover_files(root, self.settings.scene_extension, skip_dirs)
        logger.info(
            "Discovered project files",
            project_root=str(root),
            scripts=len(script_paths),
            scenes=len(scene_paths),
        )

        for path in script_paths:
            try:
                report.scripts.append(self.script_parser.parse_file(path, root))
            except ParseError as e:
                self._record_parse_error(report, e, path)

        for script in report.scripts:
            for violation in self.script_validator.validate(script):
                report.script_problems.append(
                    Problem.from_error(violation, script.path)
                )

        scene_parser = SceneParser(index_scripts(report.scripts))
        for path in scene_paths:
            try:
                report.scenes.append(scene_parser.parse_file(path))
            except ParseError as e:
                self._record_parse_error(report, e, path)

        for scene in report.scenes:
            for violation in self.scene_validator.validate(scene):
                report.scene_problems.append(Problem.from_error(violation, scene.path))

        logger.info(
            "Project check finished",
            general_problems=len(report.general_problems),
            script_problems=len(report.script_problems),
            scene_problems=len(report.scene_problems),
        )
        return report

    def _record_parse_error(
        self, report: CheckReport, error: ParseError, path: Path
    ) -> None:
        logger.warning("Could not build model", path=str(path), error=error.message)
        report.general_problems.append(Problem.from_error(error, path))
