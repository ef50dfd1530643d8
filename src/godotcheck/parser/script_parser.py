"""Builds Script models from GDScript source files."""

from __future__ import annotations

from pathlib import Path

from godotcheck.common.file_source import load_text, to_resource_path
from godotcheck.config import get_logger
from godotcheck.exceptions import ParseError
from godotcheck.parser.header import HeaderLineError, parse_header_line
from godotcheck.parser.models import Script, ScriptKind, split_lines

logger = get_logger(__name__)

KIND_PREFIX_LENGTH = 2


class ScriptParser:
    """Parse GDScript files into Script models."""

    def __init__(self, resource_prefix: str = "res://") -> None:
        """Initialize the script parser.

        Args:
            resource_prefix: Prefix of project-relative resource paths
        """
        self.resource_prefix = resource_prefix

    def parse(self, path: Path, contents: str, gd_path: str) -> Script:
        """Build a Script from already loaded contents.

        Args:
            path: Location of the script file
            contents: Full text of the file
            gd_path: Resource path scenes use to reference this script

        Returns:
            The built Script

        Raises:
            ParseError: If the name can't be derived or a header is malformed
        """
        full_name = path.name
        kind = ScriptKind.from_file_name(full_name)
        name = self._derive_name(path, kind)
        class_name, extends = self._parse_headers(full_name, contents)

        return Script(
            full_name=full_name,
            name=name,
            path=path,
            gd_path=gd_path,
            contents=contents,
            kind=kind,
            class_name=class_name,
            extends=extends,
        )

    def parse_file(self, path: Path, project_root: Path) -> Script:
        """Read and build a Script from disk.

        Args:
            path: Location of the script file
            project_root: Root of the project, used to derive the resource path

        Returns:
            The built Script

        Raises:
            ParseError: If the file can't be read or parsed
        """
        try:
            contents = load_text(path)
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(
                f"{path.name} could not be read: {e}",
                file=path.name,
                code="read",
                details={"path": str(path)},
            ) from e

        gd_path = to_resource_path(path, project_root, self.resource_prefix)
        script = self.parse(path, contents, gd_path)
        logger.debug(
            "Built script",
            script=script.full_name,
            kind=script.kind.value,
            class_name=script.class_name,
            extends=script.extends,
        )
        return script

    def _derive_name(self, path: Path, kind: ScriptKind) -> str:
        stem = path.stem
        if kind is ScriptKind.BEHAVIOUR:
            return stem
        if len(stem) < KIND_PREFIX_LENGTH:
            raise ParseError(
                f"{path.name} file stem is too short to remove the "
                f"{kind.value.lower()} prefix",
                file=path.name,
                code="name",
            )
        return stem[KIND_PREFIX_LENGTH:]

    def _parse_headers(
        self, full_name: str, contents: str
    ) -> tuple[str | None, str | None]:
        class_name: str | None = None
        extends: str | None = None

        for line_number, line in enumerate(split_lines(contents), start=1):
            try:
                line_class_name, line_extends = parse_header_line(line)
            except HeaderLineError as e:
                raise ParseError(
                    f"{full_name} {e}",
                    file=full_name,
                    code="header",
                    details={"line": line_number, "text": line.strip()},
                ) from e

            if line_class_name is not None:
                if class_name is not None:
                    raise ParseError(
                        f"{full_name} multiple class_names",
                        file=full_name,
                        code="duplicate-class-name",
                        details={"line": line_number},
                    )
                class_name = line_class_name

            if line_extends is not None:
                if extends is not None:
                    raise ParseError(
                        f"{full_name} multiple extends",
                        file=full_name,
                        code="duplicate-extends",
                        details={"line": line_number},
                    )
                extends = line_extends

        return class_name, extends
