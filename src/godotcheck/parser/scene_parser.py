"""Builds Scene models from Godot ``.tscn`` files."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from godotcheck.common.file_source import load_text
from godotcheck.config import get_logger
from godotcheck.exceptions import ParseError
from godotcheck.parser.models import Scene, Script, split_lines

logger = get_logger(__name__)

SCRIPT_RESOURCE_PREFIX = '[ext_resource type="Script" path="'
NODE_PREFIX = "[node "
TYPE_FIELD = 'type="'


def index_scripts(scripts: list[Script]) -> dict[str, Script]:
    """Index scripts by resource path. The first script wins on duplicates."""
    index: dict[str, Script] = {}
    for script in scripts:
        index.setdefault(script.gd_path, script)
    return index


class SceneParser:
    """Parse scene files and link them to already built scripts."""

    def __init__(self, scripts: Mapping[str, Script]) -> None:
        """Initialize the scene parser.

        Args:
            scripts: Every built script, keyed by resource path
        """
        self.scripts = scripts

    def parse(self, path: Path, contents: str) -> Scene:
        """Build a Scene from already loaded contents.

        Raises:
            ParseError: If the script resource or the master node is malformed
        """
        full_name = path.name
        lines = split_lines(contents)

        gd_script_path = self._find_script_resource(full_name, lines)
        script = None
        if gd_script_path is not None:
            script = self.scripts.get(gd_script_path)
            if script is None:
                logger.debug(
                    "Scene script resource matches no script",
                    scene=full_name,
                    resource=gd_script_path,
                )

        gd_type, node_count = self._scan_nodes(full_name, lines)

        return Scene(
            full_name=full_name,
            name=path.stem,
            path=path,
            contents=contents,
            gd_type=gd_type,
            has_children=node_count > 1,
            script=script,
        )

    def parse_file(self, path: Path) -> Scene:
        """Read and build a Scene from disk.

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

        scene = self.parse(path, contents)
        logger.debug(
            "Built scene",
            scene=scene.full_name,
            gd_type=scene.gd_type,
            has_children=scene.has_children,
            script=scene.script.full_name if scene.script else None,
        )
        return scene

    def _find_script_resource(self, full_name: str, lines: list[str]) -> str | None:
        """Return the path of the first script ext_resource, if any."""
        for line in lines:
            if not line.startswith(SCRIPT_RESOURCE_PREFIX):
                continue
            rest = line[len(SCRIPT_RESOURCE_PREFIX) :]
            end = rest.find('"')
            if end == -1:
                raise ParseError(
                    f'{full_name} no ending " on script ext_resource path',
                    file=full_name,
                    code="script-resource",
                    details={"text": line},
                )
            return rest[:end]
        return None

    def _scan_nodes(self, full_name: str, lines: list[str]) -> tuple[str, int]:
        """Return the master node type and the number of node entries."""
        gd_type: str | None = None
        node_count = 0

        for line in lines:
            if not line.startswith(NODE_PREFIX):
                continue
            if node_count == 0:
                gd_type = self._master_node_type(full_name, line)
            node_count += 1

        if gd_type is None:
            raise ParseError(
                f"{full_name} no master node",
                file=full_name,
                code="master-node",
                hint='Scenes need at least one "[node ...]" entry',
            )
        return gd_type, node_count

    def _master_node_type(self, full_name: str, line: str) -> str:
        start = line.find(TYPE_FIELD)
        if start == -1:
            raise ParseError(
                f"{full_name} no type on master node",
                file=full_name,
                code="master-node",
                details={"text": line},
            )
        rest = line[start + len(TYPE_FIELD) :]
        end = rest.find('"')
        if end == -1:
            raise ParseError(
                f"{full_name} can't find end of type on master node",
                file=full_name,
                code="master-node",
                details={"text": line},
            )
        return rest[:end]
