"""File discovery and loading for godotcheck."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path, PurePath

from godotcheck.config import get_logger
from godotcheck.exceptions import DiscoveryError

logger = get_logger(__name__)


def discover_files(
    root: Path, extension: str, skip_dirs: Iterable[str] = ()
) -> list[Path]:
    """Find every file with the given extension below root.

    A directory whose own name is in ``skip_dirs`` is not descended into,
    the root directory included. Symlinked directories are never followed.
    Entries are visited in sorted order so results are stable across
    platforms.

    Args:
        root: Directory to search
        extension: File extension without the leading dot (e.g. "gd")
        skip_dirs: Directory names to skip

    Returns:
        Matching file paths in discovery order

    Raises:
        DiscoveryError: If root is missing or a directory can't be listed
    """
    if not root.exists():
        raise DiscoveryError(
            f"Project root does not exist: {root}",
            hint="Pass the directory containing project.godot",
        )
    if not root.is_dir():
        raise DiscoveryError(f"Project root is not a directory: {root}")

    suffix = f".{extension}"
    skip = set(skip_dirs)
    files: list[Path] = []
    _visit(root, suffix, skip, files)
    logger.debug(
        "Discovered files",
        root=str(root),
        extension=extension,
        count=len(files),
    )
    return files


def _visit(directory: Path, suffix: str, skip: set[str], files: list[Path]) -> None:
    if directory.name in skip:
        logger.debug("Skipping directory", directory=str(directory))
        return

    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise DiscoveryError(
            f"Failed to list directory {directory}: {e}",
            details={"directory": str(directory)},
        ) from e

    for entry in entries:
        if entry.is_symlink() and entry.is_dir():
            # may point back up the tree
            logger.debug("Skipping symlinked directory", directory=str(entry))
            continue
        if entry.is_dir():
            _visit(entry, suffix, skip, files)
        elif entry.suffix == suffix:
            files.append(entry)


def load_text(path: Path) -> str:
    """Read a file's full text as UTF-8.

    Raises:
        OSError: If the file can't be read
        UnicodeDecodeError: If the file isn't valid UTF-8
    """
    return path.read_text(encoding="utf-8")


def to_resource_path(
    path: PurePath, project_root: PurePath, prefix: str = "res://"
) -> str:
    """Derive the resource path scenes use to reference a file.

    Args:
        path: File location, inside project_root
        project_root: Root of the project
        prefix: Resource path prefix

    Returns:
        Forward-slash separated path with the prefix, e.g. "res://player/player.gd"

    Raises:
        ValueError: If path is not inside project_root
    """
    relative = path.relative_to(project_root)
    return prefix + relative.as_posix().replace("\\", "/")
