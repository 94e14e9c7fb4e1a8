"""
Render directory selection.
Finds the newest "render*" subdirectory under the renders root.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from utils.logger import setup_logger
from pipeline.errors import RenderDirectoryNotFoundError
from config import RENDERS_ROOT_DIR, RENDER_DIR_PREFIX

logger = setup_logger(__name__)


@dataclass
class RenderCandidate:
    """A render directory together with the timestamp used to rank it."""
    path: Path
    timestamp: float


def read_dir_timestamp(path: Path) -> Optional[float]:
    """
    Return the creation time of `path`, or its modification time when the
    platform does not report creation times.

    Returns None if the metadata cannot be read at all.
    """
    try:
        stat = path.stat()
    except OSError as e:
        logger.debug(f"Skipping {path}: could not read metadata ({e})")
        return None

    birthtime = getattr(stat, "st_birthtime", None)
    if birthtime is not None:
        return float(birthtime)
    return float(stat.st_mtime)


def find_latest_render_dir(
    root: Union[str, Path] = RENDERS_ROOT_DIR,
    prefix: str = RENDER_DIR_PREFIX,
) -> Path:
    """
    Find the most recently created directory in `root` whose name starts with `prefix`.

    Args:
        root: Directory to scan (immediate children only)
        prefix: Required name prefix for candidate directories

    Returns:
        Path of the newest matching directory. When several share the newest
        timestamp, the first one listed by the filesystem wins.

    Raises:
        RenderDirectoryNotFoundError: If `root` does not exist or holds no
            matching directory
    """
    root_path = Path(root)
    if not root_path.exists():
        raise RenderDirectoryNotFoundError(f"Directory not found: {root}")

    newest: Optional[RenderCandidate] = None

    with os.scandir(root_path) as entries:
        for entry in entries:
            if not entry.name.startswith(prefix) or not entry.is_dir():
                continue

            path = Path(entry.path)
            timestamp = read_dir_timestamp(path)
            if timestamp is None:
                continue

            if newest is None or timestamp > newest.timestamp:
                newest = RenderCandidate(path=path, timestamp=timestamp)

    if newest is None:
        raise RenderDirectoryNotFoundError("No render directories found")

    logger.debug(f"Latest render directory: {newest.path} (timestamp {newest.timestamp})")
    return newest.path
