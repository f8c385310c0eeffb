"""Serialize the snapshot the viewer loads."""

import json
import os
import stat
import tempfile
from pathlib import Path

from .models import RepoRecord


def snapshot_to_json(records: list[RepoRecord]) -> str:
    """Render records as a 2-space indented JSON array, in the given order."""
    return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False) + "\n"


def _file_mode(path: Path) -> int:
    """Mode for the snapshot: the existing file's, else 0666 minus the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_snapshot(records: list[RepoRecord], path: Path) -> Path:
    """Write the snapshot so that ``path`` only ever holds a complete file.

    mkstemp creates the temp file as 0600; it gets the mode a plain write
    would have produced before it replaces ``path``.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(snapshot_to_json(records))
        os.chmod(tmp, _file_mode(path))
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
    return path
