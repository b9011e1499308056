"""Shared utility functions."""

import os
import tempfile
from pathlib import Path


def atomic_write_text(text: str, file_path: Path) -> None:
    """Write text atomically using temp file + rename.

    Creates missing parent directories. The target is replaced whole; readers
    never see a partially written file. Symlinks are followed so the file they
    point at is the one replaced, and an existing file keeps its permissions.

    Args:
        text: Content to write.
        file_path: Target file path.
    """
    file_path = Path(os.path.realpath(file_path))
    try:
        mode = os.stat(file_path).st_mode & 0o7777
    except FileNotFoundError:
        mode = 0o644

    dir_path = file_path.parent
    dir_path.mkdir(parents=True, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(suffix=".tmp", dir=dir_path)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, file_path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise
