from __future__ import annotations

from pathlib import Path


def actual_path(current_dir: Path | str | None, path: Path | str) -> Path:
    """Resolve path as if current_dir were the working directory.

    Absolute paths, and any path when current_dir is None, come back unchanged.
    """
    candidate = Path(path)
    if current_dir is None or candidate.is_absolute():
        return candidate
    return Path(current_dir) / candidate
