"""
Path utilities for locating the workspace root.

The default memory directory lives next to the project root, so that a
checkout keeps its documents alongside the code that serves them.
"""

from functools import lru_cache
from pathlib import Path


@lru_cache(maxsize=1)
def get_project_root() -> Path:
    """
    Find project root by searching for marker directories/files.

    Searches upward from this file's location for files that indicate the
    project root (pyproject.toml, .git). Falls back to the current working
    directory when no marker is found, which is the case for an installed
    (non-editable) package.

    Returns:
        Path to the project root directory.
    """
    current = Path(__file__).resolve().parent

    markers = ["pyproject.toml", ".git"]

    for _ in range(10):  # Limit search depth
        for marker in markers:
            if (current / marker).exists():
                return current
        parent = current.parent
        if parent == current:
            break
        current = parent

    return Path.cwd()
