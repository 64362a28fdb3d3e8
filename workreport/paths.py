from __future__ import annotations

import os
from pathlib import Path
import sys


BASE_DIR_ENV = "WORKREPORT_DIR"


def package_root() -> Path:
    return Path(__file__).resolve().parent


def executable_dir() -> Path | None:
    """Directory holding the program that was launched.

    Frozen builds report their binary via `sys.executable`. Otherwise the
    launcher script in `sys.argv[0]` is used, unless it is this package's own
    `__main__.py` (`python -m workreport`), which says nothing about where the
    reports live.
    """

    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    launcher = sys.argv[0] if sys.argv else ""
    if not launcher:
        return None
    path = Path(launcher)
    if not path.is_file():
        return None
    path = path.resolve()
    if path.parent == package_root():
        return None
    return path.parent


def default_base_dir(explicit: str | Path | None = None) -> Path:
    """Resolve the report directory: explicit value, then $WORKREPORT_DIR, then the executable's directory, then cwd."""

    if explicit:
        return Path(explicit).expanduser().resolve()
    from_env = os.environ.get(BASE_DIR_ENV, "").strip()
    if from_env:
        return Path(from_env).expanduser().resolve()
    return executable_dir() or Path.cwd().resolve()
