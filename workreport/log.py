from __future__ import annotations

import contextlib
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
import sys
from typing import Callable


@dataclass(frozen=True)
class LogHooks:
    log: Callable[[str, str], None] | None = None
    emit_console: bool = True
    verbose: bool = False
    log_file: Path | None = None

    def prints(self, level: str) -> bool:
        if not self.emit_console:
            return False
        return level != "debug" or self.verbose


_CONSOLE = LogHooks()


def format_log_line(level: str, message: str, *, when: datetime | None = None) -> str:
    stamp = (when or datetime.now(tz=timezone.utc)).replace(microsecond=0).isoformat()
    return f"{stamp} [{level.lower()}] {' '.join(message.split())}\n"


def append_log_line(log_file: Path, *, level: str, message: str) -> None:
    line = format_log_line(level, message)
    # A broken log file never interrupts report handling.
    with contextlib.suppress(OSError):
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with log_file.open("a", encoding="utf-8") as handle:
            handle.write(line)


def emit_log(
    message: str,
    *,
    level: str = "info",
    stderr: bool = False,
    hooks: LogHooks | None = None,
) -> None:
    """Send one progress or error line to the callback, the log file and the console."""

    hooks = hooks or _CONSOLE
    if hooks.log is not None:
        hooks.log(level, message)
    if hooks.log_file is not None:
        append_log_line(hooks.log_file, level=level, message=message)
    if hooks.prints(level):
        print(message, file=sys.stderr if stderr else sys.stdout)
