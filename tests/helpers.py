from __future__ import annotations

from pathlib import Path
from tempfile import TemporaryDirectory
import unittest

from workreport.log import LogHooks
from workreport.reports import ReportManager


def write_text(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)
    return path


def read_text(path: Path) -> str:
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


class ReportDirTestCase(unittest.TestCase):
    """Temporary report directory plus a manager that records log lines instead of printing."""

    def setUp(self) -> None:
        self._tmp = TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.messages: list[tuple[str, str]] = []
        hooks = LogHooks(log=lambda level, message: self.messages.append((level, message)), emit_console=False)
        self.manager = ReportManager(self.root, hooks=hooks)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def logged(self, level: str = "info") -> list[str]:
        return [message for lvl, message in self.messages if lvl == level]
