from __future__ import annotations

import hashlib
from pathlib import Path


ARCHIVE_DIR_NAME = "Archive"
REPORT_SUFFIX = ".txt"
DATE_DIGITS = 8

_ASCII_DIGITS = frozenset("0123456789")


def _all_digits(text: str) -> bool:
    return bool(text) and all(ch in _ASCII_DIGITS for ch in text)


def is_dated_report_name(name: str) -> bool:
    """True for `YYYYMMDD.txt`: exactly eight ASCII digits, then `.txt`."""

    if not name.endswith(REPORT_SUFFIX):
        return False
    stem = name[: -len(REPORT_SUFFIX)]
    return len(stem) == DATE_DIGITS and _all_digits(stem)


def archive_subpath(filename: str) -> str:
    """Partial path of the archive directory for a dated report.

    `20200826.txt` -> `Archive/2020/08`

    Slicing is positional only; the month is not checked against a calendar.
    """

    if not filename.endswith(REPORT_SUFFIX):
        raise ValueError(f"not a report file name (expected {REPORT_SUFFIX}): {filename!r}")
    stem = filename[: -len(REPORT_SUFFIX)]
    if len(stem) < DATE_DIGITS or not _all_digits(stem[:DATE_DIGITS]):
        raise ValueError(f"report file name must start with YYYYMMDD: {filename!r}")
    year = stem[0:4]
    month = stem[4:6]
    return f"{ARCHIVE_DIR_NAME}/{year}/{month}"


def _md5_text(text: str) -> str:
    h = hashlib.md5()
    h.update(text.encode("utf-8"))
    return h.hexdigest()


def _read_text(path: Path) -> str:
    # newline="" keeps line endings as written so CRLF edits count as changes.
    with Path(path).open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def content_changed(path1: Path, path2: Path) -> bool:
    """Compare two text files by digest. True means the contents differ."""

    return _md5_text(_read_text(path1)) != _md5_text(_read_text(path2))
