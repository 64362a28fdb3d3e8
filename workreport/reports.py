from __future__ import annotations

from datetime import date
from fnmatch import fnmatchcase
import os
from pathlib import Path
import shutil

from .archive import ARCHIVE_DIR_NAME, archive_subpath, content_changed, is_dated_report_name
from .log import LogHooks, emit_log


TEMPLATE_NAME = "Template.txt"
REPORT_GLOB = "*.txt"

# The block is followed by one more line terminator when written out.
TEMPLATE_BODY = (
    "<Today's task>\n"
    "-\n"
    "-\n"
    "\n"
    "<TODO>\n"
    "-\n"
    "-\n"
)
TEMPLATE_CONTENT = TEMPLATE_BODY + "\n"


class ReportError(RuntimeError):
    """Unrecoverable filesystem failure while creating or archiving reports."""


def _today() -> date:
    return date.today()


class ReportManager:
    """Creates and archives daily work reports inside one directory.

    Layout under `base_dir`:

        Template.txt                  seed copied into every new report
        YYYYMMDD.txt                  one report per day
        Archive/YYYY/MM/YYYYMMDD.txt  archived copies (originals stay in place)

    Every I/O failure is raised as `ReportError`; the only tolerated failures
    are unreadable directory entries while scanning in `archive_all`.
    """

    def __init__(self, base_dir: str | Path, *, hooks: LogHooks | None = None) -> None:
        self._base_dir = Path(base_dir)
        self._hooks = hooks

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    @property
    def hooks(self) -> LogHooks | None:
        return self._hooks

    @property
    def template_path(self) -> Path:
        return self._base_dir / TEMPLATE_NAME

    def report_path(self, day: str) -> Path:
        return self._base_dir / f"{day}.txt"

    @property
    def archive_root(self) -> Path:
        return self._base_dir / ARCHIVE_DIR_NAME

    def archive_dir_for(self, filename: str) -> Path:
        try:
            partial = archive_subpath(filename)
        except ValueError as exc:
            raise ReportError(f"cannot derive the archive directory: {exc}") from exc
        # partial is "Archive/YYYY/MM"; the leading segment is archive_root.
        _root, *parts = partial.split("/")
        return self.archive_root.joinpath(*parts)

    def _emit(self, message: str, *, level: str = "info") -> None:
        emit_log(message, level=level, hooks=self._hooks)

    def archive_all(self) -> list[str]:
        """Archive every `YYYYMMDD.txt` in the base directory.

        `./20200826.txt` is copied to `./Archive/2020/08/20200826.txt`.
        Returns the names that were copied.
        """

        self._emit("Archiving...")
        try:
            with os.scandir(self._base_dir) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as exc:
            raise ReportError(f"cannot get the contents of the directory: {self._base_dir}") from exc

        archived: list[str] = []
        for entry in entries:
            if not fnmatchcase(entry.name, REPORT_GLOB):
                continue
            try:
                entry.name.encode("utf-8")
                is_file = entry.is_file()
            except (OSError, UnicodeError) as exc:
                self._emit(f"skipped unreadable entry {entry.name!r}: {exc}", level="debug")
                continue
            if not is_file:
                self._emit(f"skipped non-file entry {entry.name!r}", level="debug")
                continue
            if not is_dated_report_name(entry.name):
                continue
            if self.archive_one(entry.path):
                archived.append(entry.name)
        self._emit("All the files have been archived.")
        return archived

    def archive_one(self, src_path: str | Path) -> bool:
        """Copy one report into `Archive/YYYY/MM/`.

        The copy happens when the archive entry is missing or its content
        differs from the source. Returns True when a copy was made.
        """

        src = Path(src_path)
        name = src.name
        dst_dir = self.archive_dir_for(name)
        try:
            dst_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ReportError(f"cannot create the directory: {dst_dir}") from exc

        dst = dst_dir / name
        if dst.exists():
            try:
                changed = content_changed(src, dst)
            except (OSError, UnicodeDecodeError) as exc:
                raise ReportError(f"cannot read the file for comparison: {src} / {dst}") from exc
            if not changed:
                return False

        try:
            shutil.copy(src, dst)
        except OSError as exc:
            raise ReportError(f"cannot copy the file: {src} -> {dst}") from exc
        self._emit(f"    Archived: {name}")
        return True

    def create_for_today(self) -> Path:
        return self.create_for_date(_today().strftime("%Y%m%d"))

    def create_for_date(self, day: str) -> Path:
        """Create `<day>.txt` from `Template.txt`, the shell equivalent of `cp Template.txt <day>.txt`.

        `day` is expected as `YYYYMMDD` and is not validated. An existing
        report is left untouched; a missing template is generated first.
        """

        dst = self.report_path(day)
        template = self.template_path
        if dst.exists():
            self._emit("Today's work report already exists.")
            return dst
        if not template.exists():
            self._emit(f"{TEMPLATE_NAME} was not found, so it is generated automatically.")
            self._create_template()
            self._emit(f"    Created: {template}")
        try:
            shutil.copy(template, dst)
        except OSError as exc:
            raise ReportError(f"cannot copy the file: {template} -> {dst}") from exc
        self._emit(f"    Created: {dst}")
        return dst

    def _create_template(self) -> None:
        path = self.template_path
        try:
            with path.open("w", encoding="utf-8", newline="\n") as handle:
                handle.write(TEMPLATE_CONTENT)
                handle.flush()
                os.fsync(handle.fileno())
        except OSError as exc:
            raise ReportError(f"failed to write out {path}") from exc
