from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys

from . import __version__
from .config import CONFIG_NAME, WorkReportConfig, load_config
from .log import LogHooks, emit_log
from .paths import default_base_dir
from .reports import ReportError, ReportManager


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="work-report",
        description="Archive dated work reports and create today's report from Template.txt.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--dir", help="Report directory (default: $WORKREPORT_DIR or the executable's directory)")

    sub = parser.add_subparsers(dest="cmd", required=False)

    sub.add_parser("run", help="Archive all reports, then create today's report (default).")

    archive = sub.add_parser("archive", help="Archive reports into Archive/YYYY/MM.")
    archive.add_argument("paths", nargs="*", help="Specific report files (default: every YYYYMMDD.txt)")

    new = sub.add_parser("new", help="Create a report from Template.txt.")
    new.add_argument("--date", type=_report_date, help="Report date as YYYYMMDD (default: today)")

    return parser


def _report_date(value: str) -> str:
    text = value.strip()
    if len(text) != 8 or not text.isascii() or not text.isdigit():
        raise argparse.ArgumentTypeError(f"expected YYYYMMDD, got {value!r}")
    return text


def _hooks_from_config(cfg: WorkReportConfig, base_dir: Path) -> LogHooks:
    return LogHooks(
        emit_console=cfg.log.console,
        verbose=cfg.log.verbose,
        log_file=cfg.log_file_path(base_dir),
    )


def build_manager(args: argparse.Namespace) -> ReportManager:
    base_dir = default_base_dir(getattr(args, "dir", None))
    try:
        cfg, warning = load_config(base_dir / CONFIG_NAME)
    except OSError as exc:
        raise ReportError(f"cannot read the configuration in: {base_dir}") from exc
    if warning:
        emit_log(f"config: {warning}", level="warn", stderr=True)
    return ReportManager(base_dir, hooks=_hooks_from_config(cfg, base_dir))


def cmd_run(manager: ReportManager, args: argparse.Namespace) -> int:
    manager.archive_all()
    manager.create_for_today()
    return 0


def cmd_archive(manager: ReportManager, args: argparse.Namespace) -> int:
    if not args.paths:
        manager.archive_all()
        return 0
    for raw in args.paths:
        manager.archive_one(Path(raw))
    return 0


def cmd_new(manager: ReportManager, args: argparse.Namespace) -> int:
    if args.date:
        manager.create_for_date(args.date)
    else:
        manager.create_for_today()
    return 0


COMMANDS = {
    "run": cmd_run,
    "archive": cmd_archive,
    "new": cmd_new,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    argv = list(argv) if argv is not None else list(sys.argv[1:])
    args = parser.parse_args(argv)
    command = COMMANDS.get(args.cmd or "run")
    if command is None:
        parser.error(f"Unknown command: {args.cmd}")
        return 2

    manager: ReportManager | None = None
    try:
        manager = build_manager(args)
        return command(manager, args)
    except KeyboardInterrupt:
        return 130
    except ReportError as exc:
        cause = f" ({exc.__cause__})" if exc.__cause__ is not None else ""
        emit_log(f"error: {exc}{cause}", level="error", stderr=True, hooks=_error_hooks(manager))
        return 1


def _error_hooks(manager: ReportManager | None) -> LogHooks | None:
    # Errors reach the terminal even when progress output is silenced.
    if manager is None or manager.hooks is None:
        return None
    return replace(manager.hooks, emit_console=True)
