from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib


CONFIG_NAME = "workreport.toml"


_TRUE_WORDS = {"true", "on", "yes"}
_FALSE_WORDS = {"false", "off", "no"}


def _as_bool(value, *, default: bool) -> bool:
    # TOML booleans, plus on/off style words; anything else keeps the default.
    if isinstance(value, bool):
        return value
    word = value.strip().lower() if isinstance(value, str) else ""
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return default


def _as_str(value, *, default: str) -> str:
    if isinstance(value, str):
        return value.strip()
    return default


@dataclass(frozen=True)
class LogConfig:
    file: str = ""
    console: bool = True
    verbose: bool = False


@dataclass(frozen=True)
class WorkReportConfig:
    log: LogConfig = field(default_factory=LogConfig)

    def log_file_path(self, base_dir: Path) -> Path | None:
        if not self.log.file:
            return None
        path = Path(self.log.file).expanduser()
        return path if path.is_absolute() else base_dir / path


def load_config(path: Path) -> tuple[WorkReportConfig, str]:
    """Load optional settings from workreport.toml.

    Returns (config, warning). Warning is empty on success or when the file is absent.
    """

    if not path.exists():
        return WorkReportConfig(), ""

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        return WorkReportConfig(), f"{path.name} parse failed: {exc}"

    log = data.get("log") if isinstance(data.get("log"), dict) else {}

    cfg = WorkReportConfig(
        log=LogConfig(
            file=_as_str(log.get("file"), default=LogConfig.file),
            console=_as_bool(log.get("console"), default=LogConfig.console),
            verbose=_as_bool(log.get("verbose"), default=LogConfig.verbose),
        ),
    )
    return cfg, ""
