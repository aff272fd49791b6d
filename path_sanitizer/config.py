"""Option record and config file loading."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for 3.10
    import tomli as tomllib  # type: ignore[no-redef]

SHELLS = ("bash", "zsh", "fish")
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")

DEFAULT_INCLUDE_CURRENT_DIR = True
DEFAULT_PREPEND = True
DEFAULT_LOG_LEVEL = "warning"
CONFIG_TABLE = "path_sanitizer"


class ConfigError(ValueError):
    """Raised when options or the config file are invalid."""


@dataclass(frozen=True)
class Options:
    shell: str
    include_current_dir: bool = DEFAULT_INCLUDE_CURRENT_DIR
    prepend: bool = DEFAULT_PREPEND
    candidates: tuple[str, ...] = ()
    log_level: str = DEFAULT_LOG_LEVEL

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Options":
        table = data.get(CONFIG_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(f"[{CONFIG_TABLE}] must be a table")
        dirs = table.get("dirs", [])
        if not isinstance(dirs, list):
            raise ConfigError(f"{CONFIG_TABLE}.dirs must be a list")
        options = Options(
            shell=str(table.get("shell", "")),
            include_current_dir=_read_bool(
                table, "current_dir", DEFAULT_INCLUDE_CURRENT_DIR
            ),
            prepend=_read_bool(table, "prepend", DEFAULT_PREPEND),
            candidates=tuple(dirs),
            log_level=str(table.get("log_level", DEFAULT_LOG_LEVEL)),
        )
        validate_options(options, require_shell=False)
        return options


def load_config(path: Path) -> Options:
    if not path.is_absolute():
        raise ConfigError(f"config path must be absolute: {path}")
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"failed to read config: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"failed to parse config: {exc}") from exc
    return Options.from_dict(data)


def validate_options(options: Options, require_shell: bool = True) -> None:
    if options.shell or require_shell:
        _validate_shell(options.shell)
    _validate_log_level(options.log_level)
    for candidate in options.candidates:
        if not isinstance(candidate, str):
            raise ConfigError(
                f"{CONFIG_TABLE}.dirs entries must be strings; got {candidate!r}"
            )


def _validate_shell(value: str) -> None:
    if value not in SHELLS:
        raise ConfigError("shell must be one of 'bash', 'zsh' or 'fish'")


def _validate_log_level(value: str) -> None:
    if value.lower() not in LOG_LEVELS:
        raise ConfigError(
            f"log_level must be one of {sorted(LOG_LEVELS)}; got {value}"
        )


def _read_bool(table: dict[str, Any], key: str, default: bool) -> bool:
    value = table.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{CONFIG_TABLE}.{key} must be a boolean")
    return value
