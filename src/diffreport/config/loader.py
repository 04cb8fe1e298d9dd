"""Load and merge configuration from .diffreport.toml and env vars."""

from __future__ import annotations

import codecs
import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from diffreport.config.defaults import CONFIG_FILENAME
from diffreport.config.schema import REPORT_FORMATS, DiffConfig, DiffReportConfig, ReportConfig


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _merge_env_overrides(cfg: DiffReportConfig) -> None:
    """Apply DIFFREPORT_* environment variable overrides."""
    if val := os.environ.get("DIFFREPORT_FORMAT"):
        if val in REPORT_FORMATS:
            cfg.report.format = val  # type: ignore[assignment]
    if val := os.environ.get("DIFFREPORT_OUTPUT"):
        cfg.report.output = val
    if val := os.environ.get("DIFFREPORT_ENCODING"):
        cfg.diff.encoding = val


def _check_encoding(encoding: Any) -> None:
    """Raise ConfigError unless *encoding* names a known codec."""
    if not isinstance(encoding, str):
        raise ConfigError(f"Encoding must be a string, got {encoding!r}")
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding: {encoding}") from exc


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> DiffReportConfig:
    """Load, validate, and return a DiffReportConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = DiffReportConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = DiffReportConfig(
            version=raw.get("version", "1.0"),
            diff=_build_section(raw, DiffConfig, "diff"),
            report=_build_section(raw, ReportConfig, "report"),
        )
        if cfg.report.format not in REPORT_FORMATS:
            raise ConfigError(
                f"Invalid report format {cfg.report.format!r} in {config_path}"
            )

    _merge_env_overrides(cfg)
    _check_encoding(cfg.diff.encoding)
    return cfg
