"""Configuration loading, schema, and defaults."""

from diffreport.config.loader import ConfigError, load_config
from diffreport.config.schema import DiffConfig, DiffReportConfig, ReportConfig

__all__ = [
    "ConfigError",
    "DiffConfig",
    "DiffReportConfig",
    "ReportConfig",
    "load_config",
]
