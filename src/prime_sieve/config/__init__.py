from .loader import (
    ConfigError,
    load_config,
    load_default_config,
    load_default_yaml,
    load_yaml_config,
    parse_config,
)
from .models import LoggingConfig, OutputConfig, RuntimeConfig, SieveConfig

# Config exports are intentionally small.
__all__ = [
    "ConfigError",
    "LoggingConfig",
    "OutputConfig",
    "RuntimeConfig",
    "SieveConfig",
    "load_config",
    "load_default_config",
    "load_default_yaml",
    "load_yaml_config",
    "parse_config",
]
