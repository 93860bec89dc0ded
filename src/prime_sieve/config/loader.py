from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from prime_sieve.config.models import SieveConfig


# ConfigError is raised for invalid configuration (fail fast, before any unit starts).
class ConfigError(ValueError):
    pass


def load_yaml_config(path: Path) -> dict[str, Any]:
    # Returns a raw mapping for validation.
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    return _parse_yaml(text, source=str(path))


def load_default_yaml() -> dict[str, Any]:
    # Packaged defaults mirror the reference behaviour (limit 35, process runtime).
    text = resources.files("prime_sieve").joinpath("default_config.yml").read_text(encoding="utf-8")
    return _parse_yaml(text, source="default_config.yml")


def parse_config(raw: dict[str, Any]) -> SieveConfig:
    try:
        return SieveConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def load_config(path: Path) -> SieveConfig:
    return parse_config(load_yaml_config(path))


def load_default_config() -> SieveConfig:
    return parse_config(load_default_yaml())


def _parse_yaml(text: str, *, source: str) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config {source} is not valid YAML: {exc}") from exc
    if raw is None:
        # Empty file means "all defaults".
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw
