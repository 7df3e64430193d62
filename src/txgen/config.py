"""Configuration loading from YAML + environment overrides."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from txgen.schemas import (
    DEFAULT_MAX_AMOUNT,
    DEFAULT_MAX_CLIENT_ID,
    DEFAULT_RECORD_COUNT,
    GenerationParams,
)

GENERATOR_KEYS = frozenset({"record_count", "max_client_id", "max_amount", "seed"})


def _load_yaml(path: str | Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a mapping at the top level")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


class AppSettings(BaseSettings):
    """App-level settings with env override."""

    model_config = SettingsConfigDict(
        env_prefix="TXGEN_",
        extra="ignore",
    )

    config_path: str = Field(default="config/default.yaml", alias="TXGEN_CONFIG_PATH")
    log_level: str | None = Field(default=None, alias="TXGEN_LOG_LEVEL")


def validate_app_config(config: dict[str, Any]) -> None:
    """Raise ValueError if the app section is present but not a mapping."""
    if "app" in config and not isinstance(config["app"], dict):
        raise ValueError("app section must be a mapping")


def validate_generator_config(config: dict[str, Any]) -> None:
    """Raise ValueError if the generator section is not a mapping or has unknown keys."""
    section = config.get("generator")
    if section is None:
        return
    if not isinstance(section, dict):
        raise ValueError("generator section must be a mapping")
    unknown = sorted(set(section) - GENERATOR_KEYS)
    if unknown:
        raise ValueError(
            f"Unknown generator option(s): {', '.join(unknown)}. "
            f"Allowed: {', '.join(sorted(GENERATOR_KEYS))}"
        )


def get_config(config_path: str | None = None) -> dict[str, Any]:
    """Load config: defaults, merged with YAML (if present), then env overrides."""
    settings = AppSettings()
    path = config_path or settings.config_path
    base = _default_config()
    if Path(path).exists():
        base = _deep_merge(base, _load_yaml(path))
    validate_app_config(base)
    if settings.log_level:
        base.setdefault("app", {})["log_level"] = settings.log_level
    validate_generator_config(base)
    return base


def _default_config() -> dict[str, Any]:
    return {
        "app": {"name": "txgen", "log_level": "INFO"},
        "generator": {
            "record_count": DEFAULT_RECORD_COUNT,
            "max_client_id": DEFAULT_MAX_CLIENT_ID,
            "max_amount": DEFAULT_MAX_AMOUNT,
            "seed": None,
        },
    }


def generation_params(config: dict[str, Any], **overrides: int | None) -> GenerationParams:
    """Build GenerationParams from the generator section; non-None overrides win.

    Raises InvalidArgument for out-of-range or non-integer values.
    """
    values = dict(config.get("generator") or {})
    values.update({k: v for k, v in overrides.items() if v is not None})
    return GenerationParams.build(**values)


def get_config_hash(config: dict[str, Any]) -> str:
    """SHA256 of resolved config (canonical key order), logged to trace a dataset back."""
    canonical = yaml.dump(config, default_flow_style=False, sort_keys=True, allow_unicode=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
