"""Typed configuration schema and loader for the corpusgen package."""

from __future__ import annotations

import os
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class GeneratorSettings(BaseModel):
    """Parameters of the corpus generation loop."""

    max_total_length: conint(ge=0)
    seed: int
    probability: confloat(gt=0.0, lt=1.0)
    min_line_length: conint(ge=1) = 2

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Logging verbosity for the package logger."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    model_config = ConfigDict(extra="forbid")


class VerificationSettings(BaseModel):
    """Corpus checker behaviour."""

    max_reported_invalid: conint(ge=0) = 20

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    generator: GeneratorSettings
    logging: LoggingSettings
    verification: VerificationSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_defaults() -> dict[str, Any]:
    """Return the packaged ``defaults.yml`` as a plain mapping."""

    with (
        importlib_resources.files("corpusgen.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        return yaml.safe_load(f) or {}


def load_config(path: str | os.PathLike[str] | None = None) -> ConfigModel:
    """Load configuration from defaults and optional overrides.

    Precedence of sources: package ``defaults.yml`` < YAML file at ``path``.
    The command line never passes ``path``; overrides exist for embedding and
    tests.
    """

    defaults = load_defaults()

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "GeneratorSettings",
    "LoggingSettings",
    "VerificationSettings",
    "deep_merge_dicts",
    "load_defaults",
    "load_config",
]
