"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional YAML passed to :func:`load_config`
"""

from .schema import ConfigModel, GeneratorSettings, load_config

__all__ = ["ConfigModel", "GeneratorSettings", "load_config"]
