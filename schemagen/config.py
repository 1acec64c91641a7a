"""Configuration management for schemagen.

Settings cover the defaults the built-in generators fall back to when an
attribute leaves a constraint unset, plus the seed and Faker locale used for
reproducible output.

Config resolution order (highest priority first):
1. Programmatic (SchemagenConfig constructed in code)
2. Environment variables (SCHEMAGEN_SEED, SCHEMAGEN_STRING_MAX_LENGTH, etc.)
3. Config file (~/.config/schemagen/config.json, managed by `schemagen config`)
4. Hardcoded defaults
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "schemagen"
CONFIG_FILE = CONFIG_DIR / "config.json"


# =============================================================================
# Config dataclass
# =============================================================================


@dataclass
class SchemagenConfig:
    """Top-level schemagen configuration.

    Examples:
        # Package use — no files needed
        config = SchemagenConfig(seed=42, string_max_length=32)

        # CLI use — loads from ~/.config/schemagen/config.json
        config = SchemagenConfig.load()
    """

    seed: int | None = None
    faker_locale: str = "en_US"
    string_min_length: int = 0
    string_max_length: int = 255
    integer_minimum: int = -(2**31)
    integer_maximum: int = 2**31 - 1
    float_minimum: float = -1e9
    float_maximum: float = 1e9
    float_precision: int = 2  # decimal places used when bounds don't need more

    @classmethod
    def load(cls) -> "SchemagenConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: Load from config file if it exists
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                _apply_dict(config, data)
            except (json.JSONDecodeError, OSError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)

        # Layer 2: Env var overrides
        for config_field in fields(cls):
            env_var = f"SCHEMAGEN_{config_field.name.upper()}"
            if val := os.environ.get(env_var):
                try:
                    setattr(config, config_field.name, coerce_field(config_field.name, val))
                except ValueError:
                    logger.warning("Invalid %s=%r, ignoring", env_var, val)

        return config

    def save(self) -> None:
        """Save config to ~/.config/schemagen/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        defaults = asdict(SchemagenConfig())
        data = {k: v for k, v in asdict(self).items() if v != defaults[k]}
        with open(CONFIG_FILE, "w") as f:
            json.dump(data, f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return asdict(self)


# =============================================================================
# Field coercion
# =============================================================================

_INT_FIELDS = {
    "seed",
    "string_min_length",
    "string_max_length",
    "integer_minimum",
    "integer_maximum",
    "float_precision",
}
_FLOAT_FIELDS = {"float_minimum", "float_maximum"}


def coerce_field(name: str, value: Any) -> Any:
    """Coerce a raw (string or JSON) value to the type of config field `name`.

    Raises:
        KeyError: If `name` is not a config field
        ValueError: If the value cannot be converted
    """
    if name not in {f.name for f in fields(SchemagenConfig)}:
        raise KeyError(name)
    if name == "seed" and value in (None, "", "none", "None"):
        return None
    if name in _INT_FIELDS:
        return int(value)
    if name in _FLOAT_FIELDS:
        return float(value)
    return str(value)


def _apply_dict(config: SchemagenConfig, data: dict) -> None:
    """Apply a dict of values onto a SchemagenConfig, skipping bad entries."""
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: expected a JSON object", CONFIG_FILE)
        return
    for k, v in data.items():
        if not hasattr(config, k):
            continue
        try:
            setattr(config, k, coerce_field(k, v))
        except (TypeError, ValueError):
            logger.warning("Invalid config value %s=%r, ignoring", k, v)


# =============================================================================
# Global config singleton
# =============================================================================

_config: SchemagenConfig | None = None


def get_config() -> SchemagenConfig:
    """Get the global SchemagenConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = SchemagenConfig.load()
    return _config


def configure(config: SchemagenConfig) -> None:
    """Set the global SchemagenConfig programmatically.

    Use this when schemagen is used as a package:
        from schemagen.config import configure, SchemagenConfig
        configure(SchemagenConfig(seed=7))
    """
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
