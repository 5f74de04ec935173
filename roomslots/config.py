"""
Centralized configuration for roomslots.

Values come from config/roomslots.yaml (or the file named by ROOMSLOTS_CONFIG).
Override via environment variables where marked. A missing or unreadable file
falls back to the defaults below.
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

import yaml

from roomslots import paths
from roomslots.availability.room import MAX_RANGE_MINUTES, ROOM_LABEL_REGEX, TrailingBlockPolicy
from roomslots.errors import ConfigError

logger = logging.getLogger(__name__)

# ============================================================
# Defaults
# ============================================================

_DEFAULT_SLOT_MINUTES = 30
_DEFAULT_MIN_MINUTES = 60
_DEFAULT_TRAILING_POLICY = TrailingBlockPolicy.AS_OBSERVED
_DEFAULT_LOG_LEVEL = "INFO"

# ============================================================
# Environment overrides
# ============================================================

ENV_SLOT_MINUTES = "ROOMSLOTS_SLOT_MINUTES"
"""Length of one reservation slot in minutes."""

ENV_MIN_MINUTES = "ROOMSLOTS_MIN_MINUTES"
"""Default minimum length of a reported free range."""

ENV_TRAILING_POLICY = "ROOMSLOTS_TRAILING_POLICY"
"""as_observed | strict: whether the last block of a day skips the threshold."""

ENV_LOG_LEVEL = "ROOMSLOTS_LOG_LEVEL"
"""Root log level for the CLI."""


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    slot_minutes: int = _DEFAULT_SLOT_MINUTES
    default_min_minutes: int = _DEFAULT_MIN_MINUTES
    trailing_block_policy: TrailingBlockPolicy = _DEFAULT_TRAILING_POLICY
    room_label_pattern: str = ROOM_LABEL_REGEX
    log_level: str = _DEFAULT_LOG_LEVEL
    log_json: bool | None = None

    @property
    def max_range_minutes(self) -> int:
        return MAX_RANGE_MINUTES


def _load_yaml(config_path: Path) -> dict:
    """Load YAML config, return empty dict on failure."""
    if not config_path.exists():
        logger.warning("roomslots config not found at %s, using defaults", config_path)
        return {}
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as exc:
        logger.error("Failed to load roomslots config: %s", exc)
        return {}
    if not isinstance(data, dict):
        logger.error("roomslots config at %s is not a mapping, using defaults", config_path)
        return {}
    return data


def _as_int(name: str, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from exc


def _as_policy(value) -> TrailingBlockPolicy:
    if isinstance(value, TrailingBlockPolicy):
        return value
    try:
        return TrailingBlockPolicy(str(value).lower())
    except ValueError as exc:
        choices = ", ".join(p.value for p in TrailingBlockPolicy)
        raise ConfigError(f"trailing_block_policy must be one of {choices}, got {value!r}") from exc


def _as_label_pattern(value) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"room_label_pattern must be a string, got {value!r}")
    try:
        re.compile(value)
    except re.error as exc:
        raise ConfigError(f"room_label_pattern is not a valid regex: {exc}") from exc
    return value


def load_settings(config_path: Path | None = None) -> Settings:
    """
    Resolve settings from YAML and environment.

    Precedence: environment > YAML file > defaults.

    Raises:
        ConfigError: If a value is present but unusable
    """
    if config_path is None:
        config_path = paths.config_path()

    raw = _load_yaml(Path(config_path))

    slot_minutes = _as_int("slot_minutes", os.environ.get(ENV_SLOT_MINUTES, raw.get("slot_minutes", _DEFAULT_SLOT_MINUTES)))
    if not 0 < slot_minutes < 24 * 60:
        raise ConfigError(f"slot_minutes must be between 1 and 1439, got {slot_minutes}")

    min_minutes = _as_int(
        "default_min_minutes",
        os.environ.get(ENV_MIN_MINUTES, raw.get("default_min_minutes", _DEFAULT_MIN_MINUTES)),
    )
    if not 0 <= min_minutes <= MAX_RANGE_MINUTES:
        raise ConfigError(f"default_min_minutes must be in [0, {MAX_RANGE_MINUTES}], got {min_minutes}")

    policy = _as_policy(os.environ.get(ENV_TRAILING_POLICY, raw.get("trailing_block_policy", _DEFAULT_TRAILING_POLICY)))

    logging_cfg = raw.get("logging") or {}
    if not isinstance(logging_cfg, dict):
        raise ConfigError(f"logging must be a mapping, got {logging_cfg!r}")
    log_level = str(os.environ.get(ENV_LOG_LEVEL, logging_cfg.get("level", _DEFAULT_LOG_LEVEL))).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Unknown log level {log_level!r}")
    log_json = logging_cfg.get("json")
    if log_json is not None and not isinstance(log_json, bool):
        raise ConfigError(f"logging.json must be true, false or null, got {log_json!r}")

    pattern = _as_label_pattern(raw.get("room_label_pattern") or ROOM_LABEL_REGEX)

    return Settings(
        slot_minutes=slot_minutes,
        default_min_minutes=min_minutes,
        trailing_block_policy=policy,
        room_label_pattern=pattern,
        log_level=log_level,
        log_json=log_json,
    )
