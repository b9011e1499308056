"""Centralized configuration for gist.

All environment variables and paths are defined here. Use get_config() to access
configuration values - it loads dotenv once and caches the result.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _parse_int_env(name: str, default: int) -> int:
    """Parse an integer environment variable with fallback to default.

    Args:
        name: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _parse_bool_env(name: str, default: bool = False) -> bool:
    """Parse a boolean environment variable (1/true/yes/on)."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


def _default_config_path() -> Path:
    """Return $HOME/.config/gist/config.yaml, or config.yaml if HOME is unknown."""
    try:
        home = Path.home()
    except RuntimeError:
        return Path("config.yaml")
    return home / ".config" / "gist" / "config.yaml"


def _resolve_config_path() -> Path:
    env = os.getenv("GIST_CONFIG_PATH")
    if env:
        return Path(env)
    return _default_config_path()


def _resolve_git_path() -> str:
    return os.getenv("GIST_GIT_PATH") or os.getenv("GIT_PATH") or "git"


@dataclass(frozen=True)
class Config:
    """Immutable configuration container."""

    # Profile store location
    config_path: Path

    # External tool
    git_path: str
    git_timeout: int | None  # None blocks until git exits

    # Reserved: only echoes git invocations
    verbose: bool


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Load and return configuration. Cached after first call."""
    # Never overrides variables already set in the environment
    load_dotenv(find_dotenv(usecwd=True))

    timeout = _parse_int_env("GIST_GIT_TIMEOUT", 0)

    return Config(
        config_path=_resolve_config_path(),
        git_path=_resolve_git_path(),
        git_timeout=timeout if timeout > 0 else None,
        verbose=_parse_bool_env("GIST_VERBOSE"),
    )
