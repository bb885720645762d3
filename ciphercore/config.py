"""
Configuration management for ciphercore.

Settings come from CIPHERCORE_* environment variables. Only operational
knobs are configurable; the primitives themselves (cipher suite, signature
scheme, compression level) are fixed.
"""

import logging
import os
from typing import Mapping, Optional

from .errors import ConfigError

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_BUNDLE_MAX_AGE = 24 * 60 * 60  # seconds
DEFAULT_BUNDLE_VERSION = "1.0.0"
DEFAULT_PBKDF2_ITERATIONS = 100_000

ENV_PREFIX = "CIPHERCORE_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}")
    if value <= 0:
        raise ConfigError(f"{ENV_PREFIX}{name} must be positive, got {value}")
    return value


def _require_positive_int(label: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{label} must be an integer, got {value!r}")
    if value <= 0:
        raise ConfigError(f"{label} must be positive, got {value}")
    return value


class CipherCoreConfig:
    """
    Runtime settings for ciphercore.

    Attributes:
        log_level: Logging level name used by the CLI
        bundle_max_age: Maximum bundle signature age in seconds
        bundle_version: Version string stamped on bundle signatures
        pbkdf2_iterations: Default PBKDF2 iteration count
    """

    def __init__(self, log_level: str = DEFAULT_LOG_LEVEL,
                 bundle_max_age: int = DEFAULT_BUNDLE_MAX_AGE,
                 bundle_version: str = DEFAULT_BUNDLE_VERSION,
                 pbkdf2_iterations: int = DEFAULT_PBKDF2_ITERATIONS):
        """
        Initialize configuration.

        Raises:
            ConfigError: If any value has the wrong type or is out of range
        """
        log_level = str(log_level).upper()
        if log_level not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {log_level}")
        bundle_max_age = _require_positive_int("Bundle max age", bundle_max_age)
        if not isinstance(bundle_version, str) or not bundle_version:
            raise ConfigError(f"Bundle version must be a non-empty string, got {bundle_version!r}")
        pbkdf2_iterations = _require_positive_int("PBKDF2 iterations", pbkdf2_iterations)

        self.log_level = log_level
        self.bundle_max_age = bundle_max_age
        self.bundle_version = bundle_version
        self.pbkdf2_iterations = pbkdf2_iterations

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> "CipherCoreConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Validated configuration

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        if environ is None:
            environ = os.environ

        kwargs = {}
        if f"{ENV_PREFIX}LOG_LEVEL" in environ:
            kwargs['log_level'] = environ[f"{ENV_PREFIX}LOG_LEVEL"]
        if f"{ENV_PREFIX}BUNDLE_MAX_AGE" in environ:
            kwargs['bundle_max_age'] = _parse_positive_int(
                "BUNDLE_MAX_AGE", environ[f"{ENV_PREFIX}BUNDLE_MAX_AGE"])
        if f"{ENV_PREFIX}BUNDLE_VERSION" in environ:
            kwargs['bundle_version'] = environ[f"{ENV_PREFIX}BUNDLE_VERSION"]
        if f"{ENV_PREFIX}PBKDF2_ITERATIONS" in environ:
            kwargs['pbkdf2_iterations'] = _parse_positive_int(
                "PBKDF2_ITERATIONS", environ[f"{ENV_PREFIX}PBKDF2_ITERATIONS"])

        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Get configuration values as a dictionary."""
        return {
            'log_level': self.log_level,
            'bundle_max_age': self.bundle_max_age,
            'bundle_version': self.bundle_version,
            'pbkdf2_iterations': self.pbkdf2_iterations,
        }


def get_config() -> CipherCoreConfig:
    """Load configuration from the current environment."""
    return CipherCoreConfig.from_environment()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for command-line use.

    Args:
        level: Level name. Defaults to the configured log level.
    """
    if level is None:
        level = get_config().log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
