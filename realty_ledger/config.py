"""Configuration management for realty-ledger."""

import os
from dataclasses import dataclass, field

from realty_ledger.exceptions import ConfigurationError
from realty_ledger.logging import FORMAT_TYPES


@dataclass
class GeneratorConfig:
    """Sample portfolio generation settings."""

    seed: int | None = None
    locale: str = "en_US"
    num_properties: int = 5


@dataclass
class LedgerConfig:
    """Main configuration for realty-ledger."""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables.

        Raises
        ------
        ConfigurationError
            If a numeric variable is not an integer or the log format is unknown.
        """
        generator = GeneratorConfig(
            seed=_int_env("LEDGER_SEED"),
            locale=os.getenv("LEDGER_LOCALE", "en_US"),
            num_properties=_int_env("LEDGER_SAMPLE_SIZE", 5),
        )

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in FORMAT_TYPES:
            raise ConfigurationError(f"LOG_FORMAT must be one of {FORMAT_TYPES}, got {log_format!r}")

        return cls(
            generator=generator,
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_format=log_format,
        )


def _int_env(name: str, default: int | None = None) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
