"""
Game configuration.

Defaults reproduce the classic game: a target in [1, 100], no hints
about the secret, and quiet logging. Every field can be overridden from
the environment:

    GUESS_LOW            Lowest possible target (default 1)
    GUESS_HIGH           Highest possible target (default 100)
    GUESS_REVEAL_SECRET  Print the target at start (default false)
    GUESS_LOG_LEVEL      Logging level name (default WARNING)
"""

from __future__ import annotations
import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .errors import ConfigError


ENV_PREFIX = "GUESS_"

# Guesses are parsed as unsigned 32-bit integers, so the target must fit too
MAX_VALUE = 2**32 - 1


class GameConfig(BaseModel):
    """Settings for one guessing session."""

    low: int = Field(default=1, ge=0, le=MAX_VALUE, description="Lowest possible target")
    high: int = Field(default=100, ge=0, le=MAX_VALUE, description="Highest possible target")
    reveal_secret: bool = Field(default=False, description="Print the target when the session starts")
    prompt: str = Field(default="Please input your guess.", min_length=1)
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {value}")
        return name

    @model_validator(mode="after")
    def _check_range(self) -> "GameConfig":
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must not exceed high ({self.high})")
        return self

    @property
    def range_size(self) -> int:
        return self.high - self.low + 1

    @classmethod
    def build(cls, **values) -> "GameConfig":
        """Create a config, converting validation failures to ConfigError."""
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigError(
                f"Invalid configuration: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **overrides,
    ) -> "GameConfig":
        """
        Load configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)
            overrides: Explicit values that win over the environment;
                None values are ignored

        Returns:
            Validated GameConfig
        """
        if environ is None:
            environ = os.environ

        values: dict[str, object] = {}
        for name in ("low", "high", "reveal_secret", "log_level"):
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is not None and raw.strip() != "":
                values[name] = raw.strip()

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.build(**values)
