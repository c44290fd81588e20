# config.py

"""
Runtime settings.

Values come from the environment, including a .env file found from the
working directory upwards (python-dotenv), then from command-line
overrides, and are validated by pydantic before use.
"""

import logging
import os
from typing import Any, Dict

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

from .codec import DEFAULT_EXPONENT_THRESHOLD, DEFAULT_PRECISION
from .reporter import DEFAULT_TERM_WIDTH

ENV_PREFIX = "CALC_"


class Settings(BaseModel):
    """Display and diagnostic settings."""
    term_width: int = Field(DEFAULT_TERM_WIDTH, ge=20, description="Width of error excerpts")
    precision: int = Field(DEFAULT_PRECISION, ge=0, le=17, description="Digits after the decimal point")
    exponent_threshold: int = Field(
        DEFAULT_EXPONENT_THRESHOLD, ge=1, le=308,
        description="Decimal exponent at which results switch to scientific notation",
    )
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def _from_environment() -> Dict[str, Any]:
    values = {}
    for name in Settings.model_fields:
        raw = os.getenv(ENV_PREFIX + name.upper())
        if raw is not None and raw.strip():
            values[name] = raw.strip()
    return values


def load_settings(**overrides) -> Settings:
    """
    Load settings from the environment and apply overrides.

    Args:
        **overrides: Field values that win over the environment; None
            values are ignored.

    Returns:
        Validated Settings.

    Raises:
        pydantic.ValidationError: If a value is out of range or malformed.
    """
    load_dotenv(find_dotenv(usecwd=True))
    values = _from_environment()
    values.update({key: value for key, value in overrides.items() if value is not None})
    return Settings(**values)
