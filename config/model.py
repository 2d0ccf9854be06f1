"""Model Attribute Configuration

Defaults for how models export their attributes. Every value can be
overridden per model class through the matching dunder class variable.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ModelSettings(BaseModel):
    """Model attribute settings with validation."""

    model_config = ConfigDict(validate_assignment=True)

    snake_attributes: bool = Field(
        default=True,
        description="Export attribute names in snake_case (otherwise studly/camel case)"
    )
    lc_first: bool = Field(
        default=True,
        description="Lowercase the first letter of studly-cased export names"
    )
    filter_null_values: bool = Field(
        default=True,
        description="Drop attributes whose exported value is None"
    )

    @field_validator('snake_attributes', 'lc_first', 'filter_null_values', mode='before')
    @classmethod
    def parse_env_flag(cls, value: Any) -> Any:
        """Accept the usual string spellings of environment flags."""
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in ('1', 'true', 'yes', 'on'):
                return True
            if normalized in ('0', 'false', 'no', 'off', ''):
                return False
            raise ValueError(f"Invalid boolean flag: {value!r}")
        return value

    @classmethod
    def from_env(cls) -> ModelSettings:
        """Build settings from MODEL_* environment variables."""
        return cls(
            snake_attributes=os.getenv('MODEL_SNAKE_ATTRIBUTES', 'true'),
            lc_first=os.getenv('MODEL_LC_FIRST', 'true'),
            filter_null_values=os.getenv('MODEL_FILTER_NULL_VALUES', 'true'),
        )


model_settings = ModelSettings.from_env()
