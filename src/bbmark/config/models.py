"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, bbmark.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

# --- bbmark.toml sections ---


class EngineConfig(BaseModel):
    """[engine] section."""

    model_config = {"frozen": True}

    case_insensitive: bool = False
    max_input_length: int | None = None
    enabled_rules: list[str] = Field(default_factory=list)
    disabled_rules: list[str] = Field(default_factory=list)

    @field_validator("max_input_length")
    @classmethod
    def _positive_limit(cls, value: int | None) -> int | None:
        if value is not None and value <= 0:
            msg = "max_input_length must be a positive integer"
            raise ValueError(msg)
        return value


class ExcerptConfig(BaseModel):
    """[excerpt] section."""

    model_config = {"frozen": True}

    length: int = Field(default=200, gt=0)
    suffix: str = "..."


class CatalogConfig(BaseModel):
    """[catalog] section."""

    model_config = {"frozen": True}

    messages: dict[str, str] = Field(default_factory=dict)

