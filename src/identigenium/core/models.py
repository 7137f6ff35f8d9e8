"""Pydantic models for provider configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from identigenium.core.engine import validate_alphabet


class ProviderConfig(BaseModel):
    """Construction arguments for a :class:`ConfigurableIDProvider`."""

    alphabet: str
    start_position: int = Field(default=0, ge=0)
    prefix: str = ""

    @field_validator("alphabet")
    @classmethod
    def _check_alphabet(cls, value: str) -> str:
        validate_alphabet(value)
        return value
