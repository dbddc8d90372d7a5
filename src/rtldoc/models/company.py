"""Company and recipient models."""

import io
from pathlib import Path
from typing import Optional, Union

from pydantic import Field, InstanceOf, field_validator

from .base import BaseDocModel

# Company attributes that may appear in the billing block.
DISPLAY_FIELDS = ("name", "address", "phone", "email")
DEFAULT_DISPLAY = ["address", "phone", "email"]

LogoSource = Union[bytes, Path, str, InstanceOf[io.IOBase]]


class Company(BaseDocModel):
    """
    The issuing company shown in the header and billing block.

    `display` selects, in order, which attributes make up the billing
    details; missing or empty values are dropped when rendering.
    """

    name: str = Field(..., min_length=1)
    logo: Optional[LogoSource] = Field(
        None, description="Local path, remote URL, raw image bytes or a binary stream"
    )
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    display: list[str] = Field(default_factory=lambda: list(DEFAULT_DISPLAY))

    @field_validator("display")
    @classmethod
    def check_display_fields(cls, value: list[str]) -> list[str]:
        unknown = [name for name in value if name not in DISPLAY_FIELDS]
        if unknown:
            raise ValueError(f"Unknown display fields: {', '.join(unknown)}")
        return value

    def display_values(self, fields: Optional[list[str]] = None) -> list[str]:
        """Return the selected attribute values, skipping empty ones."""
        values = []
        for name in self.display if fields is None else fields:
            value = getattr(self, name)
            if value:
                values.append(value)
        return values
