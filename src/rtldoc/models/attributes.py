"""The attribute bag a document is composed from."""

import json
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import Field, ValidationError, field_validator, model_validator

from rtldoc.errors import ConfigurationError

from .base import BaseDocModel, FontFamily
from .company import Company

# Keys that carry document content. A bag without any of them builds a blank
# document that is populated piecewise afterwards.
CONTENT_KEYS = ("company", "recipient", "details", "line_items", "column_widths", "footer")
REQUIRED_KEYS = ("company", "details", "recipient", "line_items")

PageSize = Union[str, tuple[float, float]]


class DocumentAttributes(BaseDocModel):
    """
    Validated configuration for one document.

    Optional keys left as None resolve to their defaults when the document
    is composed (page size and logo height from settings, footer from the
    company email, font from the process-wide default).
    """

    # Content
    company: Optional[Company] = None
    recipient: Optional[list[str]] = None
    details: Optional[list[list[str]]] = None
    line_items: Optional[list[list[str]]] = None
    column_widths: Optional[list[float]] = Field(
        None, description="Widths in visual (already mirrored) column order"
    )
    footer: Optional[str] = None

    # Presentation
    title: Optional[str] = None
    logo_height: Optional[float] = Field(None, gt=0)
    font: Optional[FontFamily] = None
    page_size: Optional[PageSize] = None

    @field_validator("recipient", mode="before")
    @classmethod
    def wrap_single_recipient(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @property
    def is_blank(self) -> bool:
        """True when no content key was supplied."""
        return all(getattr(self, key) is None for key in CONTENT_KEYS)

    @model_validator(mode="after")
    def check_required(self) -> "DocumentAttributes":
        if self.is_blank:
            return self

        missing = [key for key in REQUIRED_KEYS if getattr(self, key) is None]
        if missing:
            raise ValueError(f"Missing required attributes: {', '.join(missing)}")

        if self.footer is None and not self.company.email:
            raise ValueError("company.email is required when no footer is given")

        return self

    @classmethod
    def load(
        cls, attributes: Union["DocumentAttributes", dict, None] = None, **overrides: Any
    ) -> "DocumentAttributes":
        """Validate an attribute mapping, raising ConfigurationError on failure.

        Args:
            attributes: Existing attributes or a plain mapping.
            overrides: Keyword attributes merged over the mapping.

        Returns:
            Validated DocumentAttributes.
        """
        if isinstance(attributes, DocumentAttributes):
            data = attributes.model_dump(exclude_none=True)
        else:
            data = dict(attributes or {})
        data.update(overrides)

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "DocumentAttributes":
        """Load and validate attributes from a JSON file."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read attributes from {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Attributes in {path} must be a JSON object")

        return cls.load(data)
