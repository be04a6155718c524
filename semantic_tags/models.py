"""Tag record and the enumerations that classify it.

Every tag variant is a plain, frozen record. The family a tag belongs to is
read from the first segment of its identifier, and point tags additionally
carry the role (measurement or control) of the sub-hierarchy they sit in.
"""

from __future__ import annotations

import re
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

SEGMENT_SEPARATOR = "_"

# Upper camel case segments joined by underscores, e.g. Location_Indoor_Room.
TAG_ID_PATTERN = re.compile(r"^[A-Z][A-Za-z0-9]*(_[A-Z][A-Za-z0-9]*)*$")


class TagFamily(StrEnum):
    """Root categories of the semantic tag hierarchy."""

    LOCATION = "Location"
    EQUIPMENT = "Equipment"
    POINT = "Point"
    PROPERTY = "Property"


class PointRole(StrEnum):
    """Built-in sub-roles of the Point family."""

    MEASUREMENT = "Measurement"
    CONTROL = "Control"


class Tag(BaseModel):
    """Static metadata for one tag variant.

    Attributes:
        id: Full hierarchical identifier, e.g. ``Location_Indoor_Room_Bedroom``.
        label: Default display label.
        synonyms: Comma-separated default alternative names.
        description: Free text, not used for classification.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(pattern=TAG_ID_PATTERN.pattern)
    label: str = Field(min_length=1)
    synonyms: str = ""
    description: str = ""

    @field_validator("id")
    @classmethod
    def _validate_family(cls, value: str) -> str:
        root = value.split(SEGMENT_SEPARATOR, 1)[0]
        if root not in {f.value for f in TagFamily}:
            allowed = [f.value for f in TagFamily]
            raise ValueError(
                f"Tag id '{value}' must start with one of {allowed}, got '{root}'"
            )
        return value

    @property
    def family(self) -> TagFamily:
        return TagFamily(self.segments[0])

    @property
    def point_role(self) -> PointRole | None:
        """Measurement or Control for tags below those point roots."""
        if self.family is not TagFamily.POINT or len(self.segments) < 2:
            return None
        try:
            return PointRole(self.segments[1])
        except ValueError:
            return None

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self.id.split(SEGMENT_SEPARATOR))

    @property
    def name(self) -> str:
        """Leaf segment of the identifier."""
        return self.segments[-1]

    @property
    def parent_id(self) -> str | None:
        if SEGMENT_SEPARATOR not in self.id:
            return None
        return self.id.rsplit(SEGMENT_SEPARATOR, 1)[0]

    def suffixes(self) -> list[str]:
        """Return the id followed by each suffix obtained by dropping the
        leftmost segment, ending with the bare leaf segment."""
        keys = [self.id]
        remaining = self.id
        while SEGMENT_SEPARATOR in remaining:
            remaining = remaining.split(SEGMENT_SEPARATOR, 1)[1]
            keys.append(remaining)
        return keys

    def synonym_list(self) -> list[str]:
        return [s.strip() for s in self.synonyms.split(",") if s.strip()]

    def __str__(self) -> str:
        return self.id


__all__ = [
    "SEGMENT_SEPARATOR",
    "TAG_ID_PATTERN",
    "PointRole",
    "Tag",
    "TagFamily",
]
