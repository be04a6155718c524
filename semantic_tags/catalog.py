"""Load and validate the tag catalog.

The catalog is static data shipped with the package (``resources/tags.yml``).
It is read once, validated, and handed to :class:`~semantic_tags.registry.TagRegistry`
as an immutable value object. Registration order is significant: locations
first, then equipment, points and properties, each in file order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import Tag, TagFamily

logger = logging.getLogger(__name__)

_RESOURCES_PACKAGE = "semantic_tags"
_RESOURCES_SUBPATH = "resources"
_CATALOG_FILENAME = "tags.yml"

# Section name in tags.yml -> family expected for every entry in it.
FAMILY_SECTIONS: dict[str, TagFamily] = {
    "locations": TagFamily.LOCATION,
    "equipment": TagFamily.EQUIPMENT,
    "points": TagFamily.POINT,
    "properties": TagFamily.PROPERTY,
}


class CatalogError(RuntimeError):
    """Raised when the catalog payload is invalid."""


@dataclass(frozen=True)
class TagCatalog:
    """Ordered, validated set of tag variants."""

    schema_version: str
    tags: tuple[Tag, ...]
    source_path: Path | None = None

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for tag in self.tags:
            if tag.id in seen:
                raise CatalogError(f"Duplicate tag id: {tag.id}")
            seen.add(tag.id)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)

    def by_family(self, family: TagFamily) -> tuple[Tag, ...]:
        return tuple(tag for tag in self.tags if tag.family is family)

    @classmethod
    def load(cls) -> TagCatalog:
        """Load the catalog packaged with semantic_tags."""
        package = resources.files(_RESOURCES_PACKAGE)
        path = package / _RESOURCES_SUBPATH / _CATALOG_FILENAME
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: str | Path) -> TagCatalog:
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise CatalogError(f"Catalog file {path} is not valid YAML: {e}") from e
        return cls.from_dict(data, source_path=path)

    @classmethod
    def from_dict(
        cls, payload: Any, *, source_path: Path | None = None
    ) -> TagCatalog:
        if not isinstance(payload, dict):
            raise CatalogError("Catalog payload must be a mapping")

        version = str(payload.get("schema_version", "")).strip()
        if not version:
            raise CatalogError("schema_version is required")

        unknown = set(payload) - set(FAMILY_SECTIONS) - {"schema_version"}
        if unknown:
            raise CatalogError(f"Unknown catalog sections: {sorted(unknown)}")

        tags: list[Tag] = []
        for section, family in FAMILY_SECTIONS.items():
            entries = payload.get(section) or []
            if not isinstance(entries, list):
                raise CatalogError(f"'{section}' must be a list")
            tags.extend(_parse_section(entries, section, family))

        catalog = cls(schema_version=version, tags=tuple(tags), source_path=source_path)
        logger.debug(
            "Loaded tag catalog %s with %d tags from %s",
            version,
            len(catalog),
            source_path or "package resources",
        )
        return catalog


def _parse_section(
    entries: Iterable[Any], section: str, family: TagFamily
) -> Iterator[Tag]:
    for entry in entries:
        tag = _parse_tag(entry)
        if tag.family is not family:
            raise CatalogError(
                f"Tag '{tag.id}' belongs to {tag.family.value}, not '{section}'"
            )
        yield tag


def _parse_tag(entry: Any) -> Tag:
    if not isinstance(entry, dict):
        raise CatalogError("tag entry must be a mapping")
    tag_id = str(entry.get("id", "")).strip()
    if not tag_id:
        raise CatalogError("tag id is required")

    data = dict(entry)
    data["id"] = tag_id
    # YAML may hand back lists for synonyms; the record stores them comma-joined.
    synonyms = data.get("synonyms")
    if isinstance(synonyms, list):
        data["synonyms"] = ", ".join(str(s) for s in synonyms)
    elif synonyms is None:
        data["synonyms"] = ""
    if data.get("description") is None:
        data["description"] = ""

    try:
        return Tag(**data)
    except ValidationError as e:
        raise CatalogError(f"Invalid tag '{tag_id}': {e}") from e


__all__ = ["FAMILY_SECTIONS", "CatalogError", "TagCatalog"]
