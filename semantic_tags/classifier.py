"""Infer the semantic role of an entity from the tags it carries.

Entities are anything with a collection of tag strings. Tags are resolved
through the registry in the order the entity yields them; the first match
wins, so an entity is expected to carry at most one classifying tag per
family.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol

from .catalog import CatalogError
from .models import PointRole, Tag, TagFamily
from .registry import TagRegistry


class Entity(Protocol):
    """Minimal view of an externally managed entity."""

    @property
    def tags(self) -> Iterable[str]: ...


class SemanticClassifier:
    """Classify entities against a built :class:`TagRegistry`."""

    def __init__(self, registry: TagRegistry) -> None:
        self.registry = registry
        measurement = registry.get(f"{TagFamily.POINT}_{PointRole.MEASUREMENT}")
        control = registry.get(f"{TagFamily.POINT}_{PointRole.CONTROL}")
        if measurement is None or control is None:
            raise CatalogError(
                "Catalog must define Point_Measurement and Point_Control tags"
            )
        self.measurement = measurement
        self.control = control

    def _first(self, tags: Iterable[str], accept: Callable[[Tag], bool]) -> Tag | None:
        for tag_id in tags:
            tag = self.registry.resolve(tag_id)
            if tag is not None and accept(tag):
                return tag
        return None

    def classify_type(self, tags: Iterable[str], read_only: bool = False) -> Tag | None:
        """Return the Location, Equipment or Point tag describing an entity.

        An explicit non-property tag wins. Failing that, a property tag marks
        the entity as a point: a measurement when its value is read-only,
        otherwise a control.
        """
        tags = list(tags)
        semantic_type = self._first(tags, lambda t: t.family is not TagFamily.PROPERTY)
        if semantic_type is not None:
            return semantic_type
        if self.classify_property(tags) is not None:
            return self.measurement if read_only else self.control
        return None

    def classify_property(self, tags: Iterable[str]) -> Tag | None:
        return self._first(tags, lambda t: t.family is TagFamily.PROPERTY)

    def classify_point(self, tags: Iterable[str]) -> Tag | None:
        return self._first(tags, lambda t: t.family is TagFamily.POINT)

    def classify_equipment(self, tags: Iterable[str]) -> Tag | None:
        return self._first(tags, lambda t: t.family is TagFamily.EQUIPMENT)

    def classify_location(self, tags: Iterable[str]) -> Tag | None:
        return self._first(tags, lambda t: t.family is TagFamily.LOCATION)

    def classify_entity(self, entity: Entity) -> Tag | None:
        """Classify ``entity``; a missing ``read_only`` attribute means writable."""
        read_only = bool(getattr(entity, "read_only", False))
        return self.classify_type(entity.tags, read_only)


__all__ = ["Entity", "SemanticClassifier"]
