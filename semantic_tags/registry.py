"""In-memory index over the tag catalog.

The index maps each full tag id, and every suffix of it obtained by dropping
leading segments, to the tag variant. A leaf-only lookup such as
``"Bedroom"`` therefore succeeds as long as no later tag registers the same
suffix. When two tags share a suffix the tag registered last keeps the key;
the overwritten ids are recorded in :attr:`TagRegistry.shadowed`.

A registry is only obtainable through :meth:`TagRegistry.build`, after
which it is never mutated and may be read from any number of threads.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from .catalog import TagCatalog
from .models import Tag, TagFamily

logger = logging.getLogger(__name__)


class TagRegistry:
    """Read-only lookup of tags by id or id suffix."""

    def __init__(
        self,
        catalog: TagCatalog,
        index: Mapping[str, Tag],
        shadowed: Mapping[str, tuple[str, ...]],
    ) -> None:
        self.catalog = catalog
        self._index = MappingProxyType(dict(index))
        self.shadowed = MappingProxyType(dict(shadowed))
        self._by_id = MappingProxyType({tag.id: tag for tag in catalog})
        self._sorted = tuple(sorted(catalog, key=lambda t: t.id))
        children: dict[str, list[Tag]] = {}
        for tag in self._sorted:
            if tag.parent_id in self._by_id:
                children.setdefault(tag.parent_id, []).append(tag)
        self._children = {k: tuple(v) for k, v in children.items()}

    @classmethod
    def build(cls, catalog: TagCatalog) -> TagRegistry:
        """Index every tag of ``catalog`` under its id and all of its suffixes."""
        index: dict[str, Tag] = {}
        shadowed: dict[str, list[str]] = {}
        for tag in catalog:
            for key in tag.suffixes():
                previous = index.get(key)
                if previous is not None and previous.id != tag.id:
                    shadowed.setdefault(key, []).append(previous.id)
                    logger.debug(
                        "Suffix '%s' of %s now resolves to %s", key, previous.id, tag.id
                    )
                index[key] = tag
        if shadowed:
            logger.debug("%d ambiguous suffix keys in catalog", len(shadowed))
        return cls(catalog, index, {k: tuple(v) for k, v in shadowed.items()})

    # Lookup -----------------------------------------------------------------
    def resolve(self, tag_id: str) -> Tag | None:
        """Return the tag registered under ``tag_id`` (full id or suffix)."""
        return self._index.get(tag_id)

    def get(self, tag_id: str) -> Tag | None:
        """Return the tag whose full id is ``tag_id``, ignoring suffix keys."""
        return self._by_id.get(tag_id)

    def __contains__(self, tag_id: object) -> bool:
        return tag_id in self._index

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._sorted)

    def __len__(self) -> int:
        return len(self._sorted)

    def keys(self) -> list[str]:
        return sorted(self._index)

    def tags(self, family: TagFamily | str | None = None) -> list[Tag]:
        """Distinct tags in id order, optionally restricted to one family."""
        if family is None:
            return list(self._sorted)
        family = TagFamily(family)
        return [tag for tag in self._sorted if tag.family is family]

    # Hierarchy --------------------------------------------------------------
    def parent(self, tag: Tag) -> Tag | None:
        if tag.parent_id is None:
            return None
        return self._by_id.get(tag.parent_id)

    def ancestors(self, tag: Tag) -> list[Tag]:
        """Parents of ``tag`` from closest to the family root."""
        ancestors: list[Tag] = []
        current = self.parent(tag)
        while current is not None:
            ancestors.append(current)
            current = self.parent(current)
        return ancestors

    def children(self, tag: Tag) -> list[Tag]:
        return list(self._children.get(tag.id, ()))

    def is_a(self, tag: Tag, other: Tag) -> bool:
        """True when ``tag`` is ``other`` or lies below it in the hierarchy."""
        return tag.id == other.id or tag.id.startswith(other.id + "_")


__all__ = ["TagRegistry"]
