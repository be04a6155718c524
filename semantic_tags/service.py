"""Facade bundling the registry, label resolver and classifier.

:func:`default_tags` builds the packaged (or configured) vocabulary once per
process; every later call returns the same immutable instance.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable

from .bundles import BundleSource, ResourceBundleLoader
from .catalog import TagCatalog
from .classifier import Entity, SemanticClassifier
from .config import Settings
from .labels import LabelResolver, LocaleLike
from .models import Tag
from .registry import TagRegistry


class SemanticTags:
    """Query surface over one built tag vocabulary.

    Example:
        tags = SemanticTags.from_catalog(TagCatalog.load())
        tags.resolve("Bedroom").id              # "Location_Indoor_Room_Bedroom"
        tags.classify_type(["Property_Temperature"], read_only=True).id
        # "Point_Measurement"
    """

    def __init__(self, registry: TagRegistry, bundles: BundleSource | None = None):
        self.registry = registry
        self.labels = LabelResolver(registry, bundles)
        self.classifier = SemanticClassifier(registry)

    @classmethod
    def from_catalog(
        cls, catalog: TagCatalog, bundles: BundleSource | None = None
    ) -> SemanticTags:
        return cls(TagRegistry.build(catalog), bundles)

    @classmethod
    def from_settings(cls, settings: Settings) -> SemanticTags:
        if settings.catalog_path is not None:
            catalog = TagCatalog.from_file(settings.catalog_path)
        else:
            catalog = TagCatalog.load()
        return cls.from_catalog(catalog, ResourceBundleLoader(settings.locale_dir))

    # Registry ---------------------------------------------------------------
    def resolve(self, tag_id: str) -> Tag | None:
        return self.registry.resolve(tag_id)

    # Labels -----------------------------------------------------------------
    def get_label(self, tag: Tag, locale: LocaleLike = None) -> str:
        return self.labels.get_label(tag, locale)

    def get_label_and_synonyms(self, tag: Tag, locale: LocaleLike = None) -> set[str]:
        return self.labels.get_label_and_synonyms(tag, locale)

    def get_by_label(self, label: str, locale: LocaleLike = None) -> Tag | None:
        return self.labels.get_by_label(label, locale)

    def get_by_label_or_synonym(
        self, text: str, locale: LocaleLike = None
    ) -> list[Tag]:
        return self.labels.get_by_label_or_synonym(text, locale)

    # Classification ---------------------------------------------------------
    def classify_type(self, tags: Iterable[str], read_only: bool = False) -> Tag | None:
        return self.classifier.classify_type(tags, read_only)

    def classify_property(self, tags: Iterable[str]) -> Tag | None:
        return self.classifier.classify_property(tags)

    def classify_point(self, tags: Iterable[str]) -> Tag | None:
        return self.classifier.classify_point(tags)

    def classify_equipment(self, tags: Iterable[str]) -> Tag | None:
        return self.classifier.classify_equipment(tags)

    def classify_location(self, tags: Iterable[str]) -> Tag | None:
        return self.classifier.classify_location(tags)

    def classify_entity(self, entity: Entity) -> Tag | None:
        return self.classifier.classify_entity(entity)


@functools.cache
def default_tags() -> SemanticTags:
    """Process-wide vocabulary built from environment settings."""
    return SemanticTags.from_settings(Settings.from_env())


__all__ = ["SemanticTags", "default_tags"]
