"""Localized labels and synonyms for tags.

Each query consults the bundle source for the tag's full id and falls back
to the label and synonyms stored in the catalog when no translated entry
exists. Nothing here raises for an unknown locale or a missing entry.
"""

from __future__ import annotations

from .bundles import BundleSource, ResourceBundleLoader
from .locale import Locale
from .models import Tag
from .registry import TagRegistry

LocaleLike = Locale | str | None


def _split_entry(entry: str) -> list[str]:
    return [token.strip() for token in entry.split(",")]


class LabelResolver:
    """Resolve display labels and label/synonym sets for registry tags."""

    def __init__(
        self, registry: TagRegistry, bundles: BundleSource | None = None
    ) -> None:
        self.registry = registry
        self.bundles = bundles if bundles is not None else ResourceBundleLoader()

    def _entry(self, tag: Tag, locale: Locale) -> str | None:
        entry = self.bundles.lookup(locale, tag.id)
        # An entry without a label part counts as untranslated.
        if entry is None or not entry.split(",", 1)[0].strip():
            return None
        return entry

    def get_label(self, tag: Tag, locale: LocaleLike = None) -> str:
        """Translated label of ``tag``, or its catalog label."""
        entry = self._entry(tag, Locale.parse(locale))
        if entry is None:
            return tag.label
        return entry.split(",", 1)[0].strip()

    def get_label_and_synonyms(
        self, tag: Tag, locale: LocaleLike = None
    ) -> set[str]:
        """Lower-cased label plus synonyms of ``tag`` for ``locale``."""
        locale = Locale.parse(locale)
        entry = self._entry(tag, locale)
        if entry is not None:
            tokens = _split_entry(entry)
        else:
            tokens = [tag.label.strip(), *tag.synonym_list()]
        return {locale.fold(token) for token in tokens if token}

    def get_by_label(self, label: str, locale: LocaleLike = None) -> Tag | None:
        """First tag, in id order, whose label equals ``label`` ignoring case."""
        locale = Locale.parse(locale)
        wanted = locale.fold(label.strip())
        for tag in self.registry:
            if locale.fold(self.get_label(tag, locale)) == wanted:
                return tag
        return None

    def get_by_label_or_synonym(
        self, text: str, locale: LocaleLike = None
    ) -> list[Tag]:
        """All tags, in id order, listing ``text`` as label or synonym."""
        locale = Locale.parse(locale)
        wanted = locale.fold(text.strip())
        return [
            tag
            for tag in self.registry
            if wanted in self.get_label_and_synonyms(tag, locale)
        ]


__all__ = ["LabelResolver", "LocaleLike"]
