import importlib.metadata
from collections.abc import Iterable

from .catalog import CatalogError, TagCatalog
from .locale import Locale
from .models import PointRole, Tag, TagFamily
from .registry import TagRegistry
from .service import SemanticTags, default_tags

# ---------------------------------------------------------------------------
# Version metadata
# ---------------------------------------------------------------------------
# In-tree execution (tests before an editable install) has no distribution
# metadata; fall back to a neutral placeholder.
try:  # pragma: no cover - trivial guard
    __version__ = importlib.metadata.version("semantic-tags")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0"


# ---------------------------------------------------------------------------
# Module-level queries against the default vocabulary
# ---------------------------------------------------------------------------


def resolve(tag_id: str) -> Tag | None:
    return default_tags().resolve(tag_id)


def get_label(tag: Tag, locale: Locale | str | None = None) -> str:
    return default_tags().get_label(tag, locale)


def get_label_and_synonyms(tag: Tag, locale: Locale | str | None = None) -> set[str]:
    return default_tags().get_label_and_synonyms(tag, locale)


def get_by_label(label: str, locale: Locale | str | None = None) -> Tag | None:
    return default_tags().get_by_label(label, locale)


def get_by_label_or_synonym(text: str, locale: Locale | str | None = None) -> list[Tag]:
    return default_tags().get_by_label_or_synonym(text, locale)


def classify_type(tags: Iterable[str], read_only: bool = False) -> Tag | None:
    return default_tags().classify_type(tags, read_only)


def classify_property(tags: Iterable[str]) -> Tag | None:
    return default_tags().classify_property(tags)


def classify_point(tags: Iterable[str]) -> Tag | None:
    return default_tags().classify_point(tags)


def classify_equipment(tags: Iterable[str]) -> Tag | None:
    return default_tags().classify_equipment(tags)


def classify_location(tags: Iterable[str]) -> Tag | None:
    return default_tags().classify_location(tags)


__all__ = [
    "__version__",
    "CatalogError",
    "Locale",
    "PointRole",
    "SemanticTags",
    "Tag",
    "TagCatalog",
    "TagFamily",
    "TagRegistry",
    "classify_equipment",
    "classify_location",
    "classify_point",
    "classify_property",
    "classify_type",
    "default_tags",
    "get_by_label",
    "get_by_label_or_synonym",
    "get_label",
    "get_label_and_synonyms",
    "resolve",
]
