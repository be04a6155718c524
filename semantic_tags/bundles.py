"""Locale bundles holding translated tag labels and synonyms.

A bundle is a flat YAML mapping from full tag id to a comma-separated
``"label,synonym,..."`` string. Bundles are looked up per locale along the
chain ``tags_<lang>_<COUNTRY>.yml``, ``tags_<lang>.yml``, ``tags.yml``; a
missing file, a missing key, or a file that cannot be read all end the
same way: no entry, and callers fall back to catalog defaults.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from types import MappingProxyType
from typing import Protocol, runtime_checkable

import yaml

from .locale import Locale

logger = logging.getLogger(__name__)

_RESOURCES_PACKAGE = "semantic_tags"
_LOCALES_SUBPATH = ("resources", "locales")
DEFAULT_BASENAME = "tags"


@runtime_checkable
class BundleSource(Protocol):
    """Anything that can answer a translated entry for a tag id."""

    def lookup(self, locale: Locale, tag_id: str) -> str | None: ...


class MappingBundleSource:
    """Bundles held in memory, keyed by locale string (``""`` for root).

    Example:
        source = MappingBundleSource({"de": {"Property_Temperature": "Temperatur"}})
        source.lookup(Locale.parse("de_AT"), "Property_Temperature")  # "Temperatur"
    """

    def __init__(self, bundles: Mapping[str, Mapping[str, str]]) -> None:
        # The most specific suffix of a locale names its own bundle.
        self._bundles = {
            Locale.parse(key).bundle_suffixes()[0]: dict(entries)
            for key, entries in bundles.items()
        }

    def lookup(self, locale: Locale, tag_id: str) -> str | None:
        for suffix in locale.bundle_suffixes():
            entry = self._bundles.get(suffix, {}).get(tag_id)
            if entry is not None:
                return entry
        return None


class ResourceBundleLoader:
    """Reads bundle files from a directory and caches them per bundle name.

    ``directory`` defaults to the locale bundles packaged with semantic_tags.
    Reads happen at most once per bundle name; concurrent first access is
    serialized by a lock.
    """

    def __init__(
        self,
        directory: str | Path | Traversable | None = None,
        basename: str = DEFAULT_BASENAME,
    ) -> None:
        if directory is None:
            directory = resources.files(_RESOURCES_PACKAGE).joinpath(
                *_LOCALES_SUBPATH
            )
        elif isinstance(directory, str):
            directory = Path(directory)
        self.directory = directory
        self.basename = basename
        self._cache: dict[str, Mapping[str, str]] = {}
        self._lock = threading.Lock()

    def lookup(self, locale: Locale, tag_id: str) -> str | None:
        for suffix in locale.bundle_suffixes():
            entry = self.bundle(f"{self.basename}{suffix}").get(tag_id)
            if entry is not None:
                return entry
        return None

    def bundle(self, name: str) -> Mapping[str, str]:
        """Read-only entries of bundle ``name`` (empty when unavailable)."""
        cached = self._cache.get(name)
        if cached is not None:
            return cached
        with self._lock:
            if name not in self._cache:
                self._cache[name] = MappingProxyType(self._read(name))
            return self._cache[name]

    def _read(self, name: str) -> dict[str, str]:
        for extension in (".yml", ".yaml"):
            candidate = self.directory / f"{name}{extension}"
            if candidate.is_file():
                break
        else:
            logger.debug("No bundle '%s' in %s", name, self.directory)
            return {}

        try:
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable bundle %s: %s", candidate, e)
            return {}

        if not isinstance(data, dict):
            logger.warning(
                "Ignoring bundle %s: top level must be a mapping", candidate
            )
            return {}
        entries: dict[str, str] = {}
        for key, value in data.items():
            if value is None:
                continue
            if not isinstance(value, str):
                # Unquoted Yes/No/On/Off load as booleans.
                logger.warning(
                    "Ignoring entry %s in bundle %s: value %r is not a string",
                    key,
                    candidate,
                    value,
                )
                continue
            entries[str(key)] = value
        logger.debug("Loaded bundle %s with %d entries", candidate, len(entries))
        return entries


__all__ = [
    "DEFAULT_BASENAME",
    "BundleSource",
    "MappingBundleSource",
    "ResourceBundleLoader",
]
