"""Locale values used to select translation bundles and fold case."""

from __future__ import annotations

import re
from dataclasses import dataclass

_LOCALE_RE = re.compile(
    r"^(?P<language>[A-Za-z]{2,3})(?:[-_](?P<country>[A-Za-z]{2}|\d{3}))?$"
)

# Languages whose upper-case I folds to the dotless i.
_DOTLESS_I_LANGUAGES = frozenset({"tr", "az"})


@dataclass(frozen=True)
class Locale:
    """Language and optional country, e.g. ``Locale("de", "CH")``.

    The empty language denotes the root locale, which only consults the
    base bundle.
    """

    language: str = ""
    country: str = ""

    @classmethod
    def parse(cls, value: Locale | str | None) -> Locale:
        """Accept ``"de"``, ``"de_DE"``, ``"de-DE"``, ``"de_DE.UTF-8"`` or None.

        Strings that do not look like a locale map to the root locale.
        """
        if isinstance(value, Locale):
            return value
        if not value:
            return ROOT
        value = re.split(r"[.@]", value.strip(), maxsplit=1)[0]
        match = _LOCALE_RE.match(value)
        if not match:
            return ROOT
        return cls(match["language"].lower(), (match["country"] or "").upper())

    def bundle_suffixes(self) -> list[str]:
        """Bundle name suffixes from most to least specific, root last."""
        suffixes: list[str] = []
        if self.language and self.country:
            suffixes.append(f"_{self.language}_{self.country}")
        if self.language:
            suffixes.append(f"_{self.language}")
        suffixes.append("")
        return suffixes

    def fold(self, text: str) -> str:
        """Lower-case ``text`` following this locale's casing rules."""
        if self.language in _DOTLESS_I_LANGUAGES:
            text = text.replace("I", "ı").replace("İ", "i")
        return text.lower()

    def __str__(self) -> str:
        if self.country:
            return f"{self.language}_{self.country}"
        return self.language


ROOT = Locale()

__all__ = ["ROOT", "Locale"]
