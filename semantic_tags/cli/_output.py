"""Shared JSON rendering for CLI commands."""

from __future__ import annotations

import json
from typing import Any

import click

from ..models import Tag
from ..service import SemanticTags


def tag_payload(tags: SemanticTags, tag: Tag, locale: str | None) -> dict[str, Any]:
    return {
        "id": tag.id,
        "family": tag.family.value,
        "label": tags.get_label(tag, locale),
        "synonyms": sorted(tags.get_label_and_synonyms(tag, locale)),
    }


def echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
