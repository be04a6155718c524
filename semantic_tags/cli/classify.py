"""Classify command: infer an entity's semantic type from its tags."""

from __future__ import annotations

import click

from ..service import default_tags
from ._output import echo_json


@click.command("classify")
@click.argument("tags", nargs=-1, type=str)
@click.option("--read-only", is_flag=True, help="The entity's value is read-only.")
def classify_cmd(tags: tuple[str, ...], read_only: bool):
    """Classify an entity carrying TAGS."""
    vocabulary = default_tags()
    semantic_type = vocabulary.classify_type(tags, read_only)
    if semantic_type is None:
        click.echo("Not semantically classified", err=True)
        raise SystemExit(1)

    def _id(tag):
        return tag.id if tag is not None else None

    echo_json(
        {
            "type": semantic_type.id,
            "location": _id(vocabulary.classify_location(tags)),
            "equipment": _id(vocabulary.classify_equipment(tags)),
            "point": _id(vocabulary.classify_point(tags)),
            "property": _id(vocabulary.classify_property(tags)),
        }
    )
