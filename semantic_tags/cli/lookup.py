"""Lookup commands: resolve ids, show labels, search labels and synonyms."""

from __future__ import annotations

import click

from ..models import TagFamily
from ..service import default_tags
from ._output import echo_json, tag_payload

_LOCALE_OPTION = click.option(
    "--locale", default=None, help="Locale for labels, e.g. de or de_CH."
)


@click.command("resolve")
@click.argument("tag_id", type=str)
def resolve_cmd(tag_id: str):
    """Resolve TAG_ID (full id or unique suffix) to its full id."""
    tag = default_tags().resolve(tag_id)
    if tag is None:
        click.echo(f"Unknown tag: {tag_id}", err=True)
        raise SystemExit(1)
    click.echo(tag.id)


@click.command("label")
@click.argument("tag_id", type=str)
@_LOCALE_OPTION
def label_cmd(tag_id: str, locale: str | None):
    """Show the label and synonyms of TAG_ID."""
    tags = default_tags()
    tag = tags.resolve(tag_id)
    if tag is None:
        click.echo(f"Unknown tag: {tag_id}", err=True)
        raise SystemExit(1)
    echo_json(tag_payload(tags, tag, locale))


@click.command("lookup")
@click.argument("text", type=str)
@_LOCALE_OPTION
@click.option("--exact", is_flag=True, help="Match labels only, not synonyms.")
def lookup_cmd(text: str, locale: str | None, exact: bool):
    """Find tags whose label (or synonym) is TEXT."""
    tags = default_tags()
    if exact:
        found = tags.get_by_label(text, locale)
        matches = [found] if found is not None else []
    else:
        matches = tags.get_by_label_or_synonym(text, locale)
    if not matches:
        raise SystemExit(1)
    echo_json([tag_payload(tags, tag, locale) for tag in matches])


@click.command("list")
@click.option(
    "--family",
    type=click.Choice([f.value for f in TagFamily], case_sensitive=False),
    default=None,
    help="Restrict the listing to one root family.",
)
def list_cmd(family: str | None):
    """List tag ids in id order."""
    if family is not None:
        family = next(f for f in TagFamily if f.value.lower() == family.lower())
    for tag in default_tags().registry.tags(family):
        click.echo(tag.id)
