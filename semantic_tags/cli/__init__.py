"""CLI command group for semantic tags.

This module exposes the root Click command group `semantic_tags` which
aggregates subcommands implemented in sibling modules.

Example usage:

        semantic-tags resolve Bedroom
        semantic-tags lookup downstairs --locale de
        semantic-tags classify Property_Temperature --read-only
"""

from __future__ import annotations

import click

from ..config import configure_logging
from .classify import classify_cmd
from .lookup import label_cmd, list_cmd, lookup_cmd, resolve_cmd


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default=None,
    help="Logging level (defaults to SEMANTIC_TAGS_LOG_LEVEL or WARNING).",
)
def semantic_tags(log_level: str | None):
    """Semantic tag lookup and classification commands."""
    configure_logging(log_level)


# Register subcommands
semantic_tags.add_command(resolve_cmd)
semantic_tags.add_command(label_cmd)
semantic_tags.add_command(lookup_cmd)
semantic_tags.add_command(list_cmd)
semantic_tags.add_command(classify_cmd)

__all__ = ["semantic_tags"]
