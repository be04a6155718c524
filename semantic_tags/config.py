"""Environment-driven settings and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

LOG_LEVEL_ENV = "SEMANTIC_TAGS_LOG_LEVEL"
CATALOG_ENV = "SEMANTIC_TAGS_CATALOG"
LOCALE_DIR_ENV = "SEMANTIC_TAGS_LOCALE_DIR"

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Parameters
    ----------
    log_level : str
        Name of the logging level (``WARNING`` by default).
    catalog_path : Path | None
        Alternative catalog YAML file; ``None`` uses the packaged catalog.
    locale_dir : Path | None
        Directory of locale bundles; ``None`` uses the packaged bundles.
    """

    log_level: str = "WARNING"
    catalog_path: Path | None = None
    locale_dir: Path | None = None

    @classmethod
    def from_env(cls) -> Settings:
        catalog = os.getenv(CATALOG_ENV)
        locale_dir = os.getenv(LOCALE_DIR_ENV)
        return cls(
            log_level=os.getenv(LOG_LEVEL_ENV, "WARNING").upper(),
            catalog_path=Path(catalog).expanduser() if catalog else None,
            locale_dir=Path(locale_dir).expanduser() if locale_dir else None,
        )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once; later calls only adjust the level."""
    level_name = (level or Settings.from_env().log_level).upper()
    numeric = logging.getLevelNamesMapping().get(level_name, logging.WARNING)
    if not getattr(configure_logging, "_done", False):  # type: ignore[attr-defined]
        logging.basicConfig(format=LOG_FORMAT)
        configure_logging._done = True  # type: ignore[attr-defined]
    logging.getLogger().setLevel(numeric)


__all__ = [
    "CATALOG_ENV",
    "LOCALE_DIR_ENV",
    "LOG_LEVEL_ENV",
    "Settings",
    "configure_logging",
]
