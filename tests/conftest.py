"""Shared pytest fixtures for semantic tag tests."""

import pytest

from semantic_tags.bundles import MappingBundleSource
from semantic_tags.catalog import TagCatalog
from semantic_tags.registry import TagRegistry
from semantic_tags.service import SemanticTags


def make_catalog_payload(**sections):
    """Build a minimal catalog payload with the mandatory roots and point roles.

    Args:
        **sections: Extra entries per section (locations, equipment, points,
            properties), appended after the built-in roots.

    Returns:
        Mapping accepted by ``TagCatalog.from_dict``.
    """
    payload = {
        "schema_version": "test",
        "locations": [{"id": "Location", "label": "Location"}],
        "equipment": [{"id": "Equipment", "label": "Equipment"}],
        "points": [
            {"id": "Point", "label": "Point"},
            {"id": "Point_Measurement", "label": "Measurement"},
            {"id": "Point_Control", "label": "Control"},
        ],
        "properties": [{"id": "Property", "label": "Property"}],
    }
    for section, entries in sections.items():
        payload[section] = payload[section] + list(entries)
    return payload


@pytest.fixture
def make_payload():
    """Fixture providing the make_catalog_payload helper function."""
    return make_catalog_payload


@pytest.fixture(scope="session")
def catalog():
    """Catalog packaged with semantic_tags."""
    return TagCatalog.load()


@pytest.fixture(scope="session")
def registry(catalog):
    return TagRegistry.build(catalog)


@pytest.fixture(scope="session")
def vocabulary(registry):
    """SemanticTags over the packaged catalog and packaged locale bundles."""
    return SemanticTags(registry)


@pytest.fixture
def memory_vocabulary(registry):
    """SemanticTags whose bundles are held in memory."""
    bundles = MappingBundleSource(
        {
            "": {"Equipment_Camera": "Camera,Webcam"},
            "de": {
                "Property_Temperature": "Temperatur,Temperaturen,Wärme",
                "Equipment_Camera": "Kamera",
            },
            "de_CH": {
                "Location_Indoor_Floor_GroundFloor": "Parterre,Erdgeschoss,parterre",
            },
        }
    )
    return SemanticTags(registry, bundles)
