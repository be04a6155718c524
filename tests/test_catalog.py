"""Tests for loading and validating the tag catalog."""

import pytest

from semantic_tags.catalog import CatalogError, TagCatalog
from semantic_tags.models import TagFamily


def test_packaged_catalog_loads(catalog):
    assert catalog.schema_version
    assert len(catalog) > 100
    ids = [tag.id for tag in catalog]
    assert "Location_Indoor_Floor_GroundFloor" in ids
    assert "Point_Measurement" in ids
    assert "Point_Control" in ids


def test_packaged_catalog_registration_order(catalog):
    """Families are registered locations, equipment, points, properties."""
    order = [
        TagFamily.LOCATION,
        TagFamily.EQUIPMENT,
        TagFamily.POINT,
        TagFamily.PROPERTY,
    ]
    families = [tag.family for tag in catalog]
    positions = [order.index(f) for f in families]
    assert positions == sorted(positions)


def test_packaged_catalog_hierarchy_is_closed(catalog):
    ids = {tag.id for tag in catalog}
    for tag in catalog:
        if tag.parent_id is not None:
            assert tag.parent_id in ids, tag.id


def test_ground_floor_metadata(catalog):
    tag = next(t for t in catalog if t.id == "Location_Indoor_Floor_GroundFloor")
    assert tag.label == "Ground Floor"
    assert tag.synonym_list() == ["Ground Floors", "Downstairs"]


def test_by_family(catalog):
    properties = catalog.by_family(TagFamily.PROPERTY)
    assert properties
    assert all(t.family is TagFamily.PROPERTY for t in properties)


def test_from_dict_accepts_synonym_lists(make_payload):
    payload = make_payload(
        equipment=[
            {"id": "Equipment_Lamp", "label": "Lamp", "synonyms": ["Lamps", "Light"]}
        ]
    )
    catalog = TagCatalog.from_dict(payload)
    lamp = next(t for t in catalog if t.id == "Equipment_Lamp")
    assert lamp.synonyms == "Lamps, Light"


def test_from_file(tmp_path):
    path = tmp_path / "tags.yml"
    path.write_text(
        """schema_version: "2"
locations:
  - {id: Location, label: Location}
properties:
  - {id: Property, label: Property}
  - id: Property_Temperature
    label: Temperature
    synonyms: Temperatures
""",
        encoding="utf-8",
    )
    catalog = TagCatalog.from_file(path)
    assert catalog.schema_version == "2"
    assert catalog.source_path == path
    assert [t.id for t in catalog] == ["Location", "Property", "Property_Temperature"]


class TestInvalidPayloads:
    """Catalog construction rejects malformed data."""

    def test_not_a_mapping(self):
        with pytest.raises(CatalogError):
            TagCatalog.from_dict(["Location"])

    def test_missing_schema_version(self, make_payload):
        payload = make_payload()
        del payload["schema_version"]
        with pytest.raises(CatalogError, match="schema_version"):
            TagCatalog.from_dict(payload)

    def test_unknown_section(self, make_payload):
        payload = make_payload()
        payload["things"] = []
        with pytest.raises(CatalogError, match="things"):
            TagCatalog.from_dict(payload)

    def test_section_must_be_list(self, make_payload):
        payload = make_payload()
        payload["equipment"] = {"id": "Equipment"}
        with pytest.raises(CatalogError, match="equipment"):
            TagCatalog.from_dict(payload)

    def test_duplicate_id(self, make_payload):
        payload = make_payload(
            equipment=[
                {"id": "Equipment_Lamp", "label": "Lamp"},
                {"id": "Equipment_Lamp", "label": "Lamp again"},
            ]
        )
        with pytest.raises(CatalogError, match="Duplicate tag id"):
            TagCatalog.from_dict(payload)

    def test_wrong_section_for_family(self, make_payload):
        payload = make_payload(locations=[{"id": "Equipment_Lamp", "label": "Lamp"}])
        with pytest.raises(CatalogError, match="locations"):
            TagCatalog.from_dict(payload)

    def test_missing_id(self, make_payload):
        payload = make_payload(locations=[{"label": "Nowhere"}])
        with pytest.raises(CatalogError, match="id is required"):
            TagCatalog.from_dict(payload)

    def test_missing_label(self, make_payload):
        payload = make_payload(locations=[{"id": "Location_Nowhere"}])
        with pytest.raises(CatalogError, match="Location_Nowhere"):
            TagCatalog.from_dict(payload)

    def test_unknown_field(self, make_payload):
        payload = make_payload(
            locations=[{"id": "Location_Attic", "label": "Attic", "icon": "attic"}]
        )
        with pytest.raises(CatalogError, match="Location_Attic"):
            TagCatalog.from_dict(payload)

    def test_invalid_yaml_file(self, tmp_path):
        path = tmp_path / "broken.yml"
        path.write_text("schema_version: [unclosed\n", encoding="utf-8")
        with pytest.raises(CatalogError, match="not valid YAML"):
            TagCatalog.from_file(path)
