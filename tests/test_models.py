import pytest
from pydantic import ValidationError

from radio_catalog.catalog import load_catalog, write_catalog
from radio_catalog.models import CatalogEntry, ImageResult, RawStationRecord


def test_raw_record_ignores_unknown_fields():
    raw = RawStationRecord.model_validate({
        "stationuuid": "abc",
        "name": " Joy FM ",
        "url_resolved": "http://stream/joy",
        "clickcount": 12,
        "tags": "",
    })
    assert raw.display_name == "Joy FM"
    assert raw.genre == "Christian"
    assert raw.favicon is None


@pytest.mark.parametrize("tags,genre", [
    (None, "Christian"),
    ("", "Christian"),
    (" ,gospel", "Christian"),
    ("worship, christian", "worship"),
    ("  praise  ", "praise"),
])
def test_genre_is_first_tag(tags, genre):
    assert RawStationRecord(tags=tags).genre == genre


def test_entry_from_record():
    raw = RawStationRecord(name="Grace", url_resolved="http://s/grace", country="Brazil", tags="gospel")
    entry = CatalogEntry.from_record(raw, "https://cdn/img/Grace.png")
    assert entry.description == "Christian radio station from Brazil."
    assert entry.tags == ["", ""]
    assert entry.rating == 4
    assert entry.categories == ["gospel"]


def test_entry_is_immutable():
    entry = CatalogEntry(name="A", description="d", src="s", logo="l")
    with pytest.raises(ValidationError):
        entry.name = "B"


def test_image_result_truthiness():
    assert ImageResult(reference="x")
    assert not ImageResult()
    failed = ImageResult.failed("download-failed")
    assert not failed
    assert failed.reason == "download-failed"


def test_catalog_round_trip(tmp_path):
    path = tmp_path / "stations.json"
    entries = [
        CatalogEntry(
            name="Rádio Canção Nova",
            description="Christian radio station from Brazil.",
            src="http://stream/cn",
            logo="https://cdn/img/Rádio Canção Nova.png",
            categories=["católica"],
        ),
        CatalogEntry(
            name="Joy FM",
            description="Christian radio station from Unknown.",
            src="http://stream/joy",
            logo="https://cdn/img/Joy FM.ico",
        ),
    ]

    write_catalog(entries, path)

    assert load_catalog(path) == entries
    text = path.read_text(encoding="utf-8")
    assert "Rádio Canção Nova" in text
    assert text.startswith("[\n  {\n    \"name\"")


def test_write_catalog_overwrites(tmp_path):
    path = tmp_path / "stations.json"
    path.write_text("stale", encoding="utf-8")
    write_catalog([], path)
    assert load_catalog(path) == []


def test_entry_frozen_via_model_config():
    assert CatalogEntry.model_config["frozen"] is True
