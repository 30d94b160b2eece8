import pytest
from unittest.mock import MagicMock

from radio_catalog.config import HarvestSettings


@pytest.fixture
def settings(tmp_path):
    return HarvestSettings(
        image_dir=tmp_path / "logos",
        catalog_path=tmp_path / "stations.json",
        image_base_url="https://cdn.example/img/",
    )


@pytest.fixture
def image_session():
    session = MagicMock()
    session.get.return_value.content = b"\x00\x01image-bytes"
    return session
