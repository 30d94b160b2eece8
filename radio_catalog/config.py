import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, PositiveInt

API_URL = "https://fi1.api.radio-browser.info/json/stations/search"
IMAGE_DIR = Path("logos")
CATALOG_PATH = Path("stations.json")
IMAGE_BASE_URL = "https://www.eternityready.com/radio/img/"

# Radio Browser asks clients to send a descriptive agent.
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/129.0.0.0 Safari/537.36 RadioCatalog/1.0"
)

ENV_PREFIX = "RADIO_CATALOG_"


class HarvestSettings(BaseModel):
    api_url: str = API_URL
    page_size: PositiveInt = 500
    target_count: PositiveInt = 200
    tag: str = "christian"
    image_dir: Path = IMAGE_DIR
    catalog_path: Path = CATALOG_PATH
    image_base_url: str = IMAGE_BASE_URL
    homepage_timeout: float = 15
    image_timeout: Optional[float] = None
    homepage_logo_fallback: bool = False
    render_homepages: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "HarvestSettings":
        """
        Build settings from RADIO_CATALOG_* variables, e.g.
        RADIO_CATALOG_TARGET_COUNT=50 or RADIO_CATALOG_HOMEPAGE_LOGO_FALLBACK=true.
        Unset variables keep their defaults.
        """
        environ = os.environ if environ is None else environ
        overrides = {}
        for field in cls.model_fields:
            value = environ.get(f"{ENV_PREFIX}{field.upper()}")
            if value is not None and value != "":
                overrides[field] = value
        return cls(**overrides)
