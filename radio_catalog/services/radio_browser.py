import requests
import logging
from typing import List, Optional

from radio_catalog.config import HarvestSettings, USER_AGENT

logger = logging.getLogger(__name__)


def search_params(offset: int, settings: HarvestSettings) -> dict:
    return {
        "offset": offset,
        "limit": settings.page_size,
        "tagList": settings.tag,
        "hidebroken": "true",
        "order": "clickcount",
        "reverse": "true",
    }


def create_session() -> requests.Session:
    session = requests.Session()
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    })
    return session


def fetch_page(
    offset: int,
    settings: HarvestSettings,
    session: Optional[requests.Session] = None,
) -> List[dict]:
    """
    One page of the station search as raw JSON objects, most-clicked first.
    Network and HTTP errors are not caught here. An empty list means the
    directory is exhausted.
    """
    session = session or create_session()
    resp = session.get(settings.api_url, params=search_params(offset, settings))
    resp.raise_for_status()
    data = resp.json()
    logger.debug(f"Directory returned {len(data)} stations at offset {offset}")
    return data
