import logging
from typing import List, Optional

from pydantic import ValidationError

from radio_catalog.catalog import write_catalog
from radio_catalog.config import HarvestSettings
from radio_catalog.models import CatalogEntry, ImageResult, RawStationRecord
from radio_catalog.services.browser import browser_session
from radio_catalog.services.image_fetcher import create_session, fetch_and_store
from radio_catalog.services.logo_resolver import resolve_logo
from radio_catalog.services.radio_browser import create_session as create_api_session, fetch_page

logger = logging.getLogger(__name__)


def parse_record(item: dict, position: int) -> Optional[RawStationRecord]:
    try:
        return RawStationRecord.model_validate(item)
    except ValidationError as e:
        logger.warning(f"Skipping malformed station record [{position}]: {e.error_count()} invalid field(s)")
        return None


def is_acceptable(record: RawStationRecord) -> bool:
    return bool(record.display_name) and bool(record.url_resolved)


def acquire_logo(record: RawStationRecord, settings: HarvestSettings, session, driver=None) -> ImageResult:
    name = record.display_name
    logo = fetch_and_store(record.favicon, name, settings, session)
    if logo or not settings.homepage_logo_fallback:
        return logo
    logger.debug(f"Favicon unusable for {name} ({logo.reason}), trying homepage {record.homepage}")
    return resolve_logo(record.homepage, name, settings, driver=driver, session=session)


def collect_stations(settings: HarvestSettings, session=None, driver=None, api_session=None) -> List[CatalogEntry]:
    """
    Page through the directory, most-clicked first, and keep every station
    with a name, a stream and a stored logo until `target_count` is reached
    or the directory runs out.
    """
    session = session or create_session()
    api_session = api_session or create_api_session()
    stations: List[CatalogEntry] = []
    offset = 0

    while len(stations) < settings.target_count:
        logger.info(f"Fetching stations {offset} to {offset + settings.page_size}...")
        page = fetch_page(offset, settings, api_session)
        if not page:
            logger.info("Directory exhausted")
            break

        for i, item in enumerate(page):
            record = parse_record(item, offset + i)
            if record is None or not is_acceptable(record):
                continue

            logo = acquire_logo(record, settings, session, driver)
            logger.debug(f"[{offset + i}] {record.display_name}: logo={logo.reference or '-'}")

            if logo:
                stations.append(CatalogEntry.from_record(record, logo.reference))
                logger.info(f"Added: {record.display_name}")

            if len(stations) >= settings.target_count:
                break

        offset += settings.page_size

    return stations


def run(settings: Optional[HarvestSettings] = None) -> List[CatalogEntry]:
    settings = settings or HarvestSettings.from_env()
    with browser_session(settings) as driver:
        stations = collect_stations(settings, driver=driver)
        write_catalog(stations, settings.catalog_path)
        logger.info(f"DONE: Saved {len(stations)} stations to {settings.catalog_path}")
    return stations
