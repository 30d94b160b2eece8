import cloudscraper
from bs4 import BeautifulSoup
from urllib.parse import urljoin
import logging
from typing import Optional

from radio_catalog.config import HarvestSettings, USER_AGENT
from radio_catalog.models import ImageResult
from .browser import fetch_rendered_html
from .image_fetcher import fetch_and_store

logger = logging.getLogger(__name__)


def normalize_homepage(homepage: str) -> str:
    return homepage if homepage.startswith("http") else f"http://{homepage}"


def fetch_html(url: str, scraper, timeout: float = 15, driver=None) -> str:
    if driver is not None:
        return fetch_rendered_html(driver, url)
    resp = scraper.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    resp.raise_for_status()  # HTTPError if not 2xx
    return resp.text


def fetch_homepage(homepage: str, scraper, timeout: float = 15, driver=None):
    """
    Fetch the homepage HTML. An https:// URL that fails is retried once over
    http://; any other failure propagates.
    Returns (html, url actually fetched).
    """
    try:
        return fetch_html(homepage, scraper, timeout, driver), homepage
    except Exception:
        if not homepage.startswith("https://"):
            raise
        downgraded = homepage.replace("https://", "http://", 1)
        logger.warning(f"Retrying over HTTP: {downgraded}")
        return fetch_html(downgraded, scraper, timeout, driver), downgraded


def find_logo_src(html: str) -> Optional[str]:
    soup = BeautifulSoup(html, "html.parser")
    img = soup.find("img", src=lambda src: src and "logo" in src.lower())
    return img["src"] if img else None


def resolve_logo(
    homepage: Optional[str],
    station_name: str,
    settings: Optional[HarvestSettings] = None,
    scraper=None,
    driver=None,
    session=None,
) -> ImageResult:
    """
    Scrape the station homepage for the first <img> whose src mentions "logo"
    and store it through the image fetcher under the station name.
    Never raises; every failure becomes an empty result.
    """
    if not homepage:
        return ImageResult.failed("missing-input")

    settings = settings or HarvestSettings()

    try:
        if driver is None:
            scraper = scraper or cloudscraper.create_scraper()
        html, final_homepage = fetch_homepage(
            normalize_homepage(homepage), scraper, settings.homepage_timeout, driver
        )

        raw_src = find_logo_src(html)
        if not raw_src:
            logger.warning(f"No <img> logo candidate found for {station_name}")
            return ImageResult.failed("no-logo-candidate")

        logo_url = urljoin(final_homepage, raw_src)
        logger.info(f"Homepage logo found for {station_name}: {logo_url}")
        return fetch_and_store(logo_url, station_name, settings, session)
    except Exception as e:
        logger.warning(f"Failed logo extraction for {station_name} from {homepage}: {e}")
        return ImageResult.failed("homepage-failed")
