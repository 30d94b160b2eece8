from contextlib import contextmanager
import logging
from selenium import webdriver
from selenium.webdriver.firefox.options import Options

from radio_catalog.config import HarvestSettings

logger = logging.getLogger(__name__)


def create_driver(page_load_timeout: float):
    options = Options()
    options.add_argument("--headless")
    options.add_argument("--disable-gpu")
    driver = webdriver.Firefox(options=options)
    driver.set_page_load_timeout(page_load_timeout)
    return driver


@contextmanager
def browser_session(settings: HarvestSettings):
    """
    Headless Firefox shared by the whole run, or None when homepage rendering
    is off. The driver is quit on exit even if the run fails.
    """
    if not settings.render_homepages:
        yield None
        return

    logger.info("Starting headless Firefox for homepage rendering")
    driver = create_driver(settings.homepage_timeout)
    try:
        yield driver
    finally:
        try:
            driver.quit()
        except Exception as e:
            logger.warning(f"Failed to quit browser cleanly: {e}")
        logger.info("Browser closed")


def fetch_rendered_html(driver, url: str) -> str:
    driver.get(url)
    return driver.page_source
