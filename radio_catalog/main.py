import sys
import logging

from radio_catalog.collector import run
from radio_catalog.config import HarvestSettings


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main():
    settings = HarvestSettings.from_env()
    setup_logging(settings.log_level)
    logging.info(f"Harvesting up to {settings.target_count} '{settings.tag}' stations from {settings.api_url}")
    try:
        run(settings)
    except Exception as e:
        logging.error(f"FATAL ERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
