"""Command line entrypoint: consume every page of one request and print a summary."""
from __future__ import annotations

import sys

from app_logging import get_logger
from config import get_settings
from consumer import PageConsumer
from exceptions import ConfigurationError
from reporter import print_consumption

logger = get_logger("dataproxy.cli")


def main(argv: list[str] | None = None) -> int:
    try:
        settings = get_settings(argv)
    except ConfigurationError as e:
        logger.critical(str(e))
        return 1

    consumer = PageConsumer(settings.url)
    try:
        consumption = consumer.fetch_all_pages(settings.hash, settings.token)
    finally:
        consumer.close()

    print_consumption(settings.hash, settings.token, consumption)
    return 0


if __name__ == "__main__":
    sys.exit(main())
