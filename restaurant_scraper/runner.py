import json
import logging
from dataclasses import dataclass
from restaurant_scraper.config import SCRAPE_CONFIG
from restaurant_scraper.errors import FetchError, PanelNotFoundError
from restaurant_scraper.models import Restaurant
from restaurant_scraper.scrapers.tabelog import TabelogScraper
from restaurant_scraper.writer import RestaurantWriter

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

WRITTEN = "written"
FETCH_FAILED = "fetch_failed"
PANEL_MISSING = "panel_missing"
WRITE_FAILED = "write_failed"


@dataclass
class PageOutcome:
    restaurant_id: int
    status: str
    record: Restaurant | None = None
    error: str | None = None

    @property
    def skipped(self) -> bool:
        return self.status in (FETCH_FAILED, PANEL_MISSING)


def restaurant_ids(start: int, quantity: int) -> list[int]:
    return list(range(start, start + quantity))


def restaurant_url(base_url: str, restaurant_id: int) -> str:
    return f"{base_url.rstrip('/')}/{restaurant_id}/"


def process_restaurant(
    restaurant_id: int,
    scraper: TabelogScraper,
    writer: RestaurantWriter,
    base_url: str = SCRAPE_CONFIG["base_url"],
) -> PageOutcome:
    url = restaurant_url(base_url, restaurant_id)
    try:
        record = scraper.scrape(restaurant_id, url)
    except FetchError as e:
        logger.error(f"Skipping {restaurant_id}: {e}")
        return PageOutcome(restaurant_id, FETCH_FAILED, error=str(e))
    except PanelNotFoundError as e:
        logger.warning(f"Skipping {restaurant_id}: {e}")
        return PageOutcome(restaurant_id, PANEL_MISSING, error=str(e))

    if not writer.append(record):
        return PageOutcome(restaurant_id, WRITE_FAILED, record=record)
    return PageOutcome(restaurant_id, WRITTEN, record=record)


def run(
    start: int,
    quantity: int,
    output_path: str,
    scraper: TabelogScraper | None = None,
    base_url: str = SCRAPE_CONFIG["base_url"],
) -> dict:
    logger.info(f"Scraping {quantity} restaurants starting at {start}")
    if scraper is None:
        scraper = TabelogScraper(
            timeout=SCRAPE_CONFIG["request_timeout"],
            user_agent=SCRAPE_CONFIG["user_agent"],
            impersonate=SCRAPE_CONFIG["impersonate"],
        )

    outcomes: list[PageOutcome] = []
    handle = open(output_path, "w", encoding="utf-8", newline="")
    try:
        writer = RestaurantWriter(handle)
        ids = restaurant_ids(start, quantity)
        for i, restaurant_id in enumerate(ids, 1):
            logger.info(f"Processing {i}/{len(ids)}: {restaurant_id}")
            outcomes.append(process_restaurant(restaurant_id, scraper, writer, base_url))
    finally:
        # Unflushed rows are written again on close and can fail there.
        try:
            handle.close()
        except OSError as e:
            logger.error(f"Failed to close {output_path}: {e}")

    summary = {
        "requested": len(outcomes),
        "written": sum(1 for o in outcomes if o.status == WRITTEN),
        "skipped": sum(1 for o in outcomes if o.skipped),
        "write_failed": sum(1 for o in outcomes if o.status == WRITE_FAILED),
    }
    logger.info(
        f"Done. Written: {summary['written']}, Skipped: {summary['skipped']}, "
        f"Write failures: {summary['write_failed']}"
    )
    return summary


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    summary = run(
        start=SCRAPE_CONFIG["start_id"],
        quantity=SCRAPE_CONFIG["quantity"],
        output_path=SCRAPE_CONFIG["output_path"],
    )
    print(json.dumps(summary))


if __name__ == "__main__":
    main()
