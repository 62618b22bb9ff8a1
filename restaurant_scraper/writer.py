import logging
from typing import TextIO
from restaurant_scraper.models import Restaurant

logger = logging.getLogger(__name__)

COLUMNS = ("id", "name", "category", "rating", "latitude", "longitude")
NULL_RATING = "null"
DELIMITER = ","


def format_row(record: Restaurant) -> str:
    # Commas inside name/category are written as-is and will shift columns.
    rating = NULL_RATING if record.rating is None else str(record.rating)
    row = [
        str(record.id), record.name, record.category, rating,
        str(record.latitude), str(record.longitude),
    ]
    return DELIMITER.join(row) + "\n"


class RestaurantWriter:
    def __init__(self, handle: TextIO):
        self.handle = handle

    def append(self, record: Restaurant) -> bool:
        try:
            self.handle.write(format_row(record))
            self.handle.flush()
        except (OSError, ValueError) as e:
            logger.error(f"Failed to write restaurant {record.id}: {e}")
            return False
        return True
