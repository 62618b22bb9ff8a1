import logging
import re
from bs4 import BeautifulSoup
import requests
from curl_cffi import requests as curl_requests
from restaurant_scraper.errors import FetchError, PanelNotFoundError
from restaurant_scraper.geo import DEFAULT_COORDINATES, coordinates_from_map_url
from restaurant_scraper.models import Restaurant, RestaurantInfo, build_restaurant

logger = logging.getLogger(__name__)

INFO_TABLE_SELECTOR = ".rstinfo-table"
NAME_SELECTOR = ".rstinfo-table__name-wrap"
RATING_SELECTOR = ".rdheader-rating__score-val-dtl"
MAP_IMAGE_SELECTOR = "img.js-map-lazyload"
MAP_URL_ATTR = "data-original"

CATEGORY_HEADER = "Categories"
ADDRESS_HEADER = "Address"
# Link text rendered inside the address cell next to the map.
ADDRESS_BOILERPLATE = "ShowlargermapFindnearbyrestaurants"
RATING_PATTERN = re.compile(r"\d+(?:\.\d+)?")


def _text(tag) -> str:
    return tag.get_text().strip() if tag else ""


def _parse_rating(text: str) -> float | None:
    if not RATING_PATTERN.fullmatch(text):
        return None
    return float(text)


def _row_value(table, header: str):
    """Value cell of the first row whose header cell reads `header`."""
    for row in table.select("tr"):
        th = row.find("th")
        td = row.find("td")
        if th and td and _text(th) == header:
            return td
    return None


def _clean_address(td) -> str:
    if td is None:
        return ""
    compact = "".join(td.get_text().split())
    return compact.replace(ADDRESS_BOILERPLATE, "")


def parse_restaurant_info(soup: BeautifulSoup) -> RestaurantInfo:
    table = soup.select_one(INFO_TABLE_SELECTOR)
    if table is None:
        raise PanelNotFoundError(f"{INFO_TABLE_SELECTOR} not found")

    name = _text(table.select_one(NAME_SELECTOR))
    logger.info(f"Name: {name}")

    rating_text = _text(soup.select_one(RATING_SELECTOR))
    rating = _parse_rating(rating_text)
    logger.info(f"Rating: {rating_text}")

    category = _text(_row_value(table, CATEGORY_HEADER))
    logger.info(f"Category: {category}")

    address = _clean_address(_row_value(table, ADDRESS_HEADER))

    return RestaurantInfo(name=name, category=category, rating=rating, address=address)


def parse_map_coordinates(soup: BeautifulSoup) -> tuple[float, float]:
    img = soup.select_one(MAP_IMAGE_SELECTOR)
    url = img.get(MAP_URL_ATTR) if img else None
    if not url:
        logger.warning("No map image URL on page, defaulting coordinates")
        return DEFAULT_COORDINATES
    return coordinates_from_map_url(url)


class TabelogScraper:
    def __init__(
        self,
        timeout: float = 30,
        user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        impersonate: str = "",
    ):
        self.timeout = timeout
        if impersonate:
            # curl_cffi sends a real browser TLS fingerprint
            self.session = curl_requests.Session(impersonate=impersonate, timeout=timeout)
        else:
            self.session = requests.Session()
            self.session.headers.update({"User-Agent": user_agent})

    def fetch_page(self, url: str) -> BeautifulSoup:
        logger.info(f"Fetching {url}")
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except (requests.RequestException, curl_requests.RequestsError) as e:
            raise FetchError(url, e) from e
        return BeautifulSoup(resp.text, "html.parser")

    def scrape(self, restaurant_id: int, url: str) -> Restaurant:
        soup = self.fetch_page(url)
        info = parse_restaurant_info(soup)
        coordinates = parse_map_coordinates(soup)
        return build_restaurant(restaurant_id, info, coordinates)
