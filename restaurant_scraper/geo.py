import logging
import re
from urllib.parse import parse_qs, urlparse

logger = logging.getLogger(__name__)

DEFAULT_COORDINATES = (0.0, 0.0)

# Static map URLs list the viewport center first, then the restaurant marker.
MARKER_GROUP_INDEX = 1
COORDINATE_PATTERN = re.compile(r"-?\d+(?:\.\d+)?")


def _parse_coordinate(token: str) -> float | None:
    token = token.strip()
    if not COORDINATE_PATTERN.fullmatch(token):
        return None
    return float(token)


def coordinates_from_map_url(url: str | None) -> tuple[float, float]:
    """Return (lat, lng) of the marker in a static map URL's `markers` param.

    Falls back to (0.0, 0.0) for anything that doesn't decode cleanly.
    """
    if not url:
        return DEFAULT_COORDINATES

    try:
        query = urlparse(url).query
    except ValueError as e:
        logger.warning(f"Malformed map URL {url!r}: {e}")
        return DEFAULT_COORDINATES

    markers = parse_qs(query).get("markers")
    if not markers:
        logger.warning(f"No markers parameter in map URL {url!r}")
        return DEFAULT_COORDINATES

    groups = markers[0].split("|")
    if len(groups) <= MARKER_GROUP_INDEX:
        logger.warning(f"Map URL has no marker group: {markers[0]!r}")
        return DEFAULT_COORDINATES

    tokens = groups[MARKER_GROUP_INDEX].split(",")
    if len(tokens) != 2:
        return DEFAULT_COORDINATES

    lat = _parse_coordinate(tokens[0])
    lng = _parse_coordinate(tokens[1])
    if lat is None or lng is None:
        return DEFAULT_COORDINATES
    return lat, lng
