from dataclasses import dataclass


@dataclass
class RestaurantInfo:
    name: str = ""
    category: str = ""
    rating: float | None = None
    address: str = ""


@dataclass
class Restaurant:
    id: int
    name: str
    category: str
    rating: float | None
    latitude: float
    longitude: float
    address: str = ""


def build_restaurant(
    restaurant_id: int, info: RestaurantInfo, coordinates: tuple[float, float]
) -> Restaurant:
    latitude, longitude = coordinates
    return Restaurant(
        id=restaurant_id,
        name=info.name,
        category=info.category,
        rating=info.rating,
        latitude=latitude,
        longitude=longitude,
        address=info.address,
    )
