from restaurant_scraper.models import Restaurant, RestaurantInfo, build_restaurant


def test_restaurant_info_defaults():
    info = RestaurantInfo()
    assert info.name == ""
    assert info.category == ""
    assert info.rating is None
    assert info.address == ""


def test_build_restaurant_combines_fields():
    info = RestaurantInfo(name="Sushi A", category="Sushi", rating=4.2, address="Ginza1-1")
    record = build_restaurant(13000001, info, (35.1, 139.2))

    assert record == Restaurant(
        id=13000001,
        name="Sushi A",
        category="Sushi",
        rating=4.2,
        latitude=35.1,
        longitude=139.2,
        address="Ginza1-1",
    )


def test_build_restaurant_keeps_id_when_everything_is_empty():
    record = build_restaurant(13000002, RestaurantInfo(), (0.0, 0.0))
    assert record.id == 13000002
    assert record.name == ""
    assert record.rating is None
    assert (record.latitude, record.longitude) == (0.0, 0.0)
