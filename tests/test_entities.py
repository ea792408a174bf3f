import pytest

from shelfplace.model import Coordinate, ExpirationDate, Fragile, Item, Normal, Oversized


def test_coordinate_identity_is_the_spatial_triple():
    assert Coordinate(1, 2, 3) == Coordinate(1, 2, 3)
    assert Coordinate(1, 2, 3) != Coordinate(1, 2, 4)
    assert hash(Coordinate(1, 2, 3)) == hash(Coordinate(1, 2, 3))
    assert str(Coordinate(1, 2, 3)) == "(1, 2, 3)"


def test_coordinate_checked_rejects_out_of_range():
    assert Coordinate.checked(0, 9, 5) == Coordinate(0, 9, 5)
    with pytest.raises(ValueError):
        Coordinate.checked(0, 10, 0)
    with pytest.raises(ValueError):
        Coordinate.checked(-1, 0, 0)


def test_expiration_date_orders_year_then_month_then_day():
    assert ExpirationDate(31, 12, 1998) < ExpirationDate(1, 1, 1999)
    assert ExpirationDate(30, 1, 1999) < ExpirationDate(1, 2, 1999)
    assert ExpirationDate(1, 1, 1999) <= ExpirationDate(1, 1, 1999)
    assert ExpirationDate(2, 2, 1999) > ExpirationDate(1, 1, 1999)


def test_expiration_date_parse():
    assert ExpirationDate.parse(" 01-01-1999\n") == ExpirationDate(1, 1, 1999)
    assert ExpirationDate.parse("2 - 3 - 2020") == ExpirationDate(2, 3, 2020)
    with pytest.raises(ValueError):
        ExpirationDate.parse("01/01/1999")
    with pytest.raises(ValueError):
        ExpirationDate.parse("aa-01-1999")


def test_oversized_requires_positive_span():
    with pytest.raises(ValueError):
        Oversized(0)


def test_item_display():
    item = Item(id=5, name="Item5", quantity=2, quality=Fragile(ExpirationDate(1, 1, 1999), 2))
    assert str(item) == "5 - Item5, quantity: 2, quality: Fragile (Expiration: 01-01-1999, Row: 2)"
    assert str(Item(1, "a", 1)) == "1 - a, quantity: 1, quality: Normal"
    assert str(Oversized(3)) == "Oversized (Continuous Zones: 3)"


def test_items_are_hashable_values():
    assert Item(1, "a", 1, Normal()) == Item(1, "a", 1)
    assert len({Item(1, "a", 1), Item(1, "a", 1)}) == 1


def test_expiration_date_rejects_out_of_range_components():
    for day, month in ((0, 1), (32, 1), (1, 0), (1, 13)):
        with pytest.raises(ValueError):
            ExpirationDate(day, month, 2024)
    with pytest.raises(ValueError):
        ExpirationDate(1, 1, -1)
    with pytest.raises(ValueError):
        ExpirationDate.parse("99-99-2024")
    assert ExpirationDate(31, 12, 0) == ExpirationDate.parse("31-12-0")
