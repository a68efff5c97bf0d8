import pytest

from kasyno.shop import find_item, shop_registry


def test_registry_names_in_order():
    names = [item.name for item in shop_registry()]
    assert names == ["miniVIP", "VIP", "SVIP", "MVIP", "Pieczywo VIP"]


def test_ids_are_unique():
    ids = [item.id for item in shop_registry()]
    assert len(ids) == len(set(ids))


def test_prices_increase():
    prices = [item.price for item in shop_registry()]
    assert prices == sorted(prices)
    assert all(price > 0 for price in prices)


def test_every_item_grants_a_role():
    assert all(item.role_id for item in shop_registry())


@pytest.mark.parametrize("item", shop_registry())
def test_find_item_returns_registered_item(item):
    assert find_item(item.id) is item


def test_find_item_known_name():
    assert find_item(5).description == "VIP final boss"


@pytest.mark.parametrize("missing", [0, 6, -1])
def test_find_item_missing(missing):
    assert find_item(missing) is None