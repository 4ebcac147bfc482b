import pytest

from ..products_sort import (
    available_filters,
    filter_by_attributes,
    filter_by_collection,
    filter_by_search,
    is_valid_sort,
    sort_products,
)
from ..types import PriceTier, Product, Variant


@pytest.fixture
def products():
    return [
        Product(
            id="prod_rim_mug",
            slug="rim-mug",
            name="11 oz. Rim Mug",
            collection_slug="drinkware",
            collection_name="Drinkware",
            tiers=[PriceTier(tier="T1", min_qty=36, price="625")],
            variants=[
                Variant(id="v1", price="625", label="11 oz. rim red mug", sku="RIM-RED"),
                Variant(id="v2", price="640", label="11 oz. rim teal mug", sku="RIM-TEAL"),
            ],
        ),
        Product(
            id="prod_beer_stein",
            slug="beer-stein",
            name="beer Stein",
            collection_slug="barware",
            collection_name="Barware",
            variants=[Variant(id="v3", price="1200", label="22 oz. dark green stein", sku="ST-1")],
        ),
        Product(
            id="prod_coaster",
            slug="coaster",
            name="Coaster",
            variants=[Variant(id="v4", price="99", sku="row_4")],
        ),
    ]


def test_is_valid_sort():
    assert is_valid_sort("price-desc")
    assert not is_valid_sort("newest")
    assert not is_valid_sort(None)


@pytest.mark.parametrize(
    ("sort", "expected"),
    [
        ("name-asc", ["11 oz. Rim Mug", "beer Stein", "Coaster"]),
        ("name-desc", ["Coaster", "beer Stein", "11 oz. Rim Mug"]),
        ("price-asc", ["Coaster", "11 oz. Rim Mug", "beer Stein"]),
        ("price-desc", ["beer Stein", "11 oz. Rim Mug", "Coaster"]),
    ],
)
def test_sort_products(products, sort, expected):
    assert [p.name for p in sort_products(products, sort)] == expected


def test_sort_products_unknown_sort(products):
    with pytest.raises(ValueError):
        sort_products(products, "newest")


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("", ["rim-mug", "beer-stein", "coaster"]),
        ("STEIN", ["beer-stein"]),
        ("barware", ["beer-stein"]),
        ("rim-teal", ["rim-mug"]),
        ("rim-", ["rim-mug"]),
        ("nothing", []),
    ],
)
def test_filter_by_search(products, query, expected):
    assert [p.slug for p in filter_by_search(products, query)] == expected


def test_filter_by_collection(products):
    assert [p.slug for p in filter_by_collection(products, "drinkware")] == ["rim-mug"]
    assert filter_by_collection(products, None) == products


def test_filter_by_attributes(products):
    assert [p.slug for p in filter_by_attributes(products, colors=["red", "dark green"])] == [
        "rim-mug",
        "beer-stein",
    ]
    assert [p.slug for p in filter_by_attributes(products, colors=["red"], sizes=["22 oz"])] == []
    assert [p.slug for p in filter_by_attributes(products, sizes=["22 oz"])] == ["beer-stein"]
    assert filter_by_attributes(products) == products


def test_available_filters_only_offer_known_swatches(products):
    filters = available_filters(products)

    # "teal" and "dark green" have no swatch colour
    assert filters["colors"] == ["red"]
    assert filters["sizes"] == ["11 oz", "22 oz"]
