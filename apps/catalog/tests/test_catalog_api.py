import pytest
from django.urls import reverse


@pytest.fixture
def enriched_source(settings, write_pricelist, enriched_rows):
    settings.PRICELIST_ENRICHED_FILE = write_pricelist(enriched_rows, "enriched.xlsx")
    return settings.PRICELIST_ENRICHED_FILE


def test_products_list(client, enriched_source):
    response = client.get(reverse("catalog-products"))

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    assert data["sort"] == "name-asc"
    assert [p["slug"] for p in data["products"]] == ["11-oz-rim-handle-mug", "slate-coaster"]
    assert data["collections"] == [
        {"id": "col_drinkware", "slug": "drinkware", "name": "Drinkware"},
        {"id": "col_home-decor", "slug": "home-decor", "name": "Home Decor"},
    ]
    assert data["filters"] == {"colors": ["light blue", "red"], "sizes": ["11 oz"]}


def test_products_list_wire_shape(client, enriched_source):
    data = client.get(reverse("catalog-products")).json()

    mug = data["products"][0]
    assert mug["tiers"][0] == {"tier": "T1", "minQty": 36, "price": "625"}
    assert mug["collectionSlug"] == "drinkware"
    assert mug["listPrice"] == "625"
    assert mug["variants"][0]["label"] == "11 oz. rim/handle red mug"

    coaster = data["products"][1]
    assert coaster["tiers"] is None


def test_products_list_filters_and_sort(client, enriched_source):
    url = reverse("catalog-products")

    by_color = client.get(url, {"color": "light blue"}).json()
    by_category = client.get(url, {"category": "home-decor"}).json()
    by_query = client.get(url, {"q": "RH-LBLUE"}).json()
    by_price = client.get(url, {"sort": "price-asc"}).json()

    assert [p["slug"] for p in by_color["products"]] == ["11-oz-rim-handle-mug"]
    assert [p["slug"] for p in by_category["products"]] == ["slate-coaster"]
    assert [p["slug"] for p in by_query["products"]] == ["11-oz-rim-handle-mug"]
    assert [p["slug"] for p in by_price["products"]] == ["slate-coaster", "11-oz-rim-handle-mug"]


def test_products_list_multiple_sizes(client, enriched_source):
    data = client.get(reverse("catalog-products"), {"size": "11 oz,20 oz"}).json()

    assert data["count"] == 1


def test_products_list_rejects_unknown_sort(client, enriched_source):
    response = client.get(reverse("catalog-products"), {"sort": "newest"})

    assert response.status_code == 400
    assert "newest" in response.json()["detail"]


def test_products_list_without_pricelist(client):
    response = client.get(reverse("catalog-products"))

    assert response.status_code == 200
    assert response.json()["products"] == []


def test_product_detail(client, enriched_source):
    response = client.get(reverse("catalog-product-detail", args=["11-oz-rim-handle-mug"]))

    assert response.status_code == 200
    data = response.json()
    assert data["summary"] is None
    assert data["collectionName"] == "Drinkware"
    combination = data["variants"][0]["combinations"][0]["variantValue"]
    assert combination["value"] == "11 oz. rim/handle red mug"
    assert combination["colorValue"] == "#ba0c2f"
    assert combination["variantType"] == {"id": "variant", "type": "string", "label": "Variant"}


def test_product_detail_for_collision_slug_with_sku_punctuation(client, settings, write_pricelist):
    rows = [
        {"Product": "Test", "Name": "Test A", "Category": "X", "SKU": "A.1", "Price": "1"},
        {"Product": "TEST", "Name": "Test B", "Category": "X", "SKU": "B.1", "Price": "2"},
        {"Product": "test", "Name": "Test C", "Category": "X", "SKU": "RH/2", "Price": "3"},
    ]
    settings.PRICELIST_ENRICHED_FILE = write_pricelist(rows, "enriched.xlsx")

    listed = client.get(reverse("catalog-products"), {"sort": "price-asc"}).json()
    assert [p["slug"] for p in listed["products"]] == ["test", "test-B.1", "test-RH/2"]

    for slug in ("test-B.1", "test-RH/2"):
        response = client.get(reverse("catalog-product-detail", args=[slug]))
        assert response.status_code == 200
        assert response.json()["slug"] == slug


def test_product_detail_not_found(client, enriched_source):
    response = client.get(reverse("catalog-product-detail", args=["nope"]))

    assert response.status_code == 404


def test_collections(client, enriched_source):
    data = client.get(reverse("catalog-collections")).json()

    assert [c["slug"] for c in data["collections"]] == ["drinkware", "home-decor"]


def test_collection_detail(client, enriched_source):
    response = client.get(reverse("catalog-collection-detail", args=["home-decor"]))

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "col_home-decor"
    assert [p["slug"] for p in data["products"]] == ["slate-coaster"]


def test_collection_detail_not_found(client, enriched_source):
    response = client.get(reverse("catalog-collection-detail", args=["garden"]))

    assert response.status_code == 404
