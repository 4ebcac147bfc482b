from django.conf import settings
from django.urls import path
from django.views.decorators.cache import cache_page

from .catalog_views import (
    products_list,
    product_detail,
    collections_list,
    collection_detail,
)

# catalog is rebuilt from the spreadsheet on every call; cache responses briefly
_cached = cache_page(settings.CATALOG_CACHE_SECONDS)

urlpatterns = [
    path("catalog/products", _cached(products_list), name="catalog-products"),
    path("catalog/products/<path:slug>", _cached(product_detail), name="catalog-product-detail"),
    path("catalog/collections", _cached(collections_list), name="catalog-collections"),
    path("catalog/collections/<path:slug>", _cached(collection_detail), name="catalog-collection-detail"),
]
