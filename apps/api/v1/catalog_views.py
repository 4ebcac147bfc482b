# -*- coding: utf-8 -*-
# apps/api/v1/catalog_views.py
from rest_framework.decorators import api_view, permission_classes
from rest_framework import permissions, status
from rest_framework.response import Response

from apps.catalog.pricelist import (
    collections_from_products,
    get_collection_by_slug,
    get_product_by_slug,
    get_products_from_pricelist,
    list_collections,
)
from apps.catalog.products_sort import (
    DEFAULT_SORT,
    SORT_OPTIONS,
    available_filters,
    filter_by_attributes,
    filter_by_collection,
    filter_by_search,
    is_valid_sort,
    sort_products,
)
from .serializers import (
    CollectionDetailSerializer,
    CollectionSerializer,
    ProductDetailSerializer,
    ProductSerializer,
)

import logging
logger = logging.getLogger("app")


def _multi(request, name: str):
    """EN: ?color=red&color=blue or ?color=red,blue -> ["red", "blue"]."""
    values = []
    for raw in request.query_params.getlist(name):
        values.extend(v.strip() for v in raw.split(",") if v.strip())
    return values


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def products_list(request):
    """
    GET /api/v1/catalog/products?q=...&category=...&color=...&size=...&sort=name-asc

    EN: Catalog products with search, collection, colour and size filters.
        Filter values and collections are computed from the whole catalog.
    UA: Товари каталогу з пошуком і фільтрами за колекцією, кольором і розміром.
    """
    sort = request.query_params.get("sort") or DEFAULT_SORT
    if not is_valid_sort(sort):
        return Response(
            {"detail": f"Unknown sort '{sort}'", "sort_options": list(SORT_OPTIONS)},
            status=status.HTTP_400_BAD_REQUEST,
        )

    products = get_products_from_pricelist()
    category = (request.query_params.get("category") or "").strip() or None

    items = filter_by_collection(products, category)
    items = filter_by_search(items, request.query_params.get("q"))
    items = filter_by_attributes(items, colors=_multi(request, "color"), sizes=_multi(request, "size"))
    items = sort_products(items, sort)

    return Response(
        {
            "count": len(items),
            "sort": sort,
            "sort_options": list(SORT_OPTIONS),
            "filters": available_filters(products),
            "collections": CollectionSerializer(collections_from_products(products), many=True).data,
            "products": ProductSerializer(items, many=True).data,
        }
    )


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def product_detail(request, slug: str):
    """GET /api/v1/catalog/products/<slug>"""
    product = get_product_by_slug(slug)
    if product is None:
        return Response({"detail": "Product not found"}, status=status.HTTP_404_NOT_FOUND)
    return Response(ProductDetailSerializer(product).data)


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def collections_list(request):
    """GET /api/v1/catalog/collections"""
    collections = list_collections()
    return Response({"collections": CollectionSerializer(collections, many=True).data})


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def collection_detail(request, slug: str):
    """GET /api/v1/catalog/collections/<slug>"""
    collection = get_collection_by_slug(slug)
    if collection is None:
        logger.info("collection_detail: unknown collection %s", slug)
        return Response({"detail": "Collection not found"}, status=status.HTTP_404_NOT_FOUND)
    return Response(CollectionDetailSerializer(collection).data)
