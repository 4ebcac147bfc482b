# apps/catalog/products_sort.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .pricelist_config import SWATCH_COLORS
from .types import Product
from .variant_attributes import (
    get_colors_from_product,
    get_sizes_from_product,
    natural_key,
    product_matches_color,
    product_matches_size,
)

SORT_OPTIONS = (
    {"value": "name-asc", "label": "Name: A–Z"},
    {"value": "name-desc", "label": "Name: Z–A"},
    {"value": "price-asc", "label": "Price: Low to high"},
    {"value": "price-desc", "label": "Price: High to low"},
)
SORT_VALUES = tuple(o["value"] for o in SORT_OPTIONS)
DEFAULT_SORT = "name-asc"


def is_valid_sort(value: Optional[str]) -> bool:
    return isinstance(value, str) and value in SORT_VALUES


def sort_products(products: List[Product], sort: str = DEFAULT_SORT) -> List[Product]:
    """Stable sort; price sorts compare the card (T1) price as an integer."""
    if sort == "name-asc":
        return sorted(products, key=lambda p: p.name.lower())
    if sort == "name-desc":
        return sorted(products, key=lambda p: p.name.lower(), reverse=True)
    if sort == "price-asc":
        return sorted(products, key=lambda p: int(p.list_price))
    if sort == "price-desc":
        return sorted(products, key=lambda p: int(p.list_price), reverse=True)
    raise ValueError(f"Unknown sort: {sort}")


def filter_by_search(products: List[Product], query: Optional[str]) -> List[Product]:
    """Match name, slug, collection name or any variant SKU (case-insensitive)."""
    q = (query or "").strip().lower()
    if not q:
        return products

    def matches(p: Product) -> bool:
        return (
            q in p.name.lower()
            or q in p.slug.lower()
            or (p.collection_name is not None and q in p.collection_name.lower())
            or any(v.sku and q in v.sku.lower() for v in p.variants)
        )

    return [p for p in products if matches(p)]


def filter_by_collection(products: List[Product], collection_slug: Optional[str]) -> List[Product]:
    if not collection_slug:
        return products
    return [p for p in products if p.collection_slug == collection_slug]


def filter_by_attributes(
    products: List[Product],
    colors: Iterable[str] = (),
    sizes: Iterable[str] = (),
) -> List[Product]:
    """Any of the selected colours AND any of the selected sizes."""
    colors = [c.strip().lower() for c in colors if c and c.strip()]
    sizes = [s.strip().lower() for s in sizes if s and s.strip()]
    out = products
    if colors:
        out = [p for p in out if any(product_matches_color(p, c) for c in colors)]
    if sizes:
        out = [p for p in out if any(product_matches_size(p, s) for s in sizes)]
    return out


def available_filters(products: List[Product]) -> Dict[str, List[str]]:
    """
    Filter values offered in the sidebar. Colours without a swatch are left out
    here (they still colour the product page picker when a hex is known).
    """
    colors = set()
    sizes = set()
    for p in products:
        colors.update(c for c in get_colors_from_product(p) if c in SWATCH_COLORS)
        sizes.update(get_sizes_from_product(p))
    return {
        "colors": sorted(colors),
        "sizes": sorted(sizes, key=natural_key),
    }
