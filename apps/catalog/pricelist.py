# -*- coding: utf-8 -*-
# EN: Pricelist -> catalog (format detection, plain/enriched parsing, slug/collection queries)
# UA: Прайс -> каталог (визначення формату, plain/enriched парсинг, запити за slug/колекціями)

from __future__ import annotations

import re
import logging
from typing import Any, Dict, List, Literal, Optional, Set, Tuple

from django.conf import settings

from .pricelist_config import DEFAULT_SCHEMA, PricelistSchema
from .pricelist_core import (
    cell_text,
    get_tiers_from_row,
    parse_price_to_minor_units,
    pick_cell,
    read_first_sheet_rows,
    slugify,
)
from .types import (
    Collection,
    CollectionDetail,
    Combination,
    PriceTier,
    Product,
    ProductDetail,
    ProductVariantDetail,
    Variant,
    VariantType,
    VariantValue,
)
from .variant_attributes import get_color_from_variant_label, split_trailing_color, swatch_hex

PricelistFormat = Literal["plain", "enriched"]

_KEEP_AS_IS_TOKEN = re.compile(r"^(?:\d+(?:\.\d+)?|oz\.?)$", re.IGNORECASE)

VARIANT_TYPE = VariantType(id="variant", type="string", label="Variant")

logger = logging.getLogger("sheets")


# ========= HELPERS =========


def _text(row: Dict[str, Any], column: str) -> Optional[str]:
    """EN: Trimmed text of an exact column, None when empty. UA: Текст комірки або None."""
    v = cell_text(row.get(column))
    if v is None:
        return None
    v = v.strip()
    return v or None


def _product_id(slug: str) -> str:
    return f"prod_{slug.replace('-', '_')}"


def _row_price(row: Dict[str, Any], tiers: List[PriceTier], schema: PricelistSchema) -> Optional[str]:
    """T1 price when the row has tiers, otherwise the single price column."""
    if tiers:
        return tiers[0].price
    return parse_price_to_minor_units(pick_cell(row, schema.price_keys))


def _claim_slug(base: str, qualifier: Any, seen: Set[str]) -> str:
    """
    EN: Take `base` if free, else `base-{qualifier}`; the qualified slug is not re-checked.
    UA: Бере `base`, якщо вільний, інакше `base-{qualifier}` (повторно не перевіряється).
    """
    slug = base if base not in seen else f"{base}-{qualifier}"
    seen.add(slug)
    return slug


def detect_format(rows: List[Dict[str, Any]], schema: PricelistSchema = DEFAULT_SCHEMA) -> PricelistFormat:
    """
    Enriched iff the first row carries both "Product" and "Category" headers
    (exact original header text). An empty sheet is plain.
    """
    if not rows:
        return "plain"
    first = rows[0]
    if all(marker in first for marker in schema.enriched_markers):
        return "enriched"
    return "plain"


def product_key_from_name(name: str, schema: PricelistSchema = DEFAULT_SCHEMA) -> str:
    """
    Grouping key shared by colour variants of one product:
    "11 oz. rim/handle red mug" -> "11 oz. rim/handle mug".
    Names without a known suffix are their own key.
    """
    suffix, base_words, _ = split_trailing_color(name, schema)
    if suffix is None:
        return name.strip()
    return (" ".join(base_words) + suffix).strip()


def _title_token(token: str) -> str:
    if _KEEP_AS_IS_TOKEN.match(token):
        return token
    return "/".join(part[:1].upper() + part[1:].lower() for part in token.split("/"))


def display_name_from_key(key: str) -> str:
    """"11 oz. rim/handle mug" -> "11 oz. Rim/Handle Mug"."""
    return " ".join(_title_token(t) for t in key.split())


# ========= PLAIN FORMAT =========


def parse_plain(rows: List[Dict[str, Any]], schema: PricelistSchema = DEFAULT_SCHEMA) -> List[Product]:
    """
    EN: One row = one product. Headers are matched through the synonym lists.
        Rows without a name or without any price are skipped.
    UA: Один рядок = один товар. Заголовки шукаються за списками синонімів.
        Рядки без назви або без ціни пропускаються.
    """
    products: List[Product] = []
    seen_slugs: Set[str] = set()

    for i, row in enumerate(rows):
        name = pick_cell(row, schema.name_keys)
        if not name:
            continue

        tiers = get_tiers_from_row(row, schema)
        price = _row_price(row, tiers, schema)
        if not price:
            continue

        # row numbers as the sheet shows them (header is row 1)
        sku = pick_cell(row, schema.sku_keys) or f"row_{i + 2}"
        image_url = pick_cell(row, schema.image_keys)
        slug = _claim_slug(slugify(name), i, seen_slugs)
        product_id = _product_id(slug)

        products.append(
            Product(
                id=product_id,
                slug=slug,
                name=name,
                images=[image_url] if image_url else [],
                tiers=tiers or None,
                variants=[
                    Variant(
                        id=f"var_{product_id}",
                        price=price,
                        images=[image_url] if image_url else [],
                        sku=sku,
                    )
                ],
            )
        )

    return products


# ========= ENRICHED FORMAT =========


def _enriched_group_key(row: Dict[str, Any], schema: PricelistSchema) -> Optional[str]:
    """
    Explicit Product column (when it differs from Name), else the key derived
    from Name, else SKU.
    """
    product_name = _text(row, schema.product_column)
    name = _text(row, schema.name_column)
    if product_name and product_name != name:
        return product_name
    if name:
        return product_key_from_name(name, schema)
    return _text(row, schema.sku_column)


def _row_images(row: Dict[str, Any], schema: PricelistSchema) -> List[str]:
    images: List[str] = []
    for column in schema.image_columns():
        url = _text(row, column)
        if url:
            images.append(url)
    return images


def parse_enriched(rows: List[Dict[str, Any]], schema: PricelistSchema = DEFAULT_SCHEMA) -> List[Product]:
    """
    EN: Grouped format (Name, SKU, Product, Category, Image 1..20).
        Rows of the same product (colour variants) become one product with one
        variant per row; images are merged across the group.
    UA: Згрупований формат (Name, SKU, Product, Category, Image 1..20).
        Рядки одного товару (кольорові варіанти) стають одним товаром
        з варіантом на кожен рядок; зображення об'єднуються по групі.
    """
    # dict keeps first-seen order of keys
    groups: Dict[str, List[Tuple[Dict[str, Any], str]]] = {}
    first_index: Dict[str, int] = {}

    for i, row in enumerate(rows):
        price = _row_price(row, get_tiers_from_row(row, schema), schema)
        if not price:
            continue
        key = _enriched_group_key(row, schema)
        if not key:
            continue
        groups.setdefault(key, []).append((row, price))
        first_index.setdefault(key, i)

    products: List[Product] = []
    seen_slugs: Set[str] = set()

    for key, group in groups.items():
        first = group[0][0]
        name = _text(first, schema.product_column) or display_name_from_key(key)
        qualifier = _text(first, schema.sku_column) or first_index[key]
        slug = _claim_slug(slugify(key), qualifier, seen_slugs)
        product_id = _product_id(slug)

        tiers = get_tiers_from_row(first, schema)
        category = _text(first, schema.category_column)

        images: List[str] = []
        variants: List[Variant] = []
        for n, (row, price) in enumerate(group, start=1):
            row_images = _row_images(row, schema)
            for url in row_images:
                if url not in images:
                    images.append(url)
            sku = _text(row, schema.sku_column)
            variants.append(
                Variant(
                    id=f"var_{product_id}_{n}",
                    price=price,
                    images=row_images,
                    label=_text(row, schema.name_column) or sku,
                    sku=sku,
                )
            )

        products.append(
            Product(
                id=product_id,
                slug=slug,
                name=name,
                images=images,
                tiers=tiers or None,
                collection_slug=slugify(category) if category else None,
                collection_name=category,
                variants=variants,
            )
        )

    return products


def build_catalog(rows: List[Dict[str, Any]], schema: PricelistSchema = DEFAULT_SCHEMA) -> List[Product]:
    if detect_format(rows, schema) == "enriched":
        return parse_enriched(rows, schema)
    return parse_plain(rows, schema)


# ========= SOURCE FILE =========


def resolve_pricelist_rows(file_path=None) -> List[Dict[str, Any]]:
    """
    EN: Rows of the pricelist to use. An explicit path (argument or PRICELIST_PATH)
        is used alone; otherwise the enriched file, then the default file.
        Unreadable sources give an empty list.
    UA: Рядки прайсу. Явний шлях (аргумент або PRICELIST_PATH) використовується
        без запасних варіантів; інакше enriched-файл, потім файл за замовчуванням.
        Якщо нічого не прочиталось - порожній список.
    """
    override = file_path or getattr(settings, "PRICELIST_PATH", None)
    if override:
        rows = read_first_sheet_rows(override)
        return rows if rows is not None else []

    candidates = (
        getattr(settings, "PRICELIST_ENRICHED_FILE", None),
        getattr(settings, "PRICELIST_DEFAULT_FILE", None),
    )
    for candidate in candidates:
        if not candidate:
            continue
        rows = read_first_sheet_rows(candidate)
        if rows is not None:
            logger.debug("pricelist source: %s (%d rows)", candidate, len(rows))
            return rows
        logger.info("pricelist source %s unavailable, trying next", candidate)

    return []


# ========= QUERIES =========


def get_products_from_pricelist(
    file_path=None,
    schema: PricelistSchema = DEFAULT_SCHEMA,
) -> List[Product]:
    """
    Load products from the Excel pricelist. T1 price is shown on product cards;
    all tiers are shown on the product page. Never raises: a missing or broken
    file gives an empty catalog.
    """
    products = build_catalog(resolve_pricelist_rows(file_path), schema)
    logger.debug("catalog built: %d products", len(products))
    return products


def _combinations_for(label: Optional[str]) -> List[Combination]:
    if not label:
        return []
    return [
        Combination(
            variant_value=VariantValue(
                id=f"variant:{label}",
                value=label,
                color_value=swatch_hex(get_color_from_variant_label(label)),
                variant_type=VARIANT_TYPE,
            )
        )
    ]


def to_product_detail(p: Product) -> ProductDetail:
    """Build the product page view of a catalog product."""
    return ProductDetail(
        id=p.id,
        slug=p.slug,
        name=p.name,
        summary=None,
        images=list(p.images),
        tiers=list(p.tiers) if p.tiers else None,
        collection_slug=p.collection_slug,
        collection_name=p.collection_name,
        variants=[
            ProductVariantDetail(
                id=v.id,
                price=v.price,
                images=list(v.images),
                combinations=_combinations_for(v.label),
                sku=v.sku,
            )
            for v in p.variants
        ],
    )


def get_product_by_slug(slug: str, file_path=None) -> Optional[ProductDetail]:
    product = next((p for p in get_products_from_pricelist(file_path) if p.slug == slug), None)
    return to_product_detail(product) if product else None


def collections_from_products(products: List[Product]) -> List[Collection]:
    """Distinct (collection_slug, collection_name) pairs in first-seen order."""
    collections: List[Collection] = []
    seen: Set[tuple] = set()
    for p in products:
        if not p.collection_slug or not p.collection_name:
            continue
        pair = (p.collection_slug, p.collection_name)
        if pair in seen:
            continue
        seen.add(pair)
        collections.append(Collection(id=f"col_{p.collection_slug}", slug=p.collection_slug, name=p.collection_name))
    return collections


def list_collections(file_path=None) -> List[Collection]:
    return collections_from_products(get_products_from_pricelist(file_path))


def get_collection_by_slug(slug: str, file_path=None) -> Optional[CollectionDetail]:
    products = get_products_from_pricelist(file_path)
    collection = next((c for c in collections_from_products(products) if c.slug == slug), None)
    if collection is None:
        return None
    return CollectionDetail(
        id=collection.id,
        slug=collection.slug,
        name=collection.name,
        products=[p for p in products if p.collection_slug == slug],
    )
