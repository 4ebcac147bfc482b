# apps/catalog/variant_attributes.py
"""
Colour and size attributes derived from variant labels and product names.

Used by the product filters (colour/size) and by the swatches on the product
page. Nothing here is stored: every value is recomputed from the catalog.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Optional, Tuple

from .pricelist_config import DEFAULT_SCHEMA, SWATCH_COLORS, PricelistSchema
from .types import Product

SIZE_PATTERN = re.compile(r"\d+\s*oz\.?", re.IGNORECASE)


@lru_cache(maxsize=8)
def _two_word_color_re(prefixes: Tuple[str, ...]) -> "re.Pattern[str]":
    alternatives = "|".join(re.escape(p) for p in prefixes)
    return re.compile(rf"\b({alternatives})\s+\w+$", re.IGNORECASE | re.ASCII)


def split_trailing_color(
    name: str,
    schema: PricelistSchema = DEFAULT_SCHEMA,
) -> Tuple[Optional[str], List[str], Optional[str]]:
    """
    Split "11 oz. two-tone light blue mug" into
    (" mug", ["11", "oz.", "two-tone"], "light blue").

    The first suffix from ``schema.product_suffixes`` that the name ends with
    (case-insensitive) is removed, then the trailing colour words: two words
    for "light/dark/cambridge <word>", one word otherwise. Returns
    ``(None, [], None)`` when no suffix matches and ``(suffix, [], None)`` when
    nothing is left before the suffix.
    """
    v = name.strip()
    lower = v.lower()
    for suffix in schema.product_suffixes:
        if lower.endswith(suffix):
            before = v[: len(v) - len(suffix)].strip()
            break
    else:
        return None, [], None

    parts = before.split()
    if not parts:
        return suffix, [], None

    m = _two_word_color_re(schema.color_prefixes).search(before)
    if m:
        return suffix, parts[:-2], f"{m.group(1).lower()} {parts[-1].lower()}"
    return suffix, parts[:-1], parts[-1].lower()


def get_color_from_variant_label(
    label: str,
    schema: PricelistSchema = DEFAULT_SCHEMA,
) -> Optional[str]:
    """
    Colour from a variant label ("11 oz. two-tone black mug" -> "black").
    Lowercase for filtering; None when the label has no known product suffix.
    """
    _, _, color = split_trailing_color(label or "", schema)
    return color


def get_colors_from_product(product: Product, schema: PricelistSchema = DEFAULT_SCHEMA) -> List[str]:
    """Unique colours from the product's variant labels, first-seen order."""
    colors: List[str] = []
    for v in product.variants:
        color = get_color_from_variant_label(v.label or "", schema)
        if color and color not in colors:
            colors.append(color)
    return colors


def normalize_size(s: str) -> str:
    """"11 oz.", "15  oz" -> "11 oz", "15 oz"."""
    s = re.sub(r"\s*\.\s*$", "", s)
    return re.sub(r"\s+", " ", s).strip().lower()


def get_sizes_from_text(text: str) -> List[str]:
    """Size tokens in text ("11 oz. two-tone mug" -> ["11 oz"]), de-duplicated."""
    out: List[str] = []
    for m in SIZE_PATTERN.finditer(text or ""):
        size = normalize_size(m.group(0))
        if size not in out:
            out.append(size)
    return out


def natural_key(s: str):
    """Sort key that compares digit runs numerically ("9 oz" < "11 oz")."""
    return [int(part) if part.isdigit() else part.lower() for part in re.split(r"(\d+)", s)]


def get_sizes_from_product(product: Product) -> List[str]:
    """Unique sizes from the product name and all variant labels, naturally sorted."""
    sizes = set(get_sizes_from_text(product.name))
    for v in product.variants:
        sizes.update(get_sizes_from_text(v.label or ""))
    return sorted(sizes, key=natural_key)


def product_matches_color(product: Product, color_normalized: str) -> bool:
    return color_normalized in get_colors_from_product(product)


def product_matches_size(product: Product, size_normalized: str) -> bool:
    return size_normalized in get_sizes_from_product(product)


def swatch_hex(color: Optional[str]) -> Optional[str]:
    if not color:
        return None
    return SWATCH_COLORS.get(color.strip().lower())


def get_color_display_label(normalized_color: str) -> str:
    """Display label for a colour key ("light blue" -> "Light Blue", "red" -> "Red")."""
    lower = normalized_color.strip().lower()
    m = re.match(r"^(light|dark|cambridge)\s+(\w+)$", lower)
    if m:
        return f"{m.group(1).capitalize()} {m.group(2).capitalize()}"
    return lower[:1].upper() + lower[1:] if lower else normalized_color
