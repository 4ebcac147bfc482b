# apps/catalog/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional


@dataclass
class PriceTier:
    """Tiered pricing: min qty to get this unit price (price in minor units, e.g. cents)."""
    tier: str
    min_qty: int
    price: str


@dataclass
class Variant:
    id: str
    price: str
    images: List[str] = field(default_factory=list)
    label: Optional[str] = None
    sku: Optional[str] = None


@dataclass
class Product:
    id: str
    slug: str
    name: str
    images: List[str] = field(default_factory=list)
    variants: List[Variant] = field(default_factory=list)
    tiers: Optional[List[PriceTier]] = None
    collection_slug: Optional[str] = None
    collection_name: Optional[str] = None

    @property
    def list_price(self) -> str:
        """T1 price shown on product cards; first variant price when there are no tiers."""
        if self.tiers:
            return self.tiers[0].price
        return self.variants[0].price


@dataclass
class VariantType:
    id: str
    type: Literal["string", "color"]
    label: str


@dataclass
class VariantValue:
    id: str
    value: str
    color_value: Optional[str]
    variant_type: VariantType


@dataclass
class Combination:
    variant_value: VariantValue


@dataclass
class ProductVariantDetail:
    id: str
    price: str
    images: List[str] = field(default_factory=list)
    combinations: List[Combination] = field(default_factory=list)
    sku: Optional[str] = None


@dataclass
class ProductDetail:
    id: str
    slug: str
    name: str
    summary: Optional[str]
    images: List[str] = field(default_factory=list)
    variants: List[ProductVariantDetail] = field(default_factory=list)
    tiers: Optional[List[PriceTier]] = None
    collection_slug: Optional[str] = None
    collection_name: Optional[str] = None


@dataclass
class Collection:
    id: str
    slug: str
    name: str


@dataclass
class CollectionDetail:
    id: str
    slug: str
    name: str
    products: List[Product] = field(default_factory=list)
