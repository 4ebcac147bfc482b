from dataclasses import dataclass
from typing import Dict, Tuple


# ---------------------------------------------
# Синоніми заголовків (нормалізовані ключі)
# ---------------------------------------------
NAME_KEYS: Tuple[str, ...] = (
    "productname",
    "product_name",
    "name",
    "product",
    "item",
    "description",
    "itemname",
    "item_name",
    "title",
)
PRICE_KEYS: Tuple[str, ...] = (
    "price",
    "unitprice",
    "unit_price",
    "retail",
    "msrp",
    "listprice",
    "list_price",
    "cost",
)
SKU_KEYS: Tuple[str, ...] = ("sku", "id", "item", "itemid", "item_id", "productid", "product_id")
IMAGE_KEYS: Tuple[str, ...] = ("image", "imageurl", "image_url", "photo", "picture", "img", "image_link")

# T1 QTY, T1 Price, ... T5 QTY, T5 Price (Net Price / New Price 2022 are never read)
TIER_NUMBERS: Tuple[int, ...] = (1, 2, 3, 4, 5)

# Order matters: the first matching suffix wins.
PRODUCT_SUFFIXES: Tuple[str, ...] = (
    " mug",
    " mugs",
    " glass",
    " glasses",
    " stein",
    " tile",
    " tiles",
    " sleeve",
    " pad",
    " pads",
    " box",
    " ornament",
    " mirror",
    " notebook",
    " enamel",
)

COLOR_PREFIXES: Tuple[str, ...] = ("light", "dark", "cambridge")


# ---------------------------------------------
# dataclass схеми прайсу
# ---------------------------------------------
@dataclass(frozen=True)
class PricelistSchema:
    name_keys: Tuple[str, ...] = NAME_KEYS
    price_keys: Tuple[str, ...] = PRICE_KEYS
    sku_keys: Tuple[str, ...] = SKU_KEYS
    image_keys: Tuple[str, ...] = IMAGE_KEYS
    tier_numbers: Tuple[int, ...] = TIER_NUMBERS
    product_suffixes: Tuple[str, ...] = PRODUCT_SUFFIXES
    color_prefixes: Tuple[str, ...] = COLOR_PREFIXES

    # enriched sheets use a fixed header set (exact, case-sensitive)
    name_column: str = "Name"
    sku_column: str = "SKU"
    product_column: str = "Product"
    category_column: str = "Category"
    image_column_template: str = "Image {n}"
    max_images: int = 20

    @property
    def enriched_markers(self) -> Tuple[str, str]:
        return (self.product_column, self.category_column)

    def image_columns(self) -> Tuple[str, ...]:
        return tuple(
            self.image_column_template.format(n=n) for n in range(1, self.max_images + 1)
        )


DEFAULT_SCHEMA = PricelistSchema()


# ---------------------------------------------
# Кольори для свотчів (ключі в нижньому регістрі)
# ---------------------------------------------
SWATCH_COLORS: Dict[str, str] = {
    "maroon": "#782f40",
    "red": "#ba0c2f",
    "pink": "#e4a9bb",
    "orange": "#dc4405",
    "yellow": "#d9c756",
    "light green": "#a4d65e",
    "green": "#00594c",
    "light blue": "#02a3e0",
    "cambridge blue": "#307fe2",
    "blue": "#250e62",
    "black": "#101820",
    "white": "#f5f5f5",
}
