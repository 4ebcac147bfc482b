"""Catalog test configuration and fixtures."""

import pytest
from django.core.cache import cache
from openpyxl import Workbook


@pytest.fixture(autouse=True)
def isolated_pricelist(settings, tmp_path):
    # never read the real data/ directory from tests
    settings.PRICELIST_PATH = None
    settings.PRICELIST_ENRICHED_FILE = str(tmp_path / "absent_enriched.xlsx")
    settings.PRICELIST_DEFAULT_FILE = str(tmp_path / "absent_default.xlsx")
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def write_pricelist(tmp_path):
    """Write row dicts to an .xlsx file; headers are the union of keys in first-seen order."""

    def _write(rows, filename="pricelist.xlsx", headers=None):
        if headers is None:
            headers = []
            for row in rows:
                for key in row:
                    if key not in headers:
                        headers.append(key)
        wb = Workbook()
        ws = wb.active
        ws.title = "Pricelist"
        ws.append(headers)
        for row in rows:
            ws.append([row.get(h) for h in headers])
        path = tmp_path / filename
        wb.save(path)
        return str(path)

    return _write


@pytest.fixture
def plain_rows():
    return [
        {"Product Name": "Ceramic Mug", "Price": "$9.50", "SKU": "CM-1", "Image URL": "https://cdn.example.com/cm.png"},
        {"Product Name": "Shot Glass", "T1 QTY": 24, "T1 Price": "$3.10", "T2 QTY": 144, "T2 Price": "$2.75"},
        {"Product Name": "", "Price": "$1.00"},
        {"Product Name": "Coaster", "Price": "call us"},
    ]


@pytest.fixture
def enriched_rows():
    return [
        {
            "Name": "11 oz. rim/handle red mug",
            "SKU": "RH-RED",
            "Product": "11 oz. rim/handle red mug",
            "Category": "Drinkware",
            "Image 1": "red-front.png",
            "Image 2": "rim-detail.png",
            "T1 QTY": 36,
            "T1 Price": "$6.25",
            "T2 QTY": 144,
            "T2 Price": "$5.50",
        },
        {
            "Name": "11 oz. rim/handle light blue mug",
            "SKU": "RH-LBLUE",
            "Category": "Drinkware",
            "Image 1": "light-blue-front.png",
            "Image 2": "rim-detail.png",
            "T1 QTY": 36,
            "T1 Price": "$6.40",
        },
        {
            "Name": "Slate coaster",
            "SKU": "SC-1",
            "Product": "Slate Coaster",
            "Category": "Home Decor",
            "Price": "$4.00",
        },
        {
            "Name": "15 oz. two-tone black mug",
            "SKU": "TT-BLK",
            "Category": "Drinkware",
        },
    ]
