# -*- coding: utf-8 -*-
# EN: Pricelist core helpers (read XLSX rows, header normalization, cell picking, price/tier parsing)
# UA: Базові хелпери прайсу (читання рядків XLSX, нормалізація заголовків, вибір комірок, ціни/тири)

from __future__ import annotations

import re
import logging
import datetime
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional, Sequence

from openpyxl import load_workbook

from .pricelist_config import DEFAULT_SCHEMA, PricelistSchema
from .types import PriceTier

logger = logging.getLogger("sheets")

Q = Decimal

# same prefix that JavaScript's parseFloat accepts
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def normalize_header(h: Any) -> str:
    """
    EN: Canonical lookup key for a column header ("Unit Price" -> "unit_price").
    UA: Канонічний ключ заголовка стовпця ("Unit Price" -> "unit_price").
    """
    s = str(h).strip().lower()
    s = re.sub(r"\s+", "_", s)
    return re.sub(r"[^a-z0-9_]", "", s)


def cell_text(v: Any) -> Optional[str]:
    """
    EN: Render a raw cell value as text the way the sheet shows it (12.0 -> "12").
    UA: Перетворює значення комірки на текст (12.0 -> "12").
    """
    if v is None:
        return None
    if isinstance(v, str):
        return v
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    if isinstance(v, (datetime.date, datetime.time)):
        return v.isoformat()
    return str(v)


def normalize_row(row: Dict[str, Any]) -> Dict[str, str]:
    """
    EN: Map normalized header -> trimmed text; empty keys and empty cells are skipped.
    UA: Мапа нормалізований заголовок -> обрізаний текст; порожні ключі/комірки пропускаються.
    """
    out: Dict[str, str] = {}
    for k, v in row.items():
        n = normalize_header(k)
        text = cell_text(v)
        if n and text is not None and text != "":
            out[n] = text.strip()
    return out


def pick_cell(row: Dict[str, Any], keys: Sequence[str]) -> Optional[str]:
    """
    EN: Value of the first candidate key present and non-empty; list order is the priority.
    UA: Значення першого наявного непорожнього ключа; порядок списку = пріоритет.
    """
    normalized = normalize_row(row)
    for key in keys:
        v = normalized.get(key)
        if v:
            return v
    return None


def parse_price_to_minor_units(value: Any) -> Optional[str]:
    """
    EN: Parse "$19.99", "19.99" or 19.99 into minor units text ("1999").
        Returns None for empty, non-numeric or negative input.
    UA: Парсить "$19.99", "19.99" або 19.99 у копійки/центи текстом ("1999").
        Повертає None для порожнього, нечислового або від'ємного значення.
    """
    text = cell_text(value)
    if text is None or text == "":
        return None

    s = re.sub(r"[$,\s]", "", text)
    m = _FLOAT_PREFIX.match(s)
    if not m:
        return None

    try:
        num = Q(m.group(0))
        if num < 0:
            return None
        cents = (num * 100).quantize(Q("1"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None
    return str(int(cents))


def _parse_qty(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    digits = re.sub(r"\D", "", value, flags=re.ASCII)
    if not digits:
        return None
    return int(digits)


def _first_present(normalized: Dict[str, str], *keys: str) -> Optional[str]:
    for key in keys:
        if key in normalized:
            return normalized[key]
    return None


def get_tiers_from_row(
    row: Dict[str, Any],
    schema: PricelistSchema = DEFAULT_SCHEMA,
) -> List[PriceTier]:
    """
    EN: Collect (T{n} QTY, T{n} Price) pairs in tier-number order.
        A tier is kept only when the price parses and the quantity is > 0.
    UA: Збирає пари (T{n} QTY, T{n} Price) у порядку номерів тирів.
        Тир додається лише якщо ціна валідна і кількість > 0.
    """
    normalized = normalize_row(row)
    tiers: List[PriceTier] = []
    for n in schema.tier_numbers:
        qty_val = _first_present(normalized, f"t{n}qty", f"t{n}_qty")
        price_val = _first_present(normalized, f"t{n}price", f"t{n}_price")
        price_minor = parse_price_to_minor_units(price_val)
        min_qty = _parse_qty(qty_val)
        if price_minor is not None and min_qty is not None and min_qty > 0:
            tiers.append(PriceTier(tier=f"T{n}", min_qty=min_qty, price=price_minor))
    return tiers


def slugify(name: str) -> str:
    """
    EN: Lowercase, runs of non [a-z0-9] -> "-", trimmed; "product" when nothing is left.
    UA: Нижній регістр, послідовності не [a-z0-9] -> "-", обрізка; "product" якщо порожньо.
    """
    s = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return s or "product"


# ========= WORKBOOK READING =========


def _header_names(header: Iterable[Any]) -> List[Optional[str]]:
    """
    EN: Header texts for the first row; blanks -> None, duplicates get "_1", "_2".
    UA: Тексти заголовків першого рядка; порожні -> None, дублікати отримують "_1", "_2".
    """
    seen: Dict[str, int] = {}
    names: List[Optional[str]] = []
    for cell in header:
        text = cell_text(cell)
        text = text.strip() if text is not None else ""
        if not text:
            names.append(None)
            continue
        count = seen.get(text, 0)
        seen[text] = count + 1
        names.append(text if count == 0 else f"{text}_{count}")
    return names


def rows_as_dicts(values: Iterable[Sequence[Any]]) -> List[Dict[str, Any]]:
    """
    EN: First row is the header; every other non-blank row becomes {header: raw value}.
        Empty cells are omitted from the row dict.
    UA: Перший рядок - заголовок; кожен інший непорожній рядок стає {заголовок: значення}.
        Порожні комірки не потрапляють у словник.
    """
    it = iter(values)
    header = next(it, None)
    if header is None:
        return []
    headers = _header_names(header)

    rows: List[Dict[str, Any]] = []
    for raw in it:
        record: Dict[str, Any] = {}
        for key, v in zip(headers, raw):
            if key is None or v is None or v == "":
                continue
            record[key] = v
        if record:
            rows.append(record)
    return rows


def read_first_sheet_rows(path) -> Optional[List[Dict[str, Any]]]:
    """
    EN: Read the first sheet of an XLSX file into row dicts.
        Returns None when the file is missing, unreadable or not a workbook.
    UA: Читає перший аркуш XLSX у список словників.
        Повертає None, якщо файлу немає, він недоступний або це не книга Excel.
    """
    try:
        wb = load_workbook(path, read_only=True, data_only=True)
    except Exception as e:
        logger.warning("read_first_sheet_rows: cannot open %s: %s", path, e)
        return None

    try:
        if not wb.sheetnames:
            return []
        ws = wb[wb.sheetnames[0]]
        return rows_as_dicts(ws.iter_rows(values_only=True))
    except Exception as e:
        logger.error("read_first_sheet_rows: cannot parse %s: %s", path, e, exc_info=True)
        return None
    finally:
        wb.close()
