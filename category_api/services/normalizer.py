"""
Normalization of provider classification payloads into canonical categories
"""

import logging
from typing import Any, List, Optional

from category_api.schemas.category import Category

logger = logging.getLogger(__name__)

CLASS_FIELD = "class"


def string_of(value: Any) -> Optional[str]:
    """
    Convert a provider type identifier to its canonical string form

    Integers become decimal strings, integral floats drop the fractional
    part ("1.0" -> "1"), strings pass through unchanged.

    Returns:
        The identifier as a string, or None when it cannot be an identifier
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return None


def _name_of(value: Any) -> str:
    if isinstance(value, str):
        return value
    # Numeric names render as text; null, booleans and nested values count as missing
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def normalize(raw: Any) -> List[Category]:
    """
    Normalize a raw classification payload

    Never raises: a payload without a usable class list yields an empty
    list, and entries without a usable type_id are skipped. Provider
    order is kept as-is.

    Args:
        raw: Decoded JSON body from the provider

    Returns:
        Canonical categories in provider order
    """
    if not isinstance(raw, dict):
        return []

    entries = raw.get(CLASS_FIELD)
    if not isinstance(entries, list):
        return []

    categories = []
    for entry in entries:
        if not isinstance(entry, dict):
            logger.debug(f"Skipping non-object class entry: {entry!r}")
            continue

        category_id = string_of(entry.get("type_id"))
        if category_id is None:
            logger.debug(f"Skipping class entry without usable type_id: {entry!r}")
            continue

        categories.append(Category(id=category_id, name=_name_of(entry.get("type_name"))))

    return categories
