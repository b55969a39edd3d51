"""Regulatory framework categories that group checks."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List


class Category(str, Enum):
    """Enumerate the regulatory frameworks covered by the registry."""

    GDPR = "gdpr"
    AI_ACT = "ai_act"
    NIS2 = "nis2"
    PIPA = "pipa"
    APPI = "appi"
    PDPA = "pdpa"
    LGPD = "lgpd"
    JIS = "jis"


def parse_categories(raw: str | Iterable[str] | None) -> List[Category]:
    """Turn ``"gdpr,ai_act"`` or a list of names into categories.

    Raises ``ValueError`` naming the offending entry for unknown values.
    """

    if raw is None:
        return []
    if isinstance(raw, str):
        raw = raw.split(",")
    categories: List[Category] = []
    for item in raw:
        name = str(item).strip().lower()
        if not name:
            continue
        try:
            category = Category(name)
        except ValueError:
            valid = ", ".join(member.value for member in Category)
            raise ValueError(f"unknown category '{name}' (expected one of: {valid})") from None
        if category not in categories:
            categories.append(category)
    return categories
