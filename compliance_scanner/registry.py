"""Static, ordered registry of every check."""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from .category import Category
from .checks import Check
from .checks.ai_act import AI_ACT_CHECKS
from .checks.appi import APPI_CHECKS
from .checks.gdpr import GDPR_CHECKS
from .checks.jis import JIS_CHECKS
from .checks.lgpd import LGPD_CHECKS
from .checks.nis2 import NIS2_CHECKS
from .checks.pdpa import PDPA_CHECKS
from .checks.pipa import PIPA_CHECKS

CATEGORY_CHECKS: Dict[Category, Tuple[Check, ...]] = {
    Category.GDPR: GDPR_CHECKS,
    Category.AI_ACT: AI_ACT_CHECKS,
    Category.NIS2: NIS2_CHECKS,
    Category.PIPA: PIPA_CHECKS,
    Category.APPI: APPI_CHECKS,
    Category.PDPA: PDPA_CHECKS,
    Category.LGPD: LGPD_CHECKS,
    Category.JIS: JIS_CHECKS,
}


def build_registry(groups: Sequence[Sequence[Check]]) -> Tuple[Check, ...]:
    """Concatenate check groups, rejecting duplicate check ids."""

    checks: Tuple[Check, ...] = tuple(check for group in groups for check in group)
    seen = set()
    for check in checks:
        if check.check_id in seen:
            raise ValueError(f"Duplicate check id in registry: {check.check_id}")
        seen.add(check.check_id)
    return checks


ALL_CHECKS: Tuple[Check, ...] = build_registry(list(CATEGORY_CHECKS.values()))
