import pytest

from compliance_scanner.category import Category
from compliance_scanner.registry import ALL_CHECKS, CATEGORY_CHECKS, build_registry


def test_registry_holds_every_check_once():
    ids = [check.check_id for check in ALL_CHECKS]

    assert len(ids) == 39
    assert len(set(ids)) == len(ids)


def test_category_sizes():
    sizes = {category: len(checks) for category, checks in CATEGORY_CHECKS.items()}

    assert sizes == {
        Category.GDPR: 5,
        Category.AI_ACT: 4,
        Category.NIS2: 10,
        Category.PIPA: 4,
        Category.APPI: 4,
        Category.PDPA: 4,
        Category.LGPD: 4,
        Category.JIS: 4,
    }


def test_registry_order_follows_categories():
    order = [check.category for check in ALL_CHECKS]
    expected = [category for category, checks in CATEGORY_CHECKS.items() for _ in checks]

    assert order == expected
    assert ALL_CHECKS[0].check_id == "GDPR-001"
    assert ALL_CHECKS[-1].check_id == "JIS-004"


def test_category_groups_match_check_categories():
    for category, checks in CATEGORY_CHECKS.items():
        assert all(check.category == category for check in checks)
    assert set(CATEGORY_CHECKS) == set(Category)


def test_weights_are_positive():
    assert all(check.score_weight > 0 for check in ALL_CHECKS)


def test_duplicate_ids_are_rejected():
    first = ALL_CHECKS[0]

    with pytest.raises(ValueError, match="GDPR-001"):
        build_registry([[first], [first]])
