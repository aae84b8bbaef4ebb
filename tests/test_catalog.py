"""Tests for the food catalog."""

import pytest

from nutrition_estimator.domain.catalog import (
    FoodCatalog,
    FoodCategory,
    FoodRecord,
    MacroProfile,
)
from nutrition_estimator.domain.catalog_data import default_catalog
from tests.conftest import make_record


def test_default_catalog_is_loaded_once() -> None:
    assert default_catalog() is default_catalog()


def test_default_catalog_keys_are_aliases() -> None:
    for record in default_catalog():
        assert record.key in record.normalized_aliases


def test_default_catalog_apple_values() -> None:
    apple = default_catalog().get("apple")

    assert apple is not None
    assert apple.calories_per_100g == 52
    assert apple.typical_portion_grams == 150
    assert apple.category == FoodCategory.FRUIT


def test_list_categories_in_declaration_order() -> None:
    assert default_catalog().list_categories() == [
        FoodCategory.FRUIT,
        FoodCategory.VEGETABLE,
        FoodCategory.PROTEIN,
        FoodCategory.CARBOHYDRATE,
        FoodCategory.DAIRY,
    ]


def test_list_by_category_returns_records_in_order() -> None:
    dairy = default_catalog().list_by_category("dairy")

    assert [record.key for record in dairy] == ["milk", "cheese", "yogurt"]


def test_list_by_category_unknown_is_empty() -> None:
    assert default_catalog().list_by_category("dessert") == []


def test_duplicate_keys_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        FoodCatalog((make_record("kiwi"), make_record("kiwi")))


def test_record_requires_key_among_aliases() -> None:
    with pytest.raises(ValueError, match="aliases"):
        FoodRecord(
            key="kiwi",
            display_name="Kiwi",
            category=FoodCategory.FRUIT,
            calories_per_100g=61,
            macros_per_100g=MacroProfile(1.1, 15, 0.5, 3),
            typical_portion_grams=75,
            aliases=("kiwifruit",),
        )


def test_record_rejects_non_positive_portion() -> None:
    with pytest.raises(ValueError, match="typical_portion_grams"):
        make_record("kiwi", portion=0)


def test_macros_reject_negative_values() -> None:
    with pytest.raises(ValueError, match="fats"):
        MacroProfile(proteins=1, carbohydrates=1, fats=-1, fiber=0)
