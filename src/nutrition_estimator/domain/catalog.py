"""Food catalog domain models."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum


class FoodCategory(StrEnum):
    """Closed set of catalog categories."""

    FRUIT = "fruit"
    VEGETABLE = "vegetable"
    PROTEIN = "protein"
    CARBOHYDRATE = "carbohydrate"
    DAIRY = "dairy"


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient amounts in grams."""

    proteins: float
    carbohydrates: float
    fats: float
    fiber: float

    def __post_init__(self) -> None:
        for name in ("proteins", "carbohydrates", "fats", "fiber"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")


@dataclass(frozen=True)
class FoodRecord:
    """Reference nutrition data for a food, per 100g of edible portion."""

    key: str
    display_name: str
    category: FoodCategory
    calories_per_100g: float
    macros_per_100g: MacroProfile
    typical_portion_grams: float
    aliases: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.key.strip():
            raise ValueError("key must not be empty")
        if self.calories_per_100g < 0:
            raise ValueError(f"{self.key}: calories_per_100g must be non-negative")
        if self.typical_portion_grams <= 0:
            raise ValueError(f"{self.key}: typical_portion_grams must be positive")
        if self.key.lower() not in self.normalized_aliases:
            raise ValueError(f"{self.key}: key must be listed among aliases")

    @property
    def normalized_aliases(self) -> tuple[str, ...]:
        """Aliases lowercased and trimmed, in declaration order."""
        return tuple(alias.strip().lower() for alias in self.aliases)


@dataclass(frozen=True)
class FoodCatalog:
    """Read-only table of food records in declaration order."""

    records: tuple[FoodRecord, ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for record in self.records:
            if record.key in seen:
                raise ValueError(f"Duplicate catalog key: {record.key}")
            seen.add(record.key)

    def __iter__(self) -> Iterator[FoodRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def get(self, key: str) -> FoodRecord | None:
        """Return the record with the given key, if present."""
        for record in self.records:
            if record.key == key:
                return record
        return None

    def list_categories(self) -> list[FoodCategory]:
        """Return the categories present, in first-seen order."""
        categories: list[FoodCategory] = []
        for record in self.records:
            if record.category not in categories:
                categories.append(record.category)
        return categories

    def list_by_category(self, category: str) -> list[FoodRecord]:
        """Return all records of a category, or an empty list."""
        return [record for record in self.records if record.category == category]
