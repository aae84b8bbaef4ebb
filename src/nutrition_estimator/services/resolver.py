"""Resolve free-text labels to catalog food records."""

from dataclasses import dataclass

from nutrition_estimator.domain.catalog import FoodCatalog, FoodCategory, FoodRecord


def normalize_label(text: object) -> str | None:
    """Trim and lowercase a label; return None for non-strings or blanks."""
    if not isinstance(text, str):
        return None
    normalized = text.strip().lower()
    return normalized or None


@dataclass(frozen=True)
class FoodResolver:
    """Maps arbitrary labels to catalog entries.

    Matching tiers, first hit wins:

    1. exact record key
    2. exact alias (case-insensitive)
    3. substring in either direction between the label and an alias

    Records are scanned in catalog declaration order, so an ambiguous
    substring always resolves to the record declared first.
    """

    catalog: FoodCatalog

    def resolve(self, text: object) -> FoodRecord | None:
        """Return the matching record, or None when nothing matches."""
        query = normalize_label(text)
        if query is None:
            return None

        record = self.catalog.get(query)
        if record is not None:
            return record

        for record in self.catalog:
            if query in record.normalized_aliases:
                return record

        for record in self.catalog:
            for alias in record.normalized_aliases:
                if alias in query or query in alias:
                    return record

        return None

    def list_categories(self) -> list[FoodCategory]:
        """Return the categories present in the catalog."""
        return self.catalog.list_categories()

    def list_by_category(self, category: str) -> list[FoodRecord]:
        """Return the catalog records of a category."""
        return self.catalog.list_by_category(category)
