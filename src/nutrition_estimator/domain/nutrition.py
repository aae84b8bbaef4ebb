"""Nutrition estimate output models."""

from pydantic import BaseModel, ConfigDict, Field

from nutrition_estimator.domain.catalog import FoodCategory, MacroProfile

ESTIMATION_DISCLAIMER = (
    "Nutritional values are AI-assisted estimates based on image analysis, "
    "not measured values, and may vary with the actual portion size."
)


class Macros(BaseModel):
    """Macronutrient amounts in grams."""

    model_config = ConfigDict(frozen=True)

    proteins: float = 0.0
    carbohydrates: float = 0.0
    fats: float = 0.0
    fiber: float = 0.0

    @classmethod
    def from_profile(cls, profile: MacroProfile) -> "Macros":
        """Copy a catalog macro profile."""
        return cls(
            proteins=profile.proteins,
            carbohydrates=profile.carbohydrates,
            fats=profile.fats,
            fiber=profile.fiber,
        )


class NutritionValues(BaseModel):
    """Unscaled per-100g reference values as stored in the catalog."""

    model_config = ConfigDict(frozen=True)

    calories: int | float
    macros: Macros


class PortionNutrition(BaseModel):
    """Calories and macros scaled to a weight in grams."""

    model_config = ConfigDict(frozen=True)

    calories: int
    macros: Macros


class MacroDistribution(BaseModel):
    """Percentage share of protein, carbohydrate and fat by mass.

    Each share is rounded on its own, so the three need not add up to 100.
    """

    model_config = ConfigDict(frozen=True)

    proteins: int = 0
    carbohydrates: int = 0
    fats: int = 0


class NutritionItem(BaseModel):
    """Nutrition estimate for one resolved detection."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    detected_label: str
    category: FoodCategory
    confidence: float = Field(ge=0.0, le=1.0)
    estimated_weight_grams: int
    calories: int
    macros: Macros
    per_100g: NutritionValues


class NutritionSummary(BaseModel):
    """Match counts and confidence for one analysis."""

    model_config = ConfigDict(frozen=True)

    total_detected: int = 0
    matched: int = 0
    unmatched: int = 0
    average_confidence: float = 0.0


class NutritionReport(BaseModel):
    """Aggregated nutrition estimate for one analysis."""

    model_config = ConfigDict(frozen=True)

    total_calories: int = 0
    total_macros: Macros = Field(default_factory=Macros)
    macro_distribution: MacroDistribution = Field(default_factory=MacroDistribution)
    items: list[NutritionItem] = Field(default_factory=list)
    summary: NutritionSummary = Field(default_factory=NutritionSummary)
    disclaimer: str = ESTIMATION_DISCLAIMER


class FoodInfo(BaseModel):
    """Catalog entry with per-100g and per-portion values."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    category: FoodCategory
    typical_portion_grams: float
    aliases: list[str]
    per_100g: NutritionValues
    per_portion: PortionNutrition
