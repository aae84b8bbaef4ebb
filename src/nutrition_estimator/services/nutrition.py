"""Nutrition estimation from resolved food candidates."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from pydantic import ValidationError

from nutrition_estimator.domain.catalog import FoodRecord
from nutrition_estimator.domain.detections import Detection
from nutrition_estimator.domain.nutrition import (
    FoodInfo,
    MacroDistribution,
    Macros,
    NutritionItem,
    NutritionReport,
    NutritionSummary,
    NutritionValues,
    PortionNutrition,
)
from nutrition_estimator.rounding import round_half_up, round_int
from nutrition_estimator.services.portions import estimate_portion_weight
from nutrition_estimator.services.resolver import FoodResolver

_MACRO_FIELDS = ("proteins", "carbohydrates", "fats", "fiber")
_DISTRIBUTION_FIELDS = ("proteins", "carbohydrates", "fats")

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NutritionEstimator:
    """Turns food candidates into a nutrition report."""

    resolver: FoodResolver
    debug: bool = False

    def estimate_nutrition(
        self, candidates: Iterable[Detection] | None
    ) -> NutritionReport:
        """Estimate per-item and total nutrition for the candidates.

        Candidates the catalog does not know, and entries that are not valid
        detections, are counted as unmatched and left out of the totals.
        """
        if not isinstance(candidates, Iterable) or isinstance(
            candidates, str | Mapping
        ):
            if candidates is not None:
                _logger.warning("Ignoring malformed candidate list: %r", candidates)
            candidates = ()
        detections = list(candidates)
        items: list[NutritionItem] = []
        for entry in detections:
            try:
                detection = Detection.model_validate(entry)
            except ValidationError as exc:
                _logger.warning("Skipping invalid candidate: %s", exc)
                continue
            item = self.estimate_item(detection)
            if item is None:
                _logger.info(
                    "No catalog match for detection: label=%s", detection.label
                )
                continue
            items.append(item)

        total_macros = Macros(
            **{
                field: round_half_up(
                    sum(getattr(item.macros, field) for item in items), 1
                )
                for field in _MACRO_FIELDS
            }
        )
        average_confidence = (
            sum(item.confidence for item in items) / len(items) if items else 0.0
        )
        report = NutritionReport(
            total_calories=round_int(sum(item.calories for item in items)),
            total_macros=total_macros,
            macro_distribution=_macro_distribution(total_macros),
            items=items,
            summary=NutritionSummary(
                total_detected=len(detections),
                matched=len(items),
                unmatched=len(detections) - len(items),
                average_confidence=round_half_up(average_confidence, 2),
            ),
        )
        if self.debug:
            _logger.info(
                "Nutrition estimate: detected=%s matched=%s calories=%s",
                report.summary.total_detected,
                report.summary.matched,
                report.total_calories,
            )
        return report

    def estimate_item(self, detection: Detection) -> NutritionItem | None:
        """Estimate nutrition for a single detection, if it resolves."""
        record = self.resolver.resolve(detection.label)
        if record is None:
            return None

        weight = estimate_portion_weight(detection, record)
        scaled = _scale(record, weight)
        if self.debug:
            _logger.info(
                "Resolved detection: label=%s key=%s grams=%s",
                detection.label,
                record.key,
                weight,
            )
        return NutritionItem(
            key=record.key,
            name=record.display_name,
            detected_label=detection.label,
            category=record.category,
            confidence=detection.confidence,
            estimated_weight_grams=weight,
            calories=scaled.calories,
            macros=scaled.macros,
            per_100g=_per_100g(record),
        )

    def get_food_nutrition_info(self, name: object) -> FoodInfo | None:
        """Return catalog values for a food, scaled to its typical portion."""
        record = self.resolver.resolve(name)
        if record is None:
            return None
        return FoodInfo(
            key=record.key,
            name=record.display_name,
            category=record.category,
            typical_portion_grams=record.typical_portion_grams,
            aliases=list(record.aliases),
            per_100g=_per_100g(record),
            per_portion=_scale(record, record.typical_portion_grams),
        )


def _per_100g(record: FoodRecord) -> NutritionValues:
    """Return the unscaled reference values of a record."""
    return NutritionValues(
        calories=record.calories_per_100g,
        macros=Macros.from_profile(record.macros_per_100g),
    )


def _scale(record: FoodRecord, grams: float) -> PortionNutrition:
    """Scale per-100g values to a weight in grams."""
    weight_factor = grams / 100
    macros = record.macros_per_100g
    return PortionNutrition(
        calories=round_int(record.calories_per_100g * weight_factor),
        macros=Macros(
            **{
                field: round_half_up(getattr(macros, field) * weight_factor, 1)
                for field in _MACRO_FIELDS
            }
        ),
    )


def _macro_distribution(totals: Macros) -> MacroDistribution:
    """Return each macro's share of the protein/carb/fat mass."""
    total = sum(getattr(totals, field) for field in _DISTRIBUTION_FIELDS)
    if total <= 0:
        return MacroDistribution()
    return MacroDistribution(
        **{
            field: round_int(getattr(totals, field) / total * 100)
            for field in _DISTRIBUTION_FIELDS
        }
    )
