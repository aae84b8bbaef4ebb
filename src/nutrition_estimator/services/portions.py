"""Heuristic portion weight inference."""

import math
from fractions import Fraction

from nutrition_estimator.domain.catalog import FoodRecord
from nutrition_estimator.domain.detections import BoundingBox, Detection
from nutrition_estimator.rounding import round_int

MIN_PORTION_RATIO = Fraction(3, 10)
MAX_PORTION_RATIO = Fraction(5, 2)

# (exclusive lower bound, factor), checked top-down.
_CONFIDENCE_STEPS: tuple[tuple[float, float], ...] = (
    (0.9, 1.0),
    (0.7, 0.9),
    (0.5, 0.8),
)
_LOW_CONFIDENCE_FACTOR = 0.7

_AREA_STEPS: tuple[tuple[float, float], ...] = (
    (0.30, 1.3),
    (0.15, 1.0),
    (0.05, 0.7),
)
_SMALL_AREA_FACTOR = 0.5


def confidence_factor(confidence: float) -> float:
    """Map recognizer confidence to a portion scaling factor."""
    for lower_bound, factor in _CONFIDENCE_STEPS:
        if confidence > lower_bound:
            return factor
    return _LOW_CONFIDENCE_FACTOR


def bounding_box_area(bounding_box: BoundingBox | None) -> float | None:
    """Return the normalized box area, or None when geometry is unusable.

    Vertices are assumed axis-aligned and ordered top-left, top-right,
    bottom-right. With only two vertices the second is the opposite corner.
    """
    if bounding_box is None or len(bounding_box.vertices) < 2:
        return None
    vertices = bounding_box.vertices
    origin = vertices[0]
    across = vertices[1]
    below = vertices[2] if len(vertices) > 2 else vertices[1]
    coords = (origin.x, origin.y, across.x, below.y)
    if any(value is None for value in coords):
        return None
    width = abs(across.x - origin.x)
    height = abs(below.y - origin.y)
    return width * height


def size_factor(bounding_box: BoundingBox | None) -> float:
    """Map the share of the frame an item occupies to a portion factor."""
    area = bounding_box_area(bounding_box)
    if area is None:
        return 1.0
    for lower_bound, factor in _AREA_STEPS:
        if area > lower_bound:
            return factor
    return _SMALL_AREA_FACTOR


def portion_bounds(record: FoodRecord) -> tuple[int, int]:
    """Return the inclusive integer gram range allowed for a record."""
    typical = Fraction(record.typical_portion_grams)
    return (
        math.ceil(typical * MIN_PORTION_RATIO),
        math.floor(typical * MAX_PORTION_RATIO),
    )


def estimate_portion_weight(detection: Detection, record: FoodRecord) -> int:
    """Estimate grams of a detected food from confidence and box size."""
    raw = (
        record.typical_portion_grams
        * confidence_factor(detection.confidence)
        * size_factor(detection.bounding_box)
    )
    low, high = portion_bounds(record)
    return max(low, min(high, round_int(raw)))
