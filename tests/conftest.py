"""Shared test fixtures."""

import logging

import pytest

from nutrition_estimator.config import Settings
from nutrition_estimator.domain.catalog import (
    FoodCatalog,
    FoodCategory,
    FoodRecord,
    MacroProfile,
)
from nutrition_estimator.domain.catalog_data import default_catalog
from nutrition_estimator.domain.detections import BoundingBox, Detection, Vertex
from nutrition_estimator.services.analysis import AnalysisService
from nutrition_estimator.services.candidates import CandidateFilter
from nutrition_estimator.services.nutrition import NutritionEstimator
from nutrition_estimator.services.resolver import FoodResolver


def make_record(  # noqa: PLR0913
    key: str,
    *,
    category: FoodCategory = FoodCategory.FRUIT,
    calories: float = 100,
    proteins: float = 10,
    carbohydrates: float = 20,
    fats: float = 5,
    fiber: float = 1,
    portion: float = 100,
    aliases: tuple[str, ...] = (),
) -> FoodRecord:
    """Build a catalog record with simple defaults."""
    return FoodRecord(
        key=key,
        display_name=key.title(),
        category=category,
        calories_per_100g=calories,
        macros_per_100g=MacroProfile(
            proteins=proteins,
            carbohydrates=carbohydrates,
            fats=fats,
            fiber=fiber,
        ),
        typical_portion_grams=portion,
        aliases=(key, *aliases),
    )


def box(*points: tuple[float, float]) -> BoundingBox:
    """Build a bounding box from (x, y) pairs."""
    return BoundingBox(vertices=[Vertex(x=x, y=y) for x, y in points])


def square_box(side: float) -> BoundingBox:
    """Axis-aligned box anchored at the origin with the given side length."""
    return box((0.0, 0.0), (side, 0.0), (side, side), (0.0, side))


@pytest.fixture(autouse=True)
def reset_app_logger():
    yield
    logger = logging.getLogger("nutrition_estimator")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def small_catalog() -> FoodCatalog:
    return FoodCatalog(
        (
            make_record("grape", aliases=("red grape", "ruby grape", "uva")),
            make_record("grapefruit", aliases=("pomelo", "ruby")),
            make_record(
                "steak",
                category=FoodCategory.PROTEIN,
                calories=250,
                proteins=26,
                carbohydrates=0,
                fats=15,
                fiber=0,
                aliases=("beef steak",),
            ),
        )
    )


@pytest.fixture
def resolver() -> FoodResolver:
    return FoodResolver(default_catalog())


@pytest.fixture
def estimator(resolver: FoodResolver) -> NutritionEstimator:
    return NutritionEstimator(resolver=resolver)


@pytest.fixture
def candidate_filter() -> CandidateFilter:
    return CandidateFilter()


@pytest.fixture
def analysis_service(
    candidate_filter: CandidateFilter, estimator: NutritionEstimator
) -> AnalysisService:
    return AnalysisService(candidate_filter=candidate_filter, estimator=estimator)


def label(text: str, confidence: float) -> Detection:
    return Detection.from_label(text, confidence)


def obj(
    text: str, confidence: float, bounding_box: BoundingBox | None = None
) -> Detection:
    return Detection.from_object(text, confidence, bounding_box)
