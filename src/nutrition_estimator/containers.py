"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutrition_estimator.config import Settings
from nutrition_estimator.domain.catalog import FoodCatalog
from nutrition_estimator.domain.catalog_data import default_catalog
from nutrition_estimator.services.analysis import AnalysisService
from nutrition_estimator.services.candidates import CandidateFilter
from nutrition_estimator.services.nutrition import NutritionEstimator
from nutrition_estimator.services.resolver import FoodResolver


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    resolver: FoodResolver
    candidate_filter: CandidateFilter
    nutrition_estimator: NutritionEstimator
    analysis_service: AnalysisService


def build_container(
    settings: Settings | None = None, catalog: FoodCatalog | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_catalog = catalog if catalog is not None else default_catalog()
    resolver = FoodResolver(resolved_catalog)
    candidate_filter = CandidateFilter(
        object_threshold=resolved_settings.object_confidence_threshold,
        label_threshold=resolved_settings.label_confidence_threshold,
        debug=resolved_settings.debug,
    )
    nutrition_estimator = NutritionEstimator(
        resolver=resolver,
        debug=resolved_settings.debug,
    )
    analysis_service = AnalysisService(
        candidate_filter=candidate_filter,
        estimator=nutrition_estimator,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog=resolved_catalog,
        resolver=resolver,
        candidate_filter=candidate_filter,
        nutrition_estimator=nutrition_estimator,
        analysis_service=analysis_service,
    )
