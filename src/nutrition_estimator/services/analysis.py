"""End-to-end analysis of recognizer output."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from nutrition_estimator.adapters.recognition_payload import (
    parse_label_annotations,
    parse_object_annotations,
)
from nutrition_estimator.domain.detections import Detection
from nutrition_estimator.domain.nutrition import NutritionReport
from nutrition_estimator.services.candidates import CandidateFilter
from nutrition_estimator.services.nutrition import NutritionEstimator

NO_FOOD_MESSAGE = "No food was detected in the image. Try a clearer photo."

_logger = logging.getLogger(__name__)


class AnalysisResult(BaseModel):
    """Outcome of analysing one set of detections."""

    model_config = ConfigDict(frozen=True)

    food_detected: bool
    message: str
    candidates: list[Detection] = Field(default_factory=list)
    report: NutritionReport | None = None


@dataclass(frozen=True)
class AnalysisService:
    """Runs the candidate filter and nutrition estimator in sequence."""

    candidate_filter: CandidateFilter
    estimator: NutritionEstimator

    def analyze(
        self,
        objects: Iterable[Detection] | None,
        labels: Iterable[Detection] | None,
    ) -> AnalysisResult:
        """Filter detections and estimate nutrition for the survivors."""
        candidates = self.candidate_filter.filter_food_candidates(objects, labels)
        if not candidates:
            _logger.info("Analysis found no food candidates")
            return AnalysisResult(food_detected=False, message=NO_FOOD_MESSAGE)

        report = self.estimator.estimate_nutrition(candidates)
        _logger.info(
            "Analysis complete: candidates=%s matched=%s",
            len(candidates),
            report.summary.matched,
        )
        return AnalysisResult(
            food_detected=True,
            message=f"Detected {len(candidates)} food item(s) in the image",
            candidates=candidates,
            report=report,
        )

    def analyze_payload(self, payload: Mapping[str, object]) -> AnalysisResult:
        """Analyse a raw recognizer payload with ``objects`` and ``labels``."""
        return self.analyze(
            parse_object_annotations(payload.get("objects")),
            parse_label_annotations(payload.get("labels")),
        )
