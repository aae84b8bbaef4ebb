"""Select food-related detections from raw recognizer output."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from nutrition_estimator.domain.detections import Detection, DetectionSource

# Relevance only; identity is decided by the resolver.
FOOD_KEYWORDS: frozenset[str] = frozenset(
    {
        "food",
        "fruit",
        "vegetable",
        "meat",
        "bread",
        "pasta",
        "rice",
        "chicken",
        "beef",
        "fish",
        "apple",
        "banana",
        "orange",
        "tomato",
        "potato",
        "carrot",
        "salad",
        "sandwich",
        "pizza",
        "burger",
        "cake",
        "cookie",
        "cheese",
        "milk",
        "egg",
        "yogurt",
        "cereal",
        "soup",
        "noodle",
        "taco",
        "burrito",
        "comida",
        "fruta",
        "verdura",
        "carne",
        "pan",
        "pollo",
        "pescado",
        "manzana",
        "plátano",
        "naranja",
        "tomate",
        "papa",
        "zanahoria",
        "ensalada",
        "sándwich",
        "hamburguesa",
        "pastel",
        "queso",
        "leche",
        "huevo",
        "yogur",
        "sopa",
        "fideos",
    }
)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidateFilter:
    """Keeps confident, food-related detections ranked by confidence.

    Label detections are noisier than localized objects, so they need a
    higher confidence to survive.
    """

    object_threshold: float = 0.5
    label_threshold: float = 0.7
    keywords: frozenset[str] = FOOD_KEYWORDS
    debug: bool = False

    def filter_food_candidates(
        self,
        objects: Iterable[Detection] | None,
        labels: Iterable[Detection] | None,
    ) -> list[Detection]:
        """Return candidates sorted by descending confidence.

        A label sharing its name with an already kept detection is dropped;
        objects are considered first because their geometry helps portion
        estimation.
        """
        kept: list[Detection] = []
        seen_names: set[str] = set()

        for detection in objects or ():
            if detection.source is not DetectionSource.OBJECT:
                continue
            if detection.confidence > self.object_threshold and self.is_food_related(
                detection.label
            ):
                kept.append(detection)
                seen_names.add(detection.label.lower())

        for detection in labels or ():
            if detection.source is not DetectionSource.LABEL:
                continue
            if detection.confidence <= self.label_threshold:
                continue
            if not self.is_food_related(detection.label):
                continue
            name = detection.label.lower()
            if name in seen_names:
                continue
            kept.append(detection)
            seen_names.add(name)

        if self.debug:
            _logger.info("Candidate filter: kept=%s", len(kept))
        return sorted(kept, key=lambda detection: detection.confidence, reverse=True)

    def is_food_related(self, text: str) -> bool:
        """Return True when the text contains any food keyword."""
        lowered = text.lower()
        return any(keyword in lowered for keyword in self.keywords)
