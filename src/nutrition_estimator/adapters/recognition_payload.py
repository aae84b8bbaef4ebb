"""Convert recognition-service payloads into detections."""

import logging
from collections.abc import Mapping, Sequence

from pydantic import ValidationError

from nutrition_estimator.domain.detections import BoundingBox, Detection

_logger = logging.getLogger(__name__)


def parse_object_annotations(
    entries: Sequence[Mapping[str, object]] | None,
) -> list[Detection]:
    """Parse localized object annotations.

    Accepts ``{"name", "confidence" | "score", "boundingBox" | "boundingPoly"}``
    entries. Entries without a usable name or confidence are skipped; broken
    geometry only drops the bounding box.
    """
    if not _is_entry_list(entries, "object"):
        return []
    detections: list[Detection] = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            _logger.warning("Skipping non-mapping object annotation: %r", entry)
            continue
        bounding_box = _parse_bounding_box(
            entry.get("boundingBox", entry.get("boundingPoly"))
        )
        try:
            detection = Detection.from_object(
                label=entry.get("name"),
                confidence=_confidence(entry),
                bounding_box=bounding_box,
            )
        except ValidationError as exc:
            _logger.warning("Skipping invalid object annotation: %s", exc)
            continue
        detections.append(detection)
    return detections


def parse_label_annotations(
    entries: Sequence[Mapping[str, object]] | None,
) -> list[Detection]:
    """Parse label annotations of the form ``{"description", "confidence"}``."""
    if not _is_entry_list(entries, "label"):
        return []
    detections: list[Detection] = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            _logger.warning("Skipping non-mapping label annotation: %r", entry)
            continue
        try:
            detection = Detection.from_label(
                label=entry.get("description"),
                confidence=_confidence(entry),
            )
        except ValidationError as exc:
            _logger.warning("Skipping invalid label annotation: %s", exc)
            continue
        detections.append(detection)
    return detections


def _is_entry_list(entries: object, kind: str) -> bool:
    """Return True for a list of annotations; warn about anything else."""
    if entries is None:
        return False
    if not isinstance(entries, list | tuple):
        _logger.warning("Ignoring malformed %s annotations: %r", kind, entries)
        return False
    return True


def _confidence(entry: Mapping[str, object]) -> object:
    """Return the confidence, accepting the recognizer's ``score`` key too."""
    if "confidence" in entry:
        return entry["confidence"]
    return entry.get("score")


def _parse_bounding_box(raw: object) -> BoundingBox | None:
    """Return a bounding box, or None when the geometry is unusable."""
    if not isinstance(raw, Mapping):
        return None
    vertices = raw.get("normalizedVertices", raw.get("vertices"))
    if not vertices:
        return None
    try:
        return BoundingBox.model_validate({"vertices": vertices})
    except ValidationError:
        _logger.debug("Ignoring invalid bounding box geometry: %r", raw)
        return None
