"""Models for raw recognition-service detections."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DetectionSource(StrEnum):
    """Which recognizer feature produced a detection."""

    OBJECT = "object"
    LABEL = "label"


class Vertex(BaseModel):
    """Normalized 2-D point; coordinates may be missing in recognizer output."""

    model_config = ConfigDict(frozen=True)

    x: float | None = Field(default=None, ge=0.0, le=1.0)
    y: float | None = Field(default=None, ge=0.0, le=1.0)


class BoundingBox(BaseModel):
    """Bounding polygon of an object detection."""

    model_config = ConfigDict(frozen=True)

    vertices: list[Vertex] = Field(default_factory=list)


class Detection(BaseModel):
    """Single detection reported by the recognition service."""

    model_config = ConfigDict(frozen=True)

    label: str
    confidence: float = Field(ge=0.0, le=1.0)
    source: DetectionSource
    bounding_box: BoundingBox | None = None

    @model_validator(mode="after")
    def check_label_geometry(self) -> "Detection":
        """Reject geometry on label detections."""
        if self.source is DetectionSource.LABEL and self.bounding_box is not None:
            raise ValueError("label detections never carry a bounding box")
        return self

    @classmethod
    def from_object(
        cls,
        label: str,
        confidence: float,
        bounding_box: BoundingBox | None = None,
    ) -> "Detection":
        """Build an object-sourced detection."""
        return cls(
            label=label,
            confidence=confidence,
            source=DetectionSource.OBJECT,
            bounding_box=bounding_box,
        )

    @classmethod
    def from_label(cls, label: str, confidence: float) -> "Detection":
        """Build a label-sourced detection."""
        return cls(label=label, confidence=confidence, source=DetectionSource.LABEL)
