"""Engine output models: the render descriptor and the validation failure."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, Field

from radial_gauge.models.gauge import Link, Viewport
from radial_gauge.models.primitives import Primitive, TextLabel


class ViewBox(BaseModel):
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class Transform(BaseModel):
    """Uniform scale followed by translation: ``p' = p * scale + t``."""

    scale: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (x * self.scale + self.translate_x, y * self.scale + self.translate_y)

    def invert(self, x: float, y: float) -> tuple[float, float]:
        if self.scale == 0:
            return (0.0, 0.0)
        return ((x - self.translate_x) / self.scale, (y - self.translate_y) / self.scale)


class RenderDescriptor(BaseModel):
    """Complete, ready-to-draw gauge. Later primitives paint on top."""

    primitives: list[Primitive] = Field(default_factory=list)
    view_box: ViewBox = Field(default_factory=ViewBox)
    transform: Transform = Field(default_factory=Transform)
    title: TextLabel | None = None


class ValidationErrorKind(str, enum.Enum):
    NO_FIELDS_SELECTED = "NoFieldsSelected"
    NO_DATA = "NoData"
    TOO_MANY_ROWS = "TooManyRows"
    TOO_MANY_OR_TOO_FEW_MEASURES = "TooManyOrTooFewMeasures"


class ValidationFailure(BaseModel):
    error: ValidationErrorKind
    message: str


class DrillRequest(BaseModel):
    links: list[Link] = Field(default_factory=list)
    origin_event: Any = None


class RenderState(BaseModel):
    """Everything that persists between renders. Only the last viewport."""

    viewport: Viewport
