"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from radial_gauge.models.gauge import DataPoint, QueryShape, Viewport


class RenderRequest(BaseModel):
    data_point: DataPoint = Field(..., description="The single cell to display")
    target_point: DataPoint | None = Field(
        default=None, description="Second measure cell, used as the target"
    )
    query_shape: QueryShape | None = Field(
        default=None, description="Dimension/measure/row counts; inferred when omitted"
    )
    config: dict[str, Any] = Field(
        default_factory=dict, description="Raw visualization options keyed by option name"
    )
    viewport: Viewport = Field(..., description="Drawing area in pixels")


class DrillHitRequest(RenderRequest):
    x: float = Field(..., description="Pointer x in viewport coordinates")
    y: float = Field(..., description="Pointer y in viewport coordinates")
