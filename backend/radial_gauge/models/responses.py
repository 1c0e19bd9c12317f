"""API response models."""

from __future__ import annotations

from pydantic import BaseModel

from radial_gauge.models.descriptor import DrillRequest, RenderDescriptor
from radial_gauge.models.primitives import Primitive


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    stages_registered: int = 0


class RenderResponse(BaseModel):
    descriptor: RenderDescriptor
    processing_time_ms: float = 0.0
    stages_completed: int = 0


class DrillResponse(BaseModel):
    hit: Primitive | None = None
    request: DrillRequest | None = None
