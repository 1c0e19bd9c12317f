"""/api/gauge: option schema, render, SVG export and drill hit testing."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from radial_gauge.dependencies import get_text_measurer
from radial_gauge.engine.context import GaugeContext
from radial_gauge.engine.drill import drill_request, hit_test
from radial_gauge.engine.pipeline import build_context, create_pipeline
from radial_gauge.models.options import GAUGE_OPTIONS, OptionSpec
from radial_gauge.models.requests import DrillHitRequest, RenderRequest
from radial_gauge.models.responses import DrillResponse, RenderResponse
from radial_gauge.svg.serializer import serialize_descriptor
from radial_gauge.utils.text import TextMeasurer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/gauge")


def _run(req: RenderRequest, measurer: TextMeasurer) -> GaugeContext:
    """Run the pipeline; a validation failure becomes a 422."""
    ctx = build_context(
        req.data_point,
        req.config,
        req.viewport,
        query_shape=req.query_shape,
        target_point=req.target_point,
        measurer=measurer,
    )
    ctx = create_pipeline().run(ctx)
    if ctx.failure is not None:
        logger.info("Render rejected: %s", ctx.failure.error.value)
        raise HTTPException(status_code=422, detail=ctx.failure.model_dump(mode="json"))
    return ctx


@router.get("/options", response_model=list[OptionSpec])
async def options() -> list[OptionSpec]:
    return GAUGE_OPTIONS


@router.post("/render", response_model=RenderResponse)
async def render(
    req: RenderRequest, measurer: TextMeasurer = Depends(get_text_measurer)
) -> RenderResponse:
    start = time.perf_counter()
    ctx = _run(req, measurer)
    elapsed = (time.perf_counter() - start) * 1000
    return RenderResponse(
        descriptor=ctx.descriptor(),
        processing_time_ms=round(elapsed, 1),
        stages_completed=len(ctx.completed_stages),
    )


@router.post("/svg")
async def svg(req: RenderRequest, measurer: TextMeasurer = Depends(get_text_measurer)) -> Response:
    ctx = _run(req, measurer)
    return Response(content=serialize_descriptor(ctx.descriptor()), media_type="image/svg+xml")


@router.post("/drill", response_model=DrillResponse)
async def drill(
    req: DrillHitRequest, measurer: TextMeasurer = Depends(get_text_measurer)
) -> DrillResponse:
    ctx = _run(req, measurer)
    hit = hit_test(ctx.descriptor(), req.x, req.y, measurer)
    if hit is None:
        return DrillResponse()
    return DrillResponse(hit=hit, request=drill_request(hit, {"x": req.x, "y": req.y}))
