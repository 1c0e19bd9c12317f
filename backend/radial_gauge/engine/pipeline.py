"""Pipeline orchestrator: runs stages in dependency order, halting on validation failure."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time
from typing import Any, Mapping

from radial_gauge.engine.config import LayoutConfig
from radial_gauge.engine.context import GaugeContext
from radial_gauge.engine.registry import StageRegistry, get_registry
from radial_gauge.models.descriptor import RenderDescriptor, RenderState, ValidationFailure
from radial_gauge.models.gauge import DataPoint, QueryShape, Viewport
from radial_gauge.utils.text import AverageWidthMeasurer, NumberFormatter, TextMeasurer, format_number

logger = logging.getLogger(__name__)

_STAGES_PACKAGE = "radial_gauge.engine.stages"


class Pipeline:
    """Orchestrates the stage pipeline."""

    def __init__(
        self,
        registry: StageRegistry | None = None,
        config: LayoutConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or LayoutConfig()

    def run(self, ctx: GaugeContext) -> GaugeContext:
        """Run every registered stage on the given context."""
        start = time.perf_counter()
        ctx.layout = self.config
        ordered = self.registry.resolve_order()

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
            except Exception:
                logger.exception("  %s FAILED", spec.id)
                raise
            ctx.completed_stages.add(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.2fms", spec.id, elapsed)

            if ctx.halted:
                logger.info(
                    "Pipeline halted by %s: %s",
                    spec.id,
                    ctx.failure.error.value if ctx.failure else "",
                )
                break

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d stages, %d primitives in %.1fms",
            len(ctx.completed_stages),
            len(ordered),
            len(ctx.primitives),
            total,
        )
        return ctx


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire."""
    package = importlib.import_module(_STAGES_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_STAGES_PACKAGE}.{module_name}")


def create_pipeline(config: LayoutConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance with every stage registered."""
    register_stages()
    return Pipeline(config=config)


def build_context(
    data_point: DataPoint,
    raw_config: Mapping[str, Any],
    viewport: Viewport,
    *,
    query_shape: QueryShape | None = None,
    target_point: DataPoint | None = None,
    measurer: TextMeasurer | None = None,
    formatter: NumberFormatter | None = None,
) -> GaugeContext:
    """Assemble a fresh context. A missing query shape is inferred from the cells given."""
    if query_shape is None:
        query_shape = QueryShape(
            dimension_count=1 if data_point.dimension_text else 0,
            measure_count=2 if target_point is not None else 1,
            row_count=1,
        )
    return GaugeContext(
        data_point=data_point,
        viewport=viewport,
        raw_config=raw_config,
        query_shape=query_shape,
        target_point=target_point,
        measurer=measurer or AverageWidthMeasurer(),
        formatter=formatter or format_number,
    )


def initialize(viewport: Viewport) -> RenderState:
    """First phase of the host lifecycle. Idempotent; the engine keeps nothing else."""
    register_stages()
    return RenderState(viewport=viewport)


def render(
    state: RenderState,
    data_point: DataPoint,
    raw_config: Mapping[str, Any],
    viewport: Viewport | None = None,
    *,
    query_shape: QueryShape | None = None,
    target_point: DataPoint | None = None,
    measurer: TextMeasurer | None = None,
    formatter: NumberFormatter | None = None,
    pipeline: Pipeline | None = None,
) -> RenderDescriptor | ValidationFailure:
    """Compute a brand-new descriptor, or the validation failure that stopped it."""
    if viewport is not None:
        state.viewport = viewport
    ctx = build_context(
        data_point,
        raw_config,
        state.viewport,
        query_shape=query_shape,
        target_point=target_point,
        measurer=measurer,
        formatter=formatter,
    )
    ctx = (pipeline or create_pipeline()).run(ctx)
    if ctx.failure is not None:
        return ctx.failure
    return ctx.descriptor()
