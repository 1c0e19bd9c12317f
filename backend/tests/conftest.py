"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from radial_gauge.engine.context import GaugeContext
from radial_gauge.engine.pipeline import Pipeline, build_context, create_pipeline
from radial_gauge.models.gauge import DataPoint, Link, Viewport


# 400x300 viewport: radius 120, cutout 60, arm length 130, spinner length 80
VIEWPORT = Viewport(width=400, height=300)

DRILL_LINK = Link(
    label="Show All",
    url="/explore/sales?fields=orders.total",
    type="drill",
    type_label="Drill into West",
)


@pytest.fixture
def viewport() -> Viewport:
    return VIEWPORT


@pytest.fixture
def data_point() -> DataPoint:
    return DataPoint(
        value=75,
        rendered_text="75",
        label="Sales",
        dimension_text="West",
        drill_links=[DRILL_LINK],
    )


@pytest.fixture
def target_point() -> DataPoint:
    return DataPoint(value=60, rendered_text="60", label="Quota")


@pytest.fixture
def pipeline() -> Pipeline:
    return create_pipeline()


@pytest.fixture
def run_gauge(pipeline, data_point, viewport):
    """Run the full pipeline; keyword arguments override the default inputs."""

    def _run(config: dict[str, Any] | None = None, **overrides: Any) -> GaugeContext:
        point = overrides.pop("data_point", data_point)
        view = overrides.pop("viewport", viewport)
        ctx = build_context(point, config or {}, view, **overrides)
        return pipeline.run(ctx)

    return _run
