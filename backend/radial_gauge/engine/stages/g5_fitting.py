"""G5.01: Fit the composition into the viewport.

One uniform scale keeps every primitive undistorted; the scaled box is centered
with a margin on each side. A box with no width or height keeps scale 1.
"""

from __future__ import annotations

import logging

from radial_gauge.engine.context import GaugeContext
from radial_gauge.engine.registry import Layer, stage
from radial_gauge.models.descriptor import Transform, ViewBox
from radial_gauge.models.gauge import Viewport
from radial_gauge.utils.shapes import union_bounds

logger = logging.getLogger(__name__)


def fit_transform(
    bounds: tuple[float, float, float, float],
    viewport: Viewport,
    margin: float = 0.9,
) -> Transform:
    """Scale and translation that center ``bounds`` inside ``viewport``."""
    xmin, ymin, xmax, ymax = bounds
    width = xmax - xmin
    height = ymax - ymin

    if width <= 0 or height <= 0:
        logger.debug("Degenerate bounds %s; keeping scale 1", bounds)
        scale = 1.0
    else:
        scale = min(margin * viewport.width / width, margin * viewport.height / height)

    return Transform(
        scale=scale,
        translate_x=(viewport.width - width * scale) / 2 - xmin * scale,
        translate_y=(viewport.height - height * scale) / 2 - ymin * scale,
    )


@stage(
    id="G5.01",
    layer=Layer.FITTING,
    dependencies=["G4.04"],
    description="Uniform scale-and-translate into the viewport",
)
def fit_bounds(ctx: GaugeContext) -> None:
    bounds = union_bounds(ctx.primitives, ctx.measurer) or (0.0, 0.0, 0.0, 0.0)
    ctx.bounds = bounds
    ctx.transform = fit_transform(bounds, ctx.viewport, ctx.layout.fit_margin)
    ctx.view_box = ViewBox(x=0.0, y=0.0, width=ctx.viewport.width, height=ctx.viewport.height)
