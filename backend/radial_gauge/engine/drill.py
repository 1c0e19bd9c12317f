"""Drill requests: turning an interaction on a drillable primitive into a request.

The engine never wires events itself. Primitives carry ``drill_links``; the
renderer reports an interaction and gets back the request to forward to the
drill menu.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from shapely.geometry import Point

from radial_gauge.models.descriptor import DrillRequest, RenderDescriptor
from radial_gauge.models.primitives import Arc, Polyline, TextLabel
from radial_gauge.utils.shapes import primitive_geometry
from radial_gauge.utils.text import AverageWidthMeasurer, TextMeasurer

logger = logging.getLogger(__name__)

# Pointer slack in viewport units, so hairline spinners stay clickable
_HIT_TOLERANCE = 2.0


def drill_request(
    primitive: Arc | Polyline | TextLabel, origin_event: Any = None
) -> DrillRequest | None:
    if not primitive.drill_links:
        return None
    links = [link.model_copy() for link in primitive.drill_links]
    return DrillRequest(links=links, origin_event=origin_event)


def emit_drill(
    primitive: Arc | Polyline | TextLabel,
    origin_event: Any,
    emit: Callable[[DrillRequest], None],
) -> bool:
    """Fire ``emit`` with a request if the primitive is drillable. Returns whether it fired."""
    request = drill_request(primitive, origin_event)
    if request is None:
        return False
    logger.debug("Drill on %s with %d links", primitive.role, len(request.links))
    emit(request)
    return True


def hit_test(
    descriptor: RenderDescriptor,
    x: float,
    y: float,
    measurer: TextMeasurer | None = None,
    tolerance: float = _HIT_TOLERANCE,
) -> Arc | Polyline | TextLabel | None:
    """Top-most drillable primitive under viewport point (x, y)."""
    measurer = measurer or AverageWidthMeasurer()
    transform = descriptor.transform
    local = Point(*transform.invert(x, y))
    slack = tolerance / transform.scale if transform.scale > 0 else tolerance

    for primitive in reversed(descriptor.primitives):
        if not primitive.drill_links:
            continue
        geometry = primitive_geometry(primitive, measurer)
        if geometry is None:
            continue
        stroke = getattr(primitive, "stroke_width", 0.0)
        if geometry.distance(local) <= max(stroke / 2, slack):
            return primitive
    return None
