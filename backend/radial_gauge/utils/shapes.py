"""Primitive → shapely geometry. No engine imports.

Arc outlines are sampled (see ``annular_sector_points``) and reduced to their
convex hull: exact for bounding boxes, and a point, line or polygon depending on
how degenerate the arc is.
"""

from __future__ import annotations

from shapely.geometry import GeometryCollection, MultiPoint, box
from shapely.geometry.base import BaseGeometry

from radial_gauge.models.primitives import Arc, Polyline, TextLabel
from radial_gauge.utils.geometry import annular_sector_points
from radial_gauge.utils.text import TextMeasurer, text_bounds


def primitive_geometry(
    primitive: Arc | Polyline | TextLabel, measurer: TextMeasurer
) -> BaseGeometry | None:
    """Footprint of one primitive in local drawing coordinates, or None if it has none."""
    if isinstance(primitive, Arc):
        points = annular_sector_points(
            primitive.inner_radius,
            primitive.outer_radius,
            primitive.start_angle,
            primitive.end_angle,
        )
        return MultiPoint(points).convex_hull
    if isinstance(primitive, Polyline):
        if not primitive.points:
            return None
        return MultiPoint(primitive.points).convex_hull
    return box(*text_bounds(primitive, measurer))


def union_bounds(
    primitives: list[Arc | Polyline | TextLabel], measurer: TextMeasurer
) -> tuple[float, float, float, float] | None:
    """(xmin, ymin, xmax, ymax) enclosing every primitive; None for an empty drawing."""
    geoms = [g for g in (primitive_geometry(p, measurer) for p in primitives) if g is not None]
    if not geoms:
        return None
    return tuple(float(v) for v in GeometryCollection(geoms).bounds)
