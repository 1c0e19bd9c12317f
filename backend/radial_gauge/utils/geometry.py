"""Leaf-node geometry helpers. No engine imports.

Polar convention matches the primitives: angle 0 points up, clockwise positive,
so a point is ``(r·sin a, -r·cos a)`` in y-down screen space.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

# Boundary samples per arc edge. Quarter-turn angles are added on top so the
# bounding box is exact regardless of this count.
_ARC_SAMPLES = 33

_QUARTER_TURN = math.pi / 2


def polar_point(radius: float, angle: float) -> tuple[float, float]:
    return (radius * math.sin(angle), -radius * math.cos(angle))


def polar_points(radius: float, angles: NDArray[np.float64]) -> NDArray[np.float64]:
    """Nx2 array of points at ``radius`` for each angle."""
    return np.column_stack([radius * np.sin(angles), -radius * np.cos(angles)])


def arc_sample_angles(
    start: float, end: float, samples: int = _ARC_SAMPLES
) -> NDArray[np.float64]:
    """Sorted sample angles over [start, end] including every quarter turn inside it."""
    lo, hi = min(start, end), max(start, end)
    if hi - lo < 1e-12:
        return np.array([lo])
    sampled = np.linspace(lo, hi, samples)
    # Extreme x/y of a circle occur at multiples of 90°.
    first = math.ceil(lo / _QUARTER_TURN)
    last = math.floor(hi / _QUARTER_TURN)
    quarters = np.arange(first, last + 1, dtype=np.float64) * _QUARTER_TURN
    return np.unique(np.concatenate([sampled, quarters]))


def annular_sector_points(
    inner_radius: float,
    outer_radius: float,
    start: float,
    end: float,
) -> NDArray[np.float64]:
    """Closed outline of an annular sector: outer edge forward, inner edge back."""
    angles = arc_sample_angles(start, end)
    outer = polar_points(outer_radius, angles)
    inner = polar_points(inner_radius, angles[::-1])
    return np.vstack([outer, inner])


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def radial_segment_bbox(
    inner_radius: float, outer_radius: float, angle: float
) -> tuple[float, float, float, float]:
    """Bounding box of the radial line between two radii at one angle."""
    pts = np.array([polar_point(inner_radius, angle), polar_point(outer_radius, angle)])
    return bbox(pts)
