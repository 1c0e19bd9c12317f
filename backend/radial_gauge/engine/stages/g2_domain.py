"""G2.01 / G2.02: Domain mapping and gauge dimensions.

A value is clamped into the configured range, turned into a proportion in
[0, 1] and spread over [-span, +span] degrees. Equal or inverted ranges have no
usable width, so their proportion is pinned to 0 (the gauge's lower bound).
"""

from __future__ import annotations

import math

from radial_gauge.engine.context import GaugeContext
from radial_gauge.engine.registry import Layer, stage


def clamp(value: float, value_range: tuple[float, float]) -> float:
    lo, hi = min(value_range), max(value_range)
    if math.isnan(value):
        return lo
    return min(max(value, lo), hi)


def proportion_of(value: float, value_range: tuple[float, float]) -> float:
    """Position of ``value`` inside ``value_range`` as a fraction in [0, 1]."""
    lo, hi = value_range
    if hi <= lo or math.isnan(value):
        return 0.0
    return (clamp(value, value_range) - lo) / (hi - lo)


def angle_for_proportion(proportion: float, span: float) -> float:
    """Radians for a proportion over a half-sweep of ``span`` degrees."""
    return math.radians(span * 2 * proportion - span)


def angle_of(value: float, value_range: tuple[float, float], span: float) -> float:
    return angle_for_proportion(proportion_of(value, value_range), span)


def spinner_length(
    radius: float, multiplier: float, cutout_radius: float, divisor: float = 150.0
) -> float:
    """Spinner reach; never shorter than the cutout so it cannot vanish in the hole."""
    return max(radius * (multiplier / divisor), cutout_radius)


@stage(
    id="G2.01",
    layer=Layer.DOMAIN,
    dependencies=["G1.02"],
    description="Map value and target onto the angular span",
)
def map_domain(ctx: GaugeContext) -> None:
    cfg = ctx.config
    value_range = cfg.value_range

    ctx.span_angle = math.radians(cfg.angle)
    ctx.value = clamp(ctx.data_point.value, value_range)
    ctx.proportion = proportion_of(ctx.data_point.value, value_range)
    ctx.value_angle = angle_for_proportion(ctx.proportion, cfg.angle)

    if ctx.target.present:
        ctx.target_proportion = proportion_of(ctx.target.value, value_range)
        ctx.target_angle = angle_for_proportion(ctx.target_proportion, cfg.angle)


@stage(
    id="G2.02",
    layer=Layer.DOMAIN,
    dependencies=["G2.01"],
    description="Resolve radii from the viewport",
)
def dimensions(ctx: GaugeContext) -> None:
    cfg = ctx.config
    layout = ctx.layout

    ctx.radius = layout.radius_ratio * min(ctx.viewport.width, ctx.viewport.height)
    ctx.cutout_radius = ctx.radius * (cfg.cutout / 100)
    ctx.arm_length = ctx.radius + cfg.arm
    ctx.spinner_length = spinner_length(
        ctx.radius, cfg.spinner, ctx.cutout_radius, layout.spinner_length_divisor
    )
