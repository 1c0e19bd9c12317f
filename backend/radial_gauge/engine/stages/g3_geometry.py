"""G3.01–G3.05: Gauge body, fill, arms, spinner and target tick.

Primitives are appended in paint order. Fill and spinner shapes are picked from
lookup tables keyed by the normalized strategy, so a new variant is one more
builder and one more table entry.
"""

from __future__ import annotations

import math
from typing import Callable

from radial_gauge.engine.context import GaugeContext
from radial_gauge.engine.registry import Layer, stage
from radial_gauge.engine.stages.g2_domain import angle_for_proportion
from radial_gauge.models.gauge import FillType, SpinnerType
from radial_gauge.models.primitives import Arc, Polyline
from radial_gauge.utils.geometry import polar_point, radial_segment_bbox

_FULL_TURN = 2 * math.pi


# ── Fill strategies ──


def gradient_bucket(proportion: float, bucket_count: int) -> int:
    """Index of the color bucket holding ``proportion``; the top edge joins the last bucket."""
    if bucket_count <= 0:
        return 0
    index = math.floor(proportion * bucket_count)
    return max(0, min(index, bucket_count - 1))


def _body_arc(ctx: GaugeContext, start: float, end: float, color: str, role: str) -> Arc:
    return Arc(
        role=role,
        inner_radius=ctx.cutout_radius,
        outer_radius=ctx.radius,
        start_angle=start,
        end_angle=end,
        fill_color=color,
        stroke_color=color,
        stroke_width=ctx.layout.fill_stroke_width,
    )


def _progress_fill(ctx: GaugeContext) -> list[Arc]:
    return [_body_arc(ctx, -ctx.span_angle, ctx.value_angle, ctx.config.fill_color, "fill")]


def _segment_fill(ctx: GaugeContext) -> list[Arc]:
    # Fixed bands over the whole span; the spinner alone shows the value.
    colors = ctx.config.fill_colors
    count = len(colors)
    span = ctx.config.angle
    return [
        _body_arc(
            ctx,
            angle_for_proportion(i / count, span),
            angle_for_proportion((i + 1) / count, span),
            color,
            f"fill-{i}",
        )
        for i, color in enumerate(colors)
    ]


def _gradient_fill(ctx: GaugeContext) -> list[Arc]:
    colors = ctx.config.fill_colors
    color = colors[gradient_bucket(ctx.proportion, len(colors))]
    return [_body_arc(ctx, -ctx.span_angle, ctx.value_angle, color, "fill")]


_FILL_BUILDERS: dict[FillType, Callable[[GaugeContext], list[Arc]]] = {
    FillType.PROGRESS: _progress_fill,
    FillType.SEGMENT: _segment_fill,
    FillType.PROGRESS_GRADIENT: _gradient_fill,
}


# ── Spinner strategies ──


def needle_points(
    angle: float, length: float, base_ratio: float, base_offset: float
) -> list[tuple[float, float]]:
    """Tip at ``length`` along ``angle``; two base points just behind the hub."""
    base = length * base_ratio
    return [
        polar_point(length, angle),
        polar_point(base, angle - base_offset),
        polar_point(base, angle + base_offset),
    ]


def _spinner_line(ctx: GaugeContext) -> list[Arc | Polyline]:
    cfg = ctx.config
    weight = cfg.spinner_weight / ctx.layout.spinner_stroke_divisor
    arm = Arc(
        role="spinner",
        inner_radius=0.0,
        outer_radius=ctx.spinner_length,
        start_angle=ctx.value_angle,
        end_angle=ctx.value_angle,
        fill_color=cfg.spinner_color,
        stroke_color=cfg.spinner_color,
        stroke_width=weight,
        drill_links=ctx.drill_links(),
    )
    core = Arc(
        role="spinner-core",
        inner_radius=0.0,
        outer_radius=weight,
        start_angle=0.0,
        end_angle=_FULL_TURN,
        fill_color=cfg.spinner_color,
    )
    return [arm, core]


def _needle(ctx: GaugeContext, base_ratio: float) -> Polyline:
    cfg = ctx.config
    return Polyline(
        role="spinner",
        points=needle_points(
            ctx.value_angle, ctx.spinner_length, base_ratio, ctx.layout.needle_base_offset
        ),
        closed=True,
        fill_color=cfg.spinner_color,
        stroke_color=cfg.spinner_color,
        stroke_width=cfg.spinner_weight / ctx.layout.spinner_stroke_divisor,
        drill_links=ctx.drill_links(),
    )


def _spinner_needle(ctx: GaugeContext) -> list[Arc | Polyline]:
    return [_needle(ctx, ctx.layout.needle_base_ratio)]


def _spinner_auto(ctx: GaugeContext) -> list[Arc | Polyline]:
    layout = ctx.layout
    core = Arc(
        role="spinner-core",
        inner_radius=0.0,
        outer_radius=ctx.config.spinner_weight / layout.auto_core_divisor,
        start_angle=0.0,
        end_angle=_FULL_TURN,
        fill_color=layout.auto_core_fill,
        stroke_color=ctx.config.background_color,
        stroke_width=layout.auto_core_ring_width,
    )
    return [_needle(ctx, layout.auto_needle_base_ratio), core]


def _spinner_inner(ctx: GaugeContext) -> list[Arc | Polyline]:
    cfg = ctx.config
    return [
        Arc(
            role="spinner",
            inner_radius=ctx.cutout_radius,
            outer_radius=ctx.spinner_length,
            start_angle=ctx.value_angle,
            end_angle=ctx.value_angle,
            fill_color=cfg.spinner_color,
            stroke_color=cfg.spinner_color,
            stroke_width=cfg.spinner_weight / ctx.layout.spinner_stroke_divisor,
            drill_links=ctx.drill_links(),
        )
    ]


_SPINNER_BUILDERS: dict[SpinnerType, Callable[[GaugeContext], list[Arc | Polyline]]] = {
    SpinnerType.SPINNER: _spinner_line,
    SpinnerType.NEEDLE: _spinner_needle,
    SpinnerType.AUTO: _spinner_auto,
    SpinnerType.INNER: _spinner_inner,
}


# ── Stages ──


@stage(
    id="G3.01",
    layer=Layer.GEOMETRY,
    dependencies=["G2.02"],
    description="Background arc over the full span",
)
def background(ctx: GaugeContext) -> None:
    ctx.add(
        Arc(
            role="background",
            inner_radius=ctx.cutout_radius,
            outer_radius=ctx.radius,
            start_angle=-ctx.span_angle,
            end_angle=ctx.span_angle,
            fill_color=ctx.config.background_color,
        )
    )


@stage(
    id="G3.02",
    layer=Layer.GEOMETRY,
    dependencies=["G3.01"],
    description="Fill arcs for the configured fill strategy",
)
def fill(ctx: GaugeContext) -> None:
    ctx.add(*_FILL_BUILDERS[ctx.config.fill_type](ctx))


@stage(
    id="G3.03",
    layer=Layer.GEOMETRY,
    dependencies=["G3.02"],
    description="Arm marks at both ends of the span",
)
def arms(ctx: GaugeContext) -> None:
    cfg = ctx.config
    inner = ctx.cutout_radius * ctx.layout.arm_inner_ratio
    for side, angle in (("left", -ctx.span_angle), ("right", ctx.span_angle)):
        ctx.add(
            Arc(
                role=f"arm-{side}",
                inner_radius=inner,
                outer_radius=ctx.arm_length,
                start_angle=angle,
                end_angle=angle,
                fill_color=cfg.background_color,
                stroke_color=cfg.background_color,
                stroke_width=cfg.arm_weight / ctx.layout.arm_stroke_divisor,
            )
        )
        ctx.arm_bounds[side] = radial_segment_bbox(inner, ctx.arm_length, angle)


@stage(
    id="G3.04",
    layer=Layer.GEOMETRY,
    dependencies=["G3.03"],
    description="Spinner shape for the configured spinner strategy",
)
def spinner(ctx: GaugeContext) -> None:
    ctx.add(*_SPINNER_BUILDERS[ctx.config.spinner_type](ctx))


@stage(
    id="G3.05",
    layer=Layer.GEOMETRY,
    dependencies=["G3.04"],
    description="Dashed target tick",
)
def target_tick(ctx: GaugeContext) -> None:
    if not ctx.target.present:
        return
    cfg = ctx.config
    ctx.add(
        Arc(
            role="target",
            inner_radius=ctx.cutout_radius,
            outer_radius=ctx.radius,
            start_angle=ctx.target_angle,
            end_angle=ctx.target_angle,
            stroke_color=cfg.target_color,
            stroke_width=cfg.target_weight / ctx.layout.target_stroke_divisor,
            dash_array=(cfg.target_length, cfg.target_gap),
        )
    )
