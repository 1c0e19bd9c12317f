"""G4.01–G4.04: Range labels, target label, center value block and title.

Font sizes arrive as viewport percentages (vmin) and are resolved to drawing
units here. Long labels are wrapped against ``wrap_width``; each extra line
moves down by ``line_height_em`` of the label's own font size.
"""

from __future__ import annotations

from typing import Callable

from radial_gauge.engine.context import GaugeContext
from radial_gauge.engine.registry import Layer, stage
from radial_gauge.models.gauge import LabelMode, Link, TargetSpec
from radial_gauge.models.primitives import TextLabel
from radial_gauge.utils.geometry import polar_point
from radial_gauge.utils.text import wrap_text

# mode -> text for the target label
_TARGET_TEXT: dict[LabelMode, Callable[[TargetSpec], str]] = {
    LabelMode.VALUE: lambda t: t.rendered_text,
    LabelMode.LABEL: lambda t: t.label,
    LabelMode.DIM: lambda t: t.dimension_text,
    LabelMode.BOTH: lambda t: f"{t.rendered_text} {t.label}",
    LabelMode.DBOTH: lambda t: f"{t.rendered_text} {t.dimension_text}",
    LabelMode.NOLABEL: lambda t: "",
}

# mode -> (primary DataPoint field, secondary DataPoint field) for the center block
_CENTER_SLOTS: dict[LabelMode, tuple[str | None, str | None]] = {
    LabelMode.VALUE: ("rendered_text", None),
    LabelMode.LABEL: (None, "label"),
    LabelMode.DIM: (None, "dimension_text"),
    LabelMode.BOTH: ("rendered_text", "label"),
    LabelMode.DBOTH: ("rendered_text", "dimension_text"),
    LabelMode.NOLABEL: (None, None),
}


def compose_target_text(mode: LabelMode, target: TargetSpec) -> str:
    return _TARGET_TEXT[mode](target).strip()


def _text(
    ctx: GaugeContext,
    *,
    role: str,
    text: str,
    x: float,
    y: float,
    font_size: float,
    align: str = "start",
    color: str,
    bold: bool = False,
    wrap: bool = False,
    drill_links: list[Link] | None = None,
) -> TextLabel:
    if wrap:
        lines = wrap_text(text, ctx.config.wrap_width, font_size, ctx.measurer) or [text]
    else:
        lines = [text]
    return TextLabel(
        role=role,
        text=text,
        anchor_x=x,
        anchor_y=y,
        font_size=font_size,
        horizontal_align=align,
        color=color,
        font_weight="bold" if bold else "normal",
        lines=lines,
        line_height=font_size * ctx.layout.line_height_em,
        drill_links=drill_links,
    )


def _last_baseline(label: TextLabel) -> float:
    return label.anchor_y + (len(label.lines) - 1) * label.line_height


@stage(
    id="G4.01",
    layer=Layer.LABELS,
    dependencies=["G3.05"],
    description="Range min/max labels beside the arms",
)
def range_labels(ctx: GaugeContext) -> None:
    cfg = ctx.config
    font = ctx.font_px(cfg.label_font)
    left = ctx.arm_bounds["left"]
    right = ctx.arm_bounds["right"]

    def baseline(bounds: tuple[float, float, float, float]) -> float:
        y = bounds[3] - cfg.range_y * font
        # Arms that reach below the center get their label under the tip
        if cfg.angle > 90:
            y += font
        return y

    ctx.add(
        _text(
            ctx,
            role="range-min",
            text=ctx.formatter(cfg.range_formatting, cfg.range_min),
            x=left[0] - cfg.range_x * font,
            y=baseline(left),
            font_size=font,
            color=cfg.range_color,
            bold=True,
        ),
        _text(
            ctx,
            role="range-max",
            text=ctx.formatter(cfg.range_formatting, cfg.range_max),
            x=right[2] + (cfg.range_x - 1) * font,
            y=baseline(right),
            font_size=font,
            color=cfg.range_color,
            bold=True,
        ),
    )


@stage(
    id="G4.02",
    layer=Layer.LABELS,
    dependencies=["G4.01"],
    description="Target label on the side of the gauge the target falls on",
)
def target_label(ctx: GaugeContext) -> None:
    if not ctx.target.present:
        return
    cfg = ctx.config
    text = compose_target_text(cfg.target_label_type, ctx.target)
    if not text:
        return

    font = ctx.font_px(cfg.target_label_font)
    x, y = polar_point(ctx.radius * cfg.target_label_padding, ctx.target_angle)
    ctx.add(
        _text(
            ctx,
            role="target-label",
            text=text,
            x=x,
            y=y + ctx.layout.target_label_drop_em * font,
            font_size=font,
            align="start" if ctx.target_proportion >= 0.5 else "end",
            color=ctx.layout.primary_text_color,
            wrap=True,
        )
    )


@stage(
    id="G4.03",
    layer=Layer.LABELS,
    dependencies=["G4.02"],
    description="Center value block",
)
def center_labels(ctx: GaugeContext) -> None:
    cfg = ctx.config
    layout = ctx.layout
    point = ctx.data_point
    primary_field, secondary_field = _CENTER_SLOTS[cfg.value_label_type]

    top = ctx.radius * (cfg.value_label_padding / 100)
    primary_font = ctx.font_px(cfg.value_label_font)
    secondary_font = primary_font * layout.secondary_font_ratio

    primary: TextLabel | None = None
    primary_text = getattr(point, primary_field) if primary_field else ""
    if primary_text:
        primary = _text(
            ctx,
            role="value",
            text=primary_text,
            x=0.0,
            y=top,
            font_size=primary_font,
            align="middle",
            color=layout.primary_text_color,
            wrap=True,
            drill_links=ctx.drill_links(),
        )
        ctx.add(primary)

    secondary_text = getattr(point, secondary_field) if secondary_field else ""
    if secondary_text:
        if primary is not None:
            y = _last_baseline(primary) + layout.secondary_gap_em * secondary_font
        else:
            y = top + layout.single_label_drop_em * secondary_font
        ctx.add(
            _text(
                ctx,
                role="value-label",
                text=secondary_text,
                x=0.0,
                y=y,
                font_size=secondary_font,
                align="middle",
                color=layout.secondary_text_color,
                wrap=True,
                drill_links=ctx.drill_links(),
            )
        )


@stage(
    id="G4.04",
    layer=Layer.LABELS,
    dependencies=["G4.03"],
    description="Chart title in viewport space",
)
def title(ctx: GaugeContext) -> None:
    text = ctx.config.chart_title
    if not text:
        ctx.title = None
        return
    layout = ctx.layout
    ctx.title = TextLabel(
        role="title",
        text=text,
        anchor_x=ctx.viewport.width / 2,
        anchor_y=layout.title_offset_y,
        font_size=layout.title_font_size,
        horizontal_align="middle",
        color=layout.primary_text_color,
        font_weight="bold",
        lines=[text],
        line_height=layout.title_font_size * layout.line_height_em,
    )
