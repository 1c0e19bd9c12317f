"""Serialize a RenderDescriptor into an SVG document."""

from __future__ import annotations

import math
from typing import Any
from xml.sax.saxutils import escape, quoteattr

from radial_gauge.models.descriptor import RenderDescriptor
from radial_gauge.models.primitives import Arc, Polyline, TextLabel
from radial_gauge.utils.geometry import polar_point

_FULL_TURN = 2 * math.pi


def fmt(value: float) -> str:
    """Compact number: three decimals at most, no trailing zeros, never ``-0``."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _pt(x: float, y: float) -> str:
    return f"{fmt(x)} {fmt(y)}"


def _ring_path(radius: float, reverse: bool) -> str:
    # Two half arcs; a single SVG arc cannot close on itself.
    sweep = 0 if reverse else 1
    r = fmt(radius)
    top = _pt(0.0, -radius)
    bottom = _pt(0.0, radius)
    return f"M {top} A {r} {r} 0 1 {sweep} {bottom} A {r} {r} 0 1 {sweep} {top} Z"


def arc_path(arc: Arc) -> str:
    """Path data for an annular sector; a zero sweep yields a radial line."""
    inner, outer = arc.inner_radius, arc.outer_radius
    start, end = arc.start_angle, arc.end_angle
    sweep = end - start

    if sweep == 0:
        return f"M {_pt(*polar_point(inner, start))} L {_pt(*polar_point(outer, start))}"

    if abs(sweep) >= _FULL_TURN:
        d = _ring_path(outer, reverse=False)
        if inner > 0:
            d += " " + _ring_path(inner, reverse=True)
        return d

    large = 1 if abs(sweep) > math.pi else 0
    clockwise = 1 if sweep > 0 else 0
    ro = fmt(outer)
    parts = [
        f"M {_pt(*polar_point(outer, start))}",
        f"A {ro} {ro} 0 {large} {clockwise} {_pt(*polar_point(outer, end))}",
    ]
    if inner > 0:
        ri = fmt(inner)
        parts.append(f"L {_pt(*polar_point(inner, end))}")
        parts.append(f"A {ri} {ri} 0 {large} {1 - clockwise} {_pt(*polar_point(inner, start))}")
    else:
        parts.append("L 0 0")
    parts.append("Z")
    return " ".join(parts)


def polyline_path(polyline: Polyline) -> str:
    if not polyline.points:
        return ""
    head, *rest = polyline.points
    d = " ".join([f"M {_pt(*head)}", *(f"L {_pt(*p)}" for p in rest)])
    return d + " Z" if polyline.closed else d


def _attrs(attrs: dict[str, Any]) -> str:
    return " ".join(f"{k}={quoteattr(str(v))}" for k, v in attrs.items() if v is not None)


def _paint(primitive: Arc | Polyline) -> dict[str, Any]:
    attrs: dict[str, Any] = {
        "class": primitive.role or None,
        "fill": primitive.fill_color or "none",
    }
    if primitive.stroke_color and primitive.stroke_width > 0:
        attrs["stroke"] = primitive.stroke_color
        attrs["stroke-width"] = fmt(primitive.stroke_width)
    if isinstance(primitive, Arc) and primitive.dash_array:
        attrs["stroke-dasharray"] = " ".join(fmt(v) for v in primitive.dash_array)
    return attrs


def _text_element(label: TextLabel, indent: str) -> str:
    attrs = _attrs(
        {
            "class": label.role or None,
            "x": fmt(label.anchor_x),
            "y": fmt(label.anchor_y),
            "font-size": fmt(label.font_size),
            "font-weight": label.font_weight,
            "text-anchor": label.horizontal_align,
            "fill": label.color,
        }
    )
    lines = label.lines or [label.text]
    if len(lines) == 1:
        return f"{indent}<text {attrs}>{escape(lines[0])}</text>"

    spans = [
        f'<tspan x="{fmt(label.anchor_x)}" y="{fmt(label.anchor_y + i * label.line_height)}">'
        f"{escape(line)}</tspan>"
        for i, line in enumerate(lines)
    ]
    return f"{indent}<text {attrs}>{''.join(spans)}</text>"


def serialize_primitive(primitive: Arc | Polyline | TextLabel, indent: str = "    ") -> str:
    if isinstance(primitive, TextLabel):
        return _text_element(primitive, indent)
    d = arc_path(primitive) if isinstance(primitive, Arc) else polyline_path(primitive)
    return f"{indent}<path {_attrs({'d': d, **_paint(primitive)})} />"


def serialize_descriptor(descriptor: RenderDescriptor) -> str:
    """Generate SVG markup for a render descriptor."""
    vb = descriptor.view_box
    t = descriptor.transform
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="{fmt(vb.x)} {fmt(vb.y)} {fmt(vb.width)} {fmt(vb.height)}"'
        f' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]
    if descriptor.title is not None:
        lines.append(f"  <title>{escape(descriptor.title.text)}</title>")

    lines.append(
        f'  <g transform="translate({fmt(t.translate_x)} {fmt(t.translate_y)})'
        f' scale({fmt(t.scale)})">'
    )
    for primitive in descriptor.primitives:
        lines.append(serialize_primitive(primitive))
    lines.append("  </g>")

    # Title is laid out in viewport space, outside the fitted group
    if descriptor.title is not None:
        lines.append(serialize_primitive(descriptor.title, indent="  "))

    lines.append("</svg>")
    return "\n".join(lines)
