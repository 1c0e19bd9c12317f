"""Tests for SVG serialization of render descriptors."""

import math

import pytest

from radial_gauge.models.descriptor import RenderDescriptor, Transform, ViewBox
from radial_gauge.models.primitives import Arc, Polyline, TextLabel
from radial_gauge.svg.serializer import (
    arc_path,
    fmt,
    polyline_path,
    serialize_descriptor,
    serialize_primitive,
)


@pytest.mark.parametrize(
    "value, expected",
    [(1.5, "1.5"), (2.0, "2"), (1 / 3, "0.333"), (-0.0001, "0"), (-12.25, "-12.25"), (0.0, "0")],
)
def test_fmt(value, expected):
    assert fmt(value) == expected


def test_half_ring_path():
    arc = Arc(inner_radius=5, outer_radius=10, start_angle=-math.pi / 2, end_angle=math.pi / 2)
    assert arc_path(arc) == "M -10 0 A 10 10 0 0 1 10 0 L 5 0 A 5 5 0 0 0 -5 0 Z"


def test_large_sweep_sets_large_arc_flag():
    arc = Arc(inner_radius=5, outer_radius=10, start_angle=-math.pi, end_angle=math.pi / 2)
    assert " A 10 10 0 1 1 " in arc_path(arc)


def test_solid_sector_closes_on_center():
    arc = Arc(inner_radius=0, outer_radius=10, start_angle=0, end_angle=math.pi / 2)
    assert arc_path(arc).endswith("L 0 0 Z")


def test_zero_sweep_is_radial_line():
    arc = Arc(inner_radius=5, outer_radius=10, start_angle=0, end_angle=0)
    assert arc_path(arc) == "M 0 -5 L 0 -10"


def test_full_turn_draws_rings():
    solid = arc_path(Arc(outer_radius=4, start_angle=0, end_angle=2 * math.pi))
    assert solid.count(" A ") == 2
    ring = arc_path(Arc(inner_radius=2, outer_radius=4, start_angle=-math.pi, end_angle=math.pi))
    assert ring.count(" A ") == 4


def test_polyline_path():
    poly = Polyline(points=[(0, 0), (4, 0), (0, 3)], closed=True)
    assert polyline_path(poly) == "M 0 0 L 4 0 L 0 3 Z"
    assert polyline_path(Polyline()) == ""


def test_dashed_stroke():
    tick = Arc(role="target", outer_radius=10, stroke_color="#F00", stroke_width=0.5, dash_array=(5, 3))
    markup = serialize_primitive(tick)
    assert 'class="target"' in markup
    assert 'stroke-dasharray="5 3"' in markup
    assert 'stroke-width="0.5"' in markup
    assert 'fill="none"' in markup


def test_multiline_text_uses_tspans():
    label = TextLabel(text="a <b>", anchor_x=1, anchor_y=10, lines=["a", "<b>"], line_height=14)
    markup = serialize_primitive(label)
    assert markup.count("<tspan") == 2
    assert 'y="24"' in markup
    assert "&lt;b&gt;" in markup


def test_descriptor_document(run_gauge):
    ctx = run_gauge({"chart_title": "Sales & Ops"})
    svg = serialize_descriptor(ctx.descriptor())
    assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert '<svg viewBox="0 0 400 300"' in svg
    assert '<g transform="translate(' in svg
    assert svg.rstrip().endswith("</svg>")
    assert svg.count("<path") == sum(1 for p in ctx.primitives if not isinstance(p, TextLabel))
    # Title stays in viewport space
    assert svg.index("</g>") < svg.rindex("Sales &amp; Ops")
    assert "<title>Sales &amp; Ops</title>" in svg


def test_descriptor_transform_attribute():
    descriptor = RenderDescriptor(
        view_box=ViewBox(width=100, height=50),
        transform=Transform(scale=2, translate_x=50, translate_y=25),
    )
    svg = serialize_descriptor(descriptor)
    assert '<g transform="translate(50 25) scale(2)">' in svg
    assert "<title>" not in svg
