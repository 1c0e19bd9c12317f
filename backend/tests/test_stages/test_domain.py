"""Tests for domain mapping and dimensions (G2.01 / G2.02)."""

import math

import pytest

from radial_gauge.engine.stages.g2_domain import (
    angle_for_proportion,
    angle_of,
    clamp,
    proportion_of,
    spinner_length,
)
from radial_gauge.models.gauge import DataPoint


def test_three_quarters_of_a_half_circle():
    # [0, 100], span 180, value 75 -> fill from -180 deg to +90 deg
    assert angle_of(75, (0, 100), 180) == pytest.approx(math.radians(90))
    assert angle_for_proportion(0, 180) == pytest.approx(-math.pi)


@pytest.mark.parametrize(
    "value, expected",
    [(-10, 0.0), (0, 0.0), (50, 0.5), (100, 1.0), (150, 1.0), (float("nan"), 0.0)],
)
def test_proportion_is_clamped(value, expected):
    assert proportion_of(value, (0, 100)) == pytest.approx(expected)


@pytest.mark.parametrize("value_range", [(50, 50), (100, 0)])
def test_degenerate_range_pins_to_lower_bound(value_range):
    assert proportion_of(70, value_range) == 0.0
    assert angle_of(70, value_range, 120) == pytest.approx(math.radians(-120))


def test_clamp():
    assert clamp(5, (0, 10)) == 5
    assert clamp(-5, (0, 10)) == 0
    assert clamp(15, (10, 0)) == 10
    assert clamp(float("nan"), (2, 10)) == 2


def test_spinner_length_never_shorter_than_cutout():
    assert spinner_length(120, 100, 60) == pytest.approx(80)
    assert spinner_length(120, 50, 60) == pytest.approx(60)


def test_dimensions_follow_viewport(run_gauge):
    ctx = run_gauge({"cutout": 25, "arm": 20, "spinner": 150})
    assert ctx.radius == pytest.approx(120)
    assert ctx.cutout_radius == pytest.approx(30)
    assert ctx.arm_length == pytest.approx(140)
    assert ctx.spinner_length == pytest.approx(120)


def test_negative_value_sweeps_nothing(run_gauge):
    ctx = run_gauge(data_point=DataPoint(value=-10))
    fill = ctx.primitives_with_role("fill")[0]
    assert fill.start_angle == pytest.approx(-math.pi)
    assert fill.sweep == pytest.approx(0)


def test_target_angle(run_gauge):
    ctx = run_gauge({"target_source": "hardcoded", "hardcoded_target_value": 25})
    assert ctx.target_proportion == pytest.approx(0.25)
    assert ctx.target_angle == pytest.approx(-math.pi / 2)
