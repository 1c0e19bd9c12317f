"""Declarative option schema: raw option names, types, defaults and bounds."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from radial_gauge.models.gauge import FillType, LabelMode, SpinnerType, TargetSource


class OptionSpec(BaseModel):
    name: str  # Raw option key as the host sends it
    field: str  # GaugeConfig attribute it resolves to
    label: str = ""
    type: Literal["number", "string", "color", "colors", "select"]
    default: Any = None
    min: float | None = None
    max: float | None = None
    values: list[str] = Field(default_factory=list)


def _select(name: str, field: str, label: str, enum_cls: type, default: Any) -> OptionSpec:
    return OptionSpec(
        name=name,
        field=field,
        label=label,
        type="select",
        default=default.value,
        values=[member.value for member in enum_cls],
    )


GAUGE_OPTIONS: list[OptionSpec] = [
    # Gauge appearance
    OptionSpec(name="gauge_background", field="background_color", label="Gauge Background Color", type="color", default="#E0E0E0"),
    OptionSpec(name="cutout", field="cutout", label="Inner Cutout (%)", type="number", default=50, min=0, max=90),
    OptionSpec(name="angle", field="angle", label="Gauge Angle (Degrees)", type="number", default=180, min=90, max=270),
    OptionSpec(name="arm", field="arm", label="Arm Extension (px)", type="number", default=10, min=0, max=50),
    OptionSpec(name="arm_weight", field="arm_weight", label="Arm Weight (px)", type="number", default=2, min=1, max=10),
    # Fill
    _select("gauge_fill_type", "fill_type", "Fill Type", FillType, FillType.PROGRESS),
    OptionSpec(name="color", field="fill_color", label="Progress Fill Color", type="color", default="#4285F4"),
    OptionSpec(name="fill_colors", field="fill_colors", label="Segment/Gradient Colors", type="colors", default=["#EA4335", "#FBBC04", "#34A853"]),
    # Range labels
    OptionSpec(name="range_min", field="range_min", label="Range Min Value", type="number", default=0),
    OptionSpec(name="range_max", field="range_max", label="Range Max Value", type="number", default=100),
    OptionSpec(name="range_formatting", field="range_formatting", label="Range Value Format", type="string", default=""),
    OptionSpec(name="range_color", field="range_color", label="Range Label Color", type="color", default="#707070"),
    OptionSpec(name="range_x", field="range_x", label="Range Label X Offset (em)", type="number", default=1.5, min=-5, max=5),
    OptionSpec(name="range_y", field="range_y", label="Range Label Y Offset (em)", type="number", default=0, min=-5, max=5),
    OptionSpec(name="label_font", field="label_font", label="Range Label Font Size (vmin)", type="number", default=2.5, min=1, max=5),
    # Spinner
    _select("spinner_type", "spinner_type", "Spinner Type", SpinnerType, SpinnerType.AUTO),
    OptionSpec(name="spinner", field="spinner", label="Spinner Length Multiplier", type="number", default=100, min=50, max=200),
    OptionSpec(name="spinner_background", field="spinner_color", label="Spinner Color", type="color", default="#282828"),
    OptionSpec(name="spinner_weight", field="spinner_weight", label="Spinner Weight (px)", type="number", default=5, min=1, max=20),
    # Center label
    _select("value_label_type", "value_label_type", "Center Label Type", LabelMode, LabelMode.BOTH),
    OptionSpec(name="value_label_font", field="value_label_font", label="Center Label Font Size (vmin)", type="number", default=5, min=2, max=10),
    OptionSpec(name="value_label_padding", field="value_label_padding", label="Center Label Padding (%)", type="number", default=10, min=0, max=50),
    # Target
    _select("target_source", "target_source", "Target Source", TargetSource, TargetSource.OFF),
    OptionSpec(name="hardcoded_target_value", field="hardcoded_target_value", label="Hardcoded Target Value", type="number", default=75),
    _select("target_label_type", "target_label_type", "Target Label Type", LabelMode, LabelMode.BOTH),
    OptionSpec(name="target_background", field="target_color", label="Target Line Color", type="color", default="#FF0000"),
    OptionSpec(name="target_weight", field="target_weight", label="Target Line Weight (px)", type="number", default=5, min=1, max=10),
    OptionSpec(name="target_length", field="target_length", label="Target Dash Length (px)", type="number", default=5, min=1, max=20),
    OptionSpec(name="target_gap", field="target_gap", label="Target Dash Gap (px)", type="number", default=5, min=1, max=20),
    OptionSpec(name="target_label_padding", field="target_label_padding", label="Target Label Padding (x radius)", type="number", default=1.1, min=0.5, max=2.0),
    OptionSpec(name="target_label_font", field="target_label_font", label="Target Label Font Size (vmin)", type="number", default=2, min=1, max=4),
    # General
    OptionSpec(name="chart_title", field="chart_title", label="Chart Title", type="string", default="Radial Gauge"),
    OptionSpec(name="wrap_width", field="wrap_width", label="Text Wrap Width (px)", type="number", default=100, min=50, max=300),
]

OPTIONS_BY_NAME: dict[str, OptionSpec] = {spec.name: spec for spec in GAUGE_OPTIONS}
