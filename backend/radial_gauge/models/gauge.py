"""Gauge input models: data point, query shape, viewport, resolved configuration."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class FillType(str, enum.Enum):
    PROGRESS = "progress"
    SEGMENT = "segment"
    PROGRESS_GRADIENT = "progress-gradient"


class SpinnerType(str, enum.Enum):
    AUTO = "auto"
    SPINNER = "spinner"
    NEEDLE = "needle"
    INNER = "inner"


class LabelMode(str, enum.Enum):
    VALUE = "value"
    LABEL = "label"
    DIM = "dim"
    BOTH = "both"
    DBOTH = "dboth"
    NOLABEL = "nolabel"


class TargetSource(str, enum.Enum):
    OFF = "off"
    MEASURE = "measure"
    HARDCODED = "hardcoded"


class Link(BaseModel):
    """A drill target attached to a data cell."""

    label: str = ""
    url: str = ""
    type: str = ""
    type_label: str = ""


class DataPoint(BaseModel):
    value: float = 0.0
    rendered_text: str = ""
    label: str = ""
    dimension_text: str = ""
    drill_links: list[Link] = Field(default_factory=list)


class QueryShape(BaseModel):
    dimension_count: int = Field(default=0, ge=0)
    measure_count: int = Field(default=1, ge=0)
    row_count: int = Field(default=1, ge=0)


class Viewport(BaseModel):
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)

    @property
    def vmin(self) -> float:
        """One percent of the smaller viewport side (CSS ``vmin``)."""
        return min(self.width, self.height) / 100


class TargetSpec(BaseModel):
    present: bool = False
    value: float = 0.0
    rendered_text: str = ""
    label: str = ""
    dimension_text: str = ""


class GaugeConfig(BaseModel):
    """Fully-resolved gauge configuration. Built by the normalizer stage."""

    # Gauge body
    background_color: str = "#E0E0E0"
    cutout: float = Field(default=50.0, ge=0, le=90)
    angle: float = Field(default=180.0, ge=90, le=270)
    arm: float = 10.0
    arm_weight: float = 2.0

    # Fill
    fill_type: FillType = FillType.PROGRESS
    fill_color: str = "#4285F4"
    fill_colors: list[str] = Field(
        default_factory=lambda: ["#EA4335", "#FBBC04", "#34A853"], min_length=1
    )

    # Range labels
    range_min: float = 0.0
    range_max: float = 100.0
    range_formatting: str = ""
    range_color: str = "#707070"
    range_x: float = 1.5
    range_y: float = 0.0
    label_font: float = 2.5

    # Spinner
    spinner_type: SpinnerType = SpinnerType.AUTO
    spinner: float = 100.0
    spinner_color: str = "#282828"
    spinner_weight: float = 5.0

    # Center label
    value_label_type: LabelMode = LabelMode.BOTH
    value_label_font: float = 5.0
    value_label_padding: float = 10.0

    # Target
    target_source: TargetSource = TargetSource.OFF
    hardcoded_target_value: float = 75.0
    target_label_type: LabelMode = LabelMode.BOTH
    target_color: str = "#FF0000"
    target_weight: float = 5.0
    target_length: float = 5.0
    target_gap: float = 5.0
    target_label_padding: float = 1.1
    target_label_font: float = 2.0

    # General
    chart_title: str = "Radial Gauge"
    wrap_width: float = 100.0

    @property
    def value_range(self) -> tuple[float, float]:
        return (self.range_min, self.range_max)
