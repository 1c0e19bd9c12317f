"""GaugeContext: the single mutable state object flowing through all stages.

Built fresh for every render call and dropped once the descriptor is taken
out, so nothing survives between updates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from radial_gauge.engine.config import LayoutConfig
from radial_gauge.models.descriptor import (
    RenderDescriptor,
    Transform,
    ValidationFailure,
    ViewBox,
)
from radial_gauge.models.gauge import DataPoint, GaugeConfig, Link, QueryShape, TargetSpec, Viewport
from radial_gauge.models.primitives import Arc, Polyline, TextLabel
from radial_gauge.utils.text import AverageWidthMeasurer, NumberFormatter, TextMeasurer, format_number


@dataclass
class GaugeContext:
    """Shared state flowing through the entire pipeline."""

    # --- Inputs (read-only for stages) ---
    data_point: DataPoint
    viewport: Viewport
    raw_config: Mapping[str, Any] = field(default_factory=dict)
    query_shape: QueryShape = field(default_factory=QueryShape)
    # Second measure cell, used when the target comes from a measure
    target_point: DataPoint | None = None
    measurer: TextMeasurer = field(default_factory=AverageWidthMeasurer)
    formatter: NumberFormatter = format_number
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    # --- Validation ---
    failure: ValidationFailure | None = None

    # --- Normalization ---
    config: GaugeConfig = field(default_factory=GaugeConfig)
    target: TargetSpec = field(default_factory=TargetSpec)

    # --- Domain mapping (angles in radians) ---
    value: float = 0.0
    proportion: float = 0.0
    value_angle: float = 0.0
    span_angle: float = 0.0
    target_proportion: float = 0.0
    target_angle: float = 0.0

    # --- Sizes ---
    radius: float = 0.0
    cutout_radius: float = 0.0
    arm_length: float = 0.0
    spinner_length: float = 0.0

    # --- Output ---
    primitives: list[Arc | Polyline | TextLabel] = field(default_factory=list)
    # (xmin, ymin, xmax, ymax) of each arm, keyed "left"/"right"
    arm_bounds: dict[str, tuple[float, float, float, float]] = field(default_factory=dict)
    title: TextLabel | None = None
    bounds: tuple[float, float, float, float] | None = None
    transform: Transform = field(default_factory=Transform)
    view_box: ViewBox = field(default_factory=ViewBox)

    # --- Pipeline metadata ---
    completed_stages: set[str] = field(default_factory=set)

    @property
    def halted(self) -> bool:
        return self.failure is not None

    def add(self, *primitives: Arc | Polyline | TextLabel) -> None:
        """Append in paint order."""
        self.primitives.extend(primitives)

    def font_px(self, size: float) -> float:
        """Resolve a viewport-relative (vmin %) font size to drawing units."""
        return size * self.viewport.vmin

    def drill_links(self) -> list[Link]:
        """Per-primitive copies of the data point's links."""
        return [link.model_copy() for link in self.data_point.drill_links]

    def primitives_with_role(self, role: str) -> list[Arc | Polyline | TextLabel]:
        return [p for p in self.primitives if p.role == role]

    def descriptor(self) -> RenderDescriptor:
        return RenderDescriptor(
            primitives=list(self.primitives),
            view_box=self.view_box,
            transform=self.transform,
            title=self.title,
        )
