"""Layout constants: the fixed proportions of the gauge drawing."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class LayoutConfig:
    """Controls the proportions the stages draw with. Options never override these."""

    # Gauge radius as a share of the smaller viewport side
    radius_ratio: float = 0.4

    # Fitted composition fills at most this share of each viewport side
    fit_margin: float = 0.9

    # Arms start just inside the cutout so they overlap the gauge edge
    arm_inner_ratio: float = 0.97
    arm_stroke_divisor: float = 5.0

    fill_stroke_width: float = 1.0

    # Spinner length = radius * (multiplier / divisor)
    spinner_length_divisor: float = 150.0
    spinner_stroke_divisor: float = 10.0
    needle_base_ratio: float = 0.10
    auto_needle_base_ratio: float = 0.15
    needle_base_offset: float = 55 * math.pi / 60
    # Auto spinner hub: hollow ring, radius = weight / divisor
    auto_core_divisor: float = 2.0
    auto_core_fill: str = "#FFF"
    auto_core_ring_width: float = 2.0

    target_stroke_divisor: float = 10.0

    # Text (em units relative to each label's own font size)
    line_height_em: float = 1.4
    secondary_font_ratio: float = 0.55
    secondary_gap_em: float = 1.2
    single_label_drop_em: float = 1.0
    target_label_drop_em: float = 0.35
    primary_text_color: str = "#282828"
    secondary_text_color: str = "#707070"

    # Title sits in viewport space, outside the fitted group
    title_offset_y: float = 20.0
    title_font_size: float = 16.0
