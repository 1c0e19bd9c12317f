"""Drawable primitives emitted by the engine.

Angles are radians, 0 at 12 o'clock, clockwise positive, y grows downward.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from radial_gauge.models.gauge import Link


class Arc(BaseModel):
    """Annular sector. A zero sweep (start == end) draws a radial line."""

    kind: Literal["arc"] = "arc"
    role: str = ""
    inner_radius: float = 0.0
    outer_radius: float = 0.0
    start_angle: float = 0.0
    end_angle: float = 0.0
    fill_color: str | None = None
    stroke_color: str | None = None
    stroke_width: float = 0.0
    dash_array: tuple[float, float] | None = None
    drill_links: list[Link] | None = None

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle


class Polyline(BaseModel):
    kind: Literal["polyline"] = "polyline"
    role: str = ""
    points: list[tuple[float, float]] = Field(default_factory=list)
    closed: bool = False
    fill_color: str | None = None
    stroke_color: str | None = None
    stroke_width: float = 0.0
    drill_links: list[Link] | None = None


class TextLabel(BaseModel):
    """Anchored text. ``anchor_y`` is the baseline of the first line."""

    kind: Literal["text"] = "text"
    role: str = ""
    text: str = ""
    anchor_x: float = 0.0
    anchor_y: float = 0.0
    font_size: float = 12.0
    horizontal_align: Literal["start", "middle", "end"] = "start"
    color: str = "#282828"
    font_weight: Literal["normal", "bold"] = "normal"
    lines: list[str] = Field(default_factory=list)
    line_height: float = 0.0
    drill_links: list[Link] | None = None


Primitive = Annotated[Union[Arc, Polyline, TextLabel], Field(discriminator="kind")]
