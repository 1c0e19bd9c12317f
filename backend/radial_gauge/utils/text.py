"""Text measurement, wrapping and number formatting. No engine imports.

Font metrics belong to whatever surface finally draws the text, so the engine
only talks to a ``TextMeasurer``. ``AverageWidthMeasurer`` is the deterministic
fallback used when the caller has nothing better.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, NamedTuple, Protocol

from radial_gauge.models.primitives import TextLabel

logger = logging.getLogger(__name__)

# Share of the line box above the baseline.
_ASCENT_RATIO = 0.8

NumberFormatter = Callable[[str, float], str]


class TextExtent(NamedTuple):
    width: float
    height: float


class TextMeasurer(Protocol):
    def measure(self, text: str, font_size: float) -> TextExtent: ...


@dataclass(frozen=True)
class AverageWidthMeasurer:
    """Every glyph is ``char_width_ratio`` em wide, lines are ``height_ratio`` em tall."""

    char_width_ratio: float = 0.6
    height_ratio: float = 1.0

    def measure(self, text: str, font_size: float) -> TextExtent:
        return TextExtent(
            width=len(text) * font_size * self.char_width_ratio,
            height=font_size * self.height_ratio,
        )


def wrap_text(text: str, width: float, font_size: float, measurer: TextMeasurer) -> list[str]:
    """Greedy word wrap.

    Words accumulate on the current line until appending the next one would
    exceed ``width``; that word then opens a new line. A single word wider than
    ``width`` still gets a line of its own.
    """
    lines: list[str] = []
    current: list[str] = []
    for word in text.split():
        candidate = " ".join([*current, word])
        if current and measurer.measure(candidate, font_size).width > width:
            lines.append(" ".join(current))
            current = [word]
        else:
            current.append(word)
    if current:
        lines.append(" ".join(current))
    return lines


def text_bounds(
    label: TextLabel, measurer: TextMeasurer
) -> tuple[float, float, float, float]:
    """(xmin, ymin, xmax, ymax) of a label from measured line extents."""
    lines = label.lines or [label.text]
    extents = [measurer.measure(line, label.font_size) for line in lines]
    width = max(e.width for e in extents)
    height = max(e.height for e in extents)

    if label.horizontal_align == "middle":
        xmin = label.anchor_x - width / 2
    elif label.horizontal_align == "end":
        xmin = label.anchor_x - width
    else:
        xmin = label.anchor_x

    last_baseline = label.anchor_y + (len(lines) - 1) * label.line_height
    ymin = label.anchor_y - height * _ASCENT_RATIO
    ymax = last_baseline + height * (1 - _ASCENT_RATIO)
    return (xmin, ymin, xmin + width, ymax)


def plain_number(value: float) -> str:
    """Shortest faithful text for a number; integral values drop the ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(value)


def format_number(fmt: str, value: float) -> str:
    """Format with a Python format spec such as ``",.2f"``; blank means plain."""
    if not fmt:
        return plain_number(value)
    try:
        return format(value, fmt)
    except (ValueError, TypeError):
        logger.debug("Unusable number format %r; falling back to plain text", fmt)
        return plain_number(value)
