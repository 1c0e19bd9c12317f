"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends

from radial_gauge.config import Settings, settings
from radial_gauge.utils.text import AverageWidthMeasurer, TextMeasurer


def get_settings():
    return settings


def get_text_measurer(settings: Settings = Depends(get_settings)) -> TextMeasurer:
    return AverageWidthMeasurer(
        char_width_ratio=settings.text_char_width_ratio,
        height_ratio=settings.text_height_ratio,
    )
