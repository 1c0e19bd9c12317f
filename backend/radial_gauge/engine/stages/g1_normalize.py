"""G1.01 / G1.02: Option normalization and target resolution.

Raw options come straight from the host's option panel. Anything missing,
mistyped, out of bounds or outside its enumeration is replaced by the declared
default; decorative options never stop the gauge from drawing.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Mapping

from radial_gauge.engine.context import GaugeContext
from radial_gauge.engine.registry import Layer, stage
from radial_gauge.models.gauge import DataPoint, GaugeConfig, QueryShape, TargetSource, TargetSpec
from radial_gauge.models.options import GAUGE_OPTIONS, OPTIONS_BY_NAME, OptionSpec
from radial_gauge.utils.text import NumberFormatter, format_number

logger = logging.getLogger(__name__)

# Older hosts send the measure-backed target as "measure2".
_SELECT_ALIASES = {"measure2": TargetSource.MEASURE.value}

HARDCODED_TARGET_LABEL = "Target"


def _fallback(spec: OptionSpec, raw: Any) -> Any:
    if raw is not None:
        logger.debug("Option %s=%r rejected; using default %r", spec.name, raw, spec.default)
    if isinstance(spec.default, list):
        return list(spec.default)
    return spec.default


def _resolve_number(spec: OptionSpec, raw: Any) -> Any:
    if isinstance(raw, bool):
        return _fallback(spec, raw)
    if isinstance(raw, str):
        try:
            raw = float(raw)
        except ValueError:
            return _fallback(spec, raw)
    if not isinstance(raw, (int, float)) or not math.isfinite(raw):
        return _fallback(spec, raw)
    value = float(raw)
    if spec.min is not None and value < spec.min:
        return _fallback(spec, raw)
    if spec.max is not None and value > spec.max:
        return _fallback(spec, raw)
    return value


def _resolve_color(spec: OptionSpec, raw: Any) -> Any:
    # Color pickers hand over a one-element array
    if isinstance(raw, (list, tuple)):
        raw = raw[0] if raw else None
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return _fallback(spec, raw)


def _resolve_colors(spec: OptionSpec, raw: Any) -> Any:
    if isinstance(raw, str):
        raw = [raw]
    if isinstance(raw, (list, tuple)):
        colors = [c.strip() for c in raw if isinstance(c, str) and c.strip()]
        if colors:
            return colors
    return _fallback(spec, raw)


def _resolve_string(spec: OptionSpec, raw: Any) -> Any:
    if isinstance(raw, str):
        return raw
    return _fallback(spec, raw)


def _resolve_select(spec: OptionSpec, raw: Any) -> Any:
    if isinstance(raw, str):
        value = _SELECT_ALIASES.get(raw, raw)
        if value in spec.values:
            return value
    return _fallback(spec, raw)


_RESOLVERS: dict[str, Callable[[OptionSpec, Any], Any]] = {
    "number": _resolve_number,
    "color": _resolve_color,
    "colors": _resolve_colors,
    "string": _resolve_string,
    "select": _resolve_select,
}


def normalize_config(raw: Mapping[str, Any]) -> GaugeConfig:
    """Resolve a raw option bag into a complete GaugeConfig. Never raises."""
    resolved: dict[str, Any] = {}
    for spec in GAUGE_OPTIONS:
        if spec.name in raw:
            resolved[spec.field] = _RESOLVERS[spec.type](spec, raw[spec.name])
        else:
            resolved[spec.field] = _fallback(spec, None)

    unknown = sorted(set(raw) - set(OPTIONS_BY_NAME))
    if unknown:
        logger.debug("Ignoring unknown options: %s", ", ".join(unknown))
    return GaugeConfig(**resolved)


def resolve_target(
    config: GaugeConfig,
    data_point: DataPoint,
    target_point: DataPoint | None,
    query_shape: QueryShape,
    formatter: NumberFormatter = format_number,
) -> TargetSpec:
    """Work out the target marker from the configured source."""
    if config.target_source == TargetSource.MEASURE:
        if target_point is None or query_shape.measure_count < 2:
            return TargetSpec()
        return TargetSpec(
            present=True,
            value=target_point.value,
            rendered_text=target_point.rendered_text or formatter("", target_point.value),
            label=target_point.label,
            dimension_text=target_point.dimension_text or data_point.dimension_text,
        )

    if config.target_source == TargetSource.HARDCODED:
        value = config.hardcoded_target_value
        return TargetSpec(
            present=True,
            value=value,
            rendered_text=formatter(config.range_formatting, value),
            label=HARDCODED_TARGET_LABEL,
            dimension_text="",
        )

    return TargetSpec()


@stage(
    id="G1.01",
    layer=Layer.NORMALIZATION,
    dependencies=["G0.01"],
    description="Resolve raw options into a complete configuration",
)
def normalize(ctx: GaugeContext) -> None:
    ctx.config = normalize_config(ctx.raw_config)


@stage(
    id="G1.02",
    layer=Layer.NORMALIZATION,
    dependencies=["G1.01"],
    description="Resolve the target marker from its source",
)
def target(ctx: GaugeContext) -> None:
    ctx.target = resolve_target(
        ctx.config,
        ctx.data_point,
        ctx.target_point,
        ctx.query_shape,
        ctx.formatter,
    )
