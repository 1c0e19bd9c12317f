"""G0.01: Query shape validation.

The gauge draws exactly one data row: one primary measure, optionally a second
measure used as the target, and any number of dimensions.
"""

from __future__ import annotations

from radial_gauge.engine.context import GaugeContext
from radial_gauge.engine.registry import Layer, stage
from radial_gauge.models.descriptor import ValidationErrorKind, ValidationFailure
from radial_gauge.models.gauge import QueryShape

# Primary measure plus an optional target measure.
_MIN_MEASURES = 1
_MAX_MEASURES = 2

_MESSAGES: dict[ValidationErrorKind, str] = {
    ValidationErrorKind.NO_FIELDS_SELECTED: (
        "This visualization requires at least one dimension or measure."
    ),
    ValidationErrorKind.NO_DATA: "No data returned for this query.",
    ValidationErrorKind.TOO_MANY_ROWS: (
        "This Radial Gauge visualization is designed for a single item. Please ensure "
        "your query returns only one row of data (e.g., by filtering to a single "
        "dimension value)."
    ),
    ValidationErrorKind.TOO_MANY_OR_TOO_FEW_MEASURES: (
        "This visualization requires one measure, plus an optional second measure "
        "used as the target."
    ),
}


def _failure(kind: ValidationErrorKind) -> ValidationFailure:
    return ValidationFailure(error=kind, message=_MESSAGES[kind])


def validate_query_shape(shape: QueryShape) -> ValidationFailure | None:
    """Return the first problem with the query shape, or None when it can be drawn."""
    if shape.dimension_count == 0 and shape.measure_count == 0:
        return _failure(ValidationErrorKind.NO_FIELDS_SELECTED)
    if shape.row_count == 0:
        return _failure(ValidationErrorKind.NO_DATA)
    if shape.row_count > 1:
        return _failure(ValidationErrorKind.TOO_MANY_ROWS)
    if not _MIN_MEASURES <= shape.measure_count <= _MAX_MEASURES:
        return _failure(ValidationErrorKind.TOO_MANY_OR_TOO_FEW_MEASURES)
    return None


@stage(
    id="G0.01",
    layer=Layer.VALIDATION,
    description="Reject query shapes the gauge cannot draw",
)
def validate(ctx: GaugeContext) -> None:
    ctx.failure = validate_query_shape(ctx.query_shape)
