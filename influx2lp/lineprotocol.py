"""InfluxDB line-protocol formatting.

    measurement[,tag=value...] [field=value[,field=value...]] timestamp

Measurement names, tag keys and tag values are emitted verbatim; the caller
is responsible for using characters that are valid in line protocol.
"""

from __future__ import annotations

import math
from typing import Any

from influx2lp.models import FieldValue, LPMetric


def _render_float(value: float) -> str:
    # same spelling as Go's %f for the non-finite values
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:f}"


def _render_raw(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_field_value(field: FieldValue) -> str:
    """Render one field value according to its kind."""
    if field.kind == "int":
        # the trailing "i" marks an integer on the wire
        return f"{field.value}i"
    if field.kind == "float":
        # fixed point, never scientific notation
        return _render_float(field.value)
    if field.kind == "string":
        # NOTE: embedded quotes and backslashes are not escaped
        return f'"{field.value}"'
    return _render_raw(field.value)


def format_metric(metric: LPMetric) -> str:
    """Build the line-protocol string for *metric*.

    Tags are emitted in the order they were added; fields are sorted by key.
    The function never fails: an empty measurement or an empty field set
    still yields a (syntactically odd) line.
    """
    line = metric.measurement
    for key, value in metric.tags.items():
        line += f",{key}={_render_raw(value)}"

    if metric.fields:
        field_str = ",".join(
            f"{key}={format_field_value(metric.fields[key])}"
            for key in sorted(metric.fields)
        )
        line += f" {field_str}"

    return f"{line} {metric.timestamp}"
