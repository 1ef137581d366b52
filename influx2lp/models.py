"""Pydantic models for the metric record and its typed field values."""

from __future__ import annotations

import time
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ── Field values ──────────────────────────────────────────────────────────────
# A field value is exactly one of four kinds.  The kind decides how the value
# is rendered on the wire, so it is fixed once when the metric is built.


class IntField(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["int"] = "int"
    value: int


class FloatField(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["float"] = "float"
    value: float


class StringField(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    value: str


class RawField(BaseModel):
    """Any other value; rendered with its generic textual form."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["raw"] = "raw"
    value: Any


FieldValue = Annotated[
    Union[IntField, FloatField, StringField, RawField],
    Field(discriminator="kind"),
]

_FIELD_TYPES = (IntField, FloatField, StringField, RawField)


def field_value(value: Any) -> IntField | FloatField | StringField | RawField:
    """Classify a plain Python value into its field kind.

    ``bool`` is a subclass of ``int`` but is not an integer field; it falls
    through to :class:`RawField`.  Values that are already classified are
    returned unchanged.
    """
    if isinstance(value, _FIELD_TYPES):
        return value
    if isinstance(value, bool):
        return RawField(value=value)
    if isinstance(value, int):
        return IntField(value=value)
    if isinstance(value, float):
        return FloatField(value=value)
    if isinstance(value, str):
        return StringField(value=value)
    return RawField(value=value)


# ── Metric record ─────────────────────────────────────────────────────────────


class LPMetric(BaseModel):
    """A single time-series point: measurement, tags, fields and timestamp."""

    measurement: str
    tags: dict[str, Any] = Field(default_factory=dict)
    fields: dict[str, FieldValue] = Field(default_factory=dict)
    timestamp: int = Field(
        default_factory=time.time_ns, description="Nanoseconds since the epoch"
    )

    @field_validator("fields", mode="before")
    @classmethod
    def _classify_fields(cls, value: Any) -> Any:
        if isinstance(value, dict):
            # serialized field kinds are left to the discriminated union
            return {
                k: v if isinstance(v, dict) and "kind" in v else field_value(v)
                for k, v in value.items()
            }
        return value

    def __str__(self) -> str:
        from influx2lp.lineprotocol import format_metric

        return format_metric(self)
