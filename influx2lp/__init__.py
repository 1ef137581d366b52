"""Format metrics as InfluxDB line protocol and write them over HTTP."""

from influx2lp.config import Config, default_user_agent, new_client, new_config
from influx2lp.errors import (
    ConfigurationError,
    Influx2LPError,
    RequestConstructionError,
    TransportError,
    UnexpectedStatusError,
)
from influx2lp.lineprotocol import format_field_value, format_metric
from influx2lp.models import (
    FloatField,
    IntField,
    LPMetric,
    RawField,
    StringField,
    field_value,
)
from influx2lp.writer import WriteResult, write_lp, write_lp_string

__all__ = [
    "Config",
    "ConfigurationError",
    "FloatField",
    "Influx2LPError",
    "IntField",
    "LPMetric",
    "RawField",
    "RequestConstructionError",
    "StringField",
    "TransportError",
    "UnexpectedStatusError",
    "WriteResult",
    "default_user_agent",
    "field_value",
    "format_field_value",
    "format_metric",
    "new_client",
    "new_config",
    "write_lp",
    "write_lp_string",
]
