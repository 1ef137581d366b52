"""InfluxDB v2 line-protocol writer.

Sends one line-protocol string per request to the ``/api/v2/write`` endpoint
using a caller-supplied ``httpx.Client``.  The client's lifecycle, pooling and
timeout belong to the caller; see :func:`influx2lp.config.new_client`.

Each call makes exactly one attempt.  Failures are raised as the exceptions in
:mod:`influx2lp.errors` and are never retried or logged here.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

import httpx

from influx2lp.config import Config
from influx2lp.errors import (
    ConfigurationError,
    RequestConstructionError,
    TransportError,
    UnexpectedStatusError,
)
from influx2lp.lineprotocol import format_metric
from influx2lp.models import LPMetric

logger = logging.getLogger(__name__)

EXPECTED_STATUS = 204


class WriteResult(NamedTuple):
    status_code: int
    body: str


def build_uri(config: Config) -> str:
    """Return the write URI for *config*.

    Values are concatenated as-is; org or bucket names containing reserved
    URI characters will produce a broken URI.
    """
    return f"{config.host}{config.path}?&org={config.org}&bucket={config.bucket}"


def build_headers(config: Config) -> dict[str, str]:
    headers = {
        "Authorization": f"Token {config.token}",
        "Content-Type": "text/plain; charset=utf-8",
        "Accept": "application/json",
    }
    if config.user_agent:
        headers["User-Agent"] = config.user_agent
    return headers


def write_lp(client: httpx.Client, config: Config, metric: LPMetric) -> WriteResult:
    """Format *metric* and write it to InfluxDB.

    Raises:
        ConfigurationError: bucket or org is not configured (bucket is
            checked first).  No request is sent.
        RequestConstructionError, TransportError, UnexpectedStatusError:
            see :func:`write_lp_string`.
    """
    if not config.bucket:
        raise ConfigurationError("no bucket configured")
    if not config.org:
        raise ConfigurationError("no org configured")
    return write_lp_string(client, config, format_metric(metric))


def write_lp_string(client: httpx.Client, config: Config, line: str) -> WriteResult:
    """Write an already formatted line-protocol string to InfluxDB.

    Bucket and org are not validated; they are embedded in the URI whatever
    their value.

    Returns:
        ``WriteResult(204, "")`` on success.

    Raises:
        RequestConstructionError: the URI is malformed or lacks an
            ``http``/``https`` scheme, or a header value (token, user
            agent) is not ASCII.  No request is sent.
        TransportError: the server could not be reached (status 0).
        UnexpectedStatusError: the server replied with anything but 204;
            carries the status code and the full response body.
    """
    uri = build_uri(config)
    try:
        request = client.build_request(
            "POST",
            uri,
            content=line.encode("utf-8"),
            headers=build_headers(config),
        )
    except httpx.InvalidURL as exc:
        raise RequestConstructionError(f"invalid write URI {uri!r}: {exc}") from exc
    except UnicodeEncodeError as exc:
        # header values must be ASCII
        raise RequestConstructionError(f"invalid request header: {exc}") from exc
    if request.url.scheme not in ("http", "https"):
        raise RequestConstructionError(
            f"write URI {uri!r} is missing an 'http://' or 'https://' scheme"
        )

    logger.debug("POST %s (%d bytes)", request.url, len(request.content))
    try:
        resp = client.send(request)
    except httpx.TransportError as exc:
        raise TransportError(f"failed to write to {uri!r}: {exc}") from exc

    if resp.status_code != EXPECTED_STATUS:
        raise UnexpectedStatusError(
            resp.status_code, resp.text, uri, expected=EXPECTED_STATUS
        )

    logger.debug("Wrote line to %s (HTTP %d)", request.url, resp.status_code)
    return WriteResult(resp.status_code, "")
