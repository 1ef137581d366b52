"""Write configuration, loaded from keyword arguments or environment variables."""

from __future__ import annotations

import socket

import httpx
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PATH = "/api/v2/write"
DEFAULT_TIMEOUT = 3.0
UNKNOWN_HOST_USER_AGENT = "influx2lp-unknown-host"


def default_user_agent() -> str:
    """Return ``influx2lp-<hostname>``, or a fixed fallback if the lookup fails."""
    try:
        hostname = socket.gethostname()
    except OSError:
        return UNKNOWN_HOST_USER_AGENT
    if not hostname:
        return UNKNOWN_HOST_USER_AGENT
    return f"influx2lp-{hostname}"


class Config(BaseSettings):
    """Routing and auth settings for a single write.

    Environment variables use the ``INFLUX_`` prefix (``INFLUX_HOST``,
    ``INFLUX_BUCKET``, ...).  The writer only reads these values.
    """

    model_config = SettingsConfigDict(
        env_prefix="INFLUX_", env_file=".env", extra="ignore"
    )

    # ── Endpoint ──────────────────────────────────────────────────────────────
    host: str = ""
    path: str = DEFAULT_PATH

    # ── Routing ───────────────────────────────────────────────────────────────
    org: str = ""
    bucket: str = ""

    # ── Auth / client identity ────────────────────────────────────────────────
    token: str = ""
    # Empty string suppresses the User-Agent header entirely.
    user_agent: str = Field(default_factory=default_user_agent)

    # Seconds; applied by new_client(), not enforced by the writer.
    timeout: float = DEFAULT_TIMEOUT


def new_config(**overrides: object) -> Config:
    """Build a fresh configuration with defaults applied.

    The default user agent is resolved on every call.
    """
    return Config(**overrides)  # type: ignore[arg-type]


def new_client(config: Config) -> httpx.Client:
    """Return an ``httpx.Client`` using *config*'s timeout.

    The caller owns the client and is responsible for closing it.
    """
    return httpx.Client(timeout=config.timeout)
