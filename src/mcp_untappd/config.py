"""
Configuration management for Untappd MCP server.
"""

import os
from dataclasses import dataclass

from mcp_untappd.exceptions import ConfigurationError

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class UntappdConfig:
    """Configuration for Untappd integration."""

    client_id: str
    client_secret: str
    timeout: float = DEFAULT_TIMEOUT

    @property
    def base_url(self) -> str:
        """Get the Untappd API base URL."""
        return "https://api.untappd.com/v4"


def get_config() -> UntappdConfig:
    """
    Get Untappd configuration from environment.

    Environment variables:
        CLIENT_ID: Untappd API client ID
        CLIENT_SECRET: Untappd API client secret
        UNTAPPD_TIMEOUT: Request timeout in seconds (optional, default 30)

    Returns:
        UntappdConfig instance

    Raises:
        ConfigurationError: If required configuration is missing
    """
    client_id = os.environ.get("CLIENT_ID")
    client_secret = os.environ.get("CLIENT_SECRET")

    if not client_id:
        raise ConfigurationError(
            "CLIENT_ID environment variable not set. "
            "Register an app at https://untappd.com/api/register"
        )

    if not client_secret:
        raise ConfigurationError(
            "CLIENT_SECRET environment variable not set. "
            "Find it alongside your client ID in the Untappd API dashboard"
        )

    raw_timeout = os.environ.get("UNTAPPD_TIMEOUT")
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigurationError(
                f"UNTAPPD_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from None

    return UntappdConfig(
        client_id=client_id,
        client_secret=client_secret,
        timeout=timeout,
    )
