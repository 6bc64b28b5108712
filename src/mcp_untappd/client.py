"""
Untappd API client.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from mcp_untappd.config import UntappdConfig
from mcp_untappd.exceptions import UntappdAPIError

logger = logging.getLogger(__name__)


class UntappdClient:
    """
    Client for interacting with the Untappd REST API.

    See: https://untappd.com/api/docs
    """

    def __init__(
        self,
        config: UntappdConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the Untappd client.

        Args:
            config: Untappd configuration with credentials
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        self.config = config
        self.base_url = config.base_url
        self.transport = transport

        # Untappd authenticates apps with query parameters, not headers
        self.params = {
            "client_id": config.client_id,
            "client_secret": config.client_secret,
        }
        self.headers = {"Accept": "application/json"}

    async def _request(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make a GET request and return the decoded JSON body."""
        logger.debug("GET %s params=%s", endpoint, params)

        async with httpx.AsyncClient(
            base_url=self.base_url,
            params=self.params,
            headers=self.headers,
            timeout=self.config.timeout,
            transport=self.transport,
        ) as client:
            try:
                response = await client.get(endpoint, params=params)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise _status_error(e.response) from e
            except httpx.HTTPError as e:
                logger.warning("Untappd request to %s failed: %r", endpoint, e)
                raise UntappdAPIError(str(e) or type(e).__name__) from e

            return response.json()

    async def get_beer_info(self, beer_id: str) -> dict[str, Any]:
        """
        Get information about a specific beer.

        Args:
            beer_id: Untappd beer ID (bid)

        Returns:
            Raw API response
        """
        return await self._request(f"/beer/info/{quote(str(beer_id), safe='')}")

    async def search_beer(self, query: str) -> dict[str, Any]:
        """
        Search for beers by name.

        Args:
            query: Beer name to search for

        Returns:
            Raw API response
        """
        return await self._request("/search/beer", params={"q": query})

    async def get_user_checkins(self, limit: float = 25) -> dict[str, Any]:
        """
        Get the authenticated user's check-ins.

        Args:
            limit: Number of check-ins to return, passed through as given

        Returns:
            Raw API response
        """
        # Whole numbers go out as "10", not "10.0"
        if isinstance(limit, float) and limit.is_integer():
            limit = int(limit)
        return await self._request("/user/checkins", params={"limit": limit})


def _status_error(response: httpx.Response) -> UntappdAPIError:
    """Build an UntappdAPIError from an error response."""
    detail = _error_detail(response)
    status = response.status_code
    logger.warning(
        "Untappd API returned %s for %s: %s",
        status,
        response.request.url.path,
        detail,
    )

    # The request URL carries client_secret, so httpx's own message is not used
    message = detail or f"Request failed with status code {status}"
    return UntappdAPIError(message, status_code=status, detail=detail)


def _error_detail(response: httpx.Response) -> str | None:
    """Extract meta.error_detail from an Untappd error body."""
    try:
        body = response.json()
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None
    meta = body.get("meta")
    if not isinstance(meta, dict):
        return None

    detail = meta.get("error_detail")
    return str(detail) if detail else None
