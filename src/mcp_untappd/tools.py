"""
MCP tool definitions for Untappd.
"""

import json
from contextvars import ContextVar
from enum import Enum
from typing import Annotated, Any, Awaitable

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from mcp_untappd.client import UntappdClient
from mcp_untappd.exceptions import UntappdAPIError


class UntappdTool(str, Enum):
    """Names of the tools this server exposes."""

    GET_BEER_INFO = "get_beer_info"
    SEARCH_BEER = "search_beer"
    GET_USER_CHECKINS = "get_user_checkins"


TOOL_NAMES = frozenset(tool.value for tool in UntappdTool)

# Set per request by the server; FastMCP turns every exception raised by a
# tool into an error result, so failures other than API errors are recorded
# here to be reported as protocol errors instead.
unexpected_failures: ContextVar[list[Exception] | None] = ContextVar(
    "unexpected_failures", default=None
)


def register_tools(mcp: FastMCP, client: UntappdClient) -> None:
    """Register all Untappd MCP tools, bound to a single client."""

    @mcp.tool(
        name=UntappdTool.GET_BEER_INFO.value,
        description="Get information about a specific beer by its ID",
        output_schema=None,
    )
    async def get_beer_info(
        beer_id: Annotated[str, Field(description="The ID of the beer")],
    ) -> str:
        return await _call_api(client.get_beer_info(beer_id))

    @mcp.tool(
        name=UntappdTool.SEARCH_BEER.value,
        description="Search for beers by name",
        output_schema=None,
    )
    async def search_beer(
        query: Annotated[
            str, Field(description="The name of the beer to search for")
        ],
    ) -> str:
        return await _call_api(client.search_beer(query))

    @mcp.tool(
        name=UntappdTool.GET_USER_CHECKINS.value,
        description="Get the authenticated user's check-ins",
        output_schema=None,
    )
    async def get_user_checkins(
        limit: Annotated[
            float,
            Field(description="The number of check-ins to retrieve"),
        ] = 25,
    ) -> str:
        return await _call_api(client.get_user_checkins(limit=limit))


def format_response(data: Any) -> str:
    """Pretty-print an API response body for a text content block."""
    return json.dumps(data, indent=2, ensure_ascii=False)


async def _call_api(call: Awaitable[Any]) -> str:
    """
    Await an Untappd API call and format its result.

    API failures are raised as ToolError so FastMCP reports them as an
    error result (isError=true). Anything else is recorded in
    ``unexpected_failures`` and re-raised.
    """
    try:
        data = await call
    except UntappdAPIError as e:
        raise ToolError(f"Untappd API error: {e}") from e
    except Exception as e:
        failures = unexpected_failures.get()
        if failures is not None:
            failures.append(e)
        raise

    return format_response(data)
