"""
FastMCP server definition for Untappd.
"""

import logging

import httpx
from fastmcp import FastMCP
from mcp import types

from mcp_untappd.client import UntappdClient
from mcp_untappd.config import UntappdConfig
from mcp_untappd.exceptions import ToolFailureError, UnknownToolError
from mcp_untappd.tools import TOOL_NAMES, register_tools, unexpected_failures

logger = logging.getLogger(__name__)

SERVER_NAME = "untappd-server"


def create_server(
    config: UntappdConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastMCP:
    """
    Create the MCP server for a given configuration.

    Args:
        config: Untappd configuration with credentials
        transport: Optional httpx transport passed through to the client

    Returns:
        FastMCP server with all Untappd tools registered
    """
    mcp = FastMCP(
        SERVER_NAME,
        instructions="Untappd beer lookup, beer search and check-ins",
    )

    client = UntappdClient(config, transport=transport)
    register_tools(mcp, client)
    _guard_tool_calls(mcp)

    return mcp


def _guard_tool_calls(mcp: FastMCP) -> None:
    """
    Report unknown tools and unexpected tool failures as JSON-RPC errors.

    FastMCP reports both as an error result (isError=true). The MCP
    session turns an McpError raised from a request handler into a
    protocol error response instead, so the CallToolRequest handler is
    wrapped here. Only Untappd API errors stay error results.
    """
    # Written against fastmcp 2.14 / mcp 1.30; FastMCP has no public hook
    # that runs outside the low-level server's exception-to-result mapping.
    handlers = mcp._mcp_server.request_handlers
    call_tool = handlers[types.CallToolRequest]

    async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        name = request.params.name
        if name not in TOOL_NAMES:
            logger.warning("Rejected call to unknown tool %r", name)
            raise UnknownToolError(name)

        failures: list[Exception] = []
        token = unexpected_failures.set(failures)
        try:
            result = await call_tool(request)
        finally:
            unexpected_failures.reset(token)

        if failures:
            logger.error("Tool %r failed: %r", name, failures[0])
            raise ToolFailureError(name, failures[0]) from failures[0]
        return result

    handlers[types.CallToolRequest] = handle_call_tool
