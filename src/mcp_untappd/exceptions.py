"""
Exception types for mcp-untappd.

All local exceptions inherit from UntappdError, except the McpError
subclasses, which must reach the MCP session as a JSON-RPC error.
"""

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, METHOD_NOT_FOUND, ErrorData


class UntappdError(Exception):
    """Base exception for all mcp-untappd errors."""

    pass


class ConfigurationError(UntappdError):
    """Raised when configuration is invalid or missing."""

    pass


class UntappdAPIError(UntappdError):
    """
    Raised when a call to the Untappd API fails.

    Covers both error responses from the API and transport failures
    (connection refused, timeouts).

    Attributes:
        status_code: HTTP status of the error response, if one was received
        detail: The API's own ``meta.error_detail`` text, if present
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        detail: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class UnknownToolError(McpError):
    """Raised when a client calls a tool that is not in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}")
        )


class ToolFailureError(McpError):
    """Raised when a tool fails for a reason other than an API error."""

    def __init__(self, name: str, cause: Exception):
        self.name = name
        self.cause = cause
        super().__init__(
            ErrorData(
                code=INTERNAL_ERROR,
                message=f"Error calling tool {name}: {cause}",
            )
        )
