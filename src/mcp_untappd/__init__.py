"""
mcp-untappd: MCP server for the Untappd beer catalog API.

Exposes beer lookup, beer search and user check-ins as MCP tools
over stdio.
"""

from mcp_untappd.config import UntappdConfig, get_config
from mcp_untappd.client import UntappdClient
from mcp_untappd.exceptions import (
    UntappdError,
    ConfigurationError,
    UntappdAPIError,
    UnknownToolError,
    ToolFailureError,
)
from mcp_untappd.server import create_server
from mcp_untappd.tools import UntappdTool

__version__ = "0.1.0"

__all__ = [
    # Config
    "UntappdConfig",
    "get_config",
    # Client
    "UntappdClient",
    # Server
    "create_server",
    "UntappdTool",
    # Exceptions
    "UntappdError",
    "ConfigurationError",
    "UntappdAPIError",
    "UnknownToolError",
    "ToolFailureError",
]
