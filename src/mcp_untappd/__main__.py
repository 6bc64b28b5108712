"""
MCP server entry point for Untappd integration.

Run with: python -m mcp_untappd
"""

import logging
import os
import sys

from mcp_untappd.config import get_config
from mcp_untappd.exceptions import ConfigurationError
from mcp_untappd.server import create_server


def main() -> None:
    """Load configuration and serve the Untappd tools over stdio."""
    # stdout carries the MCP protocol, so logs go to stderr
    logging.basicConfig(
        stream=sys.stderr,
        level=os.environ.get("UNTAPPD_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = get_config()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr, flush=True)
        sys.exit(1)

    mcp = create_server(config)

    print("Untappd MCP server running on stdio", file=sys.stderr, flush=True)
    try:
        mcp.run(transport="stdio", show_banner=False)
    except KeyboardInterrupt:
        print("Untappd MCP server stopped", file=sys.stderr, flush=True)

    sys.exit(0)


if __name__ == "__main__":
    main()
