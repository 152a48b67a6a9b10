"""
Entry point for the Lunch Flow MCP Server.

Usage:
    stdio mode (for Claude Desktop and other MCP hosts):
        python mcp_server.py

    HTTP mode (for web deployment):
        python mcp_server.py --transport http --port 8001

Environment:
    LUNCHFLOW_API_KEY   Your Lunch Flow API key (required)
    LUNCHFLOW_API_URL   API endpoint URL (default: https://lunchflow.app/api/v1)
    LOG_LEVEL           Logging level (default: INFO)
"""
import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from lunchflow_mcp.config import ConfigError, ServerConfig
from lunchflow_mcp.server import create_server

logger = logging.getLogger("mcp_server")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Lunch Flow MCP server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="MCP transport (default: stdio)",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind address in HTTP mode")
    parser.add_argument("--port", type=int, default=8001, help="Port in HTTP mode")
    parser.add_argument("--log-level", default=None, help="Overrides LOG_LEVEL")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    load_dotenv()
    args = parse_args(argv)

    # Logs go to stderr; stdout carries the stdio transport
    logging.basicConfig(
        level=(args.log_level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    try:
        config = ServerConfig.from_env()
    except ConfigError as e:
        logger.error(str(e))
        return 1

    mcp = create_server(config)

    if args.transport == "http":
        mcp.run(transport="http", host=args.host, port=args.port)
    else:
        mcp.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
