"""Command-line entry point: stdio transport by default, HTTP with --http."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from adamik_mcp.adamik_api import AdamikApiClient
from adamik_mcp.config import AdamikConfig, ConfigError, validate_config
from adamik_mcp.logging_config import configure_logging
from adamik_mcp.mcp import build_registry
from adamik_mcp.stdio import StdioTransport
from adamik_mcp.tools import ApiSpecCache

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="adamik-mcp", description="Adamik API tools for LLM agents.")
    parser.add_argument("--http", action="store_true", help="Serve the JSON-RPC gateway over HTTP instead of stdio")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    return parser.parse_args(argv)


async def run_stdio(config: AdamikConfig) -> None:
    client = AdamikApiClient(config)
    registry = build_registry(client, config, ApiSpecCache())
    try:
        await StdioTransport(registry).serve()
    finally:
        await client.aclose()


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    config = AdamikConfig()
    configure_logging(config)
    try:
        validate_config(config)
    except ConfigError as exc:
        print("Configuration validation failed:", file=sys.stderr)
        for problem in exc.problems:
            print(f"- {problem}", file=sys.stderr)
        return 1

    if args.http:
        import uvicorn

        uvicorn.run("adamik_mcp.server:app", host=args.host, port=args.port, log_config=None)
        return 0

    try:
        asyncio.run(run_stdio(config))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
