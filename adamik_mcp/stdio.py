"""
Line-delimited JSON transport over stdin/stdout.

Each inbound line is one JSON object. Tool invocations use the compact shape
``{"id", "toolName", "parameters"}`` and are answered with
``{"id", "content": [...]}``; lines carrying a JSON-RPC ``method`` are handed
to the MCP JSON-RPC handler. Messages are processed in arrival order.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

from adamik_mcp.mcp import handle_rpc
from adamik_mcp.registry import ToolInvocation, ToolRegistry
from adamik_mcp.results import ToolFailure

logger = logging.getLogger(__name__)


def _error_envelope(rpc_id: Any, message: str) -> Dict[str, Any]:
    return {"id": rpc_id, **ToolFailure(message).to_content()}


class StdioTransport:
    """Serve a tool registry over a pair of text streams."""

    def __init__(
        self,
        registry: ToolRegistry,
        *,
        reader: Optional[TextIO] = None,
        writer: Optional[TextIO] = None,
    ) -> None:
        self.registry = registry
        self._reader = reader or sys.stdin
        self._writer = writer or sys.stdout

    async def handle_message(self, message: Any) -> Optional[Dict[str, Any]]:
        if not isinstance(message, dict):
            return _error_envelope(None, "Invalid message: expected a JSON object")
        if "method" in message:
            return await handle_rpc(self.registry, message)

        rpc_id = message.get("id")
        tool_name = message.get("toolName")
        parameters = message.get("parameters")
        if parameters is None:
            parameters = {}
        if not isinstance(tool_name, str) or not tool_name:
            return _error_envelope(rpc_id, "Invalid message: missing toolName")
        if not isinstance(parameters, dict):
            return _error_envelope(rpc_id, "Invalid parameters: expected an object")

        result = await self.registry.dispatch(
            ToolInvocation(tool_name=tool_name, parameters=parameters, id=rpc_id)
        )
        return {"id": rpc_id, **result.to_content()}

    async def handle_line(self, line: str) -> Optional[str]:
        """Decode one inbound line and return the encoded response, if any."""
        if not line.strip():
            return None
        try:
            message = json.loads(line)
        except json.JSONDecodeError:
            logger.warning("Discarding undecodable message")
            return json.dumps(_error_envelope(None, "Invalid JSON message"))
        response = await self.handle_message(message)
        if response is None:
            return None
        return json.dumps(response)

    async def serve(self) -> None:
        """Read until EOF, answering each line before reading the next."""
        logger.info("Serving %d tools over stdio", len(self.registry))
        while True:
            line = await asyncio.to_thread(self._reader.readline)
            if not line:
                break
            response = await self.handle_line(line)
            if response is not None:
                self._writer.write(response + "\n")
                self._writer.flush()
        logger.info("stdin closed, shutting down")
