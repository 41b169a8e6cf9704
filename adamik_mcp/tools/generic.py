"""Generic pass-through to any Adamik API endpoint."""

from __future__ import annotations

import json
import logging
from typing import Any, Literal, Optional

from pydantic import Field

from adamik_mcp.adamik_api import default_client
from adamik_mcp.presentation import annotate
from adamik_mcp.registry import ToolParams
from adamik_mcp.results import ToolFailure, ToolResult, ToolSuccess
from adamik_mcp.tools.validators import upstream_failure

logger = logging.getLogger(__name__)


class CallApiParams(ToolParams):
    path: str = Field(description="The path of the endpoint to call")
    method: Literal["GET", "POST"] = Field(description="The HTTP method to use")
    body: Optional[str] = Field(default=None, description="The request body for POST requests")


async def call_adamik_api(params: CallApiParams, *, client=default_client) -> ToolResult:
    """
    Call an arbitrary endpoint and decorate the payload with presentation hints.

    POST bodies arrive as JSON strings and are parsed before any request is
    made; GET requests ignore the body.
    """
    logger.debug("call-adamik-api method=%s path=%s", params.method, params.path)
    if params.method == "GET":
        response = await client.get(params.path)
    else:
        parsed_body: Any = None
        if params.body:
            try:
                parsed_body = json.loads(params.body)
            except json.JSONDecodeError as exc:
                return ToolFailure(f"Error parsing request body: Invalid JSON ({exc.msg})")
        response = await client.post(params.path, parsed_body)

    if not response.success:
        return upstream_failure(response)
    return ToolSuccess(annotate(params.path, response.data))
