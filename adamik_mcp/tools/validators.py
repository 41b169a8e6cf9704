"""Shared validation and path helpers for Adamik MCP tools."""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import quote

from pydantic import Field

from adamik_mcp.adamik_api import ApiResponse
from adamik_mcp.config import AdamikConfig
from adamik_mcp.registry import ToolParams
from adamik_mcp.results import ToolFailure, ToolResult, ToolSuccess


class ChainParams(ToolParams):
    chain_id: str = Field(
        alias="chainId",
        min_length=1,
        description="Chain identifier, one of the supported chains (see getSupportedChains)",
    )


def unsupported_chain(chain_id: str, config: AdamikConfig) -> Optional[ToolFailure]:
    """Return a failure for chain ids outside the allow-list, else None."""
    if config.is_supported_chain(chain_id):
        return None
    return ToolFailure(f"Chain {chain_id} is not supported")


def segment(value: str) -> str:
    """Percent-encode a caller supplied path segment."""
    return quote(value, safe="")


def with_next_page(path: str, next_page: Optional[str]) -> str:
    if not next_page:
        return path
    return f"{path}?nextPage={segment(next_page)}"


def upstream_failure(response: ApiResponse, *, context: str = "Error calling Adamik API") -> ToolFailure:
    return ToolFailure(f"{context} (status {response.status_code}): {response.error or 'Unknown error'}")


def relay(response: ApiResponse, *, indent: Optional[int] = None) -> ToolResult:
    """Turn an API outcome into a tool result carrying the raw JSON payload."""
    if not response.success:
        return upstream_failure(response)
    return ToolSuccess(response.data, indent=indent)


def require_transaction(body: Any) -> Any:
    if not isinstance(body.get("transaction"), dict):
        raise ValueError("body must contain a 'transaction' object")
    return body
