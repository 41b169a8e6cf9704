"""OpenAPI specification lookup with a process-lifetime cache."""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import Field

from adamik_mcp.adamik_api import default_client
from adamik_mcp.registry import ToolParams
from adamik_mcp.results import ToolResult, ToolSuccess
from adamik_mcp.tools.validators import upstream_failure

logger = logging.getLogger(__name__)


class ApiSpecCache:
    """Holds the last successfully fetched OpenAPI document."""

    def __init__(self) -> None:
        self._document: Optional[Any] = None

    @property
    def document(self) -> Optional[Any]:
        return self._document

    def is_empty(self) -> bool:
        return self._document is None

    def store(self, document: Any) -> None:
        self._document = document

    def clear(self) -> None:
        self._document = None


default_spec_cache = ApiSpecCache()


class ApiSpecificationParams(ToolParams):
    section: Optional[str] = Field(
        default=None,
        description="Optional: specific section like 'paths', 'components', 'schemas'. If not provided, returns full spec",
    )
    refresh: bool = Field(default=False, description="Optional: refresh the cached specification from API")


def select_section(document: Any, section: Optional[str]) -> Any:
    if section and isinstance(document, dict) and section in document:
        return document[section]
    return document


async def get_api_specification(
    params: ApiSpecificationParams, *, client=default_client, cache: ApiSpecCache = default_spec_cache
) -> ToolResult:
    """
    Return the Adamik OpenAPI document, or one top-level section of it.

    The document is fetched once and served from ``cache`` afterwards; pass
    ``refresh`` to fetch it again. Failed fetches leave the cache untouched.
    """
    if cache.is_empty() or params.refresh:
        response = await client.fetch_openapi_spec()
        if not response.success:
            return upstream_failure(response, context="Error fetching API specification")
        cache.store(response.data)
        logger.info("API specification cached (refresh=%s)", params.refresh)
    return ToolSuccess(select_section(cache.document, params.section), indent=2)
