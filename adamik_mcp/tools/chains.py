"""Chain-level tools: allow-list, chain features, tokens and validators."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import Field

from adamik_mcp.adamik_api import default_client
from adamik_mcp.config import AdamikConfig, default_config
from adamik_mcp.registry import NoParams
from adamik_mcp.results import ToolResult, ToolText
from adamik_mcp.tools.validators import ChainParams, relay, segment, unsupported_chain, with_next_page

logger = logging.getLogger(__name__)


class TokenDetailsParams(ChainParams):
    token_id: str = Field(alias="tokenId", min_length=1, description="Token identifier (contract address, denom, ...)")


class ChainValidatorsParams(ChainParams):
    next_page: Optional[str] = Field(
        default=None, alias="nextPage", description="Pagination cursor returned by a previous call"
    )


async def get_supported_chains(_params: NoParams, *, config: AdamikConfig = default_config) -> ToolResult:
    return ToolText(",".join(config.supported_chains))


async def list_features(
    params: ChainParams, *, client=default_client, config: AdamikConfig = default_config
) -> ToolResult:
    """
    Fetch chain details: supported features and native currency information.

    Args:
        params: Validated tool input.
        client: Adamik API client (override for testing).
        config: Runtime configuration holding the chain allow-list.

    Returns:
        The upstream JSON payload, or an error result.
    """
    rejected = unsupported_chain(params.chain_id, config)
    if rejected:
        return rejected
    response = await client.get(f"/chains/{segment(params.chain_id)}")
    return relay(response)


async def get_token_details(
    params: TokenDetailsParams, *, client=default_client, config: AdamikConfig = default_config
) -> ToolResult:
    rejected = unsupported_chain(params.chain_id, config)
    if rejected:
        return rejected
    response = await client.get(f"/{segment(params.chain_id)}/token/{segment(params.token_id)}")
    return relay(response)


async def get_chain_validators(
    params: ChainValidatorsParams, *, client=default_client, config: AdamikConfig = default_config
) -> ToolResult:
    rejected = unsupported_chain(params.chain_id, config)
    if rejected:
        return rejected
    path = with_next_page(f"/{segment(params.chain_id)}/validators", params.next_page)
    response = await client.get(path)
    return relay(response)
