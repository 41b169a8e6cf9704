"""Account-related tools."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import Field

from adamik_mcp.adamik_api import default_client
from adamik_mcp.config import AdamikConfig, default_config
from adamik_mcp.results import ToolResult
from adamik_mcp.tools.validators import ChainParams, relay, segment, unsupported_chain, with_next_page

logger = logging.getLogger(__name__)


class AccountParams(ChainParams):
    account_id: str = Field(alias="accountId", min_length=1, description="Account address on the chain")


class AccountHistoryParams(AccountParams):
    next_page: Optional[str] = Field(
        default=None, alias="nextPage", description="Pagination cursor returned by a previous call"
    )


class DeriveAddressParams(ChainParams):
    pubkey: str = Field(min_length=1, description="Public key to derive the address from")


def _account_path(params: AccountParams, suffix: str) -> str:
    return f"/{segment(params.chain_id)}/account/{segment(params.account_id)}/{suffix}"


async def get_account_state(
    params: AccountParams, *, client=default_client, config: AdamikConfig = default_config
) -> ToolResult:
    """
    Fetch balances and staking positions for an account.

    Amounts are returned in the chain's smallest unit; the caller converts
    them using the decimals from listFeatures / getTokenDetails.
    """
    rejected = unsupported_chain(params.chain_id, config)
    if rejected:
        return rejected
    response = await client.get(_account_path(params, "state"))
    return relay(response)


async def get_account_history(
    params: AccountHistoryParams, *, client=default_client, config: AdamikConfig = default_config
) -> ToolResult:
    rejected = unsupported_chain(params.chain_id, config)
    if rejected:
        return rejected
    path = with_next_page(_account_path(params, "history"), params.next_page)
    logger.debug("Fetching account history page=%s", params.next_page or "first")
    response = await client.get(path)
    return relay(response)


async def derive_address(
    params: DeriveAddressParams, *, client=default_client, config: AdamikConfig = default_config
) -> ToolResult:
    rejected = unsupported_chain(params.chain_id, config)
    if rejected:
        return rejected
    response = await client.post(f"/{segment(params.chain_id)}/address/encode", {"pubkey": params.pubkey})
    return relay(response)
