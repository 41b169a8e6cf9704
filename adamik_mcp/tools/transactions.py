"""Transaction lookup, encoding and broadcast tools."""

from __future__ import annotations

import logging
from typing import Any, Dict

from pydantic import Field, field_validator

from adamik_mcp.adamik_api import default_client
from adamik_mcp.config import AdamikConfig, default_config
from adamik_mcp.results import ToolResult
from adamik_mcp.tools.validators import ChainParams, relay, require_transaction, segment, unsupported_chain

logger = logging.getLogger(__name__)


class TransactionDetailsParams(ChainParams):
    transaction_id: str = Field(alias="transactionId", min_length=1, description="Transaction hash or identifier")


class TransactionBodyParams(ChainParams):
    body: Dict[str, Any] = Field(description="Request body, an object with a 'transaction' object")

    @field_validator("body")
    @classmethod
    def _has_transaction(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        return require_transaction(value)


async def get_transaction_details(
    params: TransactionDetailsParams, *, client=default_client, config: AdamikConfig = default_config
) -> ToolResult:
    rejected = unsupported_chain(params.chain_id, config)
    if rejected:
        return rejected
    response = await client.get(f"/{segment(params.chain_id)}/transaction/{segment(params.transaction_id)}")
    return relay(response)


async def encode_transaction(
    params: TransactionBodyParams, *, client=default_client, config: AdamikConfig = default_config
) -> ToolResult:
    """
    Encode a transaction intent into a chain-specific payload ready to sign.

    The intent is forwarded untouched; the server does not inspect or sign it.
    """
    rejected = unsupported_chain(params.chain_id, config)
    if rejected:
        return rejected
    response = await client.post(f"/{segment(params.chain_id)}/transaction/encode", params.body)
    return relay(response)


async def broadcast_transaction(
    params: TransactionBodyParams, *, client=default_client, config: AdamikConfig = default_config
) -> ToolResult:
    rejected = unsupported_chain(params.chain_id, config)
    if rejected:
        return rejected
    logger.info("Broadcasting transaction on chain %s", params.chain_id)
    response = await client.post(f"/{segment(params.chain_id)}/transaction/broadcast", params.body)
    return relay(response)
