"""
Tool table and JSON-RPC surface for MCP-style tooling.

``build_registry`` composes the full tool table once at startup. ``handle_rpc``
answers decoded JSON-RPC messages (initialize, tools/list, tools/call) and is
shared by the stdio and HTTP transports.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Dict, Optional

from adamik_mcp.adamik_api import AdamikApiClient, default_client
from adamik_mcp.config import AdamikConfig, default_config
from adamik_mcp.metrics import MetricsRecorder, default_metrics
from adamik_mcp.registry import ToolDefinition, ToolInvocation, ToolRegistry
from adamik_mcp.tools import (
    ApiSpecCache,
    broadcast_transaction,
    call_adamik_api,
    default_spec_cache,
    derive_address,
    encode_transaction,
    get_account_history,
    get_account_state,
    get_api_specification,
    get_chain_validators,
    get_supported_chains,
    get_token_details,
    get_transaction_details,
    list_features,
    read_me_first,
)
from adamik_mcp.tools.account import AccountHistoryParams, AccountParams, DeriveAddressParams
from adamik_mcp.tools.chains import ChainValidatorsParams, TokenDetailsParams
from adamik_mcp.tools.generic import CallApiParams
from adamik_mcp.tools.specification import ApiSpecificationParams
from adamik_mcp.tools.transactions import TransactionBodyParams, TransactionDetailsParams
from adamik_mcp.tools.validators import ChainParams

logger = logging.getLogger(__name__)

SERVER_NAME = "adamik-mcp-server"
SERVER_VERSION = "0.1.0"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602


def build_registry(
    client: AdamikApiClient = default_client,
    config: AdamikConfig = default_config,
    spec_cache: Optional[ApiSpecCache] = None,
    *,
    metrics: MetricsRecorder = default_metrics,
) -> ToolRegistry:
    """Register every tool against ``client``; raises DuplicateToolError on name clashes."""
    spec_cache = spec_cache if spec_cache is not None else default_spec_cache
    api = {"client": client, "config": config}
    registry = ToolRegistry(metrics=metrics)
    definitions = [
        ToolDefinition(
            name="readMeFirst",
            description=(
                "Get information about how this tool is supposed to be used. "
                "Use this tool first before any other tool from this MCP server"
            ),
            handler=read_me_first,
        ),
        ToolDefinition(
            name="getSupportedChains",
            description="Get a list of supported chain IDs",
            handler=partial(get_supported_chains, config=config),
        ),
        ToolDefinition(
            name="listFeatures",
            description=(
                "Get chain details including supported features (read, write, token, validators) "
                "and native currency information (ticker, decimals, chain name)"
            ),
            params_model=ChainParams,
            handler=partial(list_features, **api),
        ),
        ToolDefinition(
            name="getTokenDetails",
            description=(
                "Fetches information about a non-native token (ERC-20, TRC-20, SPL, etc.) - not the chain's "
                "native currency. CRITICAL: This provides the 'decimals' field needed to convert raw token "
                "amounts from getAccountState() to human-readable values. Always call this for each token "
                "when displaying balances: human_readable = raw_amount / 10^token_decimals"
            ),
            params_model=TokenDetailsParams,
            handler=partial(get_token_details, **api),
        ),
        ToolDefinition(
            name="deriveAddress",
            description="Derive a blockchain address for a given chain from a public key",
            params_model=DeriveAddressParams,
            handler=partial(derive_address, **api),
        ),
        ToolDefinition(
            name="getAccountState",
            description=(
                "Get the state of an account (balances and staking positions). IMPORTANT: Balance amounts "
                "are returned in smallest units (wei for ETH, satoshis for BTC, etc.). For NATIVE currency: "
                "use listFeatures() first to get the decimal places, then divide the raw amount by "
                "10^decimals. For TOKENS: use getTokenDetails(chainId, tokenId) for each token to get its "
                "specific decimals, then convert each token amount."
            ),
            params_model=AccountParams,
            handler=partial(get_account_state, **api),
        ),
        ToolDefinition(
            name="getAccountHistory",
            description="Get the transaction history for an account",
            params_model=AccountHistoryParams,
            handler=partial(get_account_history, **api),
        ),
        ToolDefinition(
            name="getChainValidators",
            description=(
                "Gets the list of known validators for a given chain. This is only useful when asking "
                "the user to select a validator to delegate to"
            ),
            params_model=ChainValidatorsParams,
            handler=partial(get_chain_validators, **api),
        ),
        ToolDefinition(
            name="getTransactionDetails",
            description="Gets info about a transaction",
            params_model=TransactionDetailsParams,
            handler=partial(get_transaction_details, **api),
        ),
        ToolDefinition(
            name="encodeTransaction",
            description=(
                "Turns a transaction intent in Adamik JSON format into an encoded transaction for the "
                "given chain (ready to sign). For staking transaction on babylon chain, stakeId is "
                "mandatory and amount is optional. Otherwise, amount is mandatory and stakeId is to be omitted."
            ),
            params_model=TransactionBodyParams,
            handler=partial(encode_transaction, **api),
        ),
        ToolDefinition(
            name="broadcastTransaction",
            description=(
                "Broadcast a signed transaction. You will probably need another MCP server dedicated "
                "in key management and signing before using this."
            ),
            params_model=TransactionBodyParams,
            handler=partial(broadcast_transaction, **api),
        ),
        ToolDefinition(
            name="getApiSpecification",
            description=(
                "Get the comprehensive OpenAPI specification for the Adamik API: exact request/response "
                "schemas for all transaction types, chain family details, parameter formats, encoding "
                "formats, account state schemas, error handling and pagination. Use this when you need "
                "exact API contract details for blockchain operations."
            ),
            params_model=ApiSpecificationParams,
            handler=partial(get_api_specification, client=client, cache=spec_cache),
        ),
        ToolDefinition(
            name="call-adamik-api",
            description=(
                "Call one of the endpoints of the Adamik API. Response includes data and presentation "
                "hints for optimal rendering."
            ),
            params_model=CallApiParams,
            handler=partial(call_adamik_api, client=client),
        ),
    ]
    for definition in definitions:
        registry.register(definition)
    logger.debug("Registered %d tools", len(registry))
    return registry


def jsonrpc_success_payload(rpc_id: Any, result: Any) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "result": result}


def jsonrpc_error_payload(rpc_id: Any, code: int, message: str) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "error": {"code": code, "message": message}}


async def handle_rpc(
    registry: ToolRegistry, body: Dict[str, Any], *, request_id: Optional[str] = None
) -> Optional[Dict[str, Any]]:
    """
    Answer one decoded JSON-RPC request.

    Supported methods:
      - initialize
      - list_tools / tools/list
      - call_tool / tools/call
      - notifications/initialized (no response)

    Returns:
        The response payload, or None for notifications.
    """
    method = body.get("method")
    rpc_id = body.get("id")
    raw_params = body.get("params")
    if raw_params is None:
        params: Dict[str, Any] = {}
    elif isinstance(raw_params, dict):
        params = raw_params
    else:
        return jsonrpc_error_payload(rpc_id, INVALID_PARAMS, "Invalid params")

    if not method:
        return jsonrpc_error_payload(rpc_id, INVALID_REQUEST, "Invalid request")

    if method == "initialize":
        protocol_version = params.get("protocolVersion")
        if not isinstance(protocol_version, str) or not protocol_version:
            return jsonrpc_error_payload(rpc_id, INVALID_PARAMS, "Invalid params")
        logger.debug(
            "mcp initialize requested protocol=%s request_id=%s",
            protocol_version,
            request_id,
            extra={"request_id": request_id},
        )
        return jsonrpc_success_payload(
            rpc_id,
            {
                "protocolVersion": protocol_version,
                "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
                "capabilities": {"tools": {"listChanged": False}},
            },
        )

    if method in ("list_tools", "tools/list"):
        return jsonrpc_success_payload(rpc_id, {"tools": registry.list_tools()})

    if method in ("call_tool", "tools/call"):
        tool_name = params.get("tool") or params.get("name")
        tool_params = params.get("params")
        if tool_params is None:
            tool_params = params.get("arguments") or {}
        if not isinstance(tool_name, str) or not tool_name.strip():
            return jsonrpc_error_payload(rpc_id, INVALID_PARAMS, "Invalid params")
        if not isinstance(tool_params, dict):
            return jsonrpc_error_payload(rpc_id, INVALID_PARAMS, "Invalid params")
        result = await registry.dispatch(
            ToolInvocation(tool_name=tool_name, parameters=tool_params, id=rpc_id), request_id=request_id
        )
        return jsonrpc_success_payload(rpc_id, result.to_content(include_error_flag=True))

    if method in ("notifications/initialized", "initialized"):
        logger.debug("mcp initialized notification received request_id=%s", request_id, extra={"request_id": request_id})
        return None

    return jsonrpc_error_payload(rpc_id, METHOD_NOT_FOUND, "Method not found")
