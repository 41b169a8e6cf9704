"""Static usage guide for agents connecting to the server."""

from __future__ import annotations

from adamik_mcp.registry import NoParams
from adamik_mcp.results import ToolResult, ToolText

USAGE_GUIDE = "\n".join(
    [
        "This MCP server allows any LLM to perform operations on over 60 blockchain networks. Read operations",
        "need nothing else; operations that require a wallet or a signature should be combined with a",
        "dedicated signer MCP server, which handles wallet connection and signing.",
        "",
        "## TOOL CATEGORIES",
        "",
        "**OPERATIONAL TOOLS** (for executing blockchain actions):",
        "- getSupportedChains, listFeatures: chain capabilities",
        "- getAccountState, getAccountHistory: account data",
        "- getTokenDetails, getChainValidators: network information",
        "- deriveAddress: address generation",
        "- encodeTransaction, broadcastTransaction: transaction lifecycle",
        "- getTransactionDetails: transaction status",
        "- call-adamik-api: any other endpoint, with presentation hints",
        "",
        "**SPECIFICATION TOOL** (for understanding API requirements):",
        "- getApiSpecification: API reference for exact schemas, formats and validation rules",
        "",
        "Use operational tools for current data or to execute actions. Use getApiSpecification to",
        "check formats, troubleshoot errors or provide guidance.",
        "",
        "## CRITICAL: DECIMAL HANDLING",
        "",
        "All balance amounts are returned in SMALLEST UNITS (wei, satoshis, etc.), not human-readable values.",
        "",
        "**Native currency balances:**",
        "1. Call listFeatures(chainId) to get the native currency decimals",
        "2. Call getAccountState(chainId, accountId) to get raw balances",
        "3. Convert: human_readable = raw_amount / 10^decimals",
        "Example: Optimism ETH balance '5354656887913579' with 18 decimals = 0.0054 ETH (not 5.35 ETH)",
        "",
        "**Token balances:**",
        "1. Call getAccountState(chainId, accountId) to get raw token balances and token IDs",
        "2. Call getTokenDetails(chainId, tokenId) for EACH token to get its decimals",
        "3. Convert each token: human_readable = raw_amount / 10^token_decimals",
        "Example: USDC balance '2245100' with 6 decimals = 2.2451 USDC",
        "",
        "Many operations require a blockchain address. If the user has not provided one",
        "(e.g. 0x1234... for Ethereum, bc1... for Bitcoin), ask for it or obtain it from a signer server.",
    ]
)


def read_me_first(_params: NoParams) -> ToolResult:
    return ToolText(USAGE_GUIDE)
