"""Minimal live sanity checks for the Adamik MCP tools (requires ADAMIK_API_KEY)."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from adamik_mcp.adamik_api import default_client  # noqa: E402
from adamik_mcp.mcp import build_registry  # noqa: E402

# Vitalik's public address; override via env.
SAMPLE_CHAIN = os.getenv("ADAMIK_SAMPLE_CHAIN", "ethereum")
SAMPLE_ADDRESS = os.getenv("ADAMIK_SAMPLE_ADDRESS", "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045")
# Opt-in to fetching the OpenAPI document (large).
RUN_SPEC_FETCH = os.getenv("RUN_SPEC_SANITY", "false").lower() in {"1", "true", "yes"}


def _preview(envelope: dict, limit: int = 300) -> str:
    return envelope["content"][0]["text"][:limit]


async def main() -> None:
    registry = build_registry()
    print("Supported chains:", _preview(await registry.call("getSupportedChains")))
    print("Features:", _preview(await registry.call("listFeatures", {"chainId": SAMPLE_CHAIN})))
    account = {"chainId": SAMPLE_CHAIN, "accountId": SAMPLE_ADDRESS}
    print("Account state:", _preview(await registry.call("getAccountState", account)))
    print("Account history:", _preview(await registry.call("getAccountHistory", account)))

    if RUN_SPEC_FETCH:
        print("API spec paths:", _preview(await registry.call("getApiSpecification", {"section": "paths"})))

    await default_client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
