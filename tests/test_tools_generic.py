import json

import pytest

from adamik_mcp.adamik_api import ApiResponse
from adamik_mcp.tools.generic import CallApiParams, call_adamik_api

from conftest import RecordingClient


@pytest.mark.asyncio
async def test_get_wraps_payload_with_presentation():
    payload = {"balances": {"native": {"total": "1"}}}
    client = RecordingClient(ApiResponse(data=payload, status_code=200, success=True))

    result = await call_adamik_api(CallApiParams(path="ethereum/account/0x1/balances", method="GET"), client=client)

    assert client.calls == [("GET", "ethereum/account/0x1/balances", None)]
    decoded = json.loads(result.render())
    assert decoded["data"] == payload
    assert decoded["presentation"]["style"] == "tabular"


@pytest.mark.asyncio
async def test_get_ignores_body():
    client = RecordingClient()
    await call_adamik_api(CallApiParams(path="chains", method="GET", body="not json"), client=client)
    assert client.calls == [("GET", "chains", None)]


@pytest.mark.asyncio
async def test_post_parses_body():
    client = RecordingClient()
    body = {"transaction": {"data": {"mode": "transfer"}}}
    result = await call_adamik_api(
        CallApiParams(path="ethereum/transaction/encode", method="POST", body=json.dumps(body)), client=client
    )
    assert client.calls == [("POST", "ethereum/transaction/encode", body)]
    assert json.loads(result.render())["presentation"]["style"] == "default"


@pytest.mark.asyncio
async def test_post_without_body_sends_none():
    client = RecordingClient()
    await call_adamik_api(CallApiParams(path="ethereum/address/encode", method="POST"), client=client)
    assert client.calls == [("POST", "ethereum/address/encode", None)]


@pytest.mark.asyncio
async def test_invalid_json_body_skips_network():
    client = RecordingClient()
    result = await call_adamik_api(
        CallApiParams(path="ethereum/transaction/encode", method="POST", body="{not json"), client=client
    )
    assert result.is_error
    assert result.render().startswith("Error parsing request body: Invalid JSON")
    assert client.calls == []


@pytest.mark.asyncio
async def test_upstream_failure_is_labelled():
    client = RecordingClient(ApiResponse(data=None, status_code=404, success=False, error="Not Found"))
    result = await call_adamik_api(CallApiParams(path="nowhere", method="GET"), client=client)
    assert result.render() == "Error calling Adamik API (status 404): Not Found"
