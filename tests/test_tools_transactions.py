import json

import pytest
from pydantic import ValidationError

from adamik_mcp.adamik_api import ApiResponse
from adamik_mcp.tools.transactions import (
    TransactionBodyParams,
    TransactionDetailsParams,
    broadcast_transaction,
    encode_transaction,
    get_transaction_details,
)

from conftest import RecordingClient

INTENT = {
    "transaction": {
        "data": {
            "mode": "transfer",
            "senderAddress": "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045",
            "recipientAddress": "0x0000000000000000000000000000000000000001",
            "amount": "1000000000000000",
        }
    }
}


@pytest.mark.asyncio
async def test_transaction_details_path(config):
    client = RecordingClient(ApiResponse(data={"transaction": {"parsed": {"state": "confirmed"}}}, status_code=200, success=True))
    result = await get_transaction_details(
        TransactionDetailsParams(chainId="ethereum", transactionId="0xdeadbeef"), client=client, config=config
    )
    assert client.calls == [("GET", "/ethereum/transaction/0xdeadbeef", None)]
    assert json.loads(result.render())["transaction"]["parsed"]["state"] == "confirmed"


@pytest.mark.asyncio
async def test_encode_forwards_intent_untouched(config):
    encoded = {"chainId": "ethereum", "transaction": {**INTENT["transaction"], "encoded": [{"raw": {"value": "0x02"}}]}}
    client = RecordingClient(ApiResponse(data=encoded, status_code=200, success=True))

    result = await encode_transaction(TransactionBodyParams(chainId="ethereum", body=INTENT), client=client, config=config)

    assert client.calls == [("POST", "/ethereum/transaction/encode", INTENT)]
    assert json.loads(result.render()) == encoded


@pytest.mark.asyncio
async def test_broadcast_path_and_failure(config):
    client = RecordingClient(ApiResponse(data=None, status_code=422, success=False, error="Invalid signature"))
    body = {"transaction": {"data": INTENT["transaction"]["data"], "encoded": "0x02", "signature": "0xsig"}}

    result = await broadcast_transaction(TransactionBodyParams(chainId="ethereum", body=body), client=client, config=config)

    assert client.calls == [("POST", "/ethereum/transaction/broadcast", body)]
    assert result.is_error
    assert "Invalid signature" in result.render()


@pytest.mark.asyncio
async def test_encode_unsupported_chain(config):
    client = RecordingClient()
    result = await encode_transaction(TransactionBodyParams(chainId="tron", body=INTENT), client=client, config=config)
    assert result.render() == "Error: Chain tron is not supported"
    assert client.calls == []


def test_body_requires_transaction_object():
    with pytest.raises(ValidationError):
        TransactionBodyParams(chainId="ethereum", body={"mode": "transfer"})
    with pytest.raises(ValidationError):
        TransactionBodyParams(chainId="ethereum", body='{"transaction": {}}')


@pytest.mark.asyncio
async def test_plain_text_payload_is_json_encoded(config):
    client = RecordingClient(ApiResponse(data="Error: not really", status_code=200, success=True))

    result = await get_transaction_details(
        TransactionDetailsParams(chainId="ethereum", transactionId="0xabc"), client=client, config=config
    )

    assert not result.is_error
    text = result.to_content()["content"][0]["text"]
    assert not text.startswith("Error")
    assert json.loads(text) == "Error: not really"
