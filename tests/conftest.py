import os
import sys

import pytest

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from adamik_mcp.adamik_api import ApiResponse  # noqa: E402
from adamik_mcp.config import AdamikConfig  # noqa: E402
from adamik_mcp.metrics import default_metrics  # noqa: E402


class RecordingClient:
    """Stands in for AdamikApiClient; records every call and replays queued responses."""

    def __init__(self, *responses: ApiResponse):
        self.responses = list(responses)
        self.calls = []

    def _next(self) -> ApiResponse:
        if self.responses:
            return self.responses.pop(0)
        return ApiResponse(data={"ok": True}, status_code=200, success=True)

    async def get(self, path):
        self.calls.append(("GET", path, None))
        return self._next()

    async def post(self, path, body):
        self.calls.append(("POST", path, body))
        return self._next()

    async def fetch_openapi_spec(self):
        self.calls.append(("GET", "openapi.json", None))
        return self._next()


@pytest.fixture(autouse=True)
def reset_metrics():
    default_metrics.reset()
    yield
    default_metrics.reset()


@pytest.fixture
def config():
    return AdamikConfig(
        base_url="https://api.example.test/api",
        api_key="test-key",
        supported_chains=["ethereum", "bitcoin", "optimism"],
    )


@pytest.fixture
def recording_client():
    return RecordingClient()
