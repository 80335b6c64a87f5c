import json
from typing import Any, Optional

import httpx
import pytest

from productplan_mcp.client import ProductPlanClient
from productplan_mcp.config import ProductPlanConfig


class FakeProductPlan:
    """Records outgoing requests and answers them with a canned response."""

    def __init__(self, config: ProductPlanConfig):
        self.requests: list[httpx.Request] = []
        self._status_code = 200
        self._response_kwargs: dict[str, Any] = {"json": {"ok": True}}
        self._error: Optional[Exception] = None
        self.transport = httpx.MockTransport(self._handle)
        self.client = ProductPlanClient(config, transport=self.transport)

    def respond(self, status_code: int, **kwargs) -> None:
        self._status_code = status_code
        self._response_kwargs = kwargs

    def fail_with(self, error: Exception) -> None:
        self._error = error

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return httpx.Response(self._status_code, **self._response_kwargs)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_body(self) -> Optional[dict]:
        content = self.last_request.content
        return json.loads(content) if content else None


@pytest.fixture
def config():
    return ProductPlanConfig(
        api_token="test-token",
        api_url="https://app.productplan.com/api/v2",
    )


@pytest.fixture
def api(config):
    return FakeProductPlan(config)


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "PRODUCTPLAN_API_TOKEN",
        "PRODUCTPLAN_API_URL",
        "PRODUCTPLAN_TIMEOUT",
        "PRODUCTPLAN_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
