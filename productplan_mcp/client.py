import json
import logging
from typing import Any, Optional

import httpx

from productplan_mcp.config import ProductPlanConfig

logger = logging.getLogger(__name__)


class ProductPlanAPIError(Exception):
    """Non-2xx response from the ProductPlan API.

    The body is kept as raw text since error payloads are not always JSON.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error {status_code}: {body}")


class ProductPlanClient:
    def __init__(
        self,
        config: ProductPlanConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self._config = config

        options: dict[str, Any] = {}
        if config.timeout is not None:
            options["timeout"] = config.timeout

        self._client = httpx.AsyncClient(transport=transport, **options)

    @property
    def base_url(self) -> str:
        return self._config.api_url

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.api_token}",
            "Content-Type": "application/json",
        }

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[dict[str, Any]] = None
    ) -> Any:
        url = f"{self.base_url}{path}"
        content = json.dumps(body) if body is not None else None

        logger.debug(f"{method} {url}")
        response = await self._client.request(
            method,
            url,
            headers=self.headers,
            content=content
        )

        if not response.is_success:
            raise ProductPlanAPIError(response.status_code, response.text)

        return response.json()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ProductPlanClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
