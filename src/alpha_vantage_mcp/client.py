"""
Alpha Vantage REST API Client

Every upstream call goes through AlphaVantageClient.query, which appends the
API key and collapses all failures into None.
"""

import logging
from typing import Optional

import httpx

from .config import AlphaVantageConfig
from .models import UpstreamParams, UpstreamPayload

logger = logging.getLogger(__name__)


class AlphaVantageClient:
    """Async client for the Alpha Vantage query endpoint"""

    def __init__(
        self,
        config: AlphaVantageConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def connect(self):
        """Initialize HTTP client"""
        self._client = httpx.AsyncClient(
            headers={"Accept": "application/json"},
            transport=self._transport,
        )

    async def close(self):
        """Close HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if not self._client:
            raise RuntimeError("Client not connected. Use 'async with' or call connect()")
        return self._client

    async def query(self, params: UpstreamParams) -> Optional[UpstreamPayload]:
        """
        Issue one GET against the query endpoint.

        Args:
            params: Query parameters including the 'function' discriminator

        Returns:
            The decoded JSON payload, or None if the request failed or the
            body was empty
        """
        function = params.get("function")
        request_params = {**params, "apikey": self.config.api_key}
        http = self.client

        try:
            response = await http.get(self.config.base_url, params=request_params)
            response.raise_for_status()

            if not response.content.strip():
                raise ValueError("Empty response body")

            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Alpha Vantage request failed (function={function}): {e!r}")
            return None

        if data is None:
            logger.error(f"Alpha Vantage returned no data (function={function})")
            return None

        logger.debug(f"Alpha Vantage request succeeded (function={function})")
        return data
