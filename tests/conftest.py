"""Shared fixtures for Alpha Vantage MCP tests."""

import asyncio
from typing import Any, Callable, Dict, List

import httpx
import pytest

from alpha_vantage_mcp.client import AlphaVantageClient
from alpha_vantage_mcp.config import AlphaVantageConfig
from alpha_vantage_mcp.tools import call_tool

API_KEY = "test-key"


class RecordingUpstream:
    """Fake Alpha Vantage endpoint that records every request it receives."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]):
        self.respond = respond
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_params(self) -> Dict[str, str]:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def config() -> AlphaVantageConfig:
    return AlphaVantageConfig(api_key=API_KEY, _env_file=None)


@pytest.fixture
def upstream_factory():
    """Build a RecordingUpstream from a response callable."""
    return RecordingUpstream


@pytest.fixture
def run_tool(config):
    """Run one tool call against a fake upstream and return its content."""

    def _run(upstream: RecordingUpstream, name: str, arguments: Dict[str, Any]):
        async def _call():
            async with AlphaVantageClient(config, transport=upstream.transport) as client:
                return await call_tool(client, name, arguments)

        return asyncio.run(_call())

    return _run
