"""
Alpha Vantage MCP Server

MCP server exposing Alpha Vantage market data as tools:
- Stock quotes and company overviews
- Daily and weekly time series
- Forex rates and crypto prices
- Technical indicators
"""

__version__ = "1.0.0"

from alpha_vantage_mcp.client import AlphaVantageClient
from alpha_vantage_mcp.config import AlphaVantageConfig
from alpha_vantage_mcp.server import create_server, main
from alpha_vantage_mcp.tools import TOOLS, call_tool

__all__ = [
    "__version__",
    "AlphaVantageClient",
    "AlphaVantageConfig",
    "create_server",
    "main",
    "TOOLS",
    "call_tool",
]
