"""
MCP tool definitions for Alpha Vantage.

Defines all available tools with their schemas and handlers. Each handler
maps validated arguments to upstream query parameters and returns the
payload as indented JSON, or a fixed failure message if no data came back.
"""

import json
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from mcp.types import TextContent, Tool

from alpha_vantage_mcp.client import AlphaVantageClient
from alpha_vantage_mcp.models import (
    CryptoPriceArguments,
    DailyTimeSeriesArguments,
    ForexRateArguments,
    SymbolArguments,
    TechnicalIndicatorArguments,
    ToolArguments,
    UpstreamParams,
    UpstreamPayload,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Tool Definitions
# =============================================================================

TOOL_ARGUMENTS: Dict[str, Type[ToolArguments]] = {
    "get_stock_price": SymbolArguments,
    "get_company_overview": SymbolArguments,
    "get_daily_time_series": DailyTimeSeriesArguments,
    "get_weekly_time_series": SymbolArguments,
    "get_forex_rate": ForexRateArguments,
    "get_crypto_price": CryptoPriceArguments,
    "get_technical_indicator": TechnicalIndicatorArguments,
}

TOOL_DESCRIPTIONS: Dict[str, str] = {
    "get_stock_price": "Get real-time stock price information for a symbol.",
    "get_company_overview": "Get company information and key financial metrics.",
    "get_daily_time_series": "Get daily time series (OHLCV) data for a stock.",
    "get_weekly_time_series": "Get weekly time series (OHLCV) data for a stock.",
    "get_forex_rate": "Get the exchange rate for a currency pair.",
    "get_crypto_price": "Get intraday prices for a cryptocurrency in a given market.",
    "get_technical_indicator": "Get technical indicator values (e.g., SMA, EMA, RSI) for a stock.",
}

FAILURE_MESSAGES: Dict[str, str] = {
    "get_stock_price": "Failed to fetch stock data",
    "get_company_overview": "Failed to fetch company data",
    "get_daily_time_series": "Failed to fetch time series data",
    "get_weekly_time_series": "Failed to fetch weekly time series data",
    "get_forex_rate": "Failed to fetch forex rate data",
    "get_crypto_price": "Failed to fetch crypto price data",
    "get_technical_indicator": "Failed to fetch technical indicator data",
}

TOOLS: List[Tool] = [
    Tool(
        name=name,
        description=TOOL_DESCRIPTIONS[name],
        inputSchema=model.model_json_schema(),
    )
    for name, model in TOOL_ARGUMENTS.items()
]


def get_tool_names() -> List[str]:
    """Return the names of all registered tools."""
    return [tool.name for tool in TOOLS]


# =============================================================================
# Tool Handlers
# =============================================================================

async def handle_get_stock_price(client: AlphaVantageClient, args: SymbolArguments) -> Optional[UpstreamPayload]:
    """Handle get_stock_price tool call."""
    return await client.query({
        "function": "GLOBAL_QUOTE",
        "symbol": args.symbol,
    })


async def handle_get_company_overview(client: AlphaVantageClient, args: SymbolArguments) -> Optional[UpstreamPayload]:
    """Handle get_company_overview tool call."""
    return await client.query({
        "function": "OVERVIEW",
        "symbol": args.symbol,
    })


async def handle_get_daily_time_series(
    client: AlphaVantageClient,
    args: DailyTimeSeriesArguments,
) -> Optional[UpstreamPayload]:
    """Handle get_daily_time_series tool call."""
    return await client.query({
        "function": "TIME_SERIES_DAILY",
        "symbol": args.symbol,
        "outputsize": args.outputsize,
    })


async def handle_get_weekly_time_series(client: AlphaVantageClient, args: SymbolArguments) -> Optional[UpstreamPayload]:
    """Handle get_weekly_time_series tool call."""
    return await client.query({
        "function": "TIME_SERIES_WEEKLY",
        "symbol": args.symbol,
    })


async def handle_get_forex_rate(client: AlphaVantageClient, args: ForexRateArguments) -> Optional[UpstreamPayload]:
    """Handle get_forex_rate tool call."""
    return await client.query({
        "function": "CURRENCY_EXCHANGE_RATE",
        "from_currency": args.from_currency,
        "to_currency": args.to_currency,
    })


async def handle_get_crypto_price(client: AlphaVantageClient, args: CryptoPriceArguments) -> Optional[UpstreamPayload]:
    """Handle get_crypto_price tool call."""
    return await client.query({
        "function": "CRYPTO_INTRADAY",
        "symbol": args.symbol,
        "market": args.market,
    })


async def handle_get_technical_indicator(
    client: AlphaVantageClient,
    args: TechnicalIndicatorArguments,
) -> Optional[UpstreamPayload]:
    """Handle get_technical_indicator tool call.

    The indicator name is the upstream function itself (SMA, RSI, ...) and
    is passed through without checking it against a fixed list.
    """
    params: UpstreamParams = {
        "function": args.indicator,
        "symbol": args.symbol,
        "interval": args.interval,
    }
    return await client.query(params)


# =============================================================================
# Tool Handler Registry
# =============================================================================

ToolHandler = Callable[[AlphaVantageClient, Any], Awaitable[Optional[UpstreamPayload]]]

TOOL_HANDLERS: Dict[str, ToolHandler] = {
    "get_stock_price": handle_get_stock_price,
    "get_company_overview": handle_get_company_overview,
    "get_daily_time_series": handle_get_daily_time_series,
    "get_weekly_time_series": handle_get_weekly_time_series,
    "get_forex_rate": handle_get_forex_rate,
    "get_crypto_price": handle_get_crypto_price,
    "get_technical_indicator": handle_get_technical_indicator,
}


async def call_tool(
    client: AlphaVantageClient,
    name: str,
    arguments: Dict[str, Any],
) -> List[TextContent]:
    """
    Call an Alpha Vantage tool by name.

    Args:
        client: Connected API client
        name: Tool name
        arguments: Raw tool arguments

    Returns:
        A single TextContent with the payload as JSON or a failure message

    Raises:
        pydantic.ValidationError: If the arguments do not match the tool schema
    """
    handler = TOOL_HANDLERS.get(name)
    if not handler:
        return [TextContent(type="text", text=f"Unknown tool: {name}")]

    args = TOOL_ARGUMENTS[name].model_validate(arguments)
    payload = await handler(client, args)

    if payload is None:
        logger.warning(f"Tool {name} returned no data")
        return [TextContent(type="text", text=FAILURE_MESSAGES[name])]

    return [TextContent(type="text", text=json.dumps(payload, indent=2, ensure_ascii=False))]
