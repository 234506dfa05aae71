"""
Argument models for Alpha Vantage tools.

Each tool validates its arguments against one of these pydantic models, and
the JSON schema advertised to MCP clients is generated from the same model.
"""

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field

# Query parameters sent upstream, minus the API key
UpstreamParams = Dict[str, str]

# Decoded JSON body, passed through untouched
UpstreamPayload = Any

OutputSize = Literal["compact", "full"]

Interval = Literal[
    "1min",
    "5min",
    "15min",
    "30min",
    "60min",
    "daily",
    "weekly",
    "monthly",
]


class ToolArguments(BaseModel):
    """Base model for tool arguments."""

    model_config = ConfigDict(frozen=True)


class SymbolArguments(ToolArguments):
    """Arguments for tools that only need a ticker."""

    symbol: str = Field(..., description="Stock symbol (e.g., AAPL)")


class DailyTimeSeriesArguments(SymbolArguments):
    """Arguments for the daily time series."""

    outputsize: OutputSize = Field(
        default="compact",
        description="Amount of data to return: 'compact' (latest 100 points) or 'full'",
    )


class ForexRateArguments(ToolArguments):
    """Arguments for a currency pair."""

    from_currency: str = Field(..., description="Source currency (e.g., USD)")
    to_currency: str = Field(..., description="Target currency (e.g., EUR)")


class CryptoPriceArguments(ToolArguments):
    """Arguments for a cryptocurrency quote."""

    symbol: str = Field(..., description="Cryptocurrency symbol (e.g., BTC)")
    market: str = Field(..., description="Market currency (e.g., USD)")


class TechnicalIndicatorArguments(SymbolArguments):
    """Arguments for a technical indicator series."""

    indicator: str = Field(
        ...,
        description="Technical indicator function (e.g., SMA, EMA, RSI)",
    )
    interval: Interval = Field(default="daily", description="Time interval between data points")
