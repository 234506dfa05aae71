"""
CLI entry point for the Alpha Vantage MCP server.

Allows running as: python -m alpha_vantage_mcp
"""

from .server import main

if __name__ == "__main__":
    main()
