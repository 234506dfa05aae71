"""Tests for Alpha Vantage MCP"""
