"""MCP server exposing CLT Calc tools."""
