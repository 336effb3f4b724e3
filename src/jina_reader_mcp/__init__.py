"""MCP server exposing the Jina Reader content-extraction API."""

__version__ = "1.0.0"
