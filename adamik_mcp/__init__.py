"""
Adamik MCP server package.

This package exposes LLM-friendly tools backed by the Adamik multi-chain
HTTP API. See DESIGN.md for full details.
"""

__all__ = ["config"]
