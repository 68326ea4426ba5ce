"""MCP (Model Context Protocol) adapter for the remediation engine."""

from .server import AccessibilityMCPServer, start_server

__all__ = [
    "AccessibilityMCPServer",
    "start_server",
]
