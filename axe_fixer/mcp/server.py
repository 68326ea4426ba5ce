"""MCP server exposing the remediation engine as a single tool.

Usage:
    # Start the server on stdio
    python -m axe_fixer.mcp.server

Configure in an MCP client:
    {
        "mcpServers": {
            "axe-html-fixer": {
                "command": "axe-fixer-mcp",
                "env": {
                    "AXE_FIXER_DEFAULT_HTML_PATH": "/path/to/Dashboard.html",
                    "AXE_FIXER_DEFAULT_REPORT_PATH": "/path/to/report.json"
                }
            }
        }
    }
"""

import asyncio
import json
from pathlib import Path
from typing import Optional

import structlog
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from ..config import Settings, get_settings
from ..remediation import RemediationError, load_report, remediate, remediate_fragments
from ..reporting import generate_report
from ..utils.logging import configure_logging

logger = structlog.get_logger()

# Fragment label -> (inline argument, path argument)
FRAGMENT_ARGUMENTS = {
    "header": ("header_html", "header_path"),
    "navigation": ("navigation_html", "navigation_path"),
    "footer": ("footer_html", "footer_path"),
}


class ToolInputError(Exception):
    """A tool call was missing an argument or pointed at an unreadable file."""


def _string_property(description: str) -> dict:
    return {"type": "string", "description": description}


class AccessibilityMCPServer:
    """Tool adapter between MCP requests and the remediation engine."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.log = logger.bind(component="accessibility_mcp")

    def get_tools(self) -> list[dict]:
        """Get list of available tools.

        Returns:
            List of tool definitions for MCP protocol
        """
        properties = {
            "html_path": _string_property("Path to the HTML page to remediate"),
            "html_content": _string_property("Inline HTML page content (instead of html_path)"),
            "report_path": _string_property("Path to the axe DevTools JSON report"),
            "report_content": _string_property("Inline axe JSON report (instead of report_path)"),
            "format": {
                "type": "string",
                "enum": ["json", "markdown"],
                "description": "Response format (default: json)",
                "default": "json",
            },
        }
        for label, (inline_arg, path_arg) in FRAGMENT_ARGUMENTS.items():
            properties[inline_arg] = _string_property(f"Inline {label} fragment HTML")
            properties[path_arg] = _string_property(f"Path to the {label} fragment HTML")

        return [
            {
                "name": "check_accessibility",
                "description": (
                    "Apply an axe accessibility report to HTML (a page, optionally with "
                    "header/navigation/footer fragments) and return the remediated markup, "
                    "the change log and suggested color fixes."
                ),
                "inputSchema": {
                    "type": "object",
                    "properties": properties,
                    "required": [],
                },
            },
        ]

    async def call_tool(self, name: str, arguments: Optional[dict]) -> dict:
        """Execute a tool call.

        Args:
            name: Tool name
            arguments: Tool arguments

        Returns:
            Tool result with content, or an error message
        """
        handlers = {
            "check_accessibility": self._check_accessibility,
        }

        handler = handlers.get(name)
        if not handler:
            return {"error": f"Unknown tool: {name}"}

        try:
            result = await handler(arguments or {})
            return {"content": [{"type": "text", "text": result}]}
        except (ToolInputError, RemediationError) as e:
            self.log.warning("Tool call rejected", tool=name, error=str(e))
            return {"error": str(e)}
        except Exception as e:
            self.log.error("Tool execution failed", tool=name, error=str(e))
            return {"error": str(e)}

    async def _check_accessibility(self, args: dict) -> str:
        report_text = self._resolve(
            args, "report_content", "report_path", self.settings.default_report_path, "report",
        )
        report = load_report(report_text)

        page_html = self._resolve_optional(
            args, "html_content", "html_path", self.settings.default_html_path,
        )
        page_label = self._label_for(args.get("html_path") or self.settings.default_html_path, "page")

        fragments = {}
        for label, (inline_arg, path_arg) in FRAGMENT_ARGUMENTS.items():
            html = self._resolve_optional(args, inline_arg, path_arg, None)
            if html:
                fragments[label] = html

        if page_html is None and not fragments:
            raise ToolInputError("No HTML provided: pass html_path or html_content")

        as_markdown = args.get("format") == "markdown"

        if not fragments:
            result = remediate(page_html, report, page_label, self.settings)
            self.log.info("Page checked", file=page_label, changes=len(result.changes_required))
            if as_markdown:
                return generate_report(report, result)
            return result.to_json()

        documents = {"page": page_html, **fragments}
        results = remediate_fragments(documents, report, self.settings)
        self.log.info("Fragments checked", fragments=list(results))
        if as_markdown:
            return generate_report(report, results)
        return json.dumps({label: r.to_dict() for label, r in results.items()}, indent=2)

    def _resolve_optional(
        self,
        args: dict,
        inline_arg: str,
        path_arg: str,
        default_path: Optional[str],
    ) -> Optional[str]:
        """Inline content, else the file at the given path, else None."""
        if args.get(inline_arg):
            return args[inline_arg]
        path = args.get(path_arg) or default_path
        if not path:
            return None
        return self._read(path)

    def _resolve(self, args: dict, inline_arg: str, path_arg: str, default_path: Optional[str], what: str) -> str:
        content = self._resolve_optional(args, inline_arg, path_arg, default_path)
        if content is None:
            raise ToolInputError(f"No {what} provided: pass {path_arg} or {inline_arg}")
        return content

    @staticmethod
    def _read(path: str) -> str:
        file_path = Path(path)
        if not file_path.is_file():
            raise ToolInputError(f"File not found at {path}")
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ToolInputError(f"Could not read {path}: {e}") from e

    @staticmethod
    def _label_for(path: Optional[str], fallback: str) -> str:
        return Path(path).name if path else fallback


async def start_server(settings: Optional[Settings] = None) -> None:
    """Start the MCP server on stdio."""
    settings = settings or get_settings()
    accessibility_server = AccessibilityMCPServer(settings)

    server = Server(settings.server_name, version=settings.server_version)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [
            Tool(
                name=t["name"],
                description=t["description"],
                inputSchema=t["inputSchema"],
            )
            for t in accessibility_server.get_tools()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        result = await accessibility_server.call_tool(name, arguments)
        if "error" in result:
            return [TextContent(type="text", text=f"Error: {result['error']}")]
        return [TextContent(type="text", text=result["content"][0]["text"])]

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main():
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings.log_level, json_format=settings.log_json)
    asyncio.run(start_server(settings))


if __name__ == "__main__":
    main()
