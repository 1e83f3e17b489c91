"""MCP server for glyph-mcp."""

import asyncio
import json

import structlog
from mcp.server import Server
from mcp.types import Tool, TextContent

from .config import Settings
from .files import require_absolute
from .log import configure_logging
from .tools.extract_symbols import extract_symbols

logger = structlog.get_logger()

DETAIL_LEVELS = ["minimal", "standard", "full"]


# Create server
server = Server("glyph")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="extract_symbols",
            description="Extract symbol outlines from source code files using tree-sitter parsing.",
            inputSchema={
                "type": "object",
                "properties": {
                    "pattern": {
                        "type": "string",
                        "description": "Absolute path glob pattern to match files (e.g., '/path/to/project/**/*.go', '/home/user/src/**/*.js')"
                    },
                    "detail": {
                        "type": "string",
                        "description": "Level of detail: 'minimal' (names and lines), 'standard' (declaration headers) or 'full' (complete source)",
                        "enum": DETAIL_LEVELS,
                        "default": "standard"
                    }
                },
                "required": ["pattern"]
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    settings = Settings.from_env()

    try:
        if name == "extract_symbols":
            if not arguments.get("pattern"):
                raise ValueError("pattern argument is required")
            pattern = require_absolute(arguments["pattern"])
            # Parsing is CPU-bound; keep the event loop free
            text = await asyncio.to_thread(
                extract_symbols,
                pattern,
                arguments.get("detail") or "standard",
                settings,
            )
            return [TextContent(type="text", text=text)]

        result = {"error": f"Unknown tool: {name}"}

    except Exception as e:
        logger.warning("tool_failed", tool=name, error=str(e))
        result = {"error": str(e)}

    return [TextContent(type="text", text=json.dumps(result, indent=2))]


async def run_server():
    """Run the MCP server."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Main entry point."""
    settings = Settings.from_env()
    configure_logging(level=settings.log_level, json_format=settings.log_format == "json")
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
