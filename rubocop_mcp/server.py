"""
MCP Server
==========
Wires the tool dispatcher into the ``mcp`` low-level Server and runs it
over stdio.
"""
import asyncio
import logging
import sys
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from rubocop_mcp.api.dispatcher import ToolDispatcher
from rubocop_mcp.api.handlers import ToolHandlers
from rubocop_mcp.core.config import LOG_DIR, LOG_LEVEL
from rubocop_mcp.core.constants import SERVER_NAME, SERVER_VERSION
from rubocop_mcp.services.rubocop_service import RubocopService
from rubocop_mcp.state.auto_lint_state import AutoLintState
from rubocop_mcp.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_dispatcher(
    service: Optional[RubocopService] = None,
    auto_lint: Optional[AutoLintState] = None,
) -> ToolDispatcher:
    handlers = ToolHandlers(service or RubocopService(), auto_lint or AutoLintState())
    return ToolDispatcher(handlers)


def create_server(dispatcher: Optional[ToolDispatcher] = None) -> Server:
    dispatcher = dispatcher or create_dispatcher()
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return dispatcher.list_tools()

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        return await dispatcher.call(name, arguments)

    return server


async def serve(server: Optional[Server] = None) -> None:
    server = server or create_server()
    async with stdio_server() as (read_stream, write_stream):
        logger.info("RuboCop MCP Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    setup_logging(level=getattr(logging, LOG_LEVEL, logging.INFO), log_dir=LOG_DIR)
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.critical("Fatal error", exc_info=True)
        sys.exit(1)
