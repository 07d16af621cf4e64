"""
Tool Dispatcher
===============
Routes an MCP ``tools/call`` to its handler and converts the outcome into
a CallToolResult.

Every failure, including an unknown tool name, comes back as a result with
``isError=True`` and the rendered message; nothing raised by a handler
reaches the transport.
"""
import logging
import time
from typing import Any, List, Optional

from mcp.types import CallToolResult, TextContent, Tool
from pydantic import BaseModel, ValidationError

from rubocop_mcp.api.handlers import ToolHandlers
from rubocop_mcp.api.tools import TOOL_SPECS, TOOLS, ToolName
from rubocop_mcp.core.errors import (
    InvalidToolArgumentsError,
    RubocopError,
    UnknownToolError,
    format_error,
)

logger = logging.getLogger(__name__)

_missing_handlers = [spec.handler for spec in TOOL_SPECS.values() if not hasattr(ToolHandlers, spec.handler)]
if set(TOOL_SPECS) != set(ToolName) or _missing_handlers:
    raise RuntimeError(f"Tool registry is incomplete: missing handlers {_missing_handlers}")


def text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


def resolve_tool(name: str) -> ToolName:
    try:
        return ToolName(name)
    except ValueError:
        raise UnknownToolError(name) from None


def validate_arguments(tool: ToolName, arguments: Optional[dict[str, Any]]) -> BaseModel:
    model = TOOL_SPECS[tool].args_model
    try:
        return model.model_validate(arguments or {})
    except ValidationError as exc:
        problems = [
            f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
            for err in exc.errors()
        ]
        raise InvalidToolArgumentsError(tool.value, problems) from exc


class ToolDispatcher:
    def __init__(self, handlers: ToolHandlers):
        self.handlers = handlers

    def list_tools(self) -> List[Tool]:
        return list(TOOLS)

    async def call(self, name: str, arguments: Optional[dict[str, Any]] = None) -> CallToolResult:
        start_time = time.time()
        logger.info("call_tool: %s", name)

        try:
            tool = resolve_tool(name)
            args = validate_arguments(tool, arguments)
            handler = getattr(self.handlers, TOOL_SPECS[tool].handler)
            text = await handler(args)
        except (RubocopError, UnknownToolError) as exc:
            logger.warning("Tool %s failed: %s", name, exc)
            return text_result(format_error(exc), is_error=True)
        except Exception as exc:
            logger.exception("Tool %s failed unexpectedly", name)
            return text_result(format_error(exc), is_error=True)
        finally:
            logger.info("call_tool done: %s (%.2fms)", name, (time.time() - start_time) * 1000)

        return text_result(text)
