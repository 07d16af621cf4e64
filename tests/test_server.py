"""
Integration Tests — MCP Server
==============================
Drives the real mcp Server through the SDK's in-memory client session:
tools/list and tools/call over the protocol, with RuboCop mocked out.
"""
import asyncio
from unittest.mock import AsyncMock, patch

import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from rubocop_mcp.server import create_dispatcher, create_server, main
from rubocop_mcp.services.rubocop_service import CommandOutput, RubocopService
from rubocop_mcp.state.auto_lint_state import AutoLintState


def _server(stdout=""):
    service = RubocopService()
    service.execute = AsyncMock(return_value=CommandOutput(stdout=stdout))
    return create_server(create_dispatcher(service, AutoLintState())), service


class TestProtocol:

    def test_list_tools(self):
        server, _ = _server()

        async def run_test():
            async with create_connected_server_and_client_session(server) as client:
                return await client.list_tools()

        result = asyncio.run(run_test())
        assert len(result.tools) == 6
        assert result.tools[0].name == "rubocop_lint"

    def test_call_tool(self, show_cops_output):
        server, service = _server(stdout=show_cops_output)

        async def run_test():
            async with create_connected_server_and_client_session(server) as client:
                return await client.call_tool("rubocop_list_cops", {"department": "Lint"})

        result = asyncio.run(run_test())
        assert result.isError is False
        assert "• Lint/Debugger" in result.content[0].text
        service.execute.assert_awaited_once_with(["--show-cops"])

    def test_auto_lint_state_shared_across_calls(self):
        server, _ = _server()

        async def run_test():
            async with create_connected_server_and_client_session(server) as client:
                await client.call_tool("rubocop_set_auto_lint", {"enabled": True})
                return await client.call_tool("rubocop_get_auto_lint_status", {})

        result = asyncio.run(run_test())
        assert "• Auto-lint: enabled" in result.content[0].text

    def test_unknown_tool_is_error_result(self):
        server, _ = _server()

        async def run_test():
            async with create_connected_server_and_client_session(server) as client:
                return await client.call_tool("rubocop_explode", {})

        result = asyncio.run(run_test())
        assert result.isError is True
        assert "rubocop_explode" in result.content[0].text

    def test_invalid_arguments_reach_dispatcher(self):
        server, service = _server()

        async def run_test():
            async with create_connected_server_and_client_session(server) as client:
                return await client.call_tool("rubocop_lint", {})

        result = asyncio.run(run_test())
        assert result.isError is True
        assert "Invalid arguments for rubocop_lint" in result.content[0].text
        service.execute.assert_not_awaited()


class TestMain:

    def test_startup_failure_exits_nonzero(self):
        with patch("rubocop_mcp.server.setup_logging"), \
             patch("rubocop_mcp.server.serve", new=AsyncMock(side_effect=OSError("stdin closed"))):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1
