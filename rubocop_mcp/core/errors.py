"""
Errors
======
Exception hierarchy for every failure a tool call can hit, plus the single
renderer that turns any of them into the text shown to the client.

Handlers raise; only the dispatcher catches and calls ``format_error``.
"""
from typing import Optional

from rubocop_mcp.core.constants import INSTALL_HINT


class RubocopError(Exception):
    """Base class for all RuboCop-related failures."""


class RubocopNotInstalledError(RubocopError):
    def __init__(self, command: str = "rubocop"):
        self.command = command
        super().__init__(
            f"RuboCop is not installed or '{command}' was not found in PATH.\n\n"
            "To install RuboCop:\n"
            f"  {INSTALL_HINT}"
        )


class RubocopExecutionError(RubocopError):
    """RuboCop failed to start or exited with an unexpected status."""

    def __init__(self, message: str, exit_code: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr


class RubocopParseError(RubocopError):
    """RuboCop output could not be interpreted. Keeps the raw output for diagnostics."""

    def __init__(self, raw_output: str, detail: str = ""):
        message = "Failed to parse RuboCop JSON output. The output may be malformed."
        if detail:
            message += f" ({detail})"
        super().__init__(message)
        self.raw_output = raw_output


class InvalidToolArgumentsError(RubocopError):
    def __init__(self, tool_name: str, problems: list[str]):
        super().__init__(f"Invalid arguments for {tool_name}")
        self.tool_name = tool_name
        self.problems = problems


class UnknownToolError(Exception):
    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


def format_error(error: BaseException) -> str:
    """Render any exception into a user-facing message."""
    if isinstance(error, RubocopNotInstalledError):
        return str(error)

    if isinstance(error, RubocopExecutionError):
        msg = f"Error running RuboCop: {error}"
        if error.stderr:
            msg += f"\n\nStderr:\n{error.stderr}"
        return msg

    if isinstance(error, RubocopParseError):
        return f"{error}\n\nIf this persists, please file an issue with the raw output."

    if isinstance(error, InvalidToolArgumentsError):
        lines = [f"{error}:"]
        lines.extend(f"  - {problem}" for problem in error.problems)
        return "\n".join(lines)

    if isinstance(error, UnknownToolError):
        return str(error)

    return f"Error: {error}"
