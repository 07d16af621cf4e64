"""
Tool Registry
=============
The closed set of MCP tools this server exposes.

Each ToolName has exactly one ToolSpec: its description, the pydantic model
that validates its arguments (and generates its inputSchema), and the
ToolHandlers method that serves it.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Type

from mcp.types import Tool
from pydantic import BaseModel

from rubocop_mcp.models.tool_args import (
    AutoGenConfigArgs,
    GetAutoLintStatusArgs,
    LintArgs,
    ListCopsArgs,
    SetAutoLintArgs,
    ShowCopArgs,
)


class ToolName(str, Enum):
    LINT = "rubocop_lint"
    LIST_COPS = "rubocop_list_cops"
    SHOW_COP = "rubocop_show_cop"
    AUTO_GEN_CONFIG = "rubocop_auto_gen_config"
    SET_AUTO_LINT = "rubocop_set_auto_lint"
    GET_AUTO_LINT_STATUS = "rubocop_get_auto_lint_status"


@dataclass(frozen=True)
class ToolSpec:
    name: ToolName
    description: str
    args_model: Type[BaseModel]
    handler: str

    def to_tool(self) -> Tool:
        return Tool(
            name=self.name.value,
            description=self.description,
            inputSchema=self.args_model.model_json_schema(),
        )


TOOL_SPECS: Dict[ToolName, ToolSpec] = {
    spec.name: spec
    for spec in (
        ToolSpec(
            name=ToolName.LINT,
            description=(
                "Run RuboCop (with Rails cops) on Ruby files to check for style violations and "
                "potential issues. Returns detailed information about each offense including "
                "severity, location, and whether it's auto-correctable."
            ),
            args_model=LintArgs,
            handler="lint",
        ),
        ToolSpec(
            name=ToolName.LIST_COPS,
            description=(
                "List RuboCop cops by department. Without department parameter, returns a summary "
                "of all departments. With department parameter (e.g., 'Style', 'Lint'), returns "
                "cops for that specific department with pagination support."
            ),
            args_model=ListCopsArgs,
            handler="list_cops",
        ),
        ToolSpec(
            name=ToolName.SHOW_COP,
            description=(
                "Show detailed information about a specific RuboCop cop, including its "
                "description, default configuration, and examples."
            ),
            args_model=ShowCopArgs,
            handler="show_cop",
        ),
        ToolSpec(
            name=ToolName.AUTO_GEN_CONFIG,
            description=(
                "Generate a .rubocop_todo.yml file with all current offenses disabled. "
                "Useful for gradually adopting RuboCop in existing projects."
            ),
            args_model=AutoGenConfigArgs,
            handler="auto_gen_config",
        ),
        ToolSpec(
            name=ToolName.SET_AUTO_LINT,
            description=(
                "Enable or disable automatic linting mode. When enabled, the AI assistant will be "
                "reminded to run RuboCop after generating or modifying Ruby files."
            ),
            args_model=SetAutoLintArgs,
            handler="set_auto_lint",
        ),
        ToolSpec(
            name=ToolName.GET_AUTO_LINT_STATUS,
            description="Get the current auto-lint status and configuration.",
            args_model=GetAutoLintStatusArgs,
            handler="get_auto_lint_status",
        ),
    )
}

TOOLS: List[Tool] = [TOOL_SPECS[name].to_tool() for name in ToolName]
