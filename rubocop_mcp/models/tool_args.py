"""
Tool Argument Models
====================
One pydantic model per MCP tool. The model is both the validator for an
incoming ``arguments`` dict and the source of the tool's published
``inputSchema`` (see ``rubocop_mcp.api.tools``).
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from rubocop_mcp.core.constants import DEFAULT_COP_LIMIT, MAX_COP_LIMIT


class LintArgs(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    path: str = Field(min_length=1, description="Path to the Ruby file or directory to lint")
    auto_correct: bool = Field(
        default=False,
        description="Whether to automatically fix correctable offenses (default: false)",
    )
    only: Optional[str] = Field(
        default=None,
        description="Run only the specified cop(s), e.g., 'Rails/ActiveRecordAliases' or 'Style,Lint'",
    )
    except_: Optional[str] = Field(
        default=None,
        alias="except",
        description="Exclude the specified cop(s) from the run",
    )


class ListCopsArgs(BaseModel):
    department: Optional[str] = Field(
        default=None,
        description=(
            "Filter cops by department (e.g., 'Style', 'Lint', 'Layout', 'Metrics', "
            "'Naming', 'Security'). Omit to see department summary."
        ),
    )
    limit: int = Field(
        default=DEFAULT_COP_LIMIT,
        description=f"Maximum number of cops to return (default: {DEFAULT_COP_LIMIT}, max: {MAX_COP_LIMIT})",
    )
    offset: int = Field(
        default=0,
        description="Number of cops to skip for pagination (default: 0)",
    )


class ShowCopArgs(BaseModel):
    cop_name: str = Field(
        min_length=1,
        description="The name of the cop to show details for (e.g., 'Rails/ActiveRecordAliases')",
    )


class AutoGenConfigArgs(BaseModel):
    path: str = Field(
        default=".",
        description="Path to the directory to generate config for (default: current directory)",
    )


class SetAutoLintArgs(BaseModel):
    enabled: bool = Field(description="True to enable auto-lint, false to disable")
    auto_correct: bool = Field(
        default=False,
        description="Whether to automatically fix issues when auto-linting (default: false)",
    )


class GetAutoLintStatusArgs(BaseModel):
    pass
