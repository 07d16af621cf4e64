"""
Tool Handlers
=============
One coroutine per MCP tool. Each takes its validated argument model and
returns the message text; failures are raised and left to the dispatcher.
"""
import logging

from rubocop_mcp.core.output_formatter import (
    format_cop_list,
    format_department_summary,
    format_offenses,
)
from rubocop_mcp.models.lint_result import LintResult
from rubocop_mcp.models.tool_args import (
    AutoGenConfigArgs,
    GetAutoLintStatusArgs,
    LintArgs,
    ListCopsArgs,
    SetAutoLintArgs,
    ShowCopArgs,
)
from rubocop_mcp.services.rubocop_service import RubocopService
from rubocop_mcp.state.auto_lint_state import AutoLintState

logger = logging.getLogger(__name__)

AUTO_LINT_REMINDER = (
    "\n💡 Auto-lint is enabled. Consider running with auto_correct: true "
    "to fix issues automatically."
)


class ToolHandlers:
    def __init__(self, service: RubocopService, auto_lint: AutoLintState):
        self.service = service
        self.auto_lint = auto_lint

    async def lint(self, args: LintArgs) -> str:
        # Read auto-lint mode once, before awaiting RuboCop.
        auto_lint_enabled = self.auto_lint.is_enabled()
        auto_correct = self.auto_lint.should_auto_correct(args.auto_correct)

        rubocop_args = self.service.build_lint_args(
            args.path,
            auto_correct=auto_correct,
            only=args.only,
            except_=args.except_,
        )
        output = await self.service.execute(rubocop_args)
        result = LintResult.from_json(output.stdout)
        logger.info(
            "Linted %s: %d offense(s) in %d file(s)",
            args.path, result.summary.offense_count, result.summary.inspected_file_count,
        )

        message = format_offenses(result)
        if auto_lint_enabled and result.summary.offense_count > 0:
            message += AUTO_LINT_REMINDER
        return message

    async def list_cops(self, args: ListCopsArgs) -> str:
        output = await self.service.execute(self.service.build_show_cops_args())
        if not args.department:
            return format_department_summary(output.stdout)
        return format_cop_list(output.stdout, args.department, args.limit, args.offset)

    async def show_cop(self, args: ShowCopArgs) -> str:
        output = await self.service.execute(self.service.build_show_cops_args(args.cop_name))
        return f"Details for {args.cop_name}:\n\n{output.stdout}"

    async def auto_gen_config(self, args: AutoGenConfigArgs) -> str:
        output = await self.service.execute(self.service.build_auto_gen_config_args(args.path))
        return f"Configuration generated successfully!\n\n{output.stdout}\n{output.stderr}"

    async def set_auto_lint(self, args: SetAutoLintArgs) -> str:
        self.auto_lint.set_config(args.enabled, args.auto_correct)
        config = self.auto_lint.get_config()
        logger.info("Auto-lint set: enabled=%s auto_correct=%s", config.enabled, config.auto_correct)

        status = "enabled" if config.enabled else "disabled"
        auto_correct_msg = " with auto-correction" if config.auto_correct else ""
        detail = (
            "The AI assistant will now be reminded to run RuboCop after generating "
            "or modifying Ruby files."
            if config.enabled
            else "Auto-lint reminders are now disabled."
        )
        return f"✓ Auto-lint has been {status}{auto_correct_msg}.\n\n{detail}"

    async def get_auto_lint_status(self, args: GetAutoLintStatusArgs) -> str:
        return self.auto_lint.format_status()
