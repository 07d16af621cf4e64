"""
Output Formatter
================
THE SINGLE SOURCE OF TRUTH for every message string a tool call returns
on success.

STRICT DETERMINISM CONTRACT:
  - This module NEVER runs RuboCop.
  - This module NEVER reads environment variables or auto-lint state.
  - Given the same inputs, it ALWAYS returns the exact same output string.

Three independent renderers:
    format_offenses            — LintResult → offense report
    format_cop_list            — --show-cops text → one department, paginated
    format_department_summary  — --show-cops text → department/count overview
"""
from rubocop_mcp.core.constants import DEFAULT_COP_LIMIT
from rubocop_mcp.models.lint_result import LintResult, Offense
from rubocop_mcp.parser.show_cops_parser import (
    Pagination,
    extract_cops_for_department,
    paginate,
    parse_department_counts,
)

NO_OFFENSES_MESSAGE = "✓ No offenses found!"


# ---------------------------------------------------------------------------
# Severity Icons
# ---------------------------------------------------------------------------
SEVERITY_ICONS: dict[str, str] = {
    "fatal": "❌",
    "error": "❌",
    "warning": "⚠️",
}
DEFAULT_SEVERITY_ICON = "ℹ️"


def severity_icon(severity: str) -> str:
    return SEVERITY_ICONS.get(severity, DEFAULT_SEVERITY_ICON)


# ===================================================================
# Offense Report
# ===================================================================
def _offense_tags(offense: Offense) -> str:
    tags = []
    if offense.correctable:
        tags.append("[Auto-correctable]")
    if offense.corrected:
        tags.append("[Corrected]")
    return f" {' '.join(tags)}" if tags else ""


def format_offense(offense: Offense) -> str:
    """Two-line block: icon, location and message; then cop name and tags."""
    location = f"{offense.location.line}:{offense.location.column}"
    return (
        f"  {severity_icon(offense.severity)} Line {location}: {offense.message}\n"
        f"     Cop: {offense.cop_name}{_offense_tags(offense)}\n"
    )


def format_offenses(result: LintResult) -> str:
    """
    Render a RuboCop lint result for the assistant.

    Files are listed in RuboCop's order and offenses in the order reported
    within each file. Files without offenses are skipped.
    """
    if result.summary.offense_count == 0:
        return NO_OFFENSES_MESSAGE

    output = (
        f"Found {result.summary.offense_count} offense(s) "
        f"in {len(result.files)} file(s):\n\n"
    )

    for file_report in result.files:
        if not file_report.offenses:
            continue

        output += f"📄 {file_report.path}\n"
        for offense in file_report.offenses:
            output += format_offense(offense)
        output += "\n"

    return output


# ===================================================================
# Cop Listing (one department, paginated)
# ===================================================================
def _pagination_footer(page: Pagination, department: str) -> str:
    if not page.has_more:
        return f"✓ All cops displayed for {department} department.\n"

    return (
        "📄 More results available. To see the next page:\n"
        f"   Use limit: {page.limit}, offset: {page.next_offset}\n"
        f"   Remaining: {page.remaining} cops\n"
    )


def format_cop_list(
    raw: str,
    department: str,
    limit: int = DEFAULT_COP_LIMIT,
    offset: int = 0,
) -> str:
    """
    List the cops of ``department`` found in ``rubocop --show-cops`` output.

    ``limit`` is clamped to at most MAX_COP_LIMIT. An unknown department is
    not an error: it yields a "no cops found" message.
    """
    cops = extract_cops_for_department(raw, department)

    if not cops:
        return (
            f"No cops found for department: {department}\n\n"
            "Available departments can be seen by calling rubocop_list_cops "
            "without a department parameter."
        )

    page = paginate(len(cops), limit, offset)
    shown = cops[page.offset:page.end]

    output = f"RuboCop Cops ({department} department):\n"
    if shown:
        output += f"Showing {page.offset + 1}-{page.offset + len(shown)} of {page.total} total cops\n\n"
    else:
        output += f"Showing 0 of {page.total} total cops\n\n"
    for cop in shown:
        output += f"• {cop}\n"
    output += "\n"
    output += _pagination_footer(page, department)

    return output


# ===================================================================
# Department Summary
# ===================================================================
def format_department_summary(raw: str) -> str:
    departments = parse_department_counts(raw)
    total = sum(departments.values())

    output = f"RuboCop has {total} total cops across {len(departments)} departments:\n\n"
    for name in sorted(departments):
        output += f"• {name}: {departments[name]} cops\n"

    output += "\n💡 To see cops for a specific department, use the 'department' parameter.\n"
    output += '   Example: { "department": "Style" }\n'

    return output
