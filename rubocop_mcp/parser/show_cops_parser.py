"""
Show-Cops Parser
================
Scrapes the human-readable output of ``rubocop --show-cops``.

RuboCop prints one header per department followed by the YAML-ish
configuration of every cop in it:

    # Department 'Bundler' (7):
    # Supports --autocorrect.
    Bundler/DuplicatedGem:
      Description: Checks for duplicate gem entries in Gemfile.
      Enabled: true

Contract:
    - Every regex that depends on that text layout lives in this module.
    - DETERMINISTIC: same text → same result.
    - Tolerant: lines that match nothing are ignored, never raised on.
"""
import re
from dataclasses import dataclass
from typing import Dict, List

from rubocop_mcp.core.constants import MAX_COP_LIMIT

# "# Department 'Style' (281):"
DEPARTMENT_HEADER_RE = re.compile(r"^# Department '([^']+)' \((\d+)\):")
# Looser form used only to track which department block we are in.
DEPARTMENT_NAME_RE = re.compile(r"^# Department '([^']+)'")
# "Style/AccessModifierDeclarations:"
COP_NAME_RE = re.compile(r"^([A-Z][a-zA-Z]+/[A-Za-z0-9]+):")


# ---------------------------------------------------------------------------
# Cop extraction
# ---------------------------------------------------------------------------
def extract_cops_for_department(raw: str, department: str) -> List[str]:
    """
    Return the cop names of one department, in the order RuboCop printed them.

    The department match is exact and case-sensitive: ``style`` finds nothing.
    """
    prefix = f"{department}/"
    cops: list[str] = []
    in_other_department = False

    for line in raw.splitlines():
        header = DEPARTMENT_NAME_RE.match(line)
        if header:
            in_other_department = header.group(1) != department
            continue

        if in_other_department or not line.startswith(prefix):
            continue

        match = COP_NAME_RE.match(line)
        if match:
            cops.append(match.group(1))

    return cops


def parse_department_counts(raw: str) -> Dict[str, int]:
    """Map department name → cop count, read from the department header lines."""
    counts: dict[str, int] = {}
    for line in raw.splitlines():
        match = DEPARTMENT_HEADER_RE.match(line)
        if match:
            counts[match.group(1)] = int(match.group(2))
    return counts


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Pagination:
    offset: int
    limit: int
    total: int

    @property
    def end(self) -> int:
        return max(self.offset, min(self.offset + self.limit, self.total))

    @property
    def has_more(self) -> bool:
        return self.offset + self.limit < self.total

    @property
    def next_offset(self) -> int:
        return self.offset + self.limit

    @property
    def remaining(self) -> int:
        return max(self.total - self.next_offset, 0)


def paginate(total: int, limit: int, offset: int = 0) -> Pagination:
    """Clamp limit to [0, MAX_COP_LIMIT] and offset to >= 0."""
    limit = max(0, min(limit, MAX_COP_LIMIT))
    offset = max(0, offset)
    return Pagination(offset=offset, limit=limit, total=total)
