"""
Lint Result Model
=================
Pydantic models for RuboCop's ``--format json`` report.

This is the contract between the RuboCop service and the offense formatter.
Everything here is produced by RuboCop and only ever read for display.

Fields (LintResult):
    metadata    — RuboCop / Ruby version strings (informational only)
    files       — one FileReport per inspected file, in RuboCop's order
    summary     — offense_count, target_file_count, inspected_file_count

summary.offense_count is trusted as reported; it is not cross-checked
against the per-file offense lists.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from rubocop_mcp.core.errors import RubocopParseError


class OffenseLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int
    column: int
    start_line: Optional[int] = None
    start_column: Optional[int] = None
    last_line: Optional[int] = None
    last_column: Optional[int] = None
    length: Optional[int] = None


class Offense(BaseModel):
    model_config = ConfigDict(frozen=True)

    severity: str
    message: str
    cop_name: str
    correctable: bool = False
    corrected: bool = False
    location: OffenseLocation


class FileReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    offenses: List[Offense] = []


class LintMetadata(BaseModel):
    rubocop_version: Optional[str] = None
    ruby_engine: Optional[str] = None
    ruby_version: Optional[str] = None
    ruby_patchlevel: Optional[str] = None
    ruby_platform: Optional[str] = None


class LintSummary(BaseModel):
    offense_count: int
    target_file_count: int = 0
    inspected_file_count: int = 0


class LintResult(BaseModel):
    metadata: LintMetadata = LintMetadata()
    files: List[FileReport] = []
    summary: LintSummary

    @classmethod
    def from_json(cls, raw: str) -> "LintResult":
        """Parse RuboCop JSON output; malformed or unexpected output raises RubocopParseError."""
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise RubocopParseError(raw, detail=f"{exc.error_count()} validation error(s)") from exc
