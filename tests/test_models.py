"""
Unit Tests — Lint Result Model
==============================
Parsing of `rubocop --format json` output into LintResult.
"""
import json

import pytest
from pydantic import ValidationError

from conftest import make_lint_payload, make_offense
from rubocop_mcp.core.errors import RubocopParseError
from rubocop_mcp.models.lint_result import LintResult


class TestFromJson:

    def test_parses_full_report(self, lint_json):
        result = LintResult.from_json(lint_json)
        assert result.metadata.rubocop_version == "1.64.1"
        assert result.summary.offense_count == 2
        assert [f.path for f in result.files] == ["app/models/user.rb", "app/models/clean.rb"]
        first = result.files[0].offenses[0]
        assert first.cop_name == "Style/Foo"
        assert first.location.line == 3
        assert first.location.column == 5
        assert first.location.length == 4

    def test_optional_span_and_metadata(self):
        raw = json.dumps({
            "files": [{"path": "a.rb", "offenses": [{
                "severity": "convention", "message": "m", "cop_name": "Style/X",
                "location": {"line": 1, "column": 2},
            }]}],
            "summary": {"offense_count": 1},
        })
        result = LintResult.from_json(raw)
        offense = result.files[0].offenses[0]
        assert offense.correctable is False
        assert offense.location.start_line is None
        assert result.metadata.ruby_version is None

    def test_malformed_json_raises_parse_error(self):
        with pytest.raises(RubocopParseError) as exc_info:
            LintResult.from_json("Error: invalid option --bogus")
        assert exc_info.value.raw_output == "Error: invalid option --bogus"

    def test_missing_summary_raises_parse_error(self):
        with pytest.raises(RubocopParseError):
            LintResult.from_json(json.dumps({"files": []}))

    def test_offenses_are_frozen(self):
        result = LintResult.model_validate(make_lint_payload([{"path": "a.rb", "offenses": [make_offense()]}]))
        with pytest.raises(ValidationError):
            result.files[0].offenses[0].message = "changed"
