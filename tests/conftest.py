"""
Shared fixtures: literal RuboCop output captured from `rubocop --show-cops`
and `rubocop --format json`, trimmed to a few cops per department.
"""
import json
import textwrap

import pytest

SHOW_COPS_OUTPUT = textwrap.dedent("""\
    # Available cops (7) + config for /home/dev/shop:
    # Department 'Bundler' (2):
    # Supports --autocorrect.
    Bundler/DuplicatedGem:
      Description: Checks for duplicate gem entries in Gemfile.
      Enabled: true
      Include:
      - "**/*.gemfile"
      - "**/Gemfile"

    Bundler/OrderedGems:
      Description: Gems within groups in the Gemfile should be alphabetically sorted.
      Enabled: true
      TreatCommentsAsGroupSeparators: true

    # Department 'Lint' (2):
    Lint/AmbiguousOperator:
      Description: Checks for ambiguous operators in the first argument of a method invocation without parentheses.
      Enabled: true
      StyleGuide: "#method-invocation-parens"

    Style/Misplaced:
      Description: Not a real cop; sits inside the Lint block.

    # Supports --autocorrect.
    Lint/Debugger:
      Description: Checks for debugger calls.
      Enabled: true
      DebuggerMethods:
        Kernel:
        - binding.irb

    # Department 'Style' (3):
    # Supports --autocorrect.
    Style/Alias:
      Description: Use alias instead of alias_method.
      Enabled: true
      EnforcedStyle: prefer_alias
      SupportedStyles:
      - prefer_alias
      - prefer_alias_method

    Style/AndOr:
      Description: Use &&/|| instead of and/or.
      Enabled: true
      Exclude:
        Style/NotACop: true

    Style/StringLiterals:
      Description: Checks if uses of quotes match the configured preference.
      Enabled: true
""")


def make_offense(
    line=3,
    column=5,
    severity="warning",
    message="bad",
    cop_name="Style/Foo",
    correctable=True,
    corrected=False,
):
    return {
        "severity": severity,
        "message": message,
        "cop_name": cop_name,
        "correctable": correctable,
        "corrected": corrected,
        "location": {
            "start_line": line,
            "start_column": column,
            "last_line": line,
            "last_column": column + 3,
            "length": 4,
            "line": line,
            "column": column,
        },
    }


def make_lint_payload(files, offense_count=None):
    """Build a dict shaped like `rubocop --format json` output."""
    if offense_count is None:
        offense_count = sum(len(f["offenses"]) for f in files)
    return {
        "metadata": {
            "rubocop_version": "1.64.1",
            "ruby_engine": "ruby",
            "ruby_version": "3.3.0",
            "ruby_patchlevel": "0",
            "ruby_platform": "x86_64-linux",
        },
        "files": files,
        "summary": {
            "offense_count": offense_count,
            "target_file_count": len(files),
            "inspected_file_count": len(files),
        },
    }


@pytest.fixture
def show_cops_output():
    return SHOW_COPS_OUTPUT


@pytest.fixture
def lint_json():
    payload = make_lint_payload([
        {"path": "app/models/user.rb", "offenses": [
            make_offense(line=3, column=5, message="bad", cop_name="Style/Foo"),
            make_offense(line=10, column=1, severity="error", message="Syntax error",
                         cop_name="Lint/Syntax", correctable=False),
        ]},
        {"path": "app/models/clean.rb", "offenses": []},
    ])
    return json.dumps(payload)
