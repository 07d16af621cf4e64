"""
Auto-Lint State
===============
The server-wide {enabled, auto_correct} flag pair.

One AutoLintState is created per server and injected into the tool
handlers, so tests can build isolated instances. Lives for the process
lifetime; nothing is persisted.

Rule: auto-correction is cleared whenever auto-lint is disabled, whichever
call disables it. A lint run inherits auto-correction only while both flags
are set.
"""
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class AutoLintConfig:
    enabled: bool = False
    auto_correct: bool = False


DEFAULT_CONFIG = AutoLintConfig()


class AutoLintState:
    def __init__(self) -> None:
        self._config = DEFAULT_CONFIG

    def get_config(self) -> AutoLintConfig:
        return replace(self._config)

    def is_enabled(self) -> bool:
        return self._config.enabled

    def is_auto_correct_enabled(self) -> bool:
        return self._config.auto_correct

    def set_config(self, enabled: bool, auto_correct: bool = False) -> None:
        self._config = AutoLintConfig(enabled=enabled, auto_correct=enabled and auto_correct)

    def enable(self, auto_correct: bool = False) -> None:
        self.set_config(True, auto_correct)

    def disable(self) -> None:
        self.set_config(False)

    def reset(self) -> None:
        self._config = DEFAULT_CONFIG

    def should_auto_correct(self, requested: bool = False) -> bool:
        """An explicit request wins; otherwise inherit from auto-lint mode."""
        return requested or (self._config.enabled and self._config.auto_correct)

    def format_status(self) -> str:
        status = "enabled" if self._config.enabled else "disabled"
        auto_correct_status = "enabled" if self._config.auto_correct else "disabled"
        footer = (
            "📝 The AI assistant should run RuboCop after generating or modifying Ruby files."
            if self._config.enabled
            else "Auto-lint is currently disabled."
        )
        return (
            "Auto-lint Status:\n\n"
            f"• Auto-lint: {status}\n"
            f"• Auto-correction: {auto_correct_status}\n\n"
            f"{footer}"
        )
