"""Shared data structures for command execution."""

from __future__ import annotations

from dataclasses import dataclass, field

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2


@dataclass(frozen=True)
class CommandResult:
    """Lines a command wants printed and the process exit code it implies."""

    stdout: list[str] = field(default_factory=list)
    stderr: list[str] = field(default_factory=list)
    exit_code: int = EXIT_OK

    @property
    def ok(self) -> bool:
        return self.exit_code == EXIT_OK


def failure(message: str, *, exit_code: int = EXIT_FAILURE, stdout: list[str] | None = None) -> CommandResult:
    """Helper to build a failed result with a single error line."""

    return CommandResult(stdout=list(stdout or []), stderr=[message], exit_code=exit_code)
