"""
RuboCop Service
===============
Runs the RuboCop executable and hands back its raw output.

BOUNDARY RULES:
    - The service ONLY executes RuboCop and builds its argument vectors.
    - It NEVER parses or formats output; that is the formatter's job.
    - It NEVER reads auto-lint state; callers decide whether to auto-correct.

EXIT STATUS:
    RuboCop exits with status 1 when it finds offenses. That is a normal
    outcome, not a failure: a status-1 run with stdout is returned like a
    status-0 run. Anything else non-zero raises RubocopExecutionError.

The executable is spawned directly (no shell), so paths and cop names are
never interpreted by a shell. One process per call; no retries, no timeout.
"""
import asyncio
import contextlib
import logging
from dataclasses import dataclass
from typing import List, Optional

from rubocop_mcp.core.config import RUBOCOP_COMMAND, RUBOCOP_MAX_BUFFER
from rubocop_mcp.core.constants import AUTO_CORRECT_FLAG
from rubocop_mcp.core.errors import RubocopExecutionError, RubocopNotInstalledError

logger = logging.getLogger(__name__)

_READ_CHUNK = 64 * 1024
_OFFENSES_FOUND_EXIT_CODE = 1


@dataclass
class CommandOutput:
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0


def is_success(exit_code: int, stdout: str) -> bool:
    """Exit 0, or exit 1 ("offenses found") with a report on stdout."""
    if exit_code == 0:
        return True
    return exit_code == _OFFENSES_FOUND_EXIT_CODE and bool(stdout)


class RubocopService:
    def __init__(self, command: str = RUBOCOP_COMMAND, max_buffer: int = RUBOCOP_MAX_BUFFER):
        self.command = command
        self.max_buffer = max_buffer

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    async def execute(self, args: List[str]) -> CommandOutput:
        """
        Run ``<command> *args`` and return its decoded stdout/stderr.

        Raises
        ------
        RubocopNotInstalledError
            The executable could not be found.
        RubocopExecutionError
            The process could not start, overflowed the output buffer, or
            exited with a status other than 0 / 1-with-output.
        """
        logger.debug("Running %s %s", self.command, " ".join(args))

        try:
            process = await asyncio.create_subprocess_exec(
                self.command,
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as exc:
            raise RubocopNotInstalledError(self.command) from exc
        except OSError as exc:
            raise RubocopExecutionError(f"Failed to start {self.command}: {exc}") from exc

        try:
            raw_stdout, raw_stderr = await asyncio.gather(
                self._read_capped(process.stdout, "stdout"),
                self._read_capped(process.stderr, "stderr"),
            )
        except RubocopExecutionError:
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            raise

        exit_code = await process.wait()
        stdout = raw_stdout.decode("utf-8", errors="replace")
        stderr = raw_stderr.decode("utf-8", errors="replace")

        if not is_success(exit_code, stdout):
            logger.warning("%s exited with status %s", self.command, exit_code)
            raise RubocopExecutionError(
                f"RuboCop exited with status {exit_code}",
                exit_code=exit_code,
                stderr=stderr.strip(),
            )

        return CommandOutput(stdout=stdout, stderr=stderr, exit_code=exit_code)

    async def _read_capped(self, stream: Optional[asyncio.StreamReader], name: str) -> bytes:
        if stream is None:
            return b""

        chunks: list[bytes] = []
        size = 0
        while True:
            chunk = await stream.read(_READ_CHUNK)
            if not chunk:
                break
            size += len(chunk)
            if size > self.max_buffer:
                raise RubocopExecutionError(
                    f"RuboCop {name} exceeded the {self.max_buffer} byte output limit"
                )
            chunks.append(chunk)
        return b"".join(chunks)

    # ------------------------------------------------------------------
    # Argument vectors
    # ------------------------------------------------------------------
    @staticmethod
    def build_lint_args(
        path: str,
        auto_correct: bool = False,
        only: Optional[str] = None,
        except_: Optional[str] = None,
    ) -> List[str]:
        """
        ``--format json [-A] [--only <only>] [--except <except>] <path>``

        ``only``/``except_`` are passed through verbatim; RuboCop validates
        the cop names.
        """
        args = ["--format", "json"]
        if auto_correct:
            args.append(AUTO_CORRECT_FLAG)
        if only:
            args.extend(["--only", only])
        if except_:
            args.extend(["--except", except_])
        args.append(path)
        return args

    @staticmethod
    def build_show_cops_args(cop_name: Optional[str] = None) -> List[str]:
        args = ["--show-cops"]
        if cop_name:
            args.append(cop_name)
        return args

    @staticmethod
    def build_auto_gen_config_args(path: str = ".") -> List[str]:
        return ["--auto-gen-config", path]
