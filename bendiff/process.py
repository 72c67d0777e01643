"""Running external programs and capturing their output."""

from __future__ import annotations

import os
import signal
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

EXEC_FAILURE_CODE = 127


@dataclass
class ProcessResult:
    """Exit code and captured output of a finished process.

    ``stdout`` holds the raw bytes written by the process; ``stderr`` holds
    its error output as text, together with any diagnostics of our own.
    """

    exit_code: int = 0
    stdout: bytes = b""
    stderr: str = ""

    @property
    def stdout_text(self) -> str:
        """Standard output decoded as UTF-8, undecodable bytes escaped."""
        return self.stdout.decode("utf-8", errors="surrogateescape")


def _failure(message: str) -> ProcessResult:
    return ProcessResult(exit_code=EXEC_FAILURE_CODE, stderr=message)


def _exit_code(returncode: int) -> int:
    if returncode >= 0:
        return returncode
    signum = -returncode
    if signum in {int(s) for s in signal.Signals}:
        return 128 + signum
    return EXEC_FAILURE_CODE


def run_process(
    argv: Sequence[str], working_dir: Path | str | None = None
) -> ProcessResult:
    """Run ``argv[0]`` with ``argv[1:]`` in ``working_dir`` and wait for it.

    When the program cannot be started, the exit code is 127 and ``stderr``
    explains why. A process killed by a signal reports 128 plus the signal
    number.
    """
    args = list(argv)
    if not args or not args[0]:
        return _failure("run_process: empty argv")

    cwd: str | None = None
    if working_dir is not None and str(working_dir) != "":
        if not Path(working_dir).is_dir():
            return _failure(
                "run_process: working directory does not exist or is not a directory"
            )
        cwd = os.fspath(working_dir)

    try:
        completed = subprocess.run(
            args,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        reason = exc.strerror or str(exc)
        return _failure(f"run_process: exec failed: {reason}\n")

    return ProcessResult(
        exit_code=_exit_code(completed.returncode),
        stdout=completed.stdout,
        stderr=completed.stderr.decode("utf-8", errors="replace"),
    )