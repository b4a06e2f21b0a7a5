"""External tool invocation.

Two flavours: ``run_verbose`` lets the tool talk to the terminal directly,
``run_quiet`` captures its output and only surfaces it (through
``ExternalToolFailure.output``) when the tool fails.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from cs_commons.errors import ExternalToolFailure


@dataclass
class CommandOutput:
    args: list[str]
    returncode: int
    output: str = ""


def run_verbose(args: list[str], cwd: Path | str | None = None) -> CommandOutput:
    """Run a command with its output shown live. Raises on non-zero exit."""
    try:
        result = subprocess.run(args, cwd=cwd)
    except FileNotFoundError:
        raise ExternalToolFailure(args, None) from None
    if result.returncode != 0:
        raise ExternalToolFailure(args, result.returncode)
    return CommandOutput(args=list(args), returncode=result.returncode)


def run_quiet(args: list[str], cwd: Path | str | None = None) -> CommandOutput:
    """Run a command with stdout and stderr captured.

    The captured text is returned on success and attached to the raised
    ``ExternalToolFailure`` on a non-zero exit.
    """
    try:
        result = subprocess.run(
            args,
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        raise ExternalToolFailure(args, None) from None
    output = (result.stdout or "") + (result.stderr or "")
    if result.returncode != 0:
        raise ExternalToolFailure(args, result.returncode, output)
    return CommandOutput(args=list(args), returncode=result.returncode, output=output)


def run_git(args: list[str], cwd: Path | str, quiet: bool = True) -> CommandOutput:
    """Run a git subcommand in ``cwd``."""
    runner = run_quiet if quiet else run_verbose
    return runner(["git"] + args, cwd=cwd)
