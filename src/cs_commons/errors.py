"""Error taxonomy for cs-commons.

Library code raises one of these where the failure is detected; only the
top-level CLI renders them.
"""

from __future__ import annotations


class CommonsError(RuntimeError):
    """Base class for every failure the CLI reports to the user."""


class MissingArgument(CommonsError):
    """A required positional argument was not supplied."""

    def __init__(self, command: str, synopsis: str = "") -> None:
        self.command = command
        self.synopsis = synopsis
        super().__init__(f"Missing argument for '{command}'")


class ExternalToolFailure(CommonsError):
    """An external executable could not be run or exited non-zero.

    ``output`` holds whatever the tool printed when it was run quietly,
    and is empty when the output was already shown live.
    """

    def __init__(self, args: list[str], returncode: int | None, output: str = "") -> None:
        self.args_list = list(args)
        self.returncode = returncode
        self.output = output
        if returncode is None:
            message = f"Could not run '{args[0]}': is it installed and on PATH?"
        else:
            message = f"Command failed (exit {returncode}): {' '.join(args)}"
        super().__init__(message)


class ValidationFailure(CommonsError):
    """User input or directory state does not allow the operation."""


class NetworkFailure(CommonsError):
    """A remote API could not be reached or returned an unusable answer."""
