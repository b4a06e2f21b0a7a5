"""Command-line entry point for cs-commons.

Usage:
    cs-commons help
    cs-commons config
    cs-commons create-site <sitename>
    cs-commons create-artifact <name>
    cs-commons checkin
    cs-commons import-artifact <repo-url> <local-path>
    cs-commons update-artifact <local-path>
    cs-commons preview
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from cs_commons.cli.help import cmd_config, cmd_help, print_listing
from cs_commons.cli.publish import (
    cmd_checkin,
    cmd_import_artifact,
    cmd_preview,
    cmd_update_artifact,
)
from cs_commons.cli.scaffold import cmd_create_artifact, cmd_create_site
from cs_commons.errors import CommonsError, ExternalToolFailure, MissingArgument
from cs_commons.prompt import ConsoleInput, InputSource

PROG = "cs-commons"


@dataclass(frozen=True)
class Command:
    name: str
    synopsis: str
    help: str
    handler: Callable[[argparse.Namespace], int]
    arguments: tuple[str, ...] = ()

    @property
    def usage(self) -> str:
        return f"{self.name} {self.synopsis}".rstrip()


COMMANDS: tuple[Command, ...] = (
    Command("help", "", "Show this list of commands.", cmd_help),
    Command(
        "config", "",
        "Set the author information used to prefill new artifacts.",
        cmd_config,
    ),
    Command(
        "create-site", "<sitename>",
        "Create a new course website in the directory <sitename>.",
        cmd_create_site, ("sitename",),
    ),
    Command(
        "create-artifact", "<name>",
        "Create a new artifact (assignment, lecture, ...) in the directory <name>.",
        cmd_create_artifact, ("name",),
    ),
    Command(
        "checkin", "",
        "Commit the current site or artifact and push it to its repository.",
        cmd_checkin,
    ),
    Command(
        "import-artifact", "<repo-url> <local-path>",
        "Link a published artifact into the current site at <local-path>.",
        cmd_import_artifact, ("repo_url", "local_path"),
    ),
    Command(
        "update-artifact", "<local-path>",
        "Update an imported artifact to its latest version (not implemented yet).",
        cmd_update_artifact, ("local_path",),
    ),
    Command(
        "preview", "",
        "Serve the current site locally until interrupted.",
        cmd_preview,
    ),
)

_registry: dict[str, Command] | None = None


def all_commands() -> dict[str, Command]:
    """Return every command keyed by name, built once per process.

    Raises:
        ValueError: If two commands share a name.
    """
    global _registry
    if _registry is None:
        registry: dict[str, Command] = {}
        for command in COMMANDS:
            if command.name in registry:
                raise ValueError(f"Duplicate command name: {command.name}")
            registry[command.name] = command
        _registry = registry
    return _registry


class _CommandParser(argparse.ArgumentParser):
    """Parser that reports a bad command line as MissingArgument instead of exiting."""

    def __init__(self, command: Command) -> None:
        super().__init__(prog=f"{PROG} {command.name}", add_help=False)
        self.command = command

    def error(self, message: str):
        raise MissingArgument(self.command.name, self.command.synopsis)


def build_parser(command: Command) -> argparse.ArgumentParser:
    """Build the positional-argument parser for one command."""
    parser = _CommandParser(command)
    metavars = command.synopsis.split()
    for name, metavar in zip(command.arguments, metavars):
        parser.add_argument(name, metavar=metavar.strip("<>"))
    return parser


def bind_arguments(
    command: Command,
    tokens: list[str],
    source: InputSource,
    cwd: Path,
) -> argparse.Namespace:
    """Map positional tokens onto the command's argument names.

    Tokens beyond the declared arguments are ignored.
    """
    args, _ = build_parser(command).parse_known_args(tokens)
    args.command = command.name
    args.input = source
    args.cwd = cwd
    return args


def dispatch(argv: list[str], source: InputSource, cwd: Path | None = None) -> int:
    if not argv:
        print_listing()
        return 0

    name, tokens = argv[0], argv[1:]
    command = all_commands().get(name)
    if command is None:
        print(f"ERROR: Unknown command '{name}'\n")
        print_listing()
        return 1

    args = bind_arguments(command, tokens, source, cwd or Path.cwd())
    return command.handler(args)


def main(argv: list[str] | None = None, source: InputSource | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        return dispatch(argv, source or ConsoleInput())
    except MissingArgument as e:
        print(f"Usage: {PROG} {e.command} {e.synopsis}".rstrip())
        return 1
    except ExternalToolFailure as e:
        print(f"ERROR: {e}")
        if e.output:
            print("\n  Output of the failed command:\n")
            print(e.output.rstrip())
        return 1
    except (CommonsError, OSError) as e:
        print(f"ERROR: {e}")
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nAborted.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
