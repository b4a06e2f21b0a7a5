"""help and config commands."""

import argparse


def print_listing() -> None:
    from cs_commons.cli import PROG, all_commands

    print(f"Usage: {PROG} <command> [args...]\n")
    print("Commands:")
    commands = all_commands()
    for name in sorted(commands):
        command = commands[name]
        print(f"  {command.usage}")
        print(f"      {command.help}")


def cmd_help(args: argparse.Namespace) -> int:
    print_listing()
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    from cs_commons.metadata.collector import collect
    from cs_commons.metadata.requirements import AUTHOR_REQUIREMENTS
    from cs_commons.metadata.store import load_global_config, save_global_config

    saved = load_global_config()
    updated = collect(AUTHOR_REQUIREMENTS, saved, args.input)
    path = save_global_config(updated)
    print(f"  Saved author information to {path}")
    return 0
