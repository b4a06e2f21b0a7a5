"""Line-oriented prompting.

Every interactive question goes through an ``InputSource`` so commands can
be driven by a scripted list of answers in tests.
"""

from __future__ import annotations

from typing import Protocol

YES_ANSWERS = {"y", "yes"}
NO_ANSWERS = {"n", "no"}


class InputSource(Protocol):
    def readline(self, prompt: str) -> str: ...


class ConsoleInput:
    """Reads answers from the terminal."""

    def readline(self, prompt: str) -> str:
        return input(prompt)


class ScriptedInput:
    """Replays a fixed list of answers, then behaves like a closed stdin.

    The prompts that were shown are kept in ``prompts`` for inspection.
    """

    def __init__(self, answers: list[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def readline(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError(f"No scripted answer left for: {prompt.strip()}")
        return self._answers.pop(0)


def _format_prompt(prompt: str, default: str | None) -> str:
    if default:
        return f"{prompt} [{default}]: "
    return f"{prompt}: "


def ask(
    source: InputSource,
    prompt: str,
    default: str | None = None,
    required: bool = True,
) -> str:
    """Ask a question, offering ``default`` as the answer for an empty line.

    With no usable default and ``required`` set, empty answers are
    re-asked until something is typed.
    """
    while True:
        answer = source.readline(_format_prompt(prompt, default)).strip()
        if answer:
            return answer
        if default:
            return default
        if not required:
            return ""
        print("  A value is required.")


def ask_yes_no(source: InputSource, prompt: str, default: bool = False) -> bool:
    hint = "Y/n" if default else "y/N"
    while True:
        answer = source.readline(f"{prompt} [{hint}] ").strip().lower()
        if not answer:
            return default
        if answer in YES_ANSWERS:
            return True
        if answer in NO_ANSWERS:
            return False
        print("  Please answer 'y' or 'n'.")


def ask_index(source: InputSource, prompt: str, upper: int) -> int:
    """Ask for an integer below ``upper``. Negative numbers are allowed."""
    while True:
        answer = source.readline(f"{prompt}: ").strip()
        try:
            value = int(answer)
        except ValueError:
            print(f"  Please enter a number below {upper}.")
            continue
        if value < upper:
            return value
        print(f"  Please enter a number below {upper}.")
