"""Ask the user for whatever metadata a requirement table still needs."""

from __future__ import annotations

from typing import Any

from cs_commons.metadata.requirements import Requirements
from cs_commons.prompt import InputSource, ask


def ordered_keys(requirements: Requirements) -> list[str]:
    """Return the table's keys in prompt order."""
    return sorted(requirements, key=lambda key: requirements[key][0])


def collect(
    requirements: Requirements,
    initial: dict[str, Any] | None,
    source: InputSource,
) -> dict[str, Any]:
    """Return a copy of ``initial`` with every required key answered.

    Each key is asked in order with its current value offered as the
    default. An empty answer keeps a non-empty default; without one the
    question is repeated. Keys outside the table are carried over untouched.

    Args:
        requirements: Table of key -> (order, prompt).
        initial: Values already known (inferred or from the global config).
        source: Where answers are read from.

    Returns:
        New dict; ``initial`` is not modified.
    """
    values = dict(initial or {})
    for key in ordered_keys(requirements):
        _, prompt = requirements[key]
        current = values.get(key)
        default = str(current) if current not in (None, "") else None
        values[key] = ask(source, prompt, default=default)
    return values
