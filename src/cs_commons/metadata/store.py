"""Load and save metadata marker files and the global config."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from cs_commons.errors import ValidationFailure
from cs_commons.paths import ARTIFACT_MARKER, SITE_MARKER, global_config_path

MARKERS = {"site": SITE_MARKER, "artifact": ARTIFACT_MARKER}


def write_json(data: dict[str, Any], path: Path) -> None:
    """Write a dict as pretty-printed JSON with a trailing newline."""
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
        f.write("\n")


def read_json(path: Path) -> dict[str, Any]:
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationFailure(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValidationFailure(f"{path} does not contain a JSON object")
    return data


def detect_kind(directory: Path | str) -> str:
    """Tell whether ``directory`` holds a site or an artifact.

    Raises:
        ValidationFailure: If neither marker file is present, or both are.
    """
    directory = Path(directory)
    found = [kind for kind, name in MARKERS.items() if (directory / name).is_file()]
    if not found:
        raise ValidationFailure(
            f"{directory} is not a cs-commons site or artifact "
            f"(no {SITE_MARKER} or {ARTIFACT_MARKER} found)"
        )
    if len(found) > 1:
        raise ValidationFailure(
            f"{directory} contains both {SITE_MARKER} and {ARTIFACT_MARKER}; "
            "remove the one that does not apply"
        )
    return found[0]


def load_metadata(directory: Path | str, kind: str) -> dict[str, Any]:
    return read_json(Path(directory) / MARKERS[kind])


def save_metadata(directory: Path | str, kind: str, data: dict[str, Any]) -> Path:
    path = Path(directory) / MARKERS[kind]
    write_json(data, path)
    return path


def load_global_config(path: Path | str | None = None) -> dict[str, Any]:
    """Read ~/.cs-commons, returning an empty dict when it does not exist."""
    config_path = Path(path) if path else global_config_path()
    if not config_path.is_file():
        return {}
    return read_json(config_path)


def save_global_config(data: dict[str, Any], path: Path | str | None = None) -> Path:
    config_path = Path(path) if path else global_config_path()
    write_json(data, config_path)
    return config_path
