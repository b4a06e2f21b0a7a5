"""Steps shared by create-site and create-artifact."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from cs_commons.hosting import infer_urls
from cs_commons.metadata.collector import collect
from cs_commons.metadata.requirements import COMMON_REQUIREMENTS
from cs_commons.prompt import InputSource, ask
from cs_commons.scaffold.templates import GITIGNORE


def collect_repository(source: InputSource) -> dict[str, Any]:
    """Ask for the repository URL, then whatever it does not imply.

    For a recognized GitHub SSH URL the public repository and website URLs
    are derived and never asked.
    """
    _, prompt = COMMON_REQUIREMENTS["repo"]
    repo_url = ask(source, prompt)
    values: dict[str, Any] = {"repo": repo_url, **infer_urls(repo_url)}
    missing = {k: v for k, v in COMMON_REQUIREMENTS.items() if k not in values}
    return collect(missing, values, source)


def write_gitignore(directory: Path) -> Path:
    path = directory / ".gitignore"
    path.write_text(GITIGNORE)
    return path
