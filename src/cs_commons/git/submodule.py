"""Link shared artifacts into a site as git submodules."""

from __future__ import annotations

from pathlib import Path

from cs_commons.errors import ValidationFailure
from cs_commons.process import run_git


def validate_import(repo_url: str, local_path: str, cwd: Path | str) -> Path:
    """Check an import request, returning the resolved target path."""
    if not repo_url.startswith("https://"):
        raise ValidationFailure(
            f"'{repo_url}' is not a public repository URL (expected https://...)"
        )
    rel = Path(local_path)
    if rel.is_absolute():
        raise ValidationFailure(f"'{local_path}' must be a path relative to the current directory")
    target = Path(cwd) / rel
    if target.exists():
        raise ValidationFailure(f"'{local_path}' already exists")
    return target


def import_artifact(repo_url: str, local_path: str, cwd: Path | str | None = None) -> Path:
    """Add the artifact at ``repo_url`` as a submodule at ``local_path``.

    The caller still has to commit and push the new submodule.
    """
    root = Path(cwd or Path.cwd())
    target = validate_import(repo_url, local_path, root)
    run_git(["submodule", "add", repo_url, local_path], root, quiet=False)
    return target
