"""Publish a site or artifact directory to its repository.

The sequence is linear: init on the publish branch, add, status, optional
manual adjustment, commit, remote, push. Any failing git call aborts it;
nothing already done is undone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from cs_commons.errors import NetworkFailure, ValidationFailure
from cs_commons.hosting import DISCOVERY_TAG, fetch_description, has_discovery_tag, parse_hosted_url
from cs_commons.metadata.store import detect_kind, load_metadata
from cs_commons.paths import user_shell
from cs_commons.process import run_git, run_verbose
from cs_commons.prompt import InputSource, ask_yes_no

CONTENT_EXTENSIONS = {
    ".md", ".markdown", ".html", ".htm", ".css", ".scss", ".js",
    ".json", ".yml", ".yaml", ".txt", ".csv",
    ".png", ".jpg", ".jpeg", ".gif", ".svg", ".ico",
    ".pdf", ".ipynb", ".py", ".java", ".c", ".h", ".zip",
}

SKIP_DIRS = {"_site", "node_modules"}

PUSH_BRANCH = {"site": "gh-pages", "artifact": "master"}
COMMIT_MESSAGE = "Initial commit"


@dataclass
class CheckinResult:
    kind: str
    branch: str
    files: list[str] = field(default_factory=list)
    remote: str = ""
    # True/False once the description was checked, None when it could not be
    tagged: bool | None = None


def discover_content(directory: Path | str) -> list[str]:
    """Find content files under ``directory`` by extension.

    Hidden directories and build output are skipped. An existing
    ``.gitignore`` is always included.

    Returns:
        Sorted list of paths relative to ``directory``.
    """
    root = Path(directory)
    found: list[str] = []
    for path in root.rglob("*"):
        rel = path.relative_to(root)
        if any(part.startswith(".") or part in SKIP_DIRS for part in rel.parts[:-1]):
            continue
        if path.is_file() and path.suffix.lower() in CONTENT_EXTENSIONS:
            found.append(rel.as_posix())
    if (root / ".gitignore").is_file():
        found.append(".gitignore")
    return sorted(found)


def check_discovery_tag(repo_url: str) -> bool | None:
    """Warn when the hosted repository's description lacks the discovery tag.

    Returns True/False for a completed check, None when the URL is not a
    recognized GitHub URL or the API could not be queried.
    """
    hosted = parse_hosted_url(repo_url)
    if hosted is None:
        return None
    try:
        description = fetch_description(hosted)
    except NetworkFailure as e:
        print(f"  WARNING: could not verify the repository description: {e}")
        return None
    if has_discovery_tag(description):
        return True
    print(
        f"  WARNING: the description of {hosted.public_repo_url} does not contain "
        f"'{DISCOVERY_TAG}'.\n"
        f"  Add it on GitHub so others can discover this repository."
    )
    return False


def checkin(directory: Path | str, source: InputSource) -> CheckinResult:
    """Initialize, commit and push the site or artifact in ``directory``."""
    root = Path(directory)
    kind = detect_kind(root)
    metadata = load_metadata(root, kind)
    remote = metadata.get("repo")
    if not remote:
        raise ValidationFailure(f"No 'repo' URL recorded in the {kind} metadata")

    files = discover_content(root)
    if not files:
        raise ValidationFailure(f"No content files found in {root}")

    branch = PUSH_BRANCH[kind]
    run_git(["init", "-b", branch], root)
    run_git(["add", "--"] + files, root)

    print("\n  Files staged for the initial commit:\n")
    run_git(["status"], root, quiet=False)
    if ask_yes_no(source, "Open a shell to adjust the staged files before committing?"):
        print("  Use 'git add' / 'git rm --cached' as needed, then exit the shell to continue.")
        run_verbose([user_shell()], cwd=root)

    run_git(["commit", "-m", COMMIT_MESSAGE], root)
    run_git(["remote", "add", "origin", remote], root)
    run_git(["push", "-u", "origin", branch], root, quiet=False)

    result = CheckinResult(kind=kind, branch=branch, files=files, remote=remote)
    result.tagged = check_discovery_tag(remote)
    return result
