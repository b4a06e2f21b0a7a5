"""Scaffold a new course-content artifact."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from cs_commons.errors import ValidationFailure
from cs_commons.metadata.collector import collect
from cs_commons.metadata.requirements import (
    ARTIFACT_REQUIREMENTS,
    AUTHOR_REQUIREMENTS,
    LICENSE_REQUIREMENTS,
    LICENSES,
    License,
)
from cs_commons.metadata.store import load_global_config, save_global_config, save_metadata
from cs_commons.paths import global_config_path
from cs_commons.prompt import InputSource, ask_index, ask_yes_no
from cs_commons.scaffold.common import collect_repository, write_gitignore
from cs_commons.scaffold.templates import (
    ARTIFACT_INDEX,
    ARTIFACT_README,
    format_author,
    format_keywords,
)


def collect_authors(source: InputSource) -> list[dict[str, str]]:
    """Ask for one or more authors.

    The first author is prefilled from ~/.cs-commons and, if the user
    agrees, saved back there.
    """
    saved = load_global_config()
    prefill = {k: v for k, v in saved.items() if k in AUTHOR_REQUIREMENTS}
    first = collect(AUTHOR_REQUIREMENTS, prefill, source)
    authors = [{k: first[k] for k in AUTHOR_REQUIREMENTS}]

    changed = any(saved.get(k) != authors[0][k] for k in AUTHOR_REQUIREMENTS)
    if changed and ask_yes_no(source, f"Save your author information to {global_config_path()}?"):
        save_global_config({**saved, **authors[0]})

    while ask_yes_no(source, "Add another author?"):
        authors.append(collect(AUTHOR_REQUIREMENTS, {}, source))
    return authors


def choose_license(source: InputSource) -> License:
    """Pick a license from the catalog, or describe one with a negative index."""
    print("\n  Available licenses:")
    for i, lic in enumerate(LICENSES):
        print(f"    {i}. {lic.shortname:<18} {lic.fullname}")
    print("    Enter -1 to use a different license.\n")

    index = ask_index(source, "License number", len(LICENSES))
    if index >= 0:
        return LICENSES[index]
    values = collect(LICENSE_REQUIREMENTS, {}, source)
    return License(values["shortname"], values["fullname"], values["website"])


def render_readme(metadata: dict[str, Any]) -> str:
    lic = metadata["license"]
    return ARTIFACT_README.format(
        title=metadata["title"],
        type=metadata["type"],
        authors_block="\n".join(format_author(a) for a in metadata["authors"]),
        license_shortname=lic["shortname"],
        license_fullname=lic["fullname"],
        license_website=lic["website"],
        keywords_block=format_keywords(metadata["keywords"]),
    )


def create_artifact(name: str, source: InputSource, cwd: Path | str | None = None) -> dict:
    """Create an artifact directory called ``name`` under ``cwd``.

    Raises:
        ValidationFailure: If the directory already exists. Nothing is
            asked or written in that case.

    Returns:
        Dict with keys: target, metadata, files.
    """
    target = Path(cwd or Path.cwd()) / name
    if target.exists():
        raise ValidationFailure(f"{target} already exists")

    metadata = collect_repository(source)
    metadata["authors"] = collect_authors(source)
    metadata["license"] = choose_license(source).as_dict()
    fields = collect(ARTIFACT_REQUIREMENTS, {}, source)
    metadata["title"] = fields["title"]
    metadata["type"] = fields["type"]
    metadata["keywords"] = fields["keywords"].split()

    target.mkdir(parents=True)
    files = [save_metadata(target, "artifact", metadata)]
    index_path = target / "index.md"
    index_path.write_text(ARTIFACT_INDEX.format(title=metadata["title"], type=metadata["type"]))
    readme_path = target / "README.md"
    readme_path.write_text(render_readme(metadata))
    files += [index_path, readme_path, write_gitignore(target)]

    return {"target": target, "metadata": metadata, "files": files}
