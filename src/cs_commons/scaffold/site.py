"""Scaffold a new course website."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

import yaml

from cs_commons.errors import ValidationFailure
from cs_commons.metadata.collector import collect
from cs_commons.metadata.requirements import SITE_REQUIREMENTS
from cs_commons.metadata.store import save_metadata
from cs_commons.paths import SITE_MARKER, template_base_url
from cs_commons.process import run_quiet
from cs_commons.prompt import InputSource
from cs_commons.scaffold.common import collect_repository, write_gitignore
from cs_commons.scaffold.templates import SITE_INDEX, TEMPLATE_FILES


def fetch_templates(target: Path, base_url: str | None = None) -> list[Path]:
    """Download every template file into ``target`` with curl.

    Parent directories are created as needed. Fails on the first file
    that cannot be fetched; files already downloaded stay in place.
    """
    base = (base_url or template_base_url()).rstrip("/")
    fetched = []
    for rel in TEMPLATE_FILES:
        dest = target / rel
        dest.parent.mkdir(parents=True, exist_ok=True)
        run_quiet(["curl", "--fail", "--silent", "--show-error", "--location",
                   "--output", str(dest), f"{base}/{rel}"])
        fetched.append(dest)
    return fetched


def render_site_config(values: dict[str, Any]) -> str:
    """Build the Jekyll ``_config.yml`` for a site."""
    parts = urlsplit(values.get("url", ""))
    config = {
        "title": values["title"],
        "url": f"{parts.scheme}://{parts.netloc}" if parts.netloc else values.get("url", ""),
        "baseurl": parts.path.rstrip("/"),
        "repository": values.get("public_repo", ""),
        "markdown": "kramdown",
        "exclude": [SITE_MARKER, "README.md"],
    }
    return yaml.safe_dump(config, sort_keys=False, default_flow_style=False)


def create_site(name: str, source: InputSource, cwd: Path | str | None = None) -> dict:
    """Create a site directory called ``name`` under ``cwd``.

    An existing directory is scaffolded into unless it is already a site.
    Nothing is rolled back when a later step fails.

    Returns:
        Dict with keys: target, metadata, files.
    """
    target = Path(cwd or Path.cwd()) / name
    if (target / SITE_MARKER).exists():
        raise ValidationFailure(f"{target} is already a cs-commons site")

    values = collect_repository(source)
    values = collect(SITE_REQUIREMENTS, values, source)

    target.mkdir(parents=True, exist_ok=True)
    files = fetch_templates(target)

    config_path = target / "_config.yml"
    config_path.write_text(render_site_config(values))
    index_path = target / "index.md"
    index_path.write_text(SITE_INDEX.format(
        title=values["title"],
        public_repo=values.get("public_repo", ""),
    ))
    files += [config_path, index_path, write_gitignore(target)]
    files.append(save_metadata(target, "site", values))

    return {"target": target, "metadata": values, "files": files}
