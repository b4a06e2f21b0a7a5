"""Text templates for generated site and artifact files.

Templates use str.format() with named placeholders.
"""

from __future__ import annotations

# Files copied from the template repository into every new site
TEMPLATE_FILES = [
    "_layouts/default.html",
    "_includes/head.html",
    "_includes/navigation.html",
    "css/main.css",
]

GITIGNORE = """\
_site/
.sass-cache/
.jekyll-metadata
.DS_Store
*~
*.swp
"""

# ── Site ───────────────────────────────────────────────────────────

SITE_INDEX = """\
---
layout: default
title: {title}
---

# {title}

Welcome to the course website. Edit `index.md` to change this page and
add new pages as Markdown files next to it.

Course materials are published from [{public_repo}]({public_repo}).
"""

# ── Artifact ───────────────────────────────────────────────────────

ARTIFACT_INDEX = """\
---
title: {title}
type: {type}
---

# {title}

Describe the {type} here.
"""

ARTIFACT_README = """\
# {title}

A {type} shared through cs-commons.

## Authors

{authors_block}

## License

This {type} is released under the [{license_fullname} ({license_shortname})]({license_website}).

## Keywords

{keywords_block}
"""


def format_author(author: dict) -> str:
    """Format one author as a markdown list line."""
    line = f"- {author.get('name', 'Unknown')}"
    if author.get("email"):
        line += f" <{author['email']}>"
    if author.get("affiliation"):
        line += f", {author['affiliation']}"
    return line


def format_keywords(keywords: list[str]) -> str:
    if not keywords:
        return "*None*"
    return ", ".join(f"`{k}`" for k in keywords)
