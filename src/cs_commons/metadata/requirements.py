"""Fixed metadata requirement tables and the license catalog.

A requirement table maps a metadata key to ``(order, prompt)``. Keys are
asked in ascending ``order``; the numbers only need to be unique within
a table.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

Requirements = dict[str, tuple[int, str]]

# Repository locations shared by sites and artifacts
COMMON_REQUIREMENTS: Requirements = {
    "repo": (0, "Repository URL (e.g. git@github.com:user/repo.git)"),
    "public_repo": (10, "Public repository URL (e.g. https://github.com/user/repo)"),
    "url": (20, "Public website URL"),
}

SITE_REQUIREMENTS: Requirements = {
    "title": (0, "Site title (e.g. CS 101: Introduction to Programming)"),
}

AUTHOR_REQUIREMENTS: Requirements = {
    "name": (0, "Author name"),
    "email": (10, "Author email"),
    "affiliation": (20, "Author affiliation (e.g. university)"),
}

ARTIFACT_REQUIREMENTS: Requirements = {
    "title": (0, "Artifact title"),
    "type": (10, "Artifact type (e.g. assignment, lecture, lab, exam)"),
    "keywords": (20, "Keywords (separated by spaces)"),
}


@dataclass(frozen=True)
class License:
    shortname: str
    fullname: str
    website: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


LICENSES: list[License] = [
    License(
        "CC BY 4.0",
        "Creative Commons Attribution 4.0 International",
        "https://creativecommons.org/licenses/by/4.0/",
    ),
    License(
        "CC BY-SA 4.0",
        "Creative Commons Attribution-ShareAlike 4.0 International",
        "https://creativecommons.org/licenses/by-sa/4.0/",
    ),
    License(
        "CC BY-NC-SA 4.0",
        "Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International",
        "https://creativecommons.org/licenses/by-nc-sa/4.0/",
    ),
    License(
        "MIT",
        "MIT License",
        "https://opensource.org/licenses/MIT",
    ),
    License(
        "GPL-3.0",
        "GNU General Public License v3.0",
        "https://www.gnu.org/licenses/gpl-3.0.html",
    ),
]

LICENSE_REQUIREMENTS: Requirements = {
    "shortname": (0, "License short name (e.g. CC BY 4.0)"),
    "fullname": (10, "License full name"),
    "website": (20, "License website"),
}
