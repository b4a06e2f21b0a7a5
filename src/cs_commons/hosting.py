"""GitHub repository URL recognition and description lookup."""

from __future__ import annotations

import re
from dataclasses import dataclass

import requests

from cs_commons.errors import NetworkFailure
from cs_commons.paths import api_base_url

DISCOVERY_TAG = "#cs-commons"
API_TIMEOUT = 10

_SSH_URL = re.compile(r"^git@github\.com:(?P<owner>[\w.-]+)/(?P<repo>[\w.-]+?)(?:\.git)?/?$")


@dataclass(frozen=True)
class HostedRepo:
    owner: str
    repo: str

    @property
    def site_url(self) -> str:
        return f"http://{self.owner}.github.io/{self.repo}"

    @property
    def public_repo_url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo}"

    @property
    def api_url(self) -> str:
        return f"{api_base_url()}/repos/{self.owner}/{self.repo}"


def parse_hosted_url(url: str) -> HostedRepo | None:
    """Recognize ``git@github.com:<owner>/<repo>[.git]``.

    Returns None for anything else, including https clone URLs.
    """
    match = _SSH_URL.match(url.strip())
    if not match:
        return None
    return HostedRepo(owner=match.group("owner"), repo=match.group("repo"))


def infer_urls(repo_url: str) -> dict[str, str]:
    """Derive public repository and website URLs from a recognized repo URL."""
    hosted = parse_hosted_url(repo_url)
    if hosted is None:
        return {}
    return {"public_repo": hosted.public_repo_url, "url": hosted.site_url}


def fetch_description(hosted: HostedRepo) -> str:
    """Return the repository description shown on GitHub.

    Raises:
        NetworkFailure: If the API cannot be reached, answers with an
            error status, or returns something that is not JSON.
    """
    try:
        response = requests.get(
            hosted.api_url,
            headers={"Accept": "application/vnd.github+json"},
            timeout=API_TIMEOUT,
        )
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as e:
        raise NetworkFailure(f"Could not query {hosted.api_url}: {e}") from e
    except ValueError as e:
        raise NetworkFailure(f"Unreadable response from {hosted.api_url}") from e

    if not isinstance(data, dict):
        raise NetworkFailure(f"Unexpected response from {hosted.api_url}")
    return data.get("description") or ""


def has_discovery_tag(description: str) -> bool:
    return DISCOVERY_TAG in description
