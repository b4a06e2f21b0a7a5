"""Filesystem and remote locations.

Resolves canonical paths used by cs-commons. Uses environment variables
when available, falls back to conventional defaults.

Environment variables:
    HOME: location of the global config file (~/.cs-commons)
    SHELL: shell spawned for manual adjustment during checkin
    CS_COMMONS_TEMPLATE_URL: base URL of the site template repository
    CS_COMMONS_API_URL: base URL of the GitHub REST API
"""

from __future__ import annotations

import os
from pathlib import Path

SITE_MARKER = "cs-commons-site.json"
ARTIFACT_MARKER = "cs-commons-artifact.json"
GLOBAL_CONFIG_NAME = ".cs-commons"

_DEFAULT_TEMPLATE_URL = "https://raw.githubusercontent.com/cs-commons/site-template/gh-pages"
_DEFAULT_API_URL = "https://api.github.com"
_DEFAULT_SHELL = "/bin/sh"


def global_config_path() -> Path:
    """Return the path to the user's ~/.cs-commons file."""
    return Path.home() / GLOBAL_CONFIG_NAME


def template_base_url() -> str:
    """Return the base URL template files are fetched from."""
    return os.environ.get("CS_COMMONS_TEMPLATE_URL", _DEFAULT_TEMPLATE_URL).rstrip("/")


def api_base_url() -> str:
    """Return the base URL of the code-hosting API."""
    return os.environ.get("CS_COMMONS_API_URL", _DEFAULT_API_URL).rstrip("/")


def user_shell() -> str:
    return os.environ.get("SHELL") or _DEFAULT_SHELL
