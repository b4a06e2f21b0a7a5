"""Scaffold module — create new site and artifact directories."""

from cs_commons.scaffold.artifact import create_artifact
from cs_commons.scaffold.site import create_site

__all__ = ["create_artifact", "create_site"]
