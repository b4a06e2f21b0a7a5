"""Metadata module — requirement tables, the collector, and persistence."""

from cs_commons.metadata.collector import collect, ordered_keys
from cs_commons.metadata.requirements import (
    ARTIFACT_REQUIREMENTS,
    AUTHOR_REQUIREMENTS,
    COMMON_REQUIREMENTS,
    LICENSES,
    SITE_REQUIREMENTS,
    License,
)
from cs_commons.metadata.store import (
    detect_kind,
    load_global_config,
    load_metadata,
    save_global_config,
    save_metadata,
)

__all__ = [
    "collect",
    "ordered_keys",
    "ARTIFACT_REQUIREMENTS",
    "AUTHOR_REQUIREMENTS",
    "COMMON_REQUIREMENTS",
    "LICENSES",
    "SITE_REQUIREMENTS",
    "License",
    "detect_kind",
    "load_global_config",
    "load_metadata",
    "save_global_config",
    "save_metadata",
]
