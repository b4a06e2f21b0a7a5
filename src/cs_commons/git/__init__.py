"""Git module — publishing and linking via the git executable."""

from cs_commons.git.checkin import CheckinResult, checkin, discover_content
from cs_commons.git.submodule import import_artifact, validate_import

__all__ = [
    "CheckinResult",
    "checkin",
    "discover_content",
    "import_artifact",
    "validate_import",
]
