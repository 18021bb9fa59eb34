"""
dupsift — read-only duplicate file finder.

Core features:
- Five detection algorithms: name, size, name-and-size, fuzzy-content, full-content
- Progressive narrowing: cheap signatures (name, size) before SHA-1 prefix and full hashes
- Report ordered by occupied space, with a total summary
- CLI interface for headless/server usage
"""

# Get version
from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("dupsift")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Public API — only what users should import directly
from dupsift.commands import DeduplicationCommand
from dupsift.core import (
    ScanParams, Algorithm, Stage, StageEvent, File, DuplicateGroup, DuplicateReport)
from dupsift.utils.convert_utils import ConvertUtils

__all__ = [
    "DeduplicationCommand",
    "ScanParams",
    "Algorithm",
    "Stage",
    "StageEvent",
    "File",
    "DuplicateGroup",
    "DuplicateReport",
    "ConvertUtils",
    "__version__",
]
