"""Data models for xwebpack."""
from xwebpack.models.manifest import ManifestPatch
from xwebpack.models.process import (
    PackageManager,
    PackageManagerChoice,
    ProcessResult,
)
from xwebpack.models.request import ResolvedPaths, ScaffoldRequest

__all__ = [
    'ManifestPatch',
    'PackageManager',
    'PackageManagerChoice',
    'ProcessResult',
    'ResolvedPaths',
    'ScaffoldRequest',
]
