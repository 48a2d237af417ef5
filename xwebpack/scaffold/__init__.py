"""Project scaffolding from the template repository."""

from .core import ScaffoldPipeline, ScaffoldResult, ScaffoldStage
from .manifest import merge_manifest, rewrite_manifest

__all__ = [
    "ScaffoldPipeline",
    "ScaffoldResult",
    "ScaffoldStage",
    "merge_manifest",
    "rewrite_manifest",
]
