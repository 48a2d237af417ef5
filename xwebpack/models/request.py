"""Scaffold request and derived path models."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ScaffoldRequest(BaseModel):
    """What the user asked for on the command line."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    target_name: str
    use_npm: bool = False
    verbose: bool = False

    @field_validator('target_name')
    @classmethod
    def validate_target_name(cls, v: str) -> str:
        """Reject empty or whitespace-only project directories."""
        if not v or not v.strip():
            raise ValueError("Project directory must not be empty")
        return v


@dataclass(frozen=True)
class ResolvedPaths:
    """Absolute locations derived once from a ScaffoldRequest."""
    root: Path
    app_name: str
    original_directory: Path

    @classmethod
    def from_request(
        cls,
        request: ScaffoldRequest,
        cwd: Optional[Path] = None,
    ) -> "ResolvedPaths":
        original = Path(cwd) if cwd else Path.cwd()
        root = Path(os.path.normpath(original / request.target_name))
        return cls(root=root, app_name=root.name, original_directory=original)
