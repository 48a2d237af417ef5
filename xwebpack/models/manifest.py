"""package.json identity patch."""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ManifestPatch:
    """Fields written over the template's package.json."""
    name: str
    version: str = "0.1.0"
    description: str = ""
    private: bool = True

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "private": self.private,
        }
