"""Rewrite the cloned package.json with the new project's identity."""
import json
from pathlib import Path
from typing import Any, Dict

from xwebpack.core.errors import ManifestError
from xwebpack.core.logger import get_logger
from xwebpack.models.manifest import ManifestPatch

logger = get_logger(__name__)

MANIFEST_NAME = "package.json"


def merge_manifest(manifest: Dict[str, Any], patch: ManifestPatch) -> Dict[str, Any]:
    """Shallow-merge patch over manifest; patch fields always win."""
    merged = dict(manifest)
    merged.update(patch.as_dict())
    return merged


def rewrite_manifest(root: Path, app_name: str) -> Dict[str, Any]:
    """Stamp name, version, description and private into root/package.json.

    Args:
        root: Project directory containing the cloned template
        app_name: Value for the "name" field

    Returns:
        The manifest as written

    Raises:
        ManifestError: If package.json is missing, unreadable or not an object
    """
    manifest_path = Path(root) / MANIFEST_NAME

    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ManifestError(f"Template has no {MANIFEST_NAME} at {manifest_path}") from exc
    except (OSError, ValueError) as exc:
        raise ManifestError(f"Could not read {manifest_path}: {exc}") from exc

    if not isinstance(manifest, dict):
        raise ManifestError(f"{manifest_path} does not contain a JSON object")

    merged = merge_manifest(manifest, ManifestPatch(name=app_name))
    try:
        manifest_path.write_text(
            json.dumps(merged, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
    except OSError as exc:
        raise ManifestError(f"Could not write {manifest_path}: {exc}") from exc
    logger.debug(f"Rewrote {manifest_path}")
    return merged
