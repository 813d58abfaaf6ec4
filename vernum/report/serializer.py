"""JSON serialization of version families."""

from __future__ import annotations

import json
from typing import Any, Mapping

from vernum.versioning.versioned import VersionedFiles


def groups_to_dict(groups: Mapping[str, VersionedFiles]) -> dict[str, Any]:
    """Convert a family mapping to plain dictionaries."""
    return {name: family.to_dict() for name, family in groups.items()}


def groups_to_json(groups: Mapping[str, VersionedFiles], indent: int = 2) -> str:
    """Serialize a family mapping to a JSON string."""
    return json.dumps(groups_to_dict(groups), indent=indent)
