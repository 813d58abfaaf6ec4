"""Grouping of directory entries into version families."""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path
from typing import Callable, Iterable

from vernum.versioning.versioned import VersionedFile, VersionedFiles, filenames_equal

logger = logging.getLogger(__name__)

NameFilter = Callable[[Path, str], bool]


def group_versioned_files(
    files: Iterable[VersionedFile],
    case_sensitive: bool | None = None,
) -> dict[str, VersionedFiles]:
    """Group files by original name.

    Each file joins the first family that accepts it, or seeds a new family.
    A family is then keyed by the smallest original name among its members,
    so the result does not depend on the order of the input. Keys come back
    sorted.
    """
    groups: dict[str, VersionedFiles] = {}
    for vf in files:
        family = groups.get(vf.original_name)
        if family is not None and family.add_if_same_original(vf):
            continue
        if not any(g.add_if_same_original(vf) for g in groups.values()):
            groups[vf.original_name] = VersionedFiles(vf, case_sensitive=case_sensitive)

    rekeyed: dict[str, VersionedFiles] = {}
    for family in groups.values():
        members = sorted(family, key=lambda f: (f.original_name, f.filename))
        canonical = VersionedFiles(members[0], case_sensitive=case_sensitive)
        for vf in members[1:]:
            canonical.add_if_same_original(vf)
        rekeyed[canonical.original_name] = canonical

    return dict(sorted(rekeyed.items()))


def list_directory_grouped(
    directory: str | os.PathLike[str],
    name_filter: NameFilter | None = None,
    case_sensitive: bool | None = None,
) -> dict[str, VersionedFiles]:
    """List a directory and group its entries into version families.

    Args:
        directory: Directory to list (not recursive).
        name_filter: Optional predicate ``(directory, original_name) -> bool``;
            entries it rejects are skipped.
        case_sensitive: Case rule for original names; None uses the config.

    Returns:
        Mapping of original name to family, empty when the directory has no
        entries or does not exist.
    """
    root = Path(directory)
    if not root.is_dir():
        logger.warning("Not a directory: %s", root)
        return {}

    candidates: list[VersionedFile] = []
    skipped = 0
    for entry in root.iterdir():
        vf = VersionedFile(entry)
        if name_filter is not None and not name_filter(root, vf.original_name):
            skipped += 1
            continue
        candidates.append(vf)

    groups = group_versioned_files(candidates, case_sensitive=case_sensitive)
    logger.info(
        "Grouped %d entries of %s into %d families (%d filtered out)",
        len(candidates),
        root,
        len(groups),
        skipped,
    )
    return groups


def find_latest(
    directory: str | os.PathLike[str],
    name: str,
    case_sensitive: bool | None = None,
) -> Path | None:
    """Return the newest file of the family ``name`` belongs to, if any.

    ``name`` may be the original name (``doc.txt``) or any versioned name
    of the family (``doc-1.0.0.txt``).
    """
    original_name = VersionedFile(name).original_name
    groups = list_directory_grouped(
        directory,
        lambda _dir, candidate: filenames_equal(candidate, original_name, case_sensitive),
        case_sensitive=case_sensitive,
    )
    family = next(iter(groups.values()), None)
    return family.latest_file if family is not None else None


def glob_filter(pattern: str) -> NameFilter:
    """Name filter accepting original names that match a shell-style pattern."""

    def _accept(_directory: Path, original_name: str) -> bool:
        return fnmatch.fnmatchcase(original_name, pattern)

    return _accept
