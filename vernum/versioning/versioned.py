"""Versioned filenames, files, and version families.

A version family is every file sharing one original name, e.g.
``doc.txt``, ``doc-1.0.0.txt`` and ``doc-1.1.0.txt``. ``VersionedFiles`` keeps
a family ordered newest first so the latest member is always at the front.
"""

from __future__ import annotations

import bisect
import functools
import logging
import os
from pathlib import Path
from typing import Any, Iterator

from vernum.core.config import get_config
from vernum.versioning.filename import FilenameParts
from vernum.versioning.version import VersionNumber

logger = logging.getLogger(__name__)


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def filenames_equal(
    filename1: str | None,
    filename2: str | None,
    case_sensitive: bool | None = None,
) -> bool:
    """Check whether two filenames are equal under a case rule.

    None equals only None. When case_sensitive is None the configured
    default applies (see VernumConfig.resolve_case_sensitive).
    """
    if filename1 is None or filename2 is None:
        return filename1 is None and filename2 is None
    if case_sensitive is None:
        case_sensitive = get_config().resolve_case_sensitive()
    if case_sensitive:
        return filename1 == filename2
    return filename1.casefold() == filename2.casefold()


class VersionedFilename:
    """A filename together with its parsed parts.

    Equality follows the original name, so every member of a version family
    is equal to every other.
    """

    def __init__(self, filename: str) -> None:
        self._parts = FilenameParts.decompose(filename)
        self._original_name = self._parts.original_name

    @property
    def parts(self) -> FilenameParts:
        return self._parts

    @property
    def filename(self) -> str:
        return self._parts.filename

    @property
    def original_name(self) -> str:
        return self._original_name

    @property
    def version(self) -> VersionNumber | None:
        return self._parts.version

    def is_original(self) -> bool:
        """True when the filename carries no version."""
        return not self._parts.is_versioned()

    def compare_to(self, other: VersionedFilename) -> int:
        """Two-operand ordering rule.

        Both unversioned: by original name. Exactly one unversioned: self
        first, whichever side it is. Both versioned: newest version first.
        This is not antisymmetric; sorted collections use collection_order().
        """
        if self.version is None:
            if other.version is None:
                return _cmp(self._original_name, other._original_name)
            return -1
        if other.version is None:
            return -1
        return -self.version.compare_to(other.version)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionedFilename):
            return NotImplemented
        return self._original_name == other._original_name

    def __hash__(self) -> int:
        return hash(self._original_name)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(filename={self.filename!r}, "
            f"original_name={self._original_name!r}, version={self.version!s})"
        )


def collection_order(a: VersionedFilename, b: VersionedFilename) -> int:
    """Total order used inside a family: versioned files newest first, then
    unversioned ones, ties broken by original name and raw filename."""
    if a.version is not None and b.version is not None:
        result = -a.version.compare_to(b.version)
    elif a.version is not None:
        result = -1
    elif b.version is not None:
        result = 1
    else:
        result = 0
    if result == 0:
        result = _cmp(a.original_name, b.original_name)
    if result == 0:
        result = _cmp(a.filename, b.filename)
    return result


collection_key = functools.cmp_to_key(collection_order)


class VersionedFile(VersionedFilename):
    """A versioned filename bound to a directory entry."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._file = Path(path)
        super().__init__(self._file.name)

    @property
    def file(self) -> Path:
        return self._file

    def get_file(self) -> Path:
        return self._file

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._file)!r}, version={self.version!s})"


class VersionedFiles:
    """All files of one version family, newest first."""

    def __init__(self, seed: VersionedFile, case_sensitive: bool | None = None) -> None:
        self._base_name = seed.parts.base_name
        self._ext = seed.parts.extensions
        self._original_name = seed.original_name
        self._case_sensitive = case_sensitive
        self._files: list[VersionedFile] = [seed]

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    @property
    def base_name(self) -> str:
        return self._base_name

    @property
    def ext(self) -> str:
        return self._ext

    @property
    def original_name(self) -> str:
        return self._original_name

    @property
    def files(self) -> tuple[VersionedFile, ...]:
        return tuple(self._files)

    def add_if_same_original(self, vf: VersionedFile) -> bool:
        """Add vf if it belongs to this family; return whether it was added.

        A file whose raw name is already present is accepted but not stored
        twice.
        """
        if not filenames_equal(self._original_name, vf.original_name, self._case_sensitive):
            return False
        if any(existing.filename == vf.filename for existing in self._files):
            return True
        keys = [collection_key(f) for f in self._files]
        self._files.insert(bisect.bisect_right(keys, collection_key(vf)), vf)
        logger.debug("Added %s to family %s", vf.filename, self._original_name)
        return True

    def get_latest(self) -> VersionedFile | None:
        return self._files[0] if self._files else None

    @property
    def latest(self) -> VersionedFile | None:
        return self.get_latest()

    @property
    def latest_version(self) -> VersionNumber | None:
        latest = self.get_latest()
        return latest.version if latest is not None else None

    @property
    def latest_file(self) -> Path | None:
        latest = self.get_latest()
        return latest.file if latest is not None else None

    def is_original(self) -> bool:
        """True when the newest member is the unversioned original."""
        latest = self.get_latest()
        return latest is not None and latest.is_original()

    def to_dict(self) -> dict[str, Any]:
        latest = self.get_latest()
        latest_version = self.latest_version
        return {
            "original_name": self._original_name,
            "base_name": self._base_name,
            "ext": self._ext,
            "latest": latest.filename if latest is not None else None,
            "latest_version": str(latest_version) if latest_version is not None else None,
            "files": [
                {
                    "filename": f.filename,
                    "path": str(f.file),
                    "version": str(f.version) if f.version is not None else None,
                }
                for f in self._files
            ],
        }

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[VersionedFile]:
        return iter(self._files)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionedFiles):
            return NotImplemented
        return self._original_name == other._original_name

    def __hash__(self) -> int:
        return hash(self._original_name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionedFiles):
            return NotImplemented
        return self._original_name < other._original_name

    def __repr__(self) -> str:
        return (
            f"VersionedFiles(original_name={self._original_name!r}, "
            f"files={[f.filename for f in self._files]!r})"
        )
