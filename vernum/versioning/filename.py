"""Decomposition of filenames into base name, version and extensions.

A versioned filename looks like ``<base>-<major>.<minor>.<revision>(.<ext>)*``,
e.g. ``report-2.3.1.csv`` or ``bundle-1.0.0.tar.gz``. Anything else is
decomposed as a plain, unversioned path.

The path helpers handle both ``/`` and ``\\`` separators, so results are the
same on every platform.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from vernum.versioning.version import VersionNumber

EXTENSION_SEPARATOR = "."
UNIX_SEPARATOR = "/"
WINDOWS_SEPARATOR = "\\"

VERSIONED_FILENAME_REGEX = r"(.*)(-([0-9]+[.][0-9]+[.][0-9]+))(([.][a-zA-Z][a-zA-Z0-9]{0,9})*)"
VERSIONED_FILENAME_PAT = re.compile(VERSIONED_FILENAME_REGEX)


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def last_separator_index(path: str | None) -> int:
    """Index of the last ``/`` or ``\\`` in path, or -1."""
    if path is None:
        return -1
    return max(path.rfind(UNIX_SEPARATOR), path.rfind(WINDOWS_SEPARATOR))


def extension_separator_index(path: str | None) -> int:
    """Index of the last dot, or -1 if there is none after the last separator.

        foo.txt    -> 3
        a.b/c      -> -1
    """
    if path is None:
        return -1
    dot = path.rfind(EXTENSION_SEPARATOR)
    return -1 if last_separator_index(path) > dot else dot


def strip_extension(path: str | None) -> str | None:
    """Remove the last extension.

        foo.txt    -> foo
        a\\b\\c.jpg  -> a\\b\\c
        a.b\\c      -> a.b\\c
    """
    if path is None:
        return None
    index = extension_separator_index(path)
    return path if index == -1 else path[:index]


def file_name(path: str | None) -> str | None:
    """Name of the file without its directories.

        a/b/c.txt  -> c.txt
        a/b/c/     -> ""
    """
    if path is None:
        return None
    return path[last_separator_index(path) + 1 :]


def base_name_of(path: str | None) -> str | None:
    """File name without directories and without the last extension.

        a/b/c.txt  -> c
        a/b/c/     -> ""
    """
    return strip_extension(file_name(path))


def extension_of(path: str | None) -> str | None:
    """Text after the last dot, or "" when the file has no extension.

        foo.txt    -> txt
        a/b.txt/c  -> ""
    """
    if path is None:
        return None
    index = extension_separator_index(path)
    return "" if index == -1 else path[index + 1 :]


# ---------------------------------------------------------------------------
# FilenameParts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FilenameParts:
    """A filename split into base name, optional version and extensions.

    Two parts objects are equal when they were built from the same filename.
    """

    filename: str
    base_name: str = field(compare=False)
    version: VersionNumber | None = field(default=None, compare=False)
    extension: str = field(default="", compare=False)
    extensions: str = field(default="", compare=False)

    @classmethod
    def decompose(cls, filename: str) -> FilenameParts:
        match = VERSIONED_FILENAME_PAT.fullmatch(filename)
        if match:
            extensions = match.group(4) or ""
            if extensions.startswith(EXTENSION_SEPARATOR):
                extensions = extensions[1:]
            extension = extension_of(extensions) or extensions
            return cls(
                filename=filename,
                base_name=match.group(1),
                version=VersionNumber.parse(match.group(3)),
                extension=extension,
                extensions=extensions,
            )

        base_name = base_name_of(filename) or ""
        extension = extension_of(filename) or ""
        extensions = extension
        if EXTENSION_SEPARATOR in base_name:
            # archive.tar.gz: base "archive", extensions "tar.gz"
            base_name, inner = base_name.split(EXTENSION_SEPARATOR, 1)
            extensions = f"{inner}{EXTENSION_SEPARATOR}{extension}" if extension else inner
        return cls(
            filename=filename,
            base_name=base_name,
            version=None,
            extension=extension,
            extensions=extensions,
        )

    @property
    def original_name(self) -> str:
        """The filename with its version segment removed."""
        if self.extensions:
            return f"{self.base_name}{EXTENSION_SEPARATOR}{self.extensions}"
        return self.base_name

    def is_versioned(self) -> bool:
        return self.version is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "filename": self.filename,
            "base_name": self.base_name,
            "version": str(self.version) if self.version is not None else None,
            "extension": self.extension,
            "extensions": self.extensions,
            "original_name": self.original_name,
        }


def decompose(filename: str) -> FilenameParts:
    """Shortcut for FilenameParts.decompose()."""
    return FilenameParts.decompose(filename)
