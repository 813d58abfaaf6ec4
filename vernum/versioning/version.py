"""Version numbers of the form ``major.minor[.revision][suffix]``.

Provides parsing (strict and tolerant), comparison, and stepping to the
next or previous revision.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Base class for version parsing and arithmetic failures."""


class MalformedVersion(ParseError):
    """Raised when a version string does not have the expected structure."""

    def __init__(self, message: str, text: str | None = None) -> None:
        self.text = text
        super().__init__(message)


class VersionUnderflow(ParseError):
    """Raised when stepping below version 0.0[.0]."""


def _is_digits(text: str) -> bool:
    return bool(text) and all("0" <= ch <= "9" for ch in text)


def _parse_component(name: str, segment: str, text: str) -> int:
    if not _is_digits(segment):
        raise MalformedVersion(f"Invalid {name} version number {segment!r} in {text!r}", text)
    return int(segment)


def _split_revision(segment: str) -> tuple[int | None, str | None]:
    """Split ``12rc1`` into ``(12, "rc1")``.

    An empty segment means revision 0. A segment without leading digits has
    no revision, only a suffix.
    """
    if not segment:
        return 0, None
    i = 0
    while i < len(segment) and "0" <= segment[i] <= "9":
        i += 1
    revision = int(segment[:i]) if i > 0 else None
    suffix = segment[i:] if i < len(segment) else None
    return revision, suffix


@dataclass(frozen=True)
class VersionNumber:
    """An immutable ``major.minor[.revision][suffix]`` version."""

    major: int
    minor: int
    revision: int | None = None
    suffix: str | None = None

    def __post_init__(self) -> None:
        if self.major < 0 or self.minor < 0:
            raise ValueError(f"Negative version component in {self.major}.{self.minor}")
        if self.revision is not None and self.revision < 0:
            raise ValueError(f"Negative revision: {self.revision}")

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str, separator: str = ".") -> VersionNumber:
        """Parse a version string like '1.2', '1.2.3' or '1.2.3-beta'.

        Splits into at most three segments; the third one carries the
        revision digits followed by an optional free-form suffix.

        Raises:
            MalformedVersion: empty input, or a major/minor segment that is not
                a non-negative integer.
        """
        if not separator:
            raise ValueError("Version separator must not be empty")
        if not text:
            raise MalformedVersion("Empty version", text)

        parts = text.split(separator, 2)
        major = _parse_component("major", parts[0], text)
        minor = _parse_component("minor", parts[1], text) if len(parts) > 1 else 0

        revision: int | None = None
        suffix: str | None = None
        if len(parts) > 2:
            revision, suffix = _split_revision(parts[2])

        return cls(major=major, minor=minor, revision=revision, suffix=suffix)

    @classmethod
    def value_of(cls, text: str | None) -> VersionNumber | None:
        """Parse trimmed text; blank input or the literal 'null' gives None."""
        if text is None:
            return None
        text = text.strip()
        if not text or text == "null":
            return None
        return cls.parse(text)

    @classmethod
    def try_parse(cls, text: str | None) -> VersionNumber | None:
        """Like value_of(), but a malformed version is logged and gives None."""
        try:
            return cls.value_of(text)
        except MalformedVersion:
            logger.warning("Unknown version: %s", text)
            return None

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def next_revision(self) -> VersionNumber:
        if self.revision is not None:
            return VersionNumber(self.major, self.minor, self.revision + 1, self.suffix)
        return VersionNumber(self.major, self.minor + 1, None, self.suffix)

    def prev_revision(self) -> VersionNumber:
        """Step back one unit, taking from the most specific component.

        Raises:
            VersionUnderflow: the version is already 0.0 or 0.0.0.
        """
        if self.revision is not None and self.revision > 0:
            return VersionNumber(self.major, self.minor, self.revision - 1, self.suffix)
        if self.minor > 0:
            return VersionNumber(self.major, self.minor - 1, self.revision, self.suffix)
        if self.major > 0:
            return VersionNumber(self.major - 1, self.minor, self.revision, self.suffix)
        raise VersionUnderflow(f"Can't set previous version {self}")

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def compare_to(self, other: VersionNumber) -> int:
        """Return a negative, zero or positive number like a classic cmp().

        A present revision sorts above an absent one, and so does a present
        suffix. Two suffixes compare lexicographically.
        """
        if self.major != other.major:
            return self.major - other.major
        if self.minor != other.minor:
            return self.minor - other.minor

        if self.revision is not None and other.revision is not None:
            if self.revision != other.revision:
                return self.revision - other.revision
        elif self.revision is not None:
            return 1
        elif other.revision is not None:
            return -1

        if self.suffix is None and other.suffix is None:
            return 0
        if other.suffix is None:
            return 1
        if self.suffix is None:
            return -1
        return (self.suffix > other.suffix) - (self.suffix < other.suffix)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self.compare_to(other) >= 0

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self) -> str:
        text = f"{self.major}.{self.minor}"
        if self.revision is not None:
            text += f".{self.revision}"
        if self.suffix is not None:
            text += self.suffix
        return text

    def __str__(self) -> str:
        return self.format()

    def to_dict(self) -> dict[str, Any]:
        return {
            "major": self.major,
            "minor": self.minor,
            "revision": self.revision,
            "suffix": self.suffix,
        }


def compare_versions(a: VersionNumber, b: VersionNumber) -> int:
    """Module-level form of VersionNumber.compare_to, usable with cmp_to_key."""
    return a.compare_to(b)
