"""vernum — versioned filename parsing and version-family grouping.

Usage:
    from vernum import list_directory_grouped

    for original_name, family in list_directory_grouped("exports/").items():
        print(original_name, family.latest_file)
"""

__version__ = "0.1.0"

from vernum.versioning import (  # noqa: E402
    FilenameParts,
    MalformedVersion,
    ParseError,
    VersionedFile,
    VersionedFilename,
    VersionedFiles,
    VersionNumber,
    VersionUnderflow,
    find_latest,
    list_directory_grouped,
)

__all__ = [
    "FilenameParts",
    "MalformedVersion",
    "ParseError",
    "VersionNumber",
    "VersionUnderflow",
    "VersionedFile",
    "VersionedFilename",
    "VersionedFiles",
    "__version__",
    "find_latest",
    "list_directory_grouped",
]
