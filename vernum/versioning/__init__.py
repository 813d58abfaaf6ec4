"""vernum versioning — version numbers, filename parsing and version families.

Usage:
    from vernum.versioning import VersionNumber, list_directory_grouped

    groups = list_directory_grouped("reports/")
    latest = groups["report.csv"].latest_file
"""

from vernum.versioning.filename import (
    FilenameParts,
    base_name_of,
    decompose,
    extension_of,
    extension_separator_index,
    file_name,
    last_separator_index,
    strip_extension,
)
from vernum.versioning.listing import (
    find_latest,
    glob_filter,
    group_versioned_files,
    list_directory_grouped,
)
from vernum.versioning.version import (
    MalformedVersion,
    ParseError,
    VersionNumber,
    VersionUnderflow,
    compare_versions,
)
from vernum.versioning.versioned import (
    VersionedFile,
    VersionedFilename,
    VersionedFiles,
    collection_order,
    filenames_equal,
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
    "base_name_of",
    "collection_order",
    "compare_versions",
    "decompose",
    "extension_of",
    "extension_separator_index",
    "file_name",
    "filenames_equal",
    "find_latest",
    "glob_filter",
    "group_versioned_files",
    "last_separator_index",
    "list_directory_grouped",
    "strip_extension",
]
