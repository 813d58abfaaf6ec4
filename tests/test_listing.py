from __future__ import annotations

import itertools
import logging

from vernum.versioning.listing import (
    find_latest,
    glob_filter,
    group_versioned_files,
    list_directory_grouped,
)
from vernum.versioning.versioned import VersionedFile


def _snapshot(groups):
    return {name: [f.filename for f in family] for name, family in groups.items()}


def test_groups_family_with_latest(make_files):
    directory = make_files("doc-1.0.0.txt", "doc-1.1.0.txt", "doc.txt")
    groups = list_directory_grouped(directory)

    assert list(groups) == ["doc.txt"]
    family = groups["doc.txt"]
    assert len(family) == 3
    assert family.get_latest().filename == "doc-1.1.0.txt"
    assert family.latest_file == directory / "doc-1.1.0.txt"


def test_separate_families(make_files):
    directory = make_files(
        "report-2.3.1.csv",
        "report-2.10.0.csv",
        "report.pdf",
        "archive.tar.gz",
        "archive-0.1.0.tar.gz",
        "noext",
    )
    groups = list_directory_grouped(directory)

    assert list(groups) == ["archive.tar.gz", "noext", "report.csv", "report.pdf"]
    assert groups["report.csv"].latest.filename == "report-2.10.0.csv"
    assert groups["archive.tar.gz"].latest.filename == "archive-0.1.0.tar.gz"
    assert groups["noext"].is_original()


def test_empty_directory(tmp_path):
    assert list_directory_grouped(tmp_path) == {}


def test_missing_directory_logs_warning(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="vernum.versioning.listing"):
        assert list_directory_grouped(tmp_path / "nope") == {}
    assert "Not a directory" in caplog.text


def test_filter_receives_directory_and_original_name(make_files):
    directory = make_files("doc-1.0.0.txt", "doc.md", "other.txt")
    seen = []

    def only_txt(dir_, original_name):
        seen.append((dir_, original_name))
        return original_name.endswith(".txt")

    groups = list_directory_grouped(directory, only_txt)

    assert list(groups) == ["doc.txt", "other.txt"]
    assert (directory, "doc.txt") in seen
    assert (directory, "doc.md") in seen


def test_glob_filter(make_files):
    directory = make_files("doc-1.0.0.txt", "doc.md", "notes-0.0.1.txt")
    groups = list_directory_grouped(directory, glob_filter("doc.*"))
    assert list(groups) == ["doc.md", "doc.txt"]


def test_grouping_is_order_independent():
    names = ["doc-1.0.0.txt", "doc-1.1.0.txt", "doc.txt", "img-0.0.1.png", "img.png", "x.y.z"]
    expected = None
    for perm in itertools.permutations(names):
        groups = group_versioned_files(VersionedFile(n) for n in perm)
        snapshot = _snapshot(groups)
        if expected is None:
            expected = snapshot
        assert snapshot == expected
    assert expected["doc.txt"] == ["doc-1.1.0.txt", "doc-1.0.0.txt", "doc.txt"]


def test_case_insensitive_grouping():
    files = [VersionedFile(n) for n in ["Doc.txt", "doc-1.0.0.txt", "DOC-2.0.0.TXT"]]

    sensitive = group_versioned_files(files, case_sensitive=True)
    assert len(sensitive) == 3

    insensitive = group_versioned_files(files, case_sensitive=False)
    assert list(insensitive) == ["DOC.TXT"]
    family = insensitive["DOC.TXT"]
    assert (family.original_name, family.base_name, family.ext) == ("DOC.TXT", "DOC", "TXT")
    assert family.latest.filename == "DOC-2.0.0.TXT"


def test_case_insensitive_grouping_is_order_independent():
    names = ["Doc.txt", "doc-1.0.0.txt", "DOC-2.0.0.txt", "img.PNG", "Img-0.1.0.png", "other.md"]
    expected = None
    for perm in itertools.permutations(names):
        groups = group_versioned_files((VersionedFile(n) for n in perm), case_sensitive=False)
        snapshot = {
            name: (family.original_name, family.base_name, family.ext, [f.filename for f in family])
            for name, family in groups.items()
        }
        if expected is None:
            expected = snapshot
        assert snapshot == expected
    assert list(expected) == ["DOC.txt", "Img.png", "other.md"]
    assert expected["DOC.txt"][3] == ["DOC-2.0.0.txt", "doc-1.0.0.txt", "Doc.txt"]


def test_find_latest(make_files):
    directory = make_files("doc-1.0.0.txt", "doc-1.1.0.txt", "doc.txt", "other.txt")
    assert find_latest(directory, "doc.txt") == directory / "doc-1.1.0.txt"
    assert find_latest(directory, "doc-1.0.0.txt") == directory / "doc-1.1.0.txt"
    assert find_latest(directory, "other.txt") == directory / "other.txt"
    assert find_latest(directory, "missing.txt") is None


def test_find_latest_case_insensitive(make_files):
    directory = make_files("Doc-1.0.0.txt", "Doc.txt")
    assert find_latest(directory, "doc.txt", case_sensitive=True) is None
    assert find_latest(directory, "doc.txt", case_sensitive=False) == directory / "Doc-1.0.0.txt"
