# topmark:header:start
#
#   project      : Counterpart
#   file         : test_parsed_path.py
#   file_relpath : tests/paths/test_parsed_path.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `counterpart.paths.model`.

Covers parsing, derived values, sibling-path derivation, the root
substitution used for test directories, and neighbour listing.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from counterpart.errors import InvalidPathError
from counterpart.paths.model import ParsedPath, parse
from tests.doubles import FakeTree

_TOKEN = st.text(
    alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyz0123456789_-"),
    min_size=1,
    max_size=8,
)


def test_parse_nested_test_file() -> None:
    """Segments and file parts are split on separators and dots."""
    p: ParsedPath = parse("spec/models/widget.test.rb")

    assert p.segments == ("spec", "models")
    assert p.file_parts == ("widget", "test", "rb")
    assert p.directory == "spec/models"
    assert p.file_name == "widget"
    assert p.primary_extension == "rb"
    assert p.extension_chain == ("test",)
    assert p.full_path_without_extension == "spec/models/widget"
    assert str(p) == "spec/models/widget.test.rb"


@pytest.mark.parametrize(
    "raw, name, extension",
    [
        ("widget.rb", "widget", "rb"),
        ("widget.test.rb", "widget", "rb"),
        ("Makefile", "Makefile", "Makefile"),
        ("archive.tar.gz", "archive", "gz"),
    ],
)
def test_root_level_file_has_empty_directory(raw: str, name: str, extension: str) -> None:
    """A path without separators has no directory; names come from the dot split."""
    p: ParsedPath = parse(raw)

    assert p.directory == ""
    assert p.segments == ()
    assert p.file_name == name
    assert p.primary_extension == extension
    assert p.full_path_without_extension == name
    assert str(p) == raw


@pytest.mark.parametrize("raw", ["", "lib/", "/", "."])
def test_parse_rejects_paths_without_file_component(raw: str) -> None:
    """Empty input and directory-only input raise InvalidPathError."""
    with pytest.raises(InvalidPathError):
        parse(raw)


def test_invalid_path_error_is_a_value_error() -> None:
    """Callers can catch malformed paths as ValueError."""
    with pytest.raises(ValueError, match="empty path"):
        parse("")


def test_construction_without_file_parts_is_rejected() -> None:
    """The file parts invariant also holds for direct construction."""
    with pytest.raises(InvalidPathError):
        ParsedPath(segments=("lib",), file_parts=())


def test_parse_normalizes_doubled_separators_and_dot_segments() -> None:
    """Empty and ``.`` segments are dropped."""
    assert parse("./lib//widget.rb").segments == ("lib",)


def test_parse_keeps_absolute_paths_absolute() -> None:
    """A leading slash survives the round trip."""
    p: ParsedPath = parse("/srv/app/widget.rb")

    assert p.segments == ("", "srv", "app")
    assert str(p) == "/srv/app/widget.rb"
    assert p.first_segment == ""


def test_dotfile_keeps_empty_base_name() -> None:
    """``.gitignore`` parses to an empty base name and a single extension."""
    p: ParsedPath = parse(".gitignore")

    assert p.file_parts == ("", "gitignore")
    assert str(p) == ".gitignore"


def test_parsed_path_is_immutable() -> None:
    """ParsedPath is a frozen value."""
    p: ParsedPath = parse("lib/widget.rb")
    with pytest.raises(AttributeError):
        p.segments = ("src",)  # type: ignore[misc]


def test_drop_first_segment_substitutes_single_root() -> None:
    """The leading test directory is replaced by the new root."""
    directory, moved = parse("test/foo/bar.rb").drop_first_segment("lib")

    assert directory == "lib/foo"
    assert moved == ParsedPath(segments=("lib", "foo"), file_parts=("bar", "rb"))


def test_drop_first_segment_accepts_nested_root() -> None:
    """A root spanning several segments is split before substitution."""
    directory, moved = parse("spec/models/widget.rb").drop_first_segment("lib/myproj")

    assert directory == "lib/myproj/models"
    assert str(moved) == "lib/myproj/models/widget.rb"


def test_drop_first_segment_leaves_original_untouched() -> None:
    """Derived paths are new values."""
    original: ParsedPath = parse("test/bar.rb")
    original.drop_first_segment("src")

    assert str(original) == "test/bar.rb"


def test_with_file_parts_keeps_directory() -> None:
    """Sibling derivation only swaps the file parts."""
    p: ParsedPath = parse("spec/models/widget_spec.rb").with_file_parts(("widget", "rb"))

    assert str(p) == "spec/models/widget.rb"


def test_has_test_marker_only_looks_at_extension_chain() -> None:
    """The base name and primary extension never count as the marker."""
    assert parse("app/widget.test.rb").has_test_marker("test")
    assert not parse("app/test.rb").has_test_marker("test")
    assert not parse("app/widget.test").has_test_marker("test")


def test_neighbouring_files_excludes_self() -> None:
    """The listing of the path's directory is returned without the path itself."""
    tree = FakeTree(["app/widget.test.rb", "app/widget.rb", "app/sub/thing.rb", "lib/x.rb"])

    neighbours: list[str] = parse("app/widget.test.rb").neighbouring_files(tree)

    assert neighbours == ["app/sub/thing.rb", "app/widget.rb"]
    assert tree.queries == [("list_files", "app", "**/*")]


def test_neighbouring_files_without_self_in_listing() -> None:
    """A path missing from the listing is not an error."""
    tree = FakeTree(["app/widget.rb"])

    assert parse("app/gone.rb").neighbouring_files(tree) == ["app/widget.rb"]


@given(
    segments=st.lists(_TOKEN, min_size=1, max_size=4),
    file_parts=st.lists(_TOKEN, min_size=1, max_size=4),
)
def test_string_form_round_trips(segments: list[str], file_parts: list[str]) -> None:
    """Parsing the string form of a path yields an equal path."""
    p = ParsedPath(segments=tuple(segments), file_parts=tuple(file_parts))

    assert parse(str(p)) == p


@given(raw=st.lists(_TOKEN, min_size=1, max_size=4).map(".".join))
def test_directory_is_empty_without_separator(raw: str) -> None:
    """Without ``/`` only the dot split matters."""
    p: ParsedPath = parse(raw)
    tokens: list[str] = raw.split(".")

    assert p.directory == ""
    assert p.file_name == tokens[0]
    assert p.primary_extension == tokens[-1]
