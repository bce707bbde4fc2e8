"""Unit tests for the ``_toc`` descriptor parser.

These tests pin down how loosely-typed descriptors are normalized: string and
mapping entries, group markers, label and header lookups, and the silent
degradation of malformed input to an empty configuration.
"""

from __future__ import annotations

import pytest

from starfu_docs.toc import TocConfig, TocEntry, parse_toc_config


@pytest.mark.parametrize("raw", [None, [], {}, "", 0])
def test_empty_input_yields_empty_config(raw: object) -> None:
    """Absent descriptors produce no order, aliases or headers."""
    result = parse_toc_config(raw)
    assert result.ordered == ()
    assert len(result.alias) == 0
    assert len(result.headers) == 0
    assert result.is_empty


def test_string_entries_keep_order() -> None:
    """Plain strings become entries in authored order."""
    result = parse_toc_config(["a", "b/", "c"])
    assert list(result.ordered) == [TocEntry("a"), TocEntry("b/"), TocEntry("c")]
    assert result.alias == {}
    assert result.headers == {}


def test_object_entries_register_labels_and_headers() -> None:
    """Mapping entries feed the alias and header lookups."""
    result = parse_toc_config(
        [{"path": "x", "label": "X"}, {"path": "y/", "header": "H"}]
    )
    assert result.alias.get("x") == "X"
    assert result.headers.get("y/") == "H"
    assert list(result.ordered) == [
        TocEntry("x", label="X"),
        TocEntry("y/", header="H"),
    ]


def test_mixed_entries() -> None:
    """Strings and mappings can be combined freely."""
    result = parse_toc_config(
        ["intro", {"path": "basics/", "label": "Getting Started"}, "advanced"]
    )
    assert [entry.path for entry in result.ordered] == ["intro", "basics/", "advanced"]
    assert result.alias == {"basics/": "Getting Started"}
    assert "intro" not in result.alias


def test_entries_without_path_are_dropped() -> None:
    """Mappings missing a path, or with an empty one, disappear silently."""
    result = parse_toc_config([{"label": "orphan"}, {"path": ""}])
    assert result.ordered == ()
    assert result.alias == {}, "labels of dropped entries must not leak"


def test_repeated_slashes_collapse() -> None:
    """Repeated slashes collapse while the group marker survives."""
    result = parse_toc_config(["foo//bar", "baz///"])
    assert list(result.ordered) == [TocEntry("foo/bar"), TocEntry("baz/")]


def test_leading_dot_slash_is_stripped() -> None:
    """``./`` prefixes are not part of the slug."""
    result = parse_toc_config(["./intro", "./basics/"])
    assert [entry.path for entry in result.ordered] == ["intro", "basics/"]


@pytest.mark.parametrize("raw", [{"not": "an array"}, "intro", 42])
def test_non_list_input_degrades(raw: object) -> None:
    """Anything but a list is treated as no authored order."""
    assert parse_toc_config(raw) == TocConfig()


def test_default_key_is_unwrapped() -> None:
    """A ``default`` mapping key holds the entry list."""
    result = parse_toc_config({"default": ["intro", "basics/"]})
    assert [entry.path for entry in result.ordered] == ["intro", "basics/"]


def test_headers_on_items_are_kept() -> None:
    """Headers are recorded as given even on leaf entries."""
    result = parse_toc_config([{"path": "intro", "header": "Start here"}])
    assert result.headers == {"intro": "Start here"}


def test_non_string_labels_are_ignored() -> None:
    """Only string labels and headers are honoured."""
    result = parse_toc_config([{"path": "intro", "label": 3, "header": ["x"]}])
    assert list(result.ordered) == [TocEntry("intro")]
    assert result.alias == {}
    assert result.headers == {}


@pytest.mark.parametrize(
    "raw", [["./a//b/", "c//", "./d"], [{"path": "x//y"}, "z///w/"]]
)
def test_reparsing_normalized_output_is_a_fixed_point(raw: list[object]) -> None:
    """Parsing already-normalized paths changes nothing."""
    first = parse_toc_config(raw)
    second = parse_toc_config([entry.path for entry in first.ordered])
    assert [entry.path for entry in second.ordered] == [
        entry.path for entry in first.ordered
    ]


def test_entry_slug_and_group_flag() -> None:
    """Entries expose their group flag and bare slug."""
    group = TocEntry("basics/")
    item = TocEntry("intro")
    assert group.is_group and group.slug == "basics"
    assert not item.is_group and item.slug == "intro"
