"""Unit tests for the route and slug helpers in ``starfu_docs.paths``.

Usage
-----
Run ``pytest tests/test_paths.py -v``. No fixtures beyond pytest's built-ins
are required.
"""

from __future__ import annotations

import pytest

from starfu_docs.config import Branch
from starfu_docs.paths import (
    branch_id,
    capitalize,
    fs_to_route,
    get_parts,
    is_group,
    normalize,
    normalize_group,
    normalize_item,
    to_relative,
    trim_slashes,
)

BRANCHES = (
    Branch(id="tutorial", root="/docs/tutorial"),
    Branch(id="drinks", root="../docs/cocktails/"),
)


@pytest.mark.parametrize(
    ("fs_path", "expected"),
    [
        ("/docs/tutorial/intro.md", "/tutorial/intro"),
        ("/docs/tutorial/basics/setup.mdx", "/tutorial/basics/setup"),
        ("/docs/tutorial/index.md", "/tutorial/"),
        ("/docs/tutorial/basics/index.mdx", "/tutorial/basics/"),
        ("/docs/tutorial/reindex.md", "/tutorial/reindex"),
        ("../docs/cocktails/negroni.md", "/drinks/negroni"),
        ("\\docs\\tutorial\\basics\\setup.md", "/tutorial/basics/setup"),
    ],
)
def test_fs_to_route(fs_path: str, expected: str) -> None:
    """Documents map onto ``/<branch-id>/<relative>`` routes."""
    actual = fs_to_route(fs_path, BRANCHES)
    assert actual == expected, f"Expected {expected!r} for {fs_path!r}, got {actual!r}"


@pytest.mark.parametrize(
    "fs_path",
    ["/docs/other/page.md", "/docs/tutorial-extra/page.md", "/docs/tutorial"],
)
def test_fs_to_route_outside_any_branch(fs_path: str) -> None:
    """Paths not strictly below a branch root yield an empty route."""
    assert fs_to_route(fs_path, BRANCHES) == "", f"{fs_path!r} should not route"


def test_to_relative_strips_base_prefix_only() -> None:
    """Only a literal ``base/`` prefix is removed."""
    assert to_relative("/tutorial/basics/setup", "/tutorial") == "basics/setup"
    assert to_relative("/tutorials/setup", "/tutorial") == "/tutorials/setup", (
        "URLs outside the base must come back unchanged"
    )


def test_get_parts_discards_empty_segments() -> None:
    """Segments are split on slashes with empties dropped."""
    assert get_parts("/tutorial/basics//setup/", "/tutorial") == ["basics", "setup"]
    assert get_parts("/tutorial/intro", "/tutorial") == ["intro"]


@pytest.mark.parametrize(
    ("slug", "expected"),
    [
        ("foo//bar", "foo/bar"),
        ("./intro", "intro"),
        ("././intro/", "intro"),
        ("api", "api"),
    ],
)
def test_normalize_item(slug: str, expected: str) -> None:
    """Items lose duplicate slashes, leading ``./`` and trailing slashes."""
    assert normalize_item(slug) == expected
    assert normalize_item(expected) == expected, "normalization must be idempotent"


@pytest.mark.parametrize(
    ("slug", "expected"),
    [("baz///", "baz/"), ("./basics/", "basics/"), ("api", "api/")],
)
def test_normalize_group(slug: str, expected: str) -> None:
    """Groups always end with exactly one slash."""
    assert normalize_group(slug) == expected
    assert normalize_group(expected) == expected, "normalization must be idempotent"


def test_slash_helpers() -> None:
    """Small helpers agree on the trailing-slash convention."""
    assert normalize("/tutorial/") == "/tutorial"
    assert normalize("/tutorial") == "/tutorial"
    assert trim_slashes("//tutorial/") == "tutorial"
    assert is_group("basics/")
    assert not is_group("basics")
    assert branch_id("../docs/cocktails/") == "cocktails"


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("intro", "Intro"),
        ("getting-started", "Getting-Started"),
        ("api_reference", "Api_Reference"),
        ("Already", "Already"),
    ],
)
def test_capitalize(name: str, expected: str) -> None:
    """Each separated word starts with an uppercase letter."""
    assert capitalize(name) == expected
