"""Behaviour tests for section navigation and stale-link redirects.

The scenarios live in ``features/section_navigation.feature``. Each one builds
a temporary project with a tutorial section whose root and group ``_toc``
descriptors reorder and relabel the discovered documents, then checks the
navigation tree, route resolution, and reading order a reader would see.

Usage:
    Run these behaviour tests with pytest, for example:

        pytest tests/bdd/test_section_navigation.py -v
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from starfu_docs.routing import (
    ResolutionKind,
    RouteResolution,
    prev_next,
    resolve_or_next,
)
from starfu_docs.section import NavNode
from starfu_docs.site import DocsSite, build_site

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "section_navigation.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _split(names: str) -> list[str]:
    return [name.strip() for name in names.split(",")]


@given("a tutorial section with an authored table of contents")
def given_tutorial_section(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write a tutorial tree with descriptors and load it as a site.

    Parameters
    ----------
    tmp_path : Path
        Temporary project directory provided by pytest.
    scenario_state : dict[str, object]
        Shared step state; receives the loaded :class:`DocsSite` under
        ``site``.
    """
    root = tmp_path / "docs" / "tutorial"
    (root / "basics").mkdir(parents=True)
    for relative in ("intro.md", "basics/setup.md", "basics/install.md"):
        (root / relative).write_text("Body\n", encoding="utf-8")
    (root / "_toc.yaml").write_text(
        "- intro\n"
        "- path: basics/\n"
        "  label: Getting Started\n"
        "  header: First steps\n",
        encoding="utf-8",
    )
    (root / "basics" / "_toc.yaml").write_text(
        "- path: setup\n  label: Set up\n- install\n", encoding="utf-8"
    )
    config_path = tmp_path / "docs.yaml"
    config_path.write_text(
        "sections:\n  - root: docs/tutorial\n    title: Tutorial\n", encoding="utf-8"
    )
    scenario_state["site"] = build_site(config_path)


@when(parsers.parse('I build the navigation for "{section}"'))
def when_build_nav(scenario_state: dict[str, object], section: str) -> None:
    """Compose the navigation tree of ``section``."""
    site: DocsSite = scenario_state["site"]  # type: ignore[assignment]
    scenario_state["nav"] = site.section(section).nav()


@when(parsers.parse('I request "{segment}" in "{section}"'))
def when_request(scenario_state: dict[str, object], segment: str, section: str) -> None:
    """Resolve ``segment`` within ``section``."""
    site: DocsSite = scenario_state["site"]  # type: ignore[assignment]
    scenario_state["resolution"] = resolve_or_next(site.section(section), segment)


@then(parsers.parse('the navigation labels are "{labels}"'))
def then_nav_labels(scenario_state: dict[str, object], labels: str) -> None:
    """Verify the top-level labels in order."""
    nav: list[NavNode] = scenario_state["nav"]  # type: ignore[assignment]
    assert [node.label for node in nav] == _split(labels)


@then(parsers.parse('the "{group}" group lists "{titles}"'))
def then_group_lists(
    scenario_state: dict[str, object], group: str, titles: str
) -> None:
    """Verify the item titles of one group node."""
    nav: list[NavNode] = scenario_state["nav"]  # type: ignore[assignment]
    node = next(node for node in nav if node.label == group)
    assert node.is_group, f"expected {group!r} to be a group"
    assert node.header == "First steps"
    assert [item.title for item in node.items] == _split(titles)


@then(parsers.parse('the request redirects to "{url}"'))
def then_redirects(scenario_state: dict[str, object], url: str) -> None:
    """Verify a redirect outcome and its target."""
    outcome: RouteResolution = scenario_state["resolution"]  # type: ignore[assignment]
    assert outcome.kind is ResolutionKind.REDIRECT
    assert outcome.url == url


@then("the request is not found")
def then_not_found(scenario_state: dict[str, object]) -> None:
    """Verify a not-found outcome still carries the navigation."""
    outcome: RouteResolution = scenario_state["resolution"]  # type: ignore[assignment]
    assert outcome.kind is ResolutionKind.NOT_FOUND
    assert outcome.nav, "expected navigation to accompany not-found outcomes"


@then(parsers.parse('the page after "{route}" is "{url}"'))
def then_next_page(scenario_state: dict[str, object], route: str, url: str) -> None:
    """Verify the next link in reading order."""
    result = prev_next(scenario_state["nav"], route)  # type: ignore[arg-type]
    assert result.next is not None, f"expected a page after {route!r}"
    assert result.next.url == url
