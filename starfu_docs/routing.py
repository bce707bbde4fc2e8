"""Resolve requested routes and walk a section's navigation in order.

:func:`resolve_or_next` answers a page request for a section: the matching
document, a redirect to the best nearby page when nothing matches exactly, or
a not-found outcome. Every outcome carries the section's navigation so the
caller can render a sidebar either way. :func:`prev_next` flattens a
navigation tree and returns the neighbours of the current page.

Example
-------
>>> from starfu_docs.routing import prev_next
>>> from starfu_docs.section import DocEntry, NavNode
>>> nav = [NavNode(label="Intro", dir="intro", href="/tutorial/intro"),
...        NavNode(label="Basics", dir="basics",
...                items=(DocEntry("/tutorial/basics/setup", "Setup"),))]
>>> prev_next(nav, "/tutorial/intro/").next.url
'/tutorial/basics/setup'
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from .logging import get_logger
from .paths import normalize, trim_slashes
from .section import DocEntry

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc

    from .section import NavNode, Section
    from .store import ContentDocument

logger = get_logger("routing")


class ResolutionKind(enum.StrEnum):
    """Outcome of resolving a requested segment."""

    OK = "ok"
    REDIRECT = "redirect"
    NOT_FOUND = "not_found"


@dc.dataclass(frozen=True, slots=True)
class RouteResolution:
    """Result of :func:`resolve_or_next`.

    Attributes
    ----------
    kind : ResolutionKind
        ``ok`` when a document matched, ``redirect`` when a fallback page was
        found, ``not_found`` otherwise.
    nav : tuple[NavNode, ...]
        The section's navigation tree, attached to every outcome.
    segment : str
        The segment that was requested.
    content : ContentDocument | None
        Matched document for ``ok`` outcomes.
    url : str | None
        Redirect target for ``redirect`` outcomes.
    """

    kind: ResolutionKind
    nav: tuple[NavNode, ...]
    segment: str = ""
    content: ContentDocument | None = None
    url: str | None = None


@dc.dataclass(frozen=True, slots=True)
class PrevNext:
    """Neighbours of a page in flattened navigation order."""

    prev: DocEntry | None = None
    next: DocEntry | None = None


def _first_link(node: NavNode | None) -> str | None:
    if node is None:
        return None
    if node.items:
        return node.items[0].url
    return node.href


def fallback_url(nav: cabc.Sequence[NavNode], segment: str) -> str | None:
    """Return the best page to redirect to when ``segment`` has no document.

    The section root falls back to the first navigation link. Other segments
    fall back to the first link of the node whose ``dir`` matches their first
    path component.
    """
    parts = [part for part in segment.split("/") if part]
    if not parts:
        return _first_link(nav[0] if nav else None)
    node = next((candidate for candidate in nav if candidate.dir == parts[0]), None)
    return _first_link(node)


def resolve_or_next(section: Section, segment: str | None) -> RouteResolution:
    """Resolve ``segment`` within ``section`` or pick a redirect target.

    Parameters
    ----------
    section : Section
        The section being browsed.
    segment : str or None
        Path below the section base (``""`` or ``None`` for the section root).

    Returns
    -------
    RouteResolution
        ``ok`` with the matched document, ``redirect`` with a fallback URL, or
        ``not_found``. The navigation tree is always included.
    """
    requested = trim_slashes(segment or "")
    resolve = section.resolver()
    nav = tuple(section.nav())

    content = resolve(requested)
    if content is not None:
        return RouteResolution(
            kind=ResolutionKind.OK, nav=nav, segment=requested, content=content
        )

    target = fallback_url(nav, requested)
    if target:
        logger.debug("Redirecting %s/%s to %s", section.base, requested, target)
        return RouteResolution(
            kind=ResolutionKind.REDIRECT, nav=nav, segment=requested, url=target
        )
    return RouteResolution(kind=ResolutionKind.NOT_FOUND, nav=nav, segment=requested)


def flatten_nav(nav: cabc.Iterable[NavNode]) -> list[DocEntry]:
    """Return every navigation link in reading order.

    Leaf nodes contribute themselves; groups contribute their items.
    """
    flat: list[DocEntry] = []
    for node in nav:
        if node.href and not node.items:
            flat.append(DocEntry(url=node.href, title=node.label))
        else:
            flat.extend(node.items)
    return flat


def prev_next(nav: cabc.Iterable[NavNode], current_route: str) -> PrevNext:
    """Return the links before and after ``current_route``.

    Routes compare without a trailing slash. An unknown route yields an empty
    :class:`PrevNext`.
    """
    flat = flatten_nav(nav)
    current = normalize(current_route)
    index = next(
        (idx for idx, entry in enumerate(flat) if normalize(entry.url) == current),
        None,
    )
    if index is None:
        return PrevNext()
    return PrevNext(
        prev=flat[index - 1] if index > 0 else None,
        next=flat[index + 1] if index < len(flat) - 1 else None,
    )


__all__ = [
    "PrevNext",
    "ResolutionKind",
    "RouteResolution",
    "fallback_url",
    "flatten_nav",
    "prev_next",
    "resolve_or_next",
]
