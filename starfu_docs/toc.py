"""Parse hand-authored ``_toc`` descriptors into a normalized ordering.

A descriptor lists the documents and sub-directories of one directory in the
order they should appear in navigation. Entries are either plain strings or
mappings with ``path`` and optional ``label``/``header`` keys; a trailing
``/`` on the path marks a group::

    - intro
    - path: basics/
      label: Getting Started
      header: Learn the moves
    - advanced

Authored descriptors are edited by hand and often incomplete, so parsing
never fails: anything unusable degrades to "no authored order".

Example
-------
>>> from starfu_docs.toc import parse_toc_config
>>> config = parse_toc_config(["intro", {"path": "basics/", "label": "Basics"}])
>>> [entry.path for entry in config.ordered]
['intro', 'basics/']
>>> config.alias["basics/"]
'Basics'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc

from .logging import get_logger
from .paths import is_group, normalize_group, normalize_item, trim_slashes

logger = get_logger("toc")


@dc.dataclass(frozen=True, slots=True)
class TocEntry:
    """One normalized line of a ``_toc`` descriptor.

    Attributes
    ----------
    path : str
        Normalized slug; groups end with ``/``, items never do.
    label : str | None
        Optional navigation label override.
    header : str | None
        Optional descriptive text shown above a group.
    """

    path: str
    label: str | None = None
    header: str | None = None

    @property
    def is_group(self) -> bool:
        """Return ``True`` when the entry names a sub-directory."""
        return is_group(self.path)

    @property
    def slug(self) -> str:
        """Return the path without its group marker."""
        return self.path[:-1] if self.is_group else self.path


@dc.dataclass(frozen=True, slots=True)
class TocConfig:
    """Parsed descriptor for one directory."""

    ordered: tuple[TocEntry, ...] = ()
    alias: dict[str, str] = dc.field(default_factory=dict)
    headers: dict[str, str] = dc.field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when the descriptor imposes no order."""
        return not self.ordered


def _normalize_path(path: str) -> str:
    return normalize_group(path) if is_group(path) else normalize_item(path)


def parse_toc_config(raw: object) -> TocConfig:
    """Convert a loosely-typed descriptor payload into a :class:`TocConfig`.

    Parameters
    ----------
    raw : object
        Payload loaded from a ``_toc`` file. A mapping carrying a ``default``
        key is unwrapped first; the result should be a list of strings or
        ``{path, label?, header?}`` mappings.

    Returns
    -------
    TocConfig
        Entries in authored order plus label and header lookups keyed by the
        normalized path. ``None``, non-list payloads, and entries without a
        usable path all degrade to empty results rather than raising.
    """
    if not raw:
        return TocConfig()
    if isinstance(raw, cabc.Mapping) and raw.get("default") is not None:
        raw = raw["default"]
    if not isinstance(raw, list | tuple):
        logger.debug("Ignoring TOC descriptor of type %s", type(raw).__name__)
        return TocConfig()

    ordered: list[TocEntry] = []
    alias: dict[str, str] = {}
    headers: dict[str, str] = {}
    for element in raw:
        match element:
            case str():
                path = _normalize_path(element)
                if not trim_slashes(path):
                    continue
                ordered.append(TocEntry(path=path))
            case cabc.Mapping():
                raw_path = element.get("path")
                path = _normalize_path(str(raw_path)) if raw_path else ""
                if not trim_slashes(path):
                    logger.debug("Dropping TOC entry without a path: %r", element)
                    continue
                label = element.get("label")
                header = element.get("header")
                label = label if isinstance(label, str) else None
                header = header if isinstance(header, str) else None
                if label is not None:
                    alias[path] = label
                if header is not None:
                    headers[path] = header
                ordered.append(TocEntry(path=path, label=label, header=header))
            case _:
                continue
    return TocConfig(ordered=tuple(ordered), alias=alias, headers=headers)


__all__ = ["TocConfig", "TocEntry", "parse_toc_config"]
