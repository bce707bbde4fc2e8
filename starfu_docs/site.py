"""Immutable site context shared by every section lookup.

:class:`DocsSite` bundles the resolved configuration with the content store
so sections, static paths, and route resolution all read from one snapshot
built up front. Several sites can coexist in one process; nothing is cached
at module level.

Example
-------
>>> from pathlib import Path
>>> from starfu_docs.site import build_site
>>> site = build_site(Path("docs.yaml"))  # doctest: +SKIP
>>> site.static_paths()[:2]  # doctest: +SKIP
['tutorial/intro', 'tutorial/basics/setup']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .config import load_docs_config
from .discovery import discover_content
from .logging import get_logger
from .paths import fs_to_route
from .section import Section, create_section

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from pathlib import Path

    from .config import DocsConfig
    from .store import ContentStore

logger = get_logger("site")


@dc.dataclass(frozen=True, slots=True)
class PageParams:
    """One static route to pre-render: a section and an optional page."""

    section: str
    page: str | None = None

    @property
    def path(self) -> str:
        """Return the route below the site base (``section/page``)."""
        return f"{self.section}/{self.page}" if self.page else self.section


@dc.dataclass(frozen=True, slots=True)
class DocsSite:
    """Resolved configuration plus the content discovered for it."""

    config: DocsConfig
    store: ContentStore

    def section(self, section_id: str) -> Section:
        """Return the section registered as ``section_id``.

        Raises
        ------
        SectionNotConfiguredError
            If no branch uses ``section_id``.
        """
        return create_section(self.config, self.store, section_id)

    def sections(self) -> list[Section]:
        """Return every configured section in configuration order."""
        return [self.section(branch.id) for branch in self.config.branches]

    def page_params(self) -> list[PageParams]:
        """List every route a static build has to render.

        Each document contributes its page route; each section that owns at
        least one document then contributes its root route. Documents outside
        every configured root are skipped.
        """
        known = {branch.id for branch in self.config.branches}
        sections: dict[str, None] = {}
        params: list[PageParams] = []
        for path in self.store.all_paths():
            route = fs_to_route(path, self.config.branches)
            if not route:
                continue
            parts = [part for part in route.split("/") if part]
            section = parts[0] if parts else ""
            if section not in known:
                continue
            sections.setdefault(section)
            page = "/".join(parts[1:])
            if page:
                params.append(PageParams(section=section, page=page))
        params.extend(PageParams(section=section) for section in sections)
        return params

    def static_paths(self) -> list[str]:
        """Return :meth:`page_params` as ``section`` or ``section/page`` strings."""
        return [params.path for params in self.page_params()]


def build_site(config_path: Path) -> DocsSite:
    """Load ``config_path`` and discover content relative to its directory."""
    config = load_docs_config(config_path)
    store = discover_content(config, base_dir=config_path.resolve().parent)
    logger.info(
        "Loaded %d documents across %d sections from %s",
        len(store),
        len(config.branches),
        config_path,
    )
    return DocsSite(config=config, store=store)


__all__ = ["DocsSite", "PageParams", "build_site"]
