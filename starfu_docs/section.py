"""Build per-section entries, route lookups, and navigation trees.

A :class:`Section` ties one configured :class:`~starfu_docs.config.Branch` to
the documents the :class:`~starfu_docs.store.ContentStore` discovered under
its root. Navigation is composed from three sources that only partially
overlap:

* the documents actually present on disk,
* the section root's ``_toc`` descriptor, which picks and orders top-level
  documents and groups and may relabel them,
* each group directory's own ``_toc`` descriptor, which orders and relabels
  the documents inside it.

Navigation is two levels deep: a top-level document or a group of documents.
Deeper documents are still routable through :meth:`Section.resolver` but do
not appear in the tree.

Example
-------
>>> from starfu_docs.config import Branch
>>> from starfu_docs.section import Section
>>> from starfu_docs.store import ContentDocument, ContentStore
>>> branch = Branch(id="tutorial", root="/docs/tutorial")
>>> store = ContentStore(
...     [branch],
...     [ContentDocument("/docs/tutorial/intro.md"),
...      ContentDocument("/docs/tutorial/basics/setup.md")],
... )
>>> [node.label for node in Section(branch, store).nav()]
['Basics', 'Intro']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import re
import typing as typ

from .logging import get_logger
from .paths import (
    capitalize,
    fs_to_route,
    get_parts,
    normalize,
    to_relative,
    trim_slashes,
)

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .config import Branch, DocsConfig
    from .store import ContentDocument, ContentStore
    from .toc import TocConfig

logger = get_logger("section")

_INDEX_DOCUMENT = re.compile(r"(^|/)index\.[^./]+$")


@dc.dataclass(frozen=True, slots=True)
class DocEntry:
    """A single addressable document link.

    ``authored`` is ``True`` when the document's front matter supplied a
    title; otherwise ``title`` falls back to the file name.
    """

    url: str
    title: str
    authored: bool = False


@dc.dataclass(frozen=True, slots=True)
class NavNode:
    """One top-level node of a section's navigation tree.

    Attributes
    ----------
    label : str
        Text shown for the node.
    dir : str
        Directory name (groups) or document slug (leaves) the node derives
        from; the route resolver matches redirects against it.
    items : tuple[DocEntry, ...]
        Ordered document links of a group; empty for a leaf.
    header : str | None
        Optional descriptive text shown above the node.
    href : str | None
        Link target of a leaf; ``None`` for a group.
    """

    label: str
    dir: str
    items: tuple[DocEntry, ...] = ()
    header: str | None = None
    href: str | None = None

    @property
    def is_group(self) -> bool:
        """Return ``True`` when the node groups child documents."""
        return bool(self.items)


@dc.dataclass(frozen=True, slots=True)
class CategorizedEntries:
    """Entries split into top-level documents and per-group documents."""

    top_docs: dict[str, DocEntry]
    groups: dict[str, dict[str, DocEntry]]
    order: tuple[str, ...]


def categorize_entries(
    entries: cabc.Iterable[DocEntry], base: str
) -> CategorizedEntries:
    """Split entries by depth below ``base``.

    One path segment makes a top-level document keyed by its slug; two make a
    grouped document keyed by ``(group, slug)``. ``order`` records the first
    appearance of each top-level slug (``"slug"``) or group (``"dir/"``) so
    callers can fall back to discovery order. Deeper entries are skipped.
    """
    top_docs: dict[str, DocEntry] = {}
    groups: dict[str, dict[str, DocEntry]] = {}
    order: dict[str, None] = {}
    for entry in entries:
        parts = get_parts(entry.url, base)
        match parts:
            case [slug]:
                top_docs[slug] = entry
                order.setdefault(slug)
            case [group, slug]:
                groups.setdefault(group, {})[slug] = entry
                order.setdefault(f"{group}/")
            case _:
                logger.debug("Skipping %s: navigation is two levels deep", entry.url)
    return CategorizedEntries(top_docs=top_docs, groups=groups, order=tuple(order))


def _label(alias: str | None, entry: DocEntry, slug: str) -> str:
    """Pick an authored alias, then an authored title, then the capitalized slug."""
    if alias:
        return alias
    if entry.authored:
        return entry.title
    return capitalize(slug)


class Section:
    """Entries, route lookup, and navigation for one documentation branch."""

    def __init__(
        self,
        branch: Branch,
        store: ContentStore,
        *,
        base_path: str = "/",
        content_root: str | None = None,
    ) -> None:
        """Bind ``branch`` to the documents ``store`` holds under its root.

        Parameters
        ----------
        branch : Branch
            Configured section.
        store : ContentStore
            Index of every discovered document and descriptor.
        base_path : str, optional
            Public base path of the site; ``/`` publishes sections at the
            domain root.
        content_root : str, optional
            Directory whose ``_toc`` descriptors govern navigation; defaults
            to the branch root.
        """
        self.branch = branch
        self.store = store
        self.base_prefix = base_path.rstrip("/")
        self.base = f"{self.base_prefix}/{branch.id}"
        self.content_root = normalize(content_root or branch.root)
        self._documents = store.documents_for_section(branch.id)

    @property
    def id(self) -> str:
        """Return the section id."""
        return self.branch.id

    def route_for(self, fs_path: str) -> str:
        """Return the public route of a document inside this section."""
        return f"{self.base_prefix}{fs_to_route(fs_path, (self.branch,))}"

    def entries(self) -> list[DocEntry]:
        """Return every non-index document as a link, in discovery order."""
        result: list[DocEntry] = []
        for path, document in self._documents.items():
            if _INDEX_DOCUMENT.search(path):
                continue
            url = self.route_for(path)
            title = document.title
            if title is None:
                title = to_relative(url, self.base).split("/")[-1]
            result.append(
                DocEntry(url=url, title=title, authored=document.title is not None)
            )
        return result

    def resolver(self) -> cabc.Callable[[str | None], ContentDocument | None]:
        """Return a lookup from a requested segment to its document.

        Index documents answer for their directory, so an empty segment
        resolves to the section's own ``index`` document when one exists.
        """
        routes = {
            normalize(self.route_for(path)): document
            for path, document in self._documents.items()
        }
        base = normalize(self.base)

        def resolve(segment: str | None) -> ContentDocument | None:
            cleaned = trim_slashes(segment or "")
            target = f"{base}/{cleaned}" if cleaned else base
            return routes.get(normalize(target))

        return resolve

    def nav(self) -> list[NavNode]:
        """Compose the ordered navigation tree for this section.

        The root descriptor decides which groups and top-level documents
        appear and in which order. When it is absent, or none of its entries
        match a discovered document, every discovered group and document is
        shown in discovery order instead.
        """
        categorized = categorize_entries(self.entries(), self.base)
        root_toc = self.store.toc_for(self.content_root)

        nodes = self._build_nodes(
            (entry.path for entry in root_toc.ordered), root_toc, categorized
        )
        if not nodes:
            nodes = self._build_nodes(categorized.order, root_toc, categorized)
        return nodes

    def _build_nodes(
        self,
        paths: cabc.Iterable[str],
        root_toc: TocConfig,
        categorized: CategorizedEntries,
    ) -> list[NavNode]:
        nodes: list[NavNode] = []
        for path in paths:
            if path.endswith("/"):
                node = self._build_group(path[:-1], root_toc, categorized)
            else:
                node = self._build_doc(path, root_toc, categorized)
            if node is not None:
                nodes.append(node)
        return nodes

    def _build_group(
        self, dir_name: str, root_toc: TocConfig, categorized: CategorizedEntries
    ) -> NavNode | None:
        """Return the group node for ``dir_name`` or ``None`` when it is empty."""
        group_key = f"{dir_name}/"
        item_by_slug = categorized.groups.get(dir_name, {})
        local_toc = self.store.toc_for(f"{self.content_root}/{dir_name}")

        slugs = [
            entry.slug for entry in local_toc.ordered if entry.slug in item_by_slug
        ]
        if not slugs:
            # No descriptor (or a stale one): keep every document visible.
            slugs = list(item_by_slug)
        items = tuple(
            DocEntry(
                url=item_by_slug[slug].url,
                title=_label(local_toc.alias.get(slug), item_by_slug[slug], slug),
                authored=item_by_slug[slug].authored,
            )
            for slug in dict.fromkeys(slugs)
        )
        if not items:
            logger.debug("Omitting empty navigation group '%s'", dir_name)
            return None
        return NavNode(
            label=root_toc.alias.get(group_key) or capitalize(dir_name),
            dir=dir_name,
            items=items,
            header=root_toc.headers.get(group_key),
        )

    @staticmethod
    def _build_doc(
        slug: str, root_toc: TocConfig, categorized: CategorizedEntries
    ) -> NavNode | None:
        """Return the leaf node for a top-level document, if it exists."""
        entry = categorized.top_docs.get(slug)
        if entry is None:
            return None
        return NavNode(
            label=_label(root_toc.alias.get(slug), entry, slug),
            dir=slug,
            href=entry.url,
            header=root_toc.headers.get(slug),
        )


def create_section(
    config: DocsConfig,
    store: ContentStore,
    section: str,
    *,
    base_path: str | None = None,
    content_root: str | None = None,
) -> Section:
    """Return the :class:`Section` registered as ``section``.

    Raises
    ------
    SectionNotConfiguredError
        If no configured branch uses the requested id.
    """
    branch = config.get_branch(trim_slashes(section))
    return Section(
        branch,
        store,
        base_path=config.base_path if base_path is None else base_path,
        content_root=content_root,
    )


__all__ = [
    "CategorizedEntries",
    "DocEntry",
    "NavNode",
    "Section",
    "categorize_entries",
    "create_section",
]
