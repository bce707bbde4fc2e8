"""Index discovered content documents and ``_toc`` descriptors.

The :class:`ContentStore` is built once from whatever the discovery step
produced and then answers two questions for the section builders: which
documents belong to a section, and what the parsed ``_toc`` descriptor for a
directory is. Documents are sorted by path on construction so every consumer
sees the same discovery order regardless of how the files were found.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from ._constants import TOC_EXTENSIONS, TOC_FILENAME_TEMPLATE
from .paths import normalize, to_posix
from .toc import TocConfig, parse_toc_config

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .config import Branch


@dc.dataclass(frozen=True, slots=True)
class ContentDocument:
    """One discovered content file.

    Attributes
    ----------
    path : str
        POSIX filesystem path, unique within the store.
    body : str
        Document body with any front matter removed; opaque to routing.
    meta : Mapping[str, Any]
        Parsed front matter. Only an optional ``title`` is consulted.
    """

    path: str
    body: str = ""
    meta: typ.Mapping[str, typ.Any] = dc.field(default_factory=dict)

    @property
    def title(self) -> str | None:
        """Return the front matter title, if one was authored."""
        value = self.meta.get("title")
        if value is None:
            return None
        text = str(value).strip()
        return text or None


DocumentSource: typ.TypeAlias = (
    cabc.Mapping[str, ContentDocument] | cabc.Iterable[ContentDocument]
)


class ContentStore:
    """Read-only index over every discovered document and descriptor."""

    def __init__(
        self,
        branches: cabc.Iterable[Branch],
        documents: DocumentSource,
        tocs: cabc.Mapping[str, object] | None = None,
    ) -> None:
        """Index documents and descriptors for lookup.

        Parameters
        ----------
        branches : Iterable[Branch]
            Configured sections; used to map a section id onto its root.
        documents : Mapping[str, ContentDocument] or Iterable[ContentDocument]
            Discovered documents, either keyed by path or as a flat iterable.
            Paths are translated to forward slashes before indexing.
        tocs : Mapping[str, object], optional
            Raw descriptor payloads keyed by the descriptor file path
            (``<dir>/_toc.yaml``).
        """
        self._branches = tuple(branches)
        if isinstance(documents, cabc.Mapping):
            pairs = [(to_posix(path), doc) for path, doc in documents.items()]
        else:
            pairs = [(to_posix(doc.path), doc) for doc in documents]
        self._documents: dict[str, ContentDocument] = dict(
            sorted(pairs, key=lambda pair: pair[0])
        )
        self._tocs: dict[str, object] = {
            to_posix(path): payload for path, payload in (tocs or {}).items()
        }

    @property
    def branches(self) -> tuple[Branch, ...]:
        """Return the branches this store was built for."""
        return self._branches

    def all_paths(self) -> list[str]:
        """Return every document path in sorted discovery order."""
        return list(self._documents)

    def get(self, path: str) -> ContentDocument | None:
        """Return the document stored under ``path``, if any."""
        return self._documents.get(to_posix(path))

    def documents_for_section(self, section_id: str) -> dict[str, ContentDocument]:
        """Return the documents that live strictly under a section's root.

        Unknown section ids yield an empty mapping; callers that need a hard
        failure resolve the branch through :class:`DocsConfig` first.
        """
        wanted = section_id.strip("/")
        branch = next((b for b in self._branches if b.id == wanted), None)
        if branch is None:
            return {}
        prefix = f"{normalize(branch.root)}/"
        return {
            path: doc
            for path, doc in self._documents.items()
            if path.startswith(prefix)
        }

    def toc_for(self, directory: str | None) -> TocConfig:
        """Return the parsed ``_toc`` descriptor for ``directory``.

        Descriptor file names are tried in :data:`TOC_EXTENSIONS` order; a
        directory without one yields the empty configuration.
        """
        if not directory:
            return parse_toc_config(None)
        base = normalize(to_posix(directory))
        for ext in TOC_EXTENSIONS:
            candidate = f"{base}/{TOC_FILENAME_TEMPLATE.format(ext=ext)}"
            if self._tocs.get(candidate):
                return parse_toc_config(self._tocs[candidate])
        return parse_toc_config(None)

    def __len__(self) -> int:
        return len(self._documents)


__all__ = ["ContentDocument", "ContentStore", "DocumentSource"]
