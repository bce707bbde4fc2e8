"""Walk configured section roots and load what the content store indexes.

Discovery is the only part of starfu_docs that touches the filesystem. For
every branch it collects Markdown documents (``*.md``/``*.mdx``) together with
their YAML front matter, and every ``_toc`` descriptor, keyed by the branch
root as spelled in the configuration so routing can match paths textually.

Example
-------
>>> from pathlib import Path
>>> from starfu_docs.config import load_docs_config
>>> from starfu_docs.discovery import discover_content
>>> config = load_docs_config(Path("docs.yaml"))  # doctest: +SKIP
>>> store = discover_content(config, base_dir=Path("."))  # doctest: +SKIP
>>> store.all_paths()[:1]  # doctest: +SKIP
['/docs/tutorial/intro.md']
"""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import CONTENT_EXTENSIONS, TOC_EXTENSIONS, TOC_FILENAME_TEMPLATE
from .logging import get_logger
from .paths import normalize
from .store import ContentDocument, ContentStore

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .config import Branch, DocsConfig

logger = get_logger("discovery")

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.S
)
TOC_FILENAMES = tuple(TOC_FILENAME_TEMPLATE.format(ext=ext) for ext in TOC_EXTENSIONS)


def _yaml_loader() -> YAML:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    return loader


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Return the parsed front matter mapping and the remaining body.

    Documents without front matter, or whose front matter is not a YAML
    mapping, yield an empty mapping and the text unchanged.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text
    try:
        loaded = _yaml_loader().load(match.group(1))
    except YAMLError as exc:
        logger.warning("Ignoring unreadable front matter: %s", exc)
        return {}, text
    if not isinstance(loaded, dict):
        return {}, text[match.end() :]
    return dict(loaded), text[match.end() :]


def load_toc_descriptor(path: Path) -> object | None:
    """Return the raw payload of a ``_toc`` file, or ``None`` if unparsable."""
    try:
        with path.open("r", encoding="utf-8") as handle:
            return _yaml_loader().load(handle)
    except (YAMLError, UnicodeDecodeError) as exc:
        logger.warning("Ignoring malformed TOC descriptor %s: %s", path, exc)
        return None


def resolve_root(root: str, base_dir: Path) -> Path:
    """Return the directory backing a configured root.

    Roots are project-relative even when they start with ``/``; an absolute
    directory is used as-is only when no project-relative directory exists.
    A root found in neither place resolves to its project-relative path.
    """
    candidate = base_dir / root.lstrip("/")
    if not candidate.exists() and Path(root).is_dir():
        return Path(root)
    return candidate


def _read_document(path: Path, key: str) -> ContentDocument:
    """Load one document; undecodable files are kept routable without content."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        logger.warning("Indexing %s without content: %s", path, exc)
        return ContentDocument(path=key)
    meta, body = split_front_matter(text)
    return ContentDocument(path=key, body=body, meta=meta)


def _walk_branch(
    branch: Branch, base_dir: Path
) -> tuple[list[ContentDocument], dict[str, object]]:
    """Collect documents and descriptors below one branch root."""
    directory = resolve_root(branch.root, base_dir)
    if not directory.is_dir():
        logger.warning(
            "Docs root '%s' for section '%s' does not exist", directory, branch.id
        )
        return [], {}

    prefix = normalize(branch.root)
    documents: list[ContentDocument] = []
    tocs: dict[str, object] = {}
    for path in sorted(directory.rglob("*")):
        if not path.is_file():
            continue
        key = f"{prefix}/{path.relative_to(directory).as_posix()}"
        if path.name in TOC_FILENAMES:
            tocs[key] = load_toc_descriptor(path)
        elif path.suffix in CONTENT_EXTENSIONS:
            documents.append(_read_document(path, key))
    logger.debug(
        "Discovered %d documents and %d descriptors for section '%s'",
        len(documents),
        len(tocs),
        branch.id,
    )
    return documents, tocs


def discover_content(
    config: DocsConfig, *, base_dir: Path | None = None
) -> ContentStore:
    """Build a :class:`ContentStore` from every configured section root.

    Parameters
    ----------
    config : DocsConfig
        Site configuration listing the branches to walk.
    base_dir : Path, optional
        Project directory that configured roots are relative to; defaults to
        the current working directory.

    Returns
    -------
    ContentStore
        Store indexing every discovered document and ``_toc`` descriptor.
        Missing roots contribute nothing and are reported as warnings.
    """
    project_dir = base_dir or Path.cwd()
    documents: list[ContentDocument] = []
    tocs: dict[str, object] = {}
    for branch in config.branches:
        branch_documents, branch_tocs = _walk_branch(branch, project_dir)
        documents.extend(branch_documents)
        tocs.update(branch_tocs)
    return ContentStore(config.branches, documents, tocs)


__all__ = [
    "FRONT_MATTER_PATTERN",
    "TOC_FILENAMES",
    "discover_content",
    "load_toc_descriptor",
    "resolve_root",
    "split_front_matter",
]
