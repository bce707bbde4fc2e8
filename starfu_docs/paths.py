r"""String helpers that translate filesystem paths into section routes.

Everything here is a pure function over POSIX-style strings. Routes take the
form ``/<branch-id>/<relative-path-without-extension>``; a slug that ends with
``/`` denotes a group (directory) and one without denotes a leaf item.

Example
-------
>>> from starfu_docs.paths import fs_to_route, get_parts
>>> from starfu_docs.config import Branch
>>> branches = [Branch(id="tutorial", root="/docs/tutorial")]
>>> fs_to_route("/docs/tutorial/basics/index.md", branches)
'/tutorial/basics/'
>>> get_parts("/tutorial/basics/setup", "/tutorial")
['basics', 'setup']
"""

from __future__ import annotations

import re
import typing as typ

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc

    from .config import Branch

_REPEATED_SLASHES = re.compile(r"/+")
_LEADING_DOT_SLASH = re.compile(r"^(\./)+")
_INDEX_FILE = re.compile(r"(^|/)index\.[^./]+$")
_EXTENSION = re.compile(r"\.[^./]+$")
_WORD_START = re.compile(r"(^|[-_/ ])([a-z])")


def normalize(path: str) -> str:
    """Return ``path`` without a single trailing slash."""
    return path[:-1] if path.endswith("/") else path


def trim_slashes(path: str) -> str:
    """Return ``path`` with every leading and trailing slash removed."""
    return path.strip("/")


def is_group(slug: str) -> bool:
    """Return ``True`` when ``slug`` names a group (ends with ``/``)."""
    return slug.endswith("/")


def to_posix(path: str) -> str:
    """Translate Windows separators so lookups share one convention."""
    return path.replace("\\", "/")


def branch_id(root: str) -> str:
    """Return the last non-empty component of a branch root."""
    parts = [part for part in to_posix(root).split("/") if part]
    return parts[-1] if parts else ""


def _clean_slug(slug: str) -> str:
    collapsed = _REPEATED_SLASHES.sub("/", slug)
    return _LEADING_DOT_SLASH.sub("", collapsed)


def normalize_group(slug: str) -> str:
    """Normalize a group slug so it ends with exactly one slash."""
    return _clean_slug(slug).rstrip("/") + "/"


def normalize_item(slug: str) -> str:
    """Normalize an item slug so it carries no trailing slash."""
    return _clean_slug(slug).rstrip("/")


def fs_to_route(fs_path: str, branches: cabc.Iterable[Branch]) -> str:
    """Translate a content file path into its canonical section route.

    Parameters
    ----------
    fs_path : str
        Path of the content document, using the same root spelling as the
        branch configuration.
    branches : Iterable[Branch]
        Configured branches; the first whose root is a strict ancestor of
        ``fs_path`` owns the document.

    Returns
    -------
    str
        ``/<branch-id>/<relative>`` with the extension removed and a trailing
        ``index.<ext>`` collapsed onto its directory, or ``""`` when no branch
        owns the path.
    """
    path = to_posix(fs_path)
    for branch in branches:
        prefix = f"{normalize(branch.root)}/"
        if not path.startswith(prefix):
            continue
        rel = path[len(prefix) :].lstrip("/")
        rel = _INDEX_FILE.sub(r"\1", rel)
        rel = _EXTENSION.sub("", rel)
        return f"/{branch.id}/{rel}"
    return ""


def to_relative(url: str, base: str) -> str:
    """Strip a literal ``base + "/"`` prefix from ``url`` when present."""
    prefix = f"{base}/"
    if url.startswith(prefix):
        return url[len(prefix) :]
    return url


def get_parts(url: str, base: str) -> list[str]:
    """Return the non-empty path segments of ``url`` relative to ``base``."""
    return [part for part in to_relative(url, base).split("/") if part]


def capitalize(name: str) -> str:
    """Turn a slug into a label by capitalizing each separated word.

    >>> capitalize("getting-started")
    'Getting-Started'
    """
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), name)


__all__ = [
    "branch_id",
    "capitalize",
    "fs_to_route",
    "get_parts",
    "is_group",
    "normalize",
    "normalize_group",
    "normalize_item",
    "to_posix",
    "to_relative",
    "trim_slashes",
]
