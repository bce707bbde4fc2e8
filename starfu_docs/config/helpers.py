"""Utility helpers shared by the docs configuration loader."""

from __future__ import annotations

import re
import typing as typ

from starfu_docs._constants import DEFAULT_DOCS_ROOT
from starfu_docs.paths import branch_id, to_posix

from .models import Branch, SiteConfigError

_URL_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")
_LEADING_DOT_SLASH = re.compile(r"^(\./)+")

FALLBACK_SECTIONS: tuple[dict[str, str], ...] = (
    {"root": DEFAULT_DOCS_ROOT, "title": "Docs", "subtitle": "", "href": "/docs"},
)


def normalize_root(raw: str) -> str:
    """Normalize a configured content root into a slash-separated path.

    Relative roots that climb out of the project (``../docs``) are kept
    relative; everything else is anchored with a leading slash.

    >>> normalize_root("./docs/tutorial/")
    '/docs/tutorial'
    >>> normalize_root("..\\\\docs")
    '../docs'
    """
    text = _LEADING_DOT_SLASH.sub("", to_posix(str(raw).strip()))
    text = text.rstrip("/")
    if text == ".." or text.startswith("../"):
        return text
    return text if text.startswith("/") else f"/{text}"


def normalize_base_path(raw: str | None) -> str:
    """Return the public base path without a trailing slash (root is ``/``)."""
    base = raw if raw else "/"
    trimmed = base[:-1] if base.endswith("/") else base
    return trimmed or "/"


def _ensure_leading_slash(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"


def resolve_branch_href(href: str | None, section_id: str, base_path: str) -> str:
    """Resolve a branch link against the site base path.

    Absolute URLs and hrefs that already start with the base path are
    returned unchanged; anything else is prefixed with the base.
    """
    source = href or f"/{section_id}"
    if _URL_SCHEME.match(source):
        return source
    normalized_base = normalize_base_path(base_path)
    base = "" if normalized_base == "/" else normalized_base
    if base and source.startswith(base):
        return source
    return f"{base}{_ensure_leading_slash(source)}" or "/"


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_branch(payload: typ.Mapping[str, typ.Any], base_path: str) -> Branch:
    """Build a Branch from one ``sections`` entry, deriving missing fields."""
    raw_root = _optional_str(payload.get("root"))
    if not raw_root:
        msg = "Every docs section needs a 'root' directory."
        raise SiteConfigError(msg)
    root = normalize_root(raw_root)
    section_id = _optional_str(payload.get("id")) or branch_id(root)
    if not section_id:
        msg = f"Cannot derive a section id from root '{raw_root}'."
        raise SiteConfigError(msg)
    return Branch(
        id=section_id,
        root=root,
        title=_optional_str(payload.get("title")) or section_id,
        subtitle=_optional_str(payload.get("subtitle")) or "",
        href=resolve_branch_href(
            _optional_str(payload.get("href")), section_id, base_path
        ),
    )


def build_branches(
    sections: typ.Sequence[typ.Mapping[str, typ.Any]] | None, base_path: str
) -> tuple[Branch, ...]:
    """Build every configured branch, enforcing unique section ids."""
    payloads = sections or FALLBACK_SECTIONS
    branches: list[Branch] = []
    seen: set[str] = set()
    for payload in payloads:
        match payload:
            case str() as root:
                branch = _build_branch({"root": root}, base_path)
            case dict():
                branch = _build_branch(payload, base_path)
            case _:
                msg = f"Unsupported section entry: {payload!r}"
                raise SiteConfigError(msg)
        if branch.id in seen:
            msg = f"Duplicate docs section id '{branch.id}'."
            raise SiteConfigError(msg)
        seen.add(branch.id)
        branches.append(branch)
    return tuple(branches)


__all__ = [
    "FALLBACK_SECTIONS",
    "build_branches",
    "normalize_base_path",
    "normalize_root",
    "resolve_branch_href",
]
