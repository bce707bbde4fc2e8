"""Load docs site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import build_branches, normalize_base_path
from .models import DocsConfig, SiteConfigError

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from pathlib import Path


def load_docs_config(path: Path) -> DocsConfig:
    """Load the YAML configuration describing the documentation sections.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``docs.yaml``).

    Returns
    -------
    DocsConfig
        Parsed configuration with the normalized base path, the optional site
        title, and one :class:`Branch` per configured section. When no
        sections are listed a single ``/docs`` branch is assumed.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If ``sections`` is not a list, a section lacks a root, or two
        sections resolve to the same id.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from starfu_docs.config import load_docs_config
    >>> config = load_docs_config(Path("docs.yaml"))  # doctest: +SKIP
    >>> [branch.id for branch in config.branches]  # doctest: +SKIP
    ['tutorial', 'cocktails']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return build_docs_config(loaded)


def build_docs_config(raw: typ.Mapping[str, typ.Any]) -> DocsConfig:
    """Build a :class:`DocsConfig` from an already-parsed mapping."""
    base_path = normalize_base_path(raw.get("base_path") or raw.get("basePath"))
    sections = raw.get("sections", raw.get("branches"))
    if sections is not None and not isinstance(sections, list):
        msg = "'sections' must be a list of section definitions."
        raise SiteConfigError(msg)
    title = raw.get("title")
    return DocsConfig(
        branches=build_branches(sections, base_path),
        base_path=base_path,
        title=str(title) if title is not None else None,
    )


__all__ = ["build_docs_config", "load_docs_config"]
