"""Load and validate the docs site configuration.

This subpackage parses the project's ``docs.yaml`` file, normalizes section
roots and the public base path, derives section ids and links, and produces
frozen dataclasses (:class:`DocsConfig`, :class:`Branch`) that the content
store and section builders consume. The primary entry point is
:func:`load_docs_config`.

Examples
--------
>>> from pathlib import Path
>>> from starfu_docs.config import load_docs_config
>>> config = load_docs_config(Path("docs.yaml"))  # doctest: +SKIP
>>> config.get_branch("tutorial").href  # doctest: +SKIP
'/starfu/tutorial/intro'
"""

from .helpers import normalize_base_path, normalize_root, resolve_branch_href
from .loader import build_docs_config, load_docs_config
from .models import Branch, DocsConfig, SectionNotConfiguredError, SiteConfigError

__all__ = [
    "Branch",
    "DocsConfig",
    "SectionNotConfiguredError",
    "SiteConfigError",
    "build_docs_config",
    "load_docs_config",
    "normalize_base_path",
    "normalize_root",
    "resolve_branch_href",
]
