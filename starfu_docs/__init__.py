"""Content routing for multi-section documentation sites.

This package maps discovered Markdown documents onto section routes, builds
ordered navigation trees that honour hand-authored ``_toc`` descriptors, and
resolves page requests (with redirects for stale links) and prev/next links.
The ``starfu-docs`` console script exposes the same operations for
inspection.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``DocsSite`` / ``build_site``: immutable site context and its loader.
- ``resolve_or_next`` / ``prev_next``: route resolution and traversal.

Examples
--------
>>> from pathlib import Path
>>> from starfu_docs import build_site, resolve_or_next
>>> site = build_site(Path("docs.yaml"))  # doctest: +SKIP
>>> resolve_or_next(site.section("tutorial"), "").kind  # doctest: +SKIP
<ResolutionKind.REDIRECT: 'redirect'>
"""

from __future__ import annotations

from .cli import app, main
from .routing import prev_next, resolve_or_next
from .site import DocsSite, build_site

__all__ = ["DocsSite", "app", "build_site", "main", "prev_next", "resolve_or_next"]
