"""Cyclopts CLI entrypoint for inspecting docs routing and navigation.

The ``starfu-docs`` console script loads ``docs.yaml``, discovers the content
of every configured section, and prints what the page-rendering layer would
see: the static routes to pre-render, a section's navigation tree, how a
requested path resolves, and a page's neighbours. Options can also be set
through ``STARFU_``-prefixed environment variables.

Examples
--------
List every route of the configured site:

>>> from starfu_docs.cli import main
>>> main()  # doctest: +SKIP

Show how a stale link inside the tutorial section is handled:

>>> from starfu_docs.cli import app
>>> app.run(
...     ["resolve", "--section", "tutorial", "--segment", "basics/old-page"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json as msgspec_json
from cyclopts import App, Parameter

from .logging import configure_logging
from .routing import ResolutionKind, prev_next, resolve_or_next
from .site import DocsSite, build_site

DEFAULT_CONFIG = Path("docs.yaml")

app = App(name="starfu-docs", config=cyclopts.config.Env("STARFU_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to docs config", env_var="STARFU_CONFIG")
]
SectionOption = typ.Annotated[str, Parameter(help="Section identifier")]
VerboseOption = typ.Annotated[bool, Parameter(help="Log debug details")]
QuietOption = typ.Annotated[bool, Parameter(help="Only log warnings and errors")]


def _load(config: Path, *, verbose: bool, quiet: bool) -> DocsSite:
    """Configure logging and build the site context for ``config``."""
    configure_logging(verbose=verbose, quiet=quiet)
    return build_site(config)


@app.command(help="List every static route the site has to render.")
def paths(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Print one ``section`` or ``section/page`` route per line."""
    site = _load(config, verbose=verbose, quiet=quiet)
    for path in site.static_paths():
        print(path)


@app.command(help="Print a section's navigation tree as JSON.")
def nav(
    *,
    section: SectionOption,
    config: ConfigOption = DEFAULT_CONFIG,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Print the navigation nodes of ``section`` as indented JSON.

    Raises
    ------
    SectionNotConfiguredError
        If ``section`` is not a configured section id.
    """
    site = _load(config, verbose=verbose, quiet=quiet)
    tree = site.section(section).nav()
    print(msgspec_json.format(msgspec_json.encode(tree), indent=2).decode("utf-8"))


@app.command(help="Resolve a requested path, reporting redirects.")
def resolve(
    *,
    section: SectionOption,
    segment: typ.Annotated[
        str, Parameter(help="Path below the section, empty for its root")
    ] = "",
    config: ConfigOption = DEFAULT_CONFIG,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Print ``ok <route>``, ``redirect <url>`` or ``not found``.

    Raises
    ------
    SystemExit
        With status 1 when neither a document nor a fallback exists.
    """
    site = _load(config, verbose=verbose, quiet=quiet)
    target = site.section(section)
    resolution = resolve_or_next(target, segment)
    match resolution.kind:
        case ResolutionKind.OK:
            route = f"{target.base}/{resolution.segment}".rstrip("/")
            print(f"ok {route}")
        case ResolutionKind.REDIRECT:
            print(f"redirect {resolution.url}")
        case _:
            print("not found")
            raise SystemExit(1)


@app.command(help="Show the previous and next pages around a route.")
def neighbours(
    *,
    section: SectionOption,
    route: typ.Annotated[str, Parameter(help="Public route of the current page")],
    config: ConfigOption = DEFAULT_CONFIG,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Print ``prev:`` and ``next:`` lines; ``-`` marks a boundary."""
    site = _load(config, verbose=verbose, quiet=quiet)
    result = prev_next(site.section(section).nav(), route)
    print(f"prev: {result.prev.url if result.prev else '-'}")
    print(f"next: {result.next.url if result.next else '-'}")


def main() -> None:
    """Invoke the Cyclopts application that powers ``starfu-docs``."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
