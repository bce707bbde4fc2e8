"""Typed dataclasses describing docs site configuration structures."""

from __future__ import annotations

import dataclasses as dc


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class SectionNotConfiguredError(SiteConfigError, KeyError):
    """Raised when a section id is requested that no branch registers."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


@dc.dataclass(frozen=True, slots=True)
class Branch:
    """One documentation section and where its content lives."""

    id: str
    root: str
    title: str = ""
    subtitle: str = ""
    href: str = ""


@dc.dataclass(frozen=True, slots=True)
class DocsConfig:
    """Resolved site configuration shared by every section."""

    branches: tuple[Branch, ...]
    base_path: str = "/"
    title: str | None = None

    @property
    def base_prefix(self) -> str:
        """Return the base path without its trailing slash (``/`` -> ``""``)."""
        return self.base_path.rstrip("/")

    def find_branch(self, section_id: str) -> Branch | None:
        """Return the branch registered under ``section_id``, if any."""
        for branch in self.branches:
            if branch.id == section_id:
                return branch
        return None

    def get_branch(self, section_id: str) -> Branch:
        """Return the branch for ``section_id`` or fail loudly."""
        branch = self.find_branch(section_id)
        if branch is None:
            available = ", ".join(branch.id for branch in self.branches)
            msg = (
                f'Docs section "{section_id}" is not configured. '
                f"Known sections: {available}"
            )
            raise SectionNotConfiguredError(msg)
        return branch


__all__ = [
    "Branch",
    "DocsConfig",
    "SectionNotConfiguredError",
    "SiteConfigError",
]
