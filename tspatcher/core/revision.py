"""Revision Selector: which upstream commit or tag `fetch` clones.

Exactly one variant is active at a time; the union type makes that a
type-level fact instead of a convention over optional fields.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "DevelopmentHead",
    "ExplicitRevision",
    "LatestPrerelease",
    "LatestStable",
    "RevisionSelector",
    "select_revision",
]


@dataclass(frozen=True, slots=True)
class ExplicitRevision:
    """A branch or tag name, passed to git verbatim."""

    name: str


@dataclass(frozen=True, slots=True)
class LatestStable:
    """Tag of the latest (non-prerelease) GitHub release."""


@dataclass(frozen=True, slots=True)
class LatestPrerelease:
    """Tag of the newest GitHub release, prerelease or not."""


@dataclass(frozen=True, slots=True)
class DevelopmentHead:
    """Tip of the default branch; no tag lookup."""


RevisionSelector = ExplicitRevision | LatestStable | LatestPrerelease | DevelopmentHead


def select_revision(
    *,
    branch: str | None = None,
    stable: bool = False,
    prerelease: bool = False,
    dev: bool = False,
) -> RevisionSelector:
    """Map `fetch` flags to a selector.

    When several flags are given the first in the order
    branch, stable, prerelease, dev wins. No flag means latest stable.
    """
    if branch is not None:
        return ExplicitRevision(branch)
    if stable:
        return LatestStable()
    if prerelease:
        return LatestPrerelease()
    if dev:
        return DevelopmentHead()
    return LatestStable()
