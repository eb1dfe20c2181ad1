"""Tests for the Revision Selector."""

from __future__ import annotations

from tspatcher.core.revision import (
    DevelopmentHead,
    ExplicitRevision,
    LatestPrerelease,
    LatestStable,
    select_revision,
)


def test_default_is_latest_stable() -> None:
    assert select_revision() == LatestStable()


def test_each_flag() -> None:
    assert select_revision(branch="release-5.6") == ExplicitRevision("release-5.6")
    assert select_revision(stable=True) == LatestStable()
    assert select_revision(prerelease=True) == LatestPrerelease()
    assert select_revision(dev=True) == DevelopmentHead()


def test_branch_wins_over_everything() -> None:
    selector = select_revision(branch="v5.4.5", stable=True, prerelease=True, dev=True)
    assert selector == ExplicitRevision("v5.4.5")


def test_stable_wins_over_prerelease_and_dev() -> None:
    assert select_revision(stable=True, prerelease=True, dev=True) == LatestStable()


def test_prerelease_wins_over_dev() -> None:
    assert select_revision(prerelease=True, dev=True) == LatestPrerelease()


def test_empty_branch_is_still_explicit() -> None:
    assert select_revision(branch="") == ExplicitRevision("")
