"""Tests for the library allow/deny policy."""

import pytest

from playsync.core.constants.denylist import DEFAULT_DENYLIST
from playsync.platform.filters import filter_libraries


@pytest.mark.parametrize("library", sorted(DEFAULT_DENYLIST))
def test_denylisted_libraries_are_excluded(library):
    """Every denylisted identifier is dropped."""
    assert filter_libraries([library], DEFAULT_DENYLIST) == []


@pytest.mark.parametrize("library", ["firebase-core", "license-x", "services-play-", "Play-base"])
def test_libraries_without_prefix_are_excluded(library):
    """Identifiers without the prefix are dropped even when not denylisted."""
    assert filter_libraries([library], denylist=[]) == []


def test_license_artifacts_are_excluded():
    """Identifiers ending with the license marker are dropped."""
    assert filter_libraries(["play-services-oss-license", "play-services-base"], []) == [
        "play-services-base"
    ]


def test_order_and_duplicates_are_preserved():
    """Survivors keep input order; the filter does not deduplicate."""
    raw = ["play-b", "play-a", "play-b"]
    assert filter_libraries(raw, []) == ["play-b", "play-a", "play-b"]


def test_scenario_listing_is_filtered():
    """Denylist and prefix rules combine over a realistic listing."""
    raw = ["play-a", "play-b", "play-services", "license-x"]
    assert filter_libraries(raw, {"play-services"}) == ["play-a", "play-b"]


def test_custom_prefix_and_suffix():
    """Prefix and suffix are configurable."""
    raw = ["firebase-auth", "firebase-license", "play-base"]
    assert filter_libraries(raw, [], prefix="firebase-", excluded_suffix="license") == [
        "firebase-auth"
    ]
