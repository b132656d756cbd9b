"""
Root conftest.py for the binstrap test suite.

Pytest plugin that enforces TRA (Test Responsibility Architecture) and Tier markers.
- Reports tests missing a TRA marker or tier marker
- Enforces tier timeouts when pytest-timeout is installed

Usage:
    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.ManagedBinary")
    def test_something():
        ...

Configuration:
    Set TRA_ENFORCE=1 to fail collection on marker violations
    Set TRA_ENFORCE=0 to disable marker checks
    Set TIER_TIMEOUT_MULTIPLIER to scale tier timeouts (e.g. on slow CI)
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


# Valid TRA namespace prefixes
VALID_TRA_PREFIXES = frozenset(
    [
        "Domain.Invariant.",
        "Domain.Policy.",
        "UseCase.",
        "Port.",
        "Adapter.",
        "Contract.",
    ]
)

# Tier timeout limits in seconds
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,  # instant
    1: 2.0,  # fast
    2: 30.0,  # standard, spawns processes
    3: 300.0,  # slow
    4: 0,  # manual, no limit
}


def _get_tier(item: Item) -> int | None:
    """Extract tier level from item's markers."""
    for marker in item.iter_markers(name="tier"):
        if marker.args:
            tier = marker.args[0]
            if isinstance(tier, int) and tier in TIER_TIMEOUTS:
                return tier
    return None


def _marker_errors(items: list[Item]) -> list[str]:
    """Validate TRA and tier markers on all tests.

    Returns:
        List of error messages. Empty if all valid.
    """
    errors = []

    for item in items:
        test_id = item.nodeid
        tra_markers = list(item.iter_markers(name="tra"))
        legacy_markers = list(item.iter_markers(name="legacy"))

        if tra_markers and legacy_markers:
            errors.append(f"{test_id}: Cannot have both @tra and @legacy markers")
        elif not tra_markers and not legacy_markers:
            errors.append(
                f"{test_id}: Missing @pytest.mark.tra('...') or @pytest.mark.legacy"
            )
        elif tra_markers:
            anchor = tra_markers[0].args[0] if tra_markers[0].args else ""
            if not isinstance(anchor, str) or not any(
                anchor.startswith(prefix) for prefix in VALID_TRA_PREFIXES
            ):
                valid = ", ".join(sorted(VALID_TRA_PREFIXES))
                errors.append(
                    f"{test_id}: Invalid TRA anchor {anchor!r}. Must start with one of: {valid}"
                )

        if _get_tier(item) is None:
            errors.append(f"{test_id}: Missing or invalid @pytest.mark.tier() marker")

    return errors


def _apply_tier_timeouts(items: list[Item]) -> None:
    """Apply timeout based on tier level.

    Only applies if pytest-timeout is installed and no explicit timeout is set.
    """
    try:
        import pytest_timeout as _  # type: ignore[import-untyped]  # noqa: F401
    except ImportError:
        return

    multiplier = float(os.environ.get("TIER_TIMEOUT_MULTIPLIER", "1.0"))

    for item in items:
        tier = _get_tier(item)
        if tier is None or any(item.iter_markers(name="timeout")):
            continue

        timeout = TIER_TIMEOUTS[tier]
        if timeout > 0:
            item.add_marker(pytest.mark.timeout(timeout * multiplier))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Check TRA and tier markers at collection time, then apply timeouts."""
    enforce_mode = os.environ.get("TRA_ENFORCE", "warn")

    if enforce_mode != "0":
        errors = _marker_errors(items)
        if errors and enforce_mode == "warn":
            print("\nTRA/Tier Enforcement Warnings:")
            for error in errors:
                print(f"  {error}")
        elif errors:
            pytest.fail(
                "TRA/Tier Enforcement Errors:\n" + "\n".join(f"  - {e}" for e in errors),
                pytrace=False,
            )

    _apply_tier_timeouts(items)


@pytest.hookimpl(trylast=True)
def pytest_report_header(config: Config) -> str:
    """Add enforcement info to pytest header."""
    return f"TRA enforcement: {os.environ.get('TRA_ENFORCE', 'warn')}"
