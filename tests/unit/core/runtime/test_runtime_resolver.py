from __future__ import annotations

"""
Unit tests for the Runtime Chipset Resolver.

Covers the '--architecture' command-line override parser and the full
decision table of resolve_chipset (runtime presence x host width x
explicit choice).
"""

import itertools
import logging

import pytest

from iseries_launcher.core.runtime.resolver import (
    WARN_X32_ON_X64,
    parse_chipset_from_args,
    resolve_chipset,
)
from iseries_launcher.domain.chipset import Chipset
from iseries_launcher.domain.exit_codes import ExitCode

# -----------------------------------------------------------------------------
# COMMAND LINE OVERRIDE
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("args, expected", [
    (["--architecture=x64"], Chipset.X64),
    (["--ARCHITECTURE=64"], Chipset.X64),
    (["--architecture 32"], Chipset.X32),
    (["--Architecture=X32"], Chipset.X32),
    (["--architecturexyz"], Chipset.UNDETERMINED),
    (["--architecture="], Chipset.UNDETERMINED),
    ([], Chipset.UNDETERMINED),
    (["foo", "bar"], Chipset.UNDETERMINED),
])
def test_parse_chipset_from_args(args, expected) -> None:
    """TC-01: Verify recognised spellings of the architecture override."""
    assert parse_chipset_from_args(args) is expected


def test_parse_chipset_first_valid_wins() -> None:
    """TC-02: Verify unrecognised values are skipped and the first valid one wins."""
    args = ["--architecture=arm", "--architecture=32", "--architecture=64"]
    assert parse_chipset_from_args(args) is Chipset.X32


def test_parse_chipset_ignores_value_in_next_argument() -> None:
    """TC-03: Verify the value must be part of the same argument."""
    assert parse_chipset_from_args(["--architecture", "64"]) is Chipset.UNDETERMINED


# -----------------------------------------------------------------------------
# DECISION TABLE
# -----------------------------------------------------------------------------

_CHOICES = (Chipset.X32, Chipset.X64, Chipset.UNDETERMINED)


def _expected(has_x32: bool, has_x64: bool, host64: bool, choice: Chipset):
    """Reference outcome: (chipset or None, failure or None, warned)."""
    if not has_x32 and not has_x64:
        return None, ExitCode.NO_RUNTIME, False
    warned = host64 and not has_x64
    if not host64 and not has_x32:
        return None, ExitCode.NO_X32_RUNTIME, warned
    if has_x32 and has_x64:
        if choice is Chipset.UNDETERMINED:
            return (Chipset.X64 if host64 else Chipset.X32), None, warned
        return choice, None, warned
    return (Chipset.X32 if has_x32 else Chipset.X64), None, warned


@pytest.mark.parametrize(
    "has_x32, has_x64, host64, choice",
    list(itertools.product((True, False), (True, False), (True, False), _CHOICES)),
)
def test_resolve_chipset_decision_table(has_x32, has_x64, host64, choice) -> None:
    """TC-04: Verify every combination of runtimes, host width and override."""
    result = resolve_chipset(has_x32, has_x64, host64, choice)
    chipset, failure, warned = _expected(has_x32, has_x64, host64, choice)

    if failure is not None:
        assert not result.ok
        assert result.failure is failure
        assert result.chipset is Chipset.UNDETERMINED
    else:
        assert result.ok
        assert result.failure is None
        assert result.chipset is chipset

    assert (WARN_X32_ON_X64 in result.warnings) is warned


def test_resolve_x32_only_on_x64_host_warns_once() -> None:
    """TC-05: Verify the x32-on-x64 fallback raises exactly one warning."""
    result = resolve_chipset(True, False, True)

    assert result.chipset is Chipset.X32
    assert result.warnings == (WARN_X32_ON_X64,)


def test_resolve_x64_only_on_x32_host_is_fatal() -> None:
    """TC-06: Verify an x32 host without the x32 runtime is fatal."""
    result = resolve_chipset(False, True, False, Chipset.X64)

    assert result.failure is ExitCode.NO_X32_RUNTIME
    assert result.warnings == ()


def test_resolve_single_runtime_ignores_override() -> None:
    """TC-07: Verify the override is ignored when only one runtime exists."""
    result = resolve_chipset(False, True, True, Chipset.X32)
    assert result.chipset is Chipset.X64


def test_resolve_logs_determined_chipset(caplog: pytest.LogCaptureFixture) -> None:
    """TC-08: Verify the decision is logged with the chipset label."""
    with caplog.at_level(logging.INFO):
        resolve_chipset(True, True, True)
    assert "Determined chipset: x64bit" in caplog.text
