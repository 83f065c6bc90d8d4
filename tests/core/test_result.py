"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings tuple and has_warning()
    - converged property falls back to True for direct methods
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pydense.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**overrides):
    fields = dict(
        params=FakeParams(value=1.0),
        info={"method": "qr"},
        timing={"total_seconds": 0.01},
        backend_name="cpu_dense",
    )
    fields.update(overrides)
    return Result(**fields)


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(params=FakeParams(value=42.0))
        assert result.params.value == 42.0
        assert result.info["method"] == "qr"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_dense"

    def test_timing_none(self):
        assert _result(timing=None).timing is None

    def test_warnings_default_empty(self):
        assert _result().warnings == ()


class TestResultImmutability:

    def test_cannot_reassign_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)


class TestResultWarnings:

    def test_has_warning_substring(self):
        result = _result(warnings=("QR algorithm did not converge in 500 iterations",))
        assert result.has_warning("did not converge")
        assert not result.has_warning("singular")


class TestResultConverged:

    def test_direct_method_counts_as_converged(self):
        assert _result().converged is True

    def test_reads_info_flag(self):
        result = _result(info={"method": "eig", "converged": False, "iterations": 500})
        assert result.converged is False
