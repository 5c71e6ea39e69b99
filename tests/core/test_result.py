"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from numstat import __version__
from numstat.core.result import Result, _default_provenance


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**kwargs):
    defaults = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="cpu",
    )
    defaults.update(kwargs)
    return Result(**defaults)


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"method": "normal_equation"},
            timing={"total_seconds": 0.01},
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "normal_equation"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu"

    def test_warnings_default_empty(self):
        assert _result().warnings == ()

    def test_provenance_auto_generated(self):
        result = _result()
        assert result.provenance["numstat_version"] == __version__
        assert "numpy_version" in result.provenance

    def test_provenance_explicit_override(self):
        result = _result(provenance={"custom": "metadata"})
        assert result.provenance == {"custom": "metadata"}


class TestImmutability:
    """Result is frozen: no attribute mutation allowed."""

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)


class TestHasWarning:
    """has_warning() checks for substring in any warning."""

    def test_no_warnings_returns_false(self):
        assert _result().has_warning("anything") is False

    def test_substring_match(self):
        result = _result(warnings=("X'X is near-singular: smallest pivot 3.55e-15",))
        assert result.has_warning("near-singular") is True
        assert result.has_warning("pivot") is True

    def test_no_match(self):
        result = _result(warnings=("near-singular",))
        assert result.has_warning("diverging") is False


class TestDefaultProvenance:

    def test_independent_copies(self):
        prov1 = _default_provenance()
        prov2 = _default_provenance()
        assert prov1 is not prov2
        assert prov1 == prov2
