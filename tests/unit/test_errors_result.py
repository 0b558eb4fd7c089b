"""
Unit tests for errors/result.py

Tests OperationResult factories, capture, chaining and unwrap.
"""

import pytest

from noid.errors.exceptions import AbortError, NoIDError
from noid.errors.result import OperationResult, ResultStatus
from noid.errors.taxonomy import APPLICATION_ERROR, ErrorSeverity


def _enrol(patient_id):
    if patient_id == "abort":
        raise AbortError()
    if patient_id == "missing":
        raise NoIDError("Patient missing", code=410001, severity=ErrorSeverity.USER)
    if patient_id == "crash":
        raise ZeroDivisionError("division by zero")
    return f"enrolled:{patient_id}"


class TestFactories:
    """Test result factories."""

    def test_ok(self):
        """Test success results."""
        result = OperationResult.ok(5)

        assert result.status == ResultStatus.OK
        assert result.success is True
        assert result.is_aborted is False
        assert result.value == 5
        assert result.error is None

    def test_failed(self):
        """Test failure results."""
        error = NoIDError("nope")

        result = OperationResult.failed(error)

        assert result.success is False
        assert result.error is error

    def test_failed_requires_error(self):
        """Test a failure without an error is rejected."""
        with pytest.raises(ValueError):
            OperationResult.failed(None)

    def test_aborted(self):
        """Test abort results."""
        result = OperationResult.aborted()

        assert result.is_aborted is True
        assert result.success is False
        assert result.error is None


class TestCapture:
    """Test capture()."""

    def test_value(self):
        """Test a returned value becomes a success."""
        result = OperationResult.capture(_enrol, "p-1")

        assert result.success is True
        assert result.value == "enrolled:p-1"

    def test_abort(self):
        """Test AbortError becomes an abort, not a failure."""
        result = OperationResult.capture(_enrol, "abort")

        assert result.is_aborted is True
        assert result.error is None

    def test_noid_error_kept(self):
        """Test NoIDError is kept as is."""
        result = OperationResult.capture(_enrol, patient_id="missing")

        assert result.status == ResultStatus.FAILED
        assert result.error.code == 410001
        assert result.error.severity == ErrorSeverity.USER

    def test_foreign_error_wrapped(self):
        """Test other exceptions are wrapped with their trace."""
        result = OperationResult.capture(_enrol, "crash")

        assert result.status == ResultStatus.FAILED
        assert result.error.message == "division by zero"
        assert result.error.code == APPLICATION_ERROR
        assert "_enrol" in result.error.server_context


class TestChainAndUnwrap:
    """Test chain() and unwrap()."""

    def test_chain_failure(self):
        """Test chaining adds a new error whose cause is the old one."""
        inner = NoIDError("hub timeout", severity=ErrorSeverity.ENVIRONMENT)

        result = OperationResult.failed(inner).chain(
            "enrolment failed", code=42, severity=ErrorSeverity.PROTOCOL
        )

        assert result.error.cause is inner
        assert result.error.code == 42
        assert result.error.severity == ErrorSeverity.PROTOCOL
        assert result.error.combined_messages == "enrolment failed, hub timeout"

    def test_chain_passes_success_and_abort(self):
        """Test successes and aborts are unchanged by chain."""
        ok = OperationResult.ok(1)
        aborted = OperationResult.aborted()

        assert ok.chain("ignored") is ok
        assert aborted.chain("ignored") is aborted

    def test_unwrap(self):
        """Test unwrap returns the value or raises."""
        error = NoIDError("bad")

        assert OperationResult.ok("v").unwrap() == "v"
        with pytest.raises(NoIDError) as exc_info:
            OperationResult.failed(error).unwrap()
        assert exc_info.value is error
        with pytest.raises(AbortError):
            OperationResult.aborted().unwrap()

    def test_to_dict(self):
        """Test dictionary form uses combined messages."""
        result = OperationResult.failed(NoIDError("inner")).chain("outer")

        data = result.to_dict()

        assert data["status"] == "failed"
        assert data["success"] is False
        assert data["message"] == "outer, inner"
        assert data["error"]["cause"]["message"] == "inner"

        assert OperationResult.ok().to_dict()["error"] is None
