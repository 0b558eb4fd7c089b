"""
errors/result.py - Operation results

An OperationResult is either a success carrying a value, a failure
carrying a NoIDError, or an abort. Failures are chained by attaching a
new error whose cause is the previous one, instead of re-raising.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, TypeVar
from enum import Enum
import logging

from .exceptions import AbortError, NoIDError
from .taxonomy import APPLICATION_ERROR, ErrorSeverity

logger = logging.getLogger("errors.result")

T = TypeVar("T")


class ResultStatus(Enum):
    """Outcome of an operation."""
    OK = "ok"
    FAILED = "failed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Success value, error, or abort. Use the factories to build one."""

    status: ResultStatus = ResultStatus.OK
    value: Optional[T] = None
    error: Optional[NoIDError] = None

    # -------- factories --------

    @classmethod
    def ok(cls, value: T = None) -> "OperationResult[T]":
        return cls(status=ResultStatus.OK, value=value)

    @classmethod
    def failed(cls, error: NoIDError) -> "OperationResult[T]":
        if error is None:
            raise ValueError("A failed result needs an error")
        return cls(status=ResultStatus.FAILED, error=error)

    @classmethod
    def aborted(cls) -> "OperationResult[T]":
        return cls(status=ResultStatus.ABORTED)

    @classmethod
    def capture(cls, func: Callable[..., T], *args: Any, **kwargs: Any) -> "OperationResult[T]":
        """
        Run func and turn its outcome into a result.

        AbortError becomes an aborted result, NoIDError a failure, and
        any other exception a failure wrapping it.
        """
        try:
            return cls.ok(func(*args, **kwargs))
        except AbortError:
            logger.debug(f"{getattr(func, '__name__', func)} aborted")
            return cls.aborted()
        except NoIDError as e:
            return cls.failed(e)
        except Exception as e:
            logger.debug(f"{getattr(func, '__name__', func)} raised {type(e).__name__}")
            return cls.failed(NoIDError.wrap(e))

    # -------- inspection --------

    @property
    def success(self) -> bool:
        return self.status == ResultStatus.OK

    @property
    def is_aborted(self) -> bool:
        return self.status == ResultStatus.ABORTED

    def unwrap(self) -> T:
        """Return the value, or raise the error (AbortError when aborted)."""
        if self.status == ResultStatus.FAILED:
            raise self.error
        if self.status == ResultStatus.ABORTED:
            raise AbortError()
        return self.value

    def chain(
        self,
        message: str,
        code: int = APPLICATION_ERROR,
        severity: ErrorSeverity = ErrorSeverity.APPLICATION,
    ) -> "OperationResult[T]":
        """
        Add context to a failure.

        Returns a failure whose error has this result's error as cause.
        Successes and aborts are returned unchanged.
        """
        if self.status != ResultStatus.FAILED:
            return self
        return OperationResult.failed(
            NoIDError(message, code=code, severity=severity, cause=self.error)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "success": self.success,
            "message": self.error.combined_messages if self.error else "",
            "error": self.error.to_dict() if self.error else None,
        }
