"""
errors/aggregate.py - Aggregate and report errors

AggregateError reports a batch of failures as one error. ErrorList
collects errors while a batch runs and turns them into an
AggregateError at the end.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple
import logging

from .catalog import MessageCatalog
from .exceptions import NoIDError, error_from_dict
from .taxonomy import APPLICATION_ERROR, ErrorSeverity

logger = logging.getLogger("errors.aggregate")


class AggregateError(NoIDError):
    """
    Several errors reported as one.

    The message is each error's str() joined by SEPARATOR, in the order
    the errors were given.
    """

    SEPARATOR = "\n"

    def __init__(
        self,
        errors: Iterable[NoIDError],
        severity: ErrorSeverity = ErrorSeverity.APPLICATION,
        cause: Optional[BaseException] = None,
    ):
        errors = tuple(errors)
        super().__init__(
            self.SEPARATOR.join(str(e) for e in errors),
            code=APPLICATION_ERROR,
            severity=severity,
            cause=cause,
        )
        self._errors: Tuple[NoIDError, ...] = errors

    # -------- alternate constructors --------

    @classmethod
    def wrap(
        cls,
        exception: BaseException,
        cause: Optional[BaseException] = None,
    ) -> "AggregateError":
        """Aggregate holding the wrapped exception as its only error."""
        error = NoIDError.wrap(exception)
        return cls([error], severity=error.severity, cause=cause)

    @classmethod
    def from_catalog(
        cls,
        catalog: MessageCatalog,
        code: int,
        *params: Any,
        severity: ErrorSeverity = ErrorSeverity.APPLICATION,
        cause: Optional[BaseException] = None,
    ) -> "AggregateError":
        """Aggregate holding one catalog-backed error."""
        error = NoIDError.from_catalog(catalog, code, *params, severity=severity)
        return cls([error], severity=severity, cause=cause)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AggregateError":
        cause = None
        cause_data = data.get("cause")
        if isinstance(cause_data, dict):
            cause = error_from_dict(cause_data)

        return cls(
            [error_from_dict(e) for e in data.get("errors", [])],
            severity=ErrorSeverity(data.get("severity", ErrorSeverity.APPLICATION.value)),
            cause=cause,
        )

    @property
    def errors(self) -> Tuple[NoIDError, ...]:
        return self._errors

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["errors"] = [e.to_dict() for e in self._errors]
        return data


class ErrorList:
    """
    Collects errors from a batch operation.
    """

    def __init__(self, errors: Optional[Iterable[NoIDError]] = None):
        self._errors: List[NoIDError] = list(errors or [])

    def add(self, error: NoIDError) -> None:
        """Add an error."""
        self._errors.append(error)

    def add_all(self, errors: Iterable[NoIDError]) -> None:
        """Add multiple errors."""
        for error in errors:
            self.add(error)

    def by_severity(self, severity: ErrorSeverity) -> List[NoIDError]:
        """Get errors by severity."""
        return [e for e in self._errors if e.severity == severity]

    def has_errors(self) -> bool:
        return bool(self._errors)

    def to_aggregate(
        self,
        severity: ErrorSeverity = ErrorSeverity.APPLICATION,
        cause: Optional[BaseException] = None,
    ) -> AggregateError:
        """Freeze the collected errors into an AggregateError."""
        return AggregateError(self._errors, severity=severity, cause=cause)

    def raise_if_errors(self, severity: ErrorSeverity = ErrorSeverity.APPLICATION) -> None:
        """Raise an AggregateError if anything was collected."""
        if not self._errors:
            return
        logger.info(f"Raising aggregate of {len(self._errors)} error(s)")
        raise self.to_aggregate(severity=severity)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[NoIDError]:
        return iter(self._errors)
