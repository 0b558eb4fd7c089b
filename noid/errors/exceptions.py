"""
errors/exceptions.py - Core error types

NoIDError is the structured error for the whole application: a numeric
code, a severity, a message, optional details and server context, and an
optional cause forming a chain back to earlier errors.

AbortError is a separate, silent signal used to short-circuit an
operation. It carries no code and is never reported as a failure.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Sequence
from enum import IntEnum
import builtins
import logging
import traceback

from .catalog import MessageCatalog, resolve_message
from .taxonomy import APPLICATION_ERROR, ErrorSeverity, is_error_carrier

logger = logging.getLogger("errors.exceptions")


def _message_of(error: BaseException) -> str:
    if isinstance(error, NoIDError):
        return error.message
    return str(error)


def _cause_of(error: BaseException) -> Optional[BaseException]:
    if isinstance(error, NoIDError):
        return error.cause
    return error.__cause__


def _format_trace(error: BaseException) -> Optional[str]:
    if error.__traceback__ is None:
        return None
    return "".join(traceback.format_tb(error.__traceback__))


def _format_message(template: str, params: Sequence[Any]) -> str:
    if not params:
        return template
    try:
        return template.format(*params)
    except (IndexError, KeyError, ValueError, AttributeError, TypeError) as e:
        logger.warning(f"Could not format message {template!r} with {params!r}: {e}")
        return template


class NoIDError(Exception):
    """
    Structured application error.

    All fields are fixed at construction. Omitted fields take defaults:
    code APPLICATION_ERROR and severity APPLICATION.
    """

    def __init__(
        self,
        message: str,
        code: int = APPLICATION_ERROR,
        severity: ErrorSeverity = ErrorSeverity.APPLICATION,
        details: Optional[str] = None,
        server_context: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        message = message if message is not None else ""
        super().__init__(message)
        self._message = message
        self._code = int(code) if code is not None else APPLICATION_ERROR
        self._severity = severity if severity is not None else ErrorSeverity.APPLICATION
        self._details = details
        self._server_context = server_context
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    # -------- alternate constructors --------

    @classmethod
    def wrap(
        cls,
        exception: BaseException,
        cause: Optional[BaseException] = None,
    ) -> "NoIDError":
        """
        Wrap any exception, keeping its message and traceback.

        Code, severity and details are copied when the wrapped exception
        carries them (see ErrorCarrier), otherwise defaults are used.
        """
        if is_error_carrier(exception):
            code = exception.code
            severity = exception.severity
            details = exception.details
        else:
            code = APPLICATION_ERROR
            severity = ErrorSeverity.APPLICATION
            details = None

        logger.debug(f"Wrapping {type(exception).__name__} as code {code}")
        return cls(
            _message_of(exception),
            code=code,
            severity=severity,
            details=details,
            server_context=_format_trace(exception),
            cause=cause,
        )

    @classmethod
    def from_catalog(
        cls,
        catalog: MessageCatalog,
        code: int,
        *params: Any,
        severity: ErrorSeverity = ErrorSeverity.APPLICATION,
        cause: Optional[BaseException] = None,
    ) -> "NoIDError":
        """
        Build an error whose message comes from a catalog.

        Args:
            catalog: Catalog used to resolve the code
            code: Error code
            *params: Positional values substituted into the template
            severity: Error severity
            cause: Optional earlier error
        """
        message = _format_message(resolve_message(catalog, code), params)
        return cls(message, code=code, severity=severity, cause=cause)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NoIDError":
        cause = None
        cause_data = data.get("cause")
        if isinstance(cause_data, dict):
            cause = error_from_dict(cause_data)

        return cls(
            data.get("message", ""),
            code=data.get("code", APPLICATION_ERROR),
            severity=ErrorSeverity(data.get("severity", ErrorSeverity.APPLICATION.value)),
            details=data.get("details"),
            server_context=data.get("server_context"),
            cause=cause,
        )

    # -------- fields --------

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> int:
        return self._code

    @property
    def severity(self) -> ErrorSeverity:
        return self._severity

    @property
    def details(self) -> Optional[str]:
        return self._details

    @property
    def server_context(self) -> Optional[str]:
        return self._server_context

    @property
    def cause(self) -> Optional[BaseException]:
        """Explicit cause, or the one attached by ``raise ... from``."""
        if self._cause is not None:
            return self._cause
        return self.__cause__

    # -------- accessors --------

    @property
    def combined_messages(self) -> str:
        """Messages of this error and every cause, joined with ", "."""
        messages = []
        seen = set()
        error: Optional[BaseException] = self
        while error is not None and id(error) not in seen:
            seen.add(id(error))
            messages.append(_message_of(error))
            error = _cause_of(error)
        return ", ".join(messages)

    def details_or_empty(self) -> str:
        return self._details if self._details is not None else ""

    def context_or_empty(self) -> str:
        """Server context, else this error's own traceback, else ""."""
        if self._server_context is not None:
            return self._server_context
        return _format_trace(self) or ""

    def to_dict(self) -> Dict[str, Any]:
        cause = self.cause
        if isinstance(cause, NoIDError):
            cause_data: Optional[Dict[str, Any]] = cause.to_dict()
        elif cause is not None:
            cause_data = {"type": type(cause).__name__, "message": str(cause)}
        else:
            cause_data = None

        return {
            "type": type(self).__name__,
            "code": self._code,
            "severity": self._severity.value,
            "message": self._message,
            "details": self._details,
            "server_context": self._server_context,
            "cause": cause_data,
        }

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self._code}, "
            f"severity={self._severity.value}, message={self._message!r})"
        )


class BaseError(NoIDError):
    """Errors raised by the base library; messages live in base_errors.json."""

    class Codes(IntEnum):
        UNABLE_TO_CONNECT_TO_DATABASE = 350100
        UNABLE_TO_CONNECT_TO_PATIENT_HUB = 350101
        UNABLE_TO_CONNECT_TO_BLOCKCHAIN = 350102


def _find_error_type(name: str) -> Optional[type]:
    pending = [NoIDError]
    while pending:
        error_type = pending.pop()
        if error_type.__name__ == name:
            return error_type
        pending.extend(error_type.__subclasses__())
    return None


def error_from_dict(data: Dict[str, Any]) -> BaseException:
    """
    Rebuild an error from to_dict() output, keeping its type where possible.

    NoIDError subclasses and built-in exceptions come back as their own
    type. Any other foreign type comes back as a plain NoIDError.
    """
    type_name = data.get("type", "")
    error_type = _find_error_type(type_name)
    if error_type is not None:
        return error_type.from_dict(data)

    builtin = getattr(builtins, type_name, None)
    if isinstance(builtin, type) and issubclass(builtin, BaseException):
        try:
            return builtin(data.get("message", ""))
        except TypeError:
            # e.g. UnicodeDecodeError needs more than a message
            logger.debug(f"Cannot rebuild {type_name} from a message alone")

    return NoIDError.from_dict(data)


class AbortError(Exception):
    """
    Abort the current operation without reporting an error.

    Deliberately not a NoIDError: handlers let it pass silently.
    """

    def __init__(self) -> None:
        super().__init__()
