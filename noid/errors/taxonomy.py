"""
errors/taxonomy.py - Error classification system

Severity levels, the generic application error code, and the fallback
texts used when a message catalog cannot resolve a code.
"""

from __future__ import annotations
from typing import Any, Optional, Protocol, runtime_checkable
from enum import Enum


class ErrorSeverity(Enum):
    """Origin of an error (who is to blame), not its urgency."""
    USER = "user"                  # Invalid input or usage
    APPLICATION = "application"    # Internal logic fault
    ENVIRONMENT = "environment"    # Database, network, other resources
    CHAIN = "chain"                # Distributed ledger dependency
    PROTOCOL = "protocol"          # Communication layer


# Code assigned when none is given
APPLICATION_ERROR: int = 351100

# Fallback messages: {0} = code, {1} = catalog name
MESSAGE_NOT_FOUND: str = "Message ({0}) not found in {1}."
MANIFEST_NOT_FOUND: str = "Message ({0}) Manifest not found for Base {1}."


@runtime_checkable
class ErrorCarrier(Protocol):
    """Anything exposing the code/severity/details triple of a NoIDError."""

    code: int
    severity: ErrorSeverity
    details: Optional[str]


def is_error_carrier(obj: Any) -> bool:
    """Check whether obj carries a usable code and severity."""
    if not isinstance(obj, ErrorCarrier):
        return False
    return isinstance(obj.code, int) and isinstance(obj.severity, ErrorSeverity)
