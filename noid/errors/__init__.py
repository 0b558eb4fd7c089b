"""
errors/ - Error Taxonomy

Structured errors with codes, severities and cause chains, message
catalogs, batch aggregation, and operation results.
"""

from .taxonomy import (
    ErrorSeverity,
    ErrorCarrier,
    APPLICATION_ERROR,
    MESSAGE_NOT_FOUND,
    MANIFEST_NOT_FOUND,
    is_error_carrier,
)

from .catalog import (
    MessageCatalog,
    CatalogUnavailableError,
    CatalogManifest,
    DictCatalog,
    JsonCatalog,
    base_catalog,
    resolve_message,
)

from .exceptions import (
    NoIDError,
    BaseError,
    AbortError,
    error_from_dict,
)

from .aggregate import (
    AggregateError,
    ErrorList,
)

from .result import (
    ResultStatus,
    OperationResult,
)

__all__ = [
    # Taxonomy
    "ErrorSeverity",
    "ErrorCarrier",
    "APPLICATION_ERROR",
    "MESSAGE_NOT_FOUND",
    "MANIFEST_NOT_FOUND",
    "is_error_carrier",
    # Catalog
    "MessageCatalog",
    "CatalogUnavailableError",
    "CatalogManifest",
    "DictCatalog",
    "JsonCatalog",
    "base_catalog",
    "resolve_message",
    # Exceptions
    "NoIDError",
    "BaseError",
    "AbortError",
    "error_from_dict",
    # Aggregate
    "AggregateError",
    "ErrorList",
    # Result
    "ResultStatus",
    "OperationResult",
]
