"""
errors/catalog.py - Message catalogs

Resolves numeric error codes to message templates. A catalog that
cannot be read, or that has no entry for a code, yields descriptive
fallback text instead of raising.
"""

from __future__ import annotations
from typing import Dict, Mapping, Optional, Protocol, Union
from pathlib import Path
import json
import logging

from pydantic import BaseModel, Field, ValidationError

from .taxonomy import MANIFEST_NOT_FOUND, MESSAGE_NOT_FOUND

logger = logging.getLogger("errors.catalog")

RESOURCE_DIR = Path(__file__).parent / "resources"
BASE_CATALOG_NAME = "base_errors"


class MessageCatalog(Protocol):
    """Read-only code -> template lookup."""

    catalog_name: str

    def lookup(self, key: str) -> Optional[str]:
        """Return the template for key, or None when absent."""
        ...


class CatalogUnavailableError(Exception):
    """Raised by a catalog whose backing resource cannot be loaded."""

    def __init__(self, catalog_name: str, reason: str = ""):
        message = f"Catalog '{catalog_name}' is unavailable"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.catalog_name = catalog_name
        self.reason = reason


class CatalogManifest(BaseModel):
    """On-disk layout of a JSON message catalog."""

    name: str = Field(..., min_length=1, description="Catalog base name")
    messages: Dict[str, str] = Field(
        default_factory=dict,
        description="Templates keyed by the string form of the error code",
    )


class DictCatalog:
    """In-memory catalog backed by a mapping."""

    def __init__(self, catalog_name: str, messages: Mapping[Union[int, str], str]):
        self.catalog_name = catalog_name
        self._messages: Dict[str, str] = {str(k): v for k, v in messages.items()}

    def lookup(self, key: str) -> Optional[str]:
        return self._messages.get(key)

    def __len__(self) -> int:
        return len(self._messages)


class JsonCatalog:
    """
    Catalog loaded lazily from a JSON manifest file.

    The manifest is read on first lookup. Until then (or if loading
    fails) the catalog name is the file stem.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.catalog_name = self.path.stem
        self._messages: Optional[Dict[str, str]] = None

    def _load(self) -> Dict[str, str]:
        if self._messages is not None:
            return self._messages

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise CatalogUnavailableError(self.catalog_name, str(e)) from e
        except json.JSONDecodeError as e:
            raise CatalogUnavailableError(self.catalog_name, f"invalid JSON: {e}") from e

        try:
            manifest = CatalogManifest.model_validate(data)
        except ValidationError as e:
            raise CatalogUnavailableError(self.catalog_name, f"invalid manifest: {e}") from e

        self.catalog_name = manifest.name
        self._messages = dict(manifest.messages)
        logger.debug(f"Loaded catalog {self.catalog_name} ({len(self._messages)} messages)")
        return self._messages

    def lookup(self, key: str) -> Optional[str]:
        return self._load().get(key)

    @property
    def loaded(self) -> bool:
        return self._messages is not None


def base_catalog(resource_dir: Optional[Union[str, Path]] = None) -> JsonCatalog:
    """Catalog holding the BaseError message templates."""
    directory = Path(resource_dir) if resource_dir else RESOURCE_DIR
    return JsonCatalog(directory / f"{BASE_CATALOG_NAME}.json")


def resolve_message(catalog: MessageCatalog, code: int) -> str:
    """
    Resolve the message template for code.

    Args:
        catalog: Catalog to search
        code: Numeric error code, looked up by its string form

    Returns:
        The template, or fallback text naming the code and catalog
    """
    code = int(code)
    try:
        result = catalog.lookup(str(code))
    except Exception as e:
        logger.warning(f"Catalog {catalog.catalog_name} failed for code {code}: {e}")
        return MANIFEST_NOT_FOUND.format(code, catalog.catalog_name)

    if result is None:
        logger.debug(f"Code {code} missing from catalog {catalog.catalog_name}")
        return MESSAGE_NOT_FOUND.format(code, catalog.catalog_name)

    return result
