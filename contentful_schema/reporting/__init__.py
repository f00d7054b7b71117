"""Structured errors and the reporter used to surface them."""

from .errors import (
    CODES,
    ERROR_MAP,
    ContentfulAPIError,
    ContentfulSchemaError,
    ContentTypeNameMissingError,
    DuplicateTypeError,
    RestrictedContentTypeError,
    format_error,
)
from .reporter import Reporter

__all__ = [
    "CODES",
    "ERROR_MAP",
    "ContentfulAPIError",
    "ContentfulSchemaError",
    "ContentTypeNameMissingError",
    "DuplicateTypeError",
    "RestrictedContentTypeError",
    "Reporter",
    "format_error",
]
