"""Schema declarations derived from Contentful content types."""

from .composer import SchemaComposer, TypeDefinition
from .customization import (
    check_restricted_content_types,
    content_type_identifier,
    create_schema_customization,
    declare_types,
    resolve_content_types,
    restricted_content_types,
)
from .naming import camel_case, content_type_type_name

__all__ = [
    "SchemaComposer",
    "TypeDefinition",
    "camel_case",
    "check_restricted_content_types",
    "content_type_identifier",
    "content_type_type_name",
    "create_schema_customization",
    "declare_types",
    "resolve_content_types",
    "restricted_content_types",
]
