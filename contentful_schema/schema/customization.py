"""
Schema customization from Contentful content types.

One linear pass: resolve the content types (snapshot or fetch), reject
reserved identifiers, store the content types for later stages, then declare
the Contentful interfaces and one object type per content type.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from contentful_schema.cache import (
    CacheStore,
    FileSystemCachePath,
    content_types_cache_key,
    get_file_system_cache_path,
    read_snapshot,
    write_snapshot,
)
from contentful_schema.client import fetch_content_types
from contentful_schema.core import PluginConfig
from contentful_schema.reporting import ContentTypeNameMissingError, Reporter, RestrictedContentTypeError
from contentful_schema.schema.composer import SchemaComposer
from contentful_schema.schema.naming import content_type_type_name

logger = logging.getLogger(__name__)

ContentTypeFetcher = Callable[[PluginConfig, Reporter], Awaitable[List[Dict[str, Any]]]]

CONTENT_TYPE_CACHE_SUFFIX = "content-type"

ENTRY_INTERFACE = "ContentfulEntry"
REFERENCE_INTERFACE = "ContentfulReference"
NODE_INTERFACE = "Node"
ASSET_TYPE = "ContentfulAsset"
TAG_TYPE = "ContentfulTag"


def restricted_content_types(enable_tags: bool) -> List[str]:
    restricted = ["entity", "reference", "asset"]
    if enable_tags:
        restricted.append("tags")
    return restricted


def _content_type_label(content_type: Dict[str, Any], use_name_for_id: bool) -> str:
    if use_name_for_id:
        name = content_type.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ContentTypeNameMissingError(content_type.get("sys", {}).get("id"))
        return name
    return content_type["sys"]["id"]


def content_type_identifier(content_type: Dict[str, Any], use_name_for_id: bool) -> str:
    """
    Lowercase identifier of a content type.

    The name is used when use_name_for_id is set, otherwise the internal
    sys.id (usually a readable constant, sometimes a generated base62 id).

    Raises:
        ContentTypeNameMissingError: use_name_for_id is set and the content type has no name
    """
    return _content_type_label(content_type, use_name_for_id).lower()


def check_restricted_content_types(content_types: List[Dict[str, Any]], plugin_config: PluginConfig) -> None:
    restricted = restricted_content_types(plugin_config.enable_tags)

    for content_type in content_types:
        content_type_id = content_type_identifier(content_type, plugin_config.use_name_for_id)
        if content_type_id in restricted:
            raise RestrictedContentTypeError(content_type_id)


async def resolve_content_types(
    plugin_config: PluginConfig,
    reporter: Reporter,
    fetch: ContentTypeFetcher = fetch_content_types,
    fs_cache: Optional[FileSystemCachePath] = None,
) -> List[Dict[str, Any]]:
    """Load content types from the forced-cache snapshot if present, else fetch them."""
    if fs_cache is None:
        fs_cache = get_file_system_cache_path(CONTENT_TYPE_CACHE_SUFFIX)

    if fs_cache.file_exists:
        reporter.info(
            "CONTENTFUL_EXPERIMENTAL_FORCE_CACHE was set. Reading serialized remote content type data from: "
            f"{fs_cache.file_path}"
        )
        return await read_snapshot(fs_cache.file_path)

    content_types = await fetch(plugin_config, reporter)

    if fs_cache.force_cache:
        reporter.info(
            "CONTENTFUL_EXPERIMENTAL_FORCE_CACHE was set. Writing serialized remote content type data to: "
            f"{fs_cache.file_path}"
        )
        await write_snapshot(fs_cache.file_path, content_types)

    return content_types


def declare_types(schema: SchemaComposer, content_types: List[Dict[str, Any]], plugin_config: PluginConfig) -> None:
    schema.create_types(
        schema.build_interface_type(
            name=ENTRY_INTERFACE,
            fields={
                "contentful_id": {"type": "String!"},
                "id": {"type": "ID!"},
                "node_locale": {"type": "String!"},
            },
            interfaces=[NODE_INTERFACE],
        )
    )

    schema.create_types(
        schema.build_interface_type(
            name=REFERENCE_INTERFACE,
            fields={
                "contentful_id": {"type": "String!"},
                "id": {"type": "ID!"},
            },
        )
    )

    schema.create_types(
        schema.build_object_type(
            name=ASSET_TYPE,
            fields={
                "contentful_id": {"type": "String!"},
                "id": {"type": "ID!"},
            },
            interfaces=[REFERENCE_INTERFACE, NODE_INTERFACE],
        )
    )

    schema.create_types(
        [
            schema.build_object_type(
                name=content_type_type_name(_content_type_label(content_type, plugin_config.use_name_for_id)),
                fields={
                    "contentful_id": {"type": "String!"},
                    "id": {"type": "ID!"},
                    "node_locale": {"type": "String!"},
                },
                interfaces=[REFERENCE_INTERFACE, ENTRY_INTERFACE, NODE_INTERFACE],
            )
            for content_type in content_types
        ]
    )

    if plugin_config.enable_tags:
        schema.create_types(
            schema.build_object_type(
                name=TAG_TYPE,
                fields={
                    "name": {"type": "String!"},
                    "contentful_id": {"type": "String!"},
                    "id": {"type": "ID!"},
                },
                interfaces=[NODE_INTERFACE],
                extensions={"dontInfer": {}},
            )
        )


async def create_schema_customization(
    schema: SchemaComposer,
    reporter: Reporter,
    cache: CacheStore,
    plugin_config: PluginConfig,
    fetch: ContentTypeFetcher = fetch_content_types,
    fs_cache: Optional[FileSystemCachePath] = None,
) -> List[Dict[str, Any]]:
    """
    Run the schema customization pass.

    Returns:
        The resolved content types

    Raises:
        RestrictedContentTypeError: A content type resolves to a reserved identifier.
            Nothing is cached or declared; the caller should panic.
        ContentTypeNameMissingError: use_name_for_id is set and a content type has no name
    """
    content_types = await resolve_content_types(plugin_config, reporter, fetch=fetch, fs_cache=fs_cache)

    check_restricted_content_types(content_types, plugin_config)

    # Later stages read the processed content types from here
    await cache.set(content_types_cache_key(plugin_config), content_types)

    declare_types(schema, content_types, plugin_config)
    logger.info(f"Declared {len(schema.type_definitions)} types for {len(content_types)} content types")

    return content_types
