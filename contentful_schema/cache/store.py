"""Key-value cache shared between the stages of a build."""

import copy
from typing import Any, Dict, Protocol

from contentful_schema.core import PluginConfig

CACHE_PREFIX_CONTENT_TYPES = "contentful-content-types"


def content_types_cache_key(plugin_config: PluginConfig) -> str:
    return f"{CACHE_PREFIX_CONTENT_TYPES}-{plugin_config.source_id}"


class CacheStore(Protocol):
    """Protocol for the host cache service."""

    async def get(self, key: str) -> Any:
        """Return cached value or None."""
        ...

    async def set(self, key: str, value: Any) -> None:
        """Store value, replacing any previous one."""
        ...

    async def delete(self, key: str) -> None:
        """Remove key from cache."""
        ...


class InMemoryCache:
    """Process-lifetime cache. Values are deep-copied in and out."""

    def __init__(self):
        self._data: Dict[str, Any] = {}

    async def get(self, key: str) -> Any:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
