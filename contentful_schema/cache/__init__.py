"""Snapshot files and the host cache store."""

from .fs_cache import FileSystemCachePath, get_file_system_cache_path, read_snapshot, write_snapshot
from .store import CacheStore, InMemoryCache, content_types_cache_key

__all__ = [
    "CacheStore",
    "FileSystemCachePath",
    "InMemoryCache",
    "content_types_cache_key",
    "get_file_system_cache_path",
    "read_snapshot",
    "write_snapshot",
]
