"""On-disk snapshots of remote data for the experimental forced-cache mode."""

import logging
import os
import pickle
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import aiofiles

logger = logging.getLogger(__name__)

FORCE_CACHE_ENV = "CONTENTFUL_EXPERIMENTAL_FORCE_CACHE"


@dataclass(frozen=True)
class FileSystemCachePath:
    force_cache: bool
    file_exists: bool
    file_path: Optional[Path]


def get_file_system_cache_path(suffix: str, cache_dir: Optional[str] = None) -> FileSystemCachePath:
    """
    Locate the snapshot file for ``suffix``.

    Forced-cache mode is on when ``cache_dir`` is given or the
    CONTENTFUL_EXPERIMENTAL_FORCE_CACHE variable is set; its value is the
    directory (relative to the working directory) holding the snapshots.
    The directory is created when missing.
    """
    cache_dir = cache_dir or os.getenv(FORCE_CACHE_ENV)
    if not cache_dir:
        return FileSystemCachePath(force_cache=False, file_exists=False, file_path=None)

    directory = Path.cwd() / cache_dir
    directory.mkdir(parents=True, exist_ok=True)

    file_path = directory / f"contentful-{suffix}.blob"
    return FileSystemCachePath(force_cache=True, file_exists=file_path.exists(), file_path=file_path)


async def write_snapshot(file_path: Path, data: Any) -> None:
    async with aiofiles.open(file_path, "wb") as f:
        await f.write(pickle.dumps(data))


async def read_snapshot(file_path: Path) -> Any:
    async with aiofiles.open(file_path, "rb") as f:
        content = await f.read()
    return pickle.loads(content)
