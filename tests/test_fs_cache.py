"""Tests for forced-cache snapshot files"""

import pytest

from contentful_schema.cache import get_file_system_cache_path, read_snapshot, write_snapshot
from contentful_schema.cache.fs_cache import FORCE_CACHE_ENV


class TestGetFileSystemCachePath:
    """Test snapshot path resolution"""

    def test_disabled_without_env(self, monkeypatch):
        monkeypatch.delenv(FORCE_CACHE_ENV, raising=False)

        result = get_file_system_cache_path("content-type")

        assert result.force_cache is False
        assert result.file_exists is False
        assert result.file_path is None

    def test_enabled_creates_directory(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(FORCE_CACHE_ENV, ".contentful-cache")

        result = get_file_system_cache_path("content-type")

        assert result.force_cache is True
        assert result.file_exists is False
        assert result.file_path == tmp_path / ".contentful-cache" / "contentful-content-type.blob"
        assert (tmp_path / ".contentful-cache").is_dir()

    def test_detects_existing_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(FORCE_CACHE_ENV, "cache")
        (tmp_path / "cache").mkdir()
        (tmp_path / "cache" / "contentful-content-type.blob").write_bytes(b"x")

        result = get_file_system_cache_path("content-type")

        assert result.file_exists is True

    def test_explicit_directory_overrides_env(self, monkeypatch, tmp_path):
        monkeypatch.delenv(FORCE_CACHE_ENV, raising=False)

        result = get_file_system_cache_path("content-type", cache_dir=str(tmp_path / "explicit"))

        assert result.force_cache is True
        assert result.file_path == tmp_path / "explicit" / "contentful-content-type.blob"


class TestSnapshot:
    """Test snapshot serialization"""

    @pytest.mark.asyncio
    async def test_round_trip_preserves_records(self, tmp_path, content_types):
        path = tmp_path / "snapshot.blob"

        await write_snapshot(path, content_types)
        result = await read_snapshot(path)

        assert result == content_types
        assert result is not content_types

    @pytest.mark.asyncio
    async def test_overwrites_existing_snapshot(self, tmp_path):
        path = tmp_path / "snapshot.blob"

        await write_snapshot(path, [{"sys": {"id": "old"}}])
        await write_snapshot(path, [{"sys": {"id": "new"}}])

        assert await read_snapshot(path) == [{"sys": {"id": "new"}}]

    @pytest.mark.asyncio
    async def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            await read_snapshot(tmp_path / "missing.blob")
