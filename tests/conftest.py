"""Shared fixtures for contentful_schema tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from contentful_schema.cache import InMemoryCache
from contentful_schema.core import PluginConfig
from contentful_schema.reporting import Reporter
from contentful_schema.schema import SchemaComposer


def make_content_type(sys_id, name=None):
    content_type = {"sys": {"id": sys_id, "type": "ContentType"}, "fields": []}
    if name is not None:
        content_type["name"] = name
    return content_type


@pytest.fixture
def content_types():
    return [
        make_content_type("blogPost", "Blog Post"),
        make_content_type("author", "Author"),
        make_content_type("2faSettings", "Two Factor Settings"),
    ]


@pytest.fixture
def plugin_config():
    return PluginConfig(space_id="space123", access_token="token", environment="master")


@pytest.fixture
def reporter():
    return MagicMock(spec=Reporter)


@pytest.fixture
def schema():
    return SchemaComposer()


@pytest.fixture
def cache():
    return InMemoryCache()


@pytest.fixture
def fetch(content_types):
    return AsyncMock(return_value=content_types)
