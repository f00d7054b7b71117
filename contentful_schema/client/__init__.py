"""Contentful API access."""

from .contentful_client import ContentfulClient, fetch_content_types

__all__ = ["ContentfulClient", "fetch_content_types"]
