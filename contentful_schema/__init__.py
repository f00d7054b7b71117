"""Map Contentful content types onto GraphQL schema declarations."""

__version__ = "1.0.0"
