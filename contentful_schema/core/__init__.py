"""Configuration for the Contentful schema integration."""

from .config import ConfigManager, PluginConfig, create_plugin_config, options_from_env

__all__ = ["ConfigManager", "PluginConfig", "create_plugin_config", "options_from_env"]
