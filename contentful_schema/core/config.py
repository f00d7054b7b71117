"""Plugin configuration and the on-disk configuration cache."""

import json
import logging
import os
from dataclasses import dataclass, fields
from getpass import getpass
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".contentful-schema"
DEFAULT_CONFIG_FILE = "config.json"

# Values that must never be written to the config file
SECRET_KEYS = {"access_token"}

ENV_PREFIX = "CONTENTFUL_"

_OPTION_ALIASES = {
    "spaceId": "space_id",
    "accessToken": "access_token",
    "useNameForId": "use_name_for_id",
    "enableTags": "enable_tags",
    "pageLimit": "page_limit",
}


@dataclass(frozen=True)
class PluginConfig:
    """Immutable options shared by every step of the schema customization pass."""

    space_id: str
    access_token: str = ""
    environment: str = "master"
    host: str = "cdn.contentful.com"
    use_name_for_id: bool = True
    enable_tags: bool = False
    page_limit: int = 1000

    @property
    def source_id(self) -> str:
        return f"{self.space_id}-{self.environment}"


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def create_plugin_config(options: Optional[Dict[str, Any]] = None) -> PluginConfig:
    """
    Merge user options over the defaults.

    Keys may be given in snake_case or in the camelCase used by Contentful
    plugin options. Unknown keys are ignored. Values are coerced to the field
    types but not validated.
    """
    options = options or {}
    known = {f.name for f in fields(PluginConfig)}

    values = {}
    for key, value in options.items():
        key = _OPTION_ALIASES.get(key, key)
        if key in known and value is not None:
            values[key] = value

    if "use_name_for_id" in values:
        values["use_name_for_id"] = _to_bool(values["use_name_for_id"])
    if "enable_tags" in values:
        values["enable_tags"] = _to_bool(values["enable_tags"])
    if "page_limit" in values:
        values["page_limit"] = int(values["page_limit"])

    return PluginConfig(**values)


def options_from_env(environ: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Collect plugin options from CONTENTFUL_* environment variables."""
    environ = os.environ if environ is None else environ

    options = {}
    for f in fields(PluginConfig):
        value = environ.get(ENV_PREFIX + f.name.upper())
        if value:
            options[f.name] = value
    return options


class ConfigManager:
    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILE
        self._config: Dict[str, Any] = {}

    def load(self) -> Dict[str, Any]:
        if not self.config_path.exists():
            return {}

        try:
            with open(self.config_path, "r") as f:
                self._config = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load cached config from {self.config_path}: {e}")
            self._config = {}

        return self._config

    def save(self, config: Dict[str, Any]) -> None:
        self._config = {k: v for k, v in config.items() if k not in SECRET_KEYS}

        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            json.dump(self._config, f, indent=2)

        logger.info(f"Configuration saved to {self.config_path}")

    @staticmethod
    def prompt_for_value(prompt_text: str, default: str = "", secret: bool = False) -> str:
        if default:
            prompt = f"{prompt_text} [{default}]: "
        else:
            prompt = f"{prompt_text}: "

        value = getpass(prompt) if secret else input(prompt)
        return value.strip() if value.strip() else default

    def get_or_prompt(self, key: str, prompt_text: str, default: str = "", secret: bool = False) -> str:
        """Return the environment value, then the cached value, else ask the user."""
        env_value = os.getenv(ENV_PREFIX + key.upper())
        if env_value:
            return env_value

        if key in self._config and self._config[key] not in (None, ""):
            return str(self._config[key])

        return self.prompt_for_value(prompt_text, default, secret)
