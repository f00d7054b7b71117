"""CLI command handlers for the Contentful schema tool."""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

from contentful_schema.cache import InMemoryCache
from contentful_schema.client import ContentfulClient
from contentful_schema.core import ConfigManager, create_plugin_config, options_from_env
from contentful_schema.reporting import ContentfulSchemaError, Reporter
from contentful_schema.schema import SchemaComposer, create_schema_customization

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def load_plugin_config(config_manager: ConfigManager):
    """Build the plugin config from the cached file, the environment and a prompted token."""
    cached_config = config_manager.load()

    options = dict(cached_config)
    options.update(options_from_env())

    if not options.get("space_id"):
        options["space_id"] = config_manager.get_or_prompt("space_id", "Contentful Space ID")
    if not options.get("access_token"):
        options["access_token"] = config_manager.prompt_for_value("Contentful Access Token", secret=True)

    return create_plugin_config(options)


def cmd_show(args=None):
    print(
        """
    ╔════════════════════════════════════════════════════╗
    ║      Contentful Schema - Current Configuration     ║
    ╚════════════════════════════════════════════════════╝
    """
    )

    config_manager = ConfigManager()
    cached_config = config_manager.load()

    if not cached_config:
        print("\n❌ No configuration found!")
        print("💡 Run 'contentful-schema config' first to set up your configuration.")
        return

    print("\n📋 Cached Configuration:")
    print("-" * 54)
    print(f"Space ID:             {cached_config.get('space_id', 'N/A')}")
    print(f"Environment:          {cached_config.get('environment', 'N/A')}")
    print(f"Host:                 {cached_config.get('host', 'N/A')}")
    print(f"Use name for id:      {cached_config.get('use_name_for_id', 'N/A')}")
    print(f"Enable tags:          {cached_config.get('enable_tags', 'N/A')}")
    print("-" * 54)
    print(f"\n📍 Config location: {config_manager.config_path}")
    print("💡 Run 'contentful-schema config' to update configuration.")


def cmd_config(args=None):
    print(
        """
    ╔════════════════════════════════════════════════════╗
    ║       Contentful Schema - Configuration Setup      ║
    ╚════════════════════════════════════════════════════╝
    """
    )

    config_manager = ConfigManager()
    cached_config = config_manager.load()

    config = {
        "space_id": config_manager.prompt_for_value("Contentful Space ID", cached_config.get("space_id", "")),
        "environment": config_manager.prompt_for_value(
            "Environment", cached_config.get("environment", "master")
        ),
        "host": config_manager.prompt_for_value("API host", cached_config.get("host", "cdn.contentful.com")),
        "use_name_for_id": config_manager.prompt_for_value(
            "Use content type name for id (true/false)", str(cached_config.get("use_name_for_id", "true"))
        ),
        "enable_tags": config_manager.prompt_for_value(
            "Enable tags (true/false)", str(cached_config.get("enable_tags", "false"))
        ),
    }

    config_manager.save(config)
    print("\n✅ Configuration saved successfully!")
    print("💡 You can now run 'contentful-schema schema' to generate the schema.")


def cmd_content_types(args=None):
    load_dotenv()

    plugin_config = load_plugin_config(ConfigManager())
    client = ContentfulClient.from_config(plugin_config)

    content_types = client.get_content_types(plugin_config.page_limit)
    if content_types is None:
        print("\n❌ Failed to fetch content types.")
        sys.exit(1)

    print(f"\n📋 {len(content_types)} content types in {plugin_config.space_id}/{plugin_config.environment}:")
    print("-" * 54)
    for content_type in content_types:
        print(f"{content_type['sys']['id']:<30} {content_type.get('name') or ''}")


def cmd_schema(args=None):
    load_dotenv()

    reporter = Reporter()
    plugin_config = load_plugin_config(ConfigManager())
    schema = SchemaComposer()

    try:
        asyncio.run(create_schema_customization(schema, reporter, InMemoryCache(), plugin_config))
    except ContentfulSchemaError as e:
        reporter.panic(e)

    sdl = schema.to_sdl()
    output = getattr(args, "output", None)
    if output:
        with open(output, "w") as f:
            f.write(sdl)
        reporter.info(f"Schema written to {output}")
    else:
        print(sdl)


def main():
    parser = argparse.ArgumentParser(
        description="Contentful Schema - Generate GraphQL type declarations from Contentful content types",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    config_parser = subparsers.add_parser("config", help="Configure the space to read from")
    config_parser.set_defaults(func=cmd_config)

    show_parser = subparsers.add_parser("show", help="Show current configuration")
    show_parser.set_defaults(func=cmd_show)

    content_types_parser = subparsers.add_parser("content-types", help="List the remote content types")
    content_types_parser.set_defaults(func=cmd_content_types)

    schema_parser = subparsers.add_parser("schema", help="Declare schema types and print them as SDL")
    schema_parser.add_argument("-o", "--output", help="Write the SDL to this file instead of stdout")
    schema_parser.set_defaults(func=cmd_schema)

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    args.func(args)
