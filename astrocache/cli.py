"""CLI entry point for the astro cache service."""

import argparse
import json
import logging

from astrocache.cache.astro_cache import AstroCache
from astrocache.config.loader import get_config_value, load_config, redacted
from astrocache.config.schema import AppConfig
from astrocache.errors import AstroError, ValidationError
from astrocache.ingest.weatherstack_client import WeatherstackClient

DEFAULT_CONFIG = "config.yaml"


def build_cache(config: AppConfig) -> AstroCache:
    client = WeatherstackClient(
        access_key=config.provider.access_key,
        base_url=config.provider.base_url,
        timeout=config.provider.timeout,
    )
    return AstroCache(client)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="astrocache",
        description="Cached sunrise/sunset/moon data service",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    serve_p = sub.add_parser("serve", help="Run the HTTP API")
    serve_p.add_argument("--host", help="Override server.host")
    serve_p.add_argument("--port", type=int, help="Override server.port")

    astro_p = sub.add_parser("astro", help="Look up astro data once")
    astro_p.add_argument("location", help="Location to query")

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display resolved config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. server.port")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)

    logging.basicConfig(
        level=config.logging.level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "astro":
        return _cmd_astro(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config: AppConfig, args) -> int:
    import uvicorn

    from astrocache.api import create_app

    app = create_app(build_cache(config), config.server.cors_origins)
    host = args.host or config.server.host
    port = args.port or config.server.port
    print(f"Server listening on {host} port {port}")
    uvicorn.run(app, host=host, port=port)
    return 0


def _cmd_astro(config: AppConfig, args) -> int:
    cache = build_cache(config)
    try:
        record = cache.get_astro(args.location)
    except ValidationError as e:
        print(f"Error: {e}")
        return 2
    except AstroError as e:
        print(f"Error: {e}")
        return 1
    print(json.dumps(record.to_dict(), indent=2))
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(json.dumps(redacted(config), indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(redacted(config), args.key)
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        if isinstance(value, dict | list):
            value = json.dumps(value)
        print(f"{args.key} = {value}")
        return 0
    print("Use: config show | config get key")
    return 1
