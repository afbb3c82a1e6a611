"""configinject CLI: inspect the keys a configuration file binds to.

Usage:
    configinject flatten config.yaml                  # key = value lines
    configinject flatten config.yaml --prefix APP     # custom key prefix
    configinject flatten config.yaml --exclude '^x'   # skip matching names
    configinject flatten config.yaml --json           # JSON object
"""

import argparse
import json
import logging
import sys
from typing import Any, Optional

from .binder import flatten
from .config import ObjectBinderSettings, load_config_file
from .errors import ConfigSourceError


def _format_value(value: Any) -> str:
    return json.dumps(value, default=str, ensure_ascii=False)


def cmd_flatten(args: argparse.Namespace) -> int:
    """Print the flattened keys of a configuration file."""
    if args.debug:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        config_object = load_config_file(args.file)
    except ConfigSourceError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    settings = ObjectBinderSettings(
        prefix=args.prefix,
        debug=args.debug,
        exclude_patterns=tuple(args.exclude) if args.exclude else None,
    )
    flat = flatten(config_object, settings)

    if args.json:
        print(json.dumps(flat, default=str, indent=2, sort_keys=True, ensure_ascii=False))
    else:
        for key in sorted(flat):
            print(f"{key} = {_format_value(flat[key])}")
    return 0


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="configinject",
        description="configinject — Flatten configuration objects into injectable keys",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    flatten_parser = subparsers.add_parser(
        "flatten", help="Print the keys a configuration file binds to"
    )
    flatten_parser.add_argument("file", help="YAML or JSON configuration file")
    flatten_parser.add_argument("--prefix", "-p", type=str, default=None,
                                help="Key prefix (default: CFG)")
    flatten_parser.add_argument("--exclude", "-x", action="append", default=None,
                                metavar="PATTERN",
                                help="Exclude property names matching PATTERN (repeatable)")
    flatten_parser.add_argument("--debug", action="store_true",
                                help="Log every binding")
    flatten_parser.add_argument("--json", action="store_true",
                                help="Print a JSON object instead of key = value lines")

    args = parser.parse_args(argv)

    if args.command == "flatten":
        sys.exit(cmd_flatten(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
