"""Entry point for running the greeter package as a module."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from greeter.config import DEFAULT_LOG_LEVEL, ConfigManager
from greeter.core import greet

logger = logging.getLogger("greeter")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="greeter",
        description="Print a greeting for a name",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Greet the default name
  %(prog)s

  # Greet someone else
  %(prog)s --name Ada

  # Read settings from a YAML file
  %(prog)s --config greeter.yaml

  # Write an example config file and exit
  %(prog)s --save-example-config greeter.yaml
        """
    )
    parser.add_argument(
        '-n', '--name',
        help='Name to greet (overrides the config file)'
    )
    parser.add_argument(
        '-c', '--config',
        type=Path,
        help='Greeter configuration YAML file (default: use built-in settings)'
    )
    parser.add_argument(
        '--save-example-config',
        type=Path,
        metavar='OUTPUT',
        help='Write an example configuration YAML file and exit'
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )
    verbosity.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Minimal output (errors only)'
    )
    return parser


def _cli_log_level(args: argparse.Namespace) -> Optional[str]:
    if args.verbose:
        return "DEBUG"
    if args.quiet:
        return "ERROR"
    return None


def main(argv: Optional[List[str]] = None) -> int:
    """Run the main application."""
    args = build_parser().parse_args(argv)

    cli_level = _cli_log_level(args)
    logging.basicConfig(
        level=cli_level or DEFAULT_LOG_LEVEL,
        format="[%(levelname)s] %(message)s",
        stream=sys.stderr,
    )

    if args.save_example_config:
        try:
            ConfigManager().save_example_config(args.save_example_config)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    try:
        config = ConfigManager(args.config).load()
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.getLogger().setLevel(cli_level or config.log_level)

    name = args.name if args.name is not None else config.name
    logger.debug("Greeting %r", name)
    print(greet(name))
    return 0


if __name__ == "__main__":
    sys.exit(main())
