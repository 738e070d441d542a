#!/usr/bin/env python3
"""
Command-Line Interface for the Hungarian Letter Frequency Counter

Usage:
    python -m hunfreq                          # hlfcBookList.txt -> hlfcResult.txt
    python -m hunfreq -c config.yaml           # Run with custom config
    python -m hunfreq --show-config            # Print effective config and exit

Exit status:
    0  report written
    1  book list unreadable or configuration invalid
    2  report file cannot be created
"""

import argparse
import os
import sys

import yaml

from .controller import ReportController
from .errors import BookListOpenFailure, ConfigurationError, OutputOpenFailure
from .models import DEFAULT_CONFIG, ReportConfig


def load_config(path):
    """
    Load the config file.

    Without an explicit path, config.yaml is used when present and the
    built-in defaults otherwise.
    """
    if path is None:
        if not os.path.exists(DEFAULT_CONFIG):
            return ReportConfig()
        path = DEFAULT_CONFIG
    return ReportConfig.from_yaml(path)


def main(argv=None):
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        description="Hungarian letter frequency counter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m hunfreq                                  # Default file names
  python -m hunfreq -c config.yaml                   # Custom typing methods
  python -m hunfreq --book-list books.txt --output result.txt
  python -m hunfreq --show-config                    # Show config and exit
        """
    )
    parser.add_argument(
        "-c", "--config",
        default=None,
        help=f"Path to config file (default: {DEFAULT_CONFIG} if present)",
    )
    parser.add_argument(
        "--book-list",
        default=None,
        help="Book list file (default: from config or hlfcBookList.txt)",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Report file (default: from config or hlfcResult.txt)",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the effective configuration as YAML and exit",
    )

    args = parser.parse_args(argv)

    # Load config
    try:
        config = load_config(args.config)
    except FileNotFoundError:
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading config: {e}", file=sys.stderr)
        return 1
    except (ConfigurationError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.book_list:
        config.book_list = args.book_list
    if args.output:
        config.output = args.output

    if args.show_config:
        print(yaml.safe_dump(config.to_dict(), sort_keys=False, allow_unicode=True), end="")
        return 0

    controller = ReportController(config)
    try:
        controller.run()
    except (BookListOpenFailure, OutputOpenFailure) as e:
        controller.logger.error(str(e))
        return e.exit_code
    except ConfigurationError as e:
        controller.logger.error(f"Configuration error: {e}")
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
