"""
Envy Command Line
=================

Validates the required environment variables of a deployment without
starting the application.

Usage
-----
    python -m envy --env-file .env --environment development

Exit status is 0 when every required variable is set and 1 otherwise.
Only variable names are printed, never their values.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .binder import init
from .errors import EnvyError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envy",
        description="Check that the required environment variables are set.",
    )
    parser.add_argument("--config", help="requirement store (default: config/envars.yml)")
    parser.add_argument("--env-file", dest="env_file", help="override file loaded before validation")
    parser.add_argument("--environment", help="environment name (default: RACK_ENV, RAILS_ENV or production)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run a single validation pass and print a summary.
    """
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        requirements = init(
            parse=args.env_file,
            config=args.config,
            environment=args.environment,
        )
    except EnvyError as exc:
        print(f"envy: {exc}", file=sys.stderr)
        return 1

    print("=" * 40)
    print("Environment Validation Summary")
    print("=" * 40)
    for requirement in requirements:
        print(f"  {requirement.name}")
    print(f"Validated variables : {len(requirements)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
