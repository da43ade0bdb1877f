"""
masterstat command line interface

Usage:
    masterstat master.quakeworld.nu:27000 master.quakeservers.net:27000
    masterstat --json --timeout 1.5
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import ConfigValidationError, QueryConfig
from .models import MultiQueryResult
from .query_multiple import query_multiple
from .utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = QueryConfig()
    parser = argparse.ArgumentParser(
        prog="masterstat",
        description="Get server addresses from QuakeWorld master servers.",
    )
    parser.add_argument("masters", nargs="*", metavar="MASTER",
                        help=f"master server as host:port (default: {' '.join(defaults.masters)})")
    parser.add_argument("-t", "--timeout", type=float, default=defaults.timeout,
                        help=f"seconds to wait for each master (default: {defaults.timeout})")
    parser.add_argument("--json", action="store_true", dest="json_output",
                        help="print successes, failures and addresses as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_result(result: MultiQueryResult, json_output: bool) -> str:
    """Render a result as JSON or as one address per line"""
    if json_output:
        return json.dumps(result.to_dict(), indent=2)
    return "\n".join(result.server_addresses())


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = QueryConfig(timeout=args.timeout, json_output=args.json_output,
                         log_level="DEBUG" if args.verbose else "INFO")
    if args.masters:
        config.masters = args.masters

    try:
        config.validate()
    except ConfigValidationError as e:
        parser.error(str(e))

    configure_logging(getattr(logging, config.log_level))

    result = asyncio.run(query_multiple(config.masters, config.timeout))

    for failure in result.failed_queries():
        logger.warning(f"{failure.master_address}: {failure.error}")
    for success in result.successful_queries():
        logger.debug(f"{success.master_address}: {len(success.addresses)} servers")

    output = format_result(result, config.json_output)
    if output:
        print(output)

    return 0 if result.successes else 1


if __name__ == "__main__":
    sys.exit(main())
