#!/usr/bin/env python3
"""
Ceiling light command-line controller
Usage:
  ceiling-light 192.168.1.50 --main 150               # Normal mode, 50%
  ceiling-light 192.168.1.50 --main moonlight:20      # Moonlight mode, 20%
  ceiling-light 192.168.1.50 --main off
  ceiling-light 192.168.1.50 --ambient 200,50,75      # Hue, saturation, value
  ceiling-light bedroom --ambient off                 # Bulb name from config.json
"""

import argparse
import logging
import sys
from typing import List, Optional

from .bulb_manager import process
from .config import load_config
from .errors import BulbError
from .protocol import DEFAULT_PORT

LOG_FORMAT = "%(asctime)s.%(msecs)03d | %(levelname)s | %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

log = logging.getLogger(__name__)


def setup_logging(debug: bool, log_file: Optional[str] = None):
    """Log to stderr, and to log_file when given, at INFO or DEBUG level"""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ceiling-light", description="Ceiling light controller"
    )
    parser.add_argument("host", help="Bulb IP, hostname or name from config.json")
    parser.add_argument(
        "--main",
        metavar="X|off|moonlight:V|normal:V",
        help="Set main light (X is between 0 and 200, V is between 1 and 100)",
    )
    parser.add_argument(
        "--ambient", metavar="H,S,V|off", help="Set ambient light"
    )
    parser.add_argument("--config", help="Path to config.json")
    parser.add_argument(
        "--debug", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.debug, args.log_file)

    try:
        config = load_config(args.config)
        host = config.resolve_host(args.host)
        process(host, DEFAULT_PORT, args.main, args.ambient, config.connection)
    except (BulbError, OSError) as e:
        log.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
