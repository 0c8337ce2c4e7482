# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""availwatch CLI."""

import argparse
import sys

from ..config import MonitorSettings, load_monitor_settings
from ..endpoints import load_endpoints
from ..errors import ConfigError
from ..http import create_default_http_client
from ..log import setup_logging
from ..runtime import Monitor

BANNER = "Starting health checks... (Press CTRL+C to stop)"
EXIT_CONFIG_ERROR = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="availwatch",
        description="Check HTTP endpoints every 15 seconds and report per-domain availability",
    )
    parser.add_argument("config", help="Path to the YAML endpoint configuration file")
    return parser


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        endpoints = load_endpoints(args.config)
    except ConfigError as exc:
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    settings: MonitorSettings = load_monitor_settings()
    http_client = create_default_http_client(settings)

    print(BANNER, flush=True)
    with Monitor(endpoints, http_client=http_client) as monitor:
        try:
            monitor.run()
        except KeyboardInterrupt:
            return EXIT_INTERRUPTED

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
