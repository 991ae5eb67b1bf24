"""
Process configuration.

Positional CLI arguments: <static-dir> [port] [db-path]
Environment:
- LOG_LEVEL (default INFO)
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass

DEFAULT_PORT = 3000
BIND_HOST = "127.0.0.1"


@dataclass(frozen=True)
class Settings:
    static_dir: str
    port: int
    db_path: str | None
    host: str = BIND_HOST
    log_level: str = "INFO"


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def _port(raw: str) -> int:
    value = (raw or "").strip()
    if not (value.isascii() and value.isdigit()):
        raise argparse.ArgumentTypeError(f"Cannot parse {raw} as a port number")
    port = int(value)
    # Unsigned 16-bit.
    if port > 65535:
        raise argparse.ArgumentTypeError(f"Cannot parse {raw} as a port number")
    return port


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sdc-map-backend",
        description="Serve a static directory and store submitted answers in SQLite.",
    )
    parser.add_argument("static_dir", help="Directory served for every path except /submit")
    parser.add_argument(
        "port",
        nargs="?",
        type=_port,
        default=DEFAULT_PORT,
        help=f"Port to bind on {BIND_HOST} (default: {DEFAULT_PORT})",
    )
    parser.add_argument(
        "db_path",
        nargs="?",
        default=None,
        help="SQLite database file (default: in-memory, lost on exit)",
    )
    return parser


def parse_settings(argv: list[str] | None = None) -> Settings:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not os.path.isdir(args.static_dir):
        parser.error(f"static directory does not exist: {args.static_dir}")

    return Settings(
        static_dir=args.static_dir,
        port=args.port,
        db_path=args.db_path,
        log_level=log_level(),
    )
