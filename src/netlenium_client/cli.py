from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence

from .clients.admin_client import AdminClient
from .config import ConfigError, load_config
from .exceptions import NetleniumError


def cmd_sessions(args: argparse.Namespace) -> None:
    with AdminClient.from_config(args.config) as client:
        sessions = client.get_sessions()
    print(json.dumps({"sessions": [session.model_dump(mode="json") for session in sessions]}, indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="netlenium-admin", description="Netlenium admin CLI")
    parser.add_argument("--env-file", default=None)
    subparsers = parser.add_subparsers(dest="command", required=True)

    sessions_parser = subparsers.add_parser("sessions", help="List active automation sessions")
    sessions_parser.set_defaults(func=cmd_sessions)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        args.config = load_config(args.env_file)
    except ConfigError as exc:
        print(json.dumps({"error": "config", "message": str(exc)}, indent=2))
        raise SystemExit(2) from exc

    logging.basicConfig(
        level=args.config.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    try:
        args.func(args)
    except NetleniumError as exc:
        print(json.dumps({"error": exc.kind.value, "message": exc.message}, indent=2))
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
