"""Command line interface for clustersnap."""

from __future__ import annotations

import argparse
import logging
import sys

from ..config import load_config
from ..exceptions import ConfigurationError
from .trigger_cmd import run_trigger

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="clustersnap")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging threshold for progress messages",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    trigger_parser = subparsers.add_parser(
        "trigger", help="Request an on-demand snapshot of each DB cluster"
    )
    trigger_parser.add_argument("clusters", nargs="*", help="DB cluster identifiers")
    trigger_parser.add_argument(
        "--prefix",
        default=None,
        help="Snapshot name prefix (default: run-<unix seconds>)",
    )
    trigger_parser.add_argument("--region", default=None, help="AWS region of the clusters")
    trigger_parser.add_argument("--profile", default=None, help="AWS named profile to use")
    trigger_parser.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="Show the snapshots that would be requested without calling AWS",
    )
    trigger_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the dry-run journal as JSON instead of a table",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    # "trigger" is the only subcommand and argparse requires one
    try:
        config = load_config(
            prefix=args.prefix,
            region=args.region,
            profile=args.profile,
            dry_run=args.dry_run,
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return run_trigger(args.clusters, config, as_json=args.json)


if __name__ == "__main__":
    raise SystemExit(main())
