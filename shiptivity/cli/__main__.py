"""
Shiptivity CLI - manage the client swimlane board from a terminal.

Usage:
    shiptivity init
    shiptivity seed
    shiptivity list [--status LANE] [--json]
    shiptivity show ID [--json]
    shiptivity move ID [--status LANE] [--priority N] [--json]
    shiptivity audit [--json]
"""

import argparse
import logging
import sys

from shiptivity.cli.commands import (
    cmd_audit,
    cmd_init,
    cmd_list,
    cmd_move,
    cmd_seed,
    cmd_show,
)
from shiptivity.logging_config import setup_shiptivity_logging
from shiptivity.protocols import StorageError, ValidationError
from shiptivity.storage import SQLiteClientStore
from shiptivity.types import VALID_LANE_VALUES
from shiptivity.utils import get_shiptivity_home

# Set up logging
logging.basicConfig(level=logging.WARNING)
logger = logging.getLogger(__name__)

LANE_CHOICES = sorted(VALID_LANE_VALUES)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shiptivity",
        description="Client swimlane board",
    )
    parser.add_argument(
        "--db", help="Database file (default: $SHIPTIVITY_DATA_DIR/clients.db)", default=None
    )
    parser.add_argument("--log-level", default="INFO", help="Log level for the file log")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init", help="Create the database schema")
    subparsers.add_parser("seed", help="Add demo clients to an empty board")

    # list
    p_list = subparsers.add_parser("list", help="List clients")
    # Not restricted with choices= so bad lanes get the same message as the API
    p_list.add_argument("--status", "-s", help=f"Lane filter: {' | '.join(LANE_CHOICES)}")
    p_list.add_argument("--json", "-j", action="store_true")

    # show
    p_show = subparsers.add_parser("show", help="Show one client")
    p_show.add_argument("id", help="Client id")
    p_show.add_argument("--json", "-j", action="store_true")

    # move
    p_move = subparsers.add_parser("move", help="Change a client's lane and/or priority")
    p_move.add_argument("id", help="Client id")
    p_move.add_argument("--status", "-s", help=f"Target lane: {' | '.join(LANE_CHOICES)}")
    p_move.add_argument(
        "--priority", "-p", type=int, help="Target priority (1 = top, clamped to the lane)"
    )
    p_move.add_argument("--json", "-j", action="store_true")

    # audit
    p_audit = subparsers.add_parser("audit", help="Check lane rankings for gaps and duplicates")
    p_audit.add_argument("--json", "-j", action="store_true")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_shiptivity_logging(level=args.log_level)
    db_path = args.db or (get_shiptivity_home() / "clients.db")

    try:
        store = SQLiteClientStore(db_path)
    except StorageError as e:
        logger.error(f"Failed to open database: {e}")
        return 1

    try:
        if args.command == "init":
            cmd_init(args, store)
        elif args.command == "seed":
            cmd_seed(args, store)
        elif args.command == "list":
            cmd_list(args, store)
        elif args.command == "show":
            cmd_show(args, store)
        elif args.command == "move":
            cmd_move(args, store)
        elif args.command == "audit":
            return cmd_audit(args, store)
    except ValidationError as e:
        print(f"{e.message} {e.long_message}", file=sys.stderr)
        return 2
    except StorageError as e:
        logger.error(f"Command failed: {e}")
        return 1
    finally:
        store.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
