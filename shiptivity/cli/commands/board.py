"""Board commands for the shiptivity CLI."""

import json
from typing import TYPE_CHECKING, List

from shiptivity.reorder import ReorderEngine
from shiptivity.storage import SCHEMA_VERSION, seed_demo_clients
from shiptivity.types import LANE_ORDER, Client
from shiptivity.validation import validate_id, validate_lane

if TYPE_CHECKING:
    from shiptivity.storage import SQLiteClientStore


def _print_client(client: Client) -> None:
    print(f"[{client.id}] {client.name}")
    print(f"  lane: {client.status.value}  priority: {client.priority}")
    if client.description:
        print(f"  {client.description}")


def _print_board(clients: List[Client]) -> None:
    for lane in LANE_ORDER:
        members = sorted((c for c in clients if c.status == lane), key=lambda c: c.priority)
        if not members:
            continue
        print(f"{lane.value} ({len(members)})")
        for c in members:
            print(f"  {c.priority:>3}. {c.name} [id={c.id}]")


def cmd_init(args, store: "SQLiteClientStore"):
    """Schema is created when the store opens; report where it lives."""
    print(f"Database ready at {store.db_path} (schema v{SCHEMA_VERSION})")


def cmd_seed(args, store: "SQLiteClientStore"):
    created = seed_demo_clients(store)
    if created:
        print(f"Added {len(created)} demo clients")
    else:
        print("Board is not empty, nothing seeded")


def cmd_list(args, store: "SQLiteClientStore"):
    lane = validate_lane(getattr(args, "status", None))
    clients = store.list_clients(lane)
    if args.json:
        print(json.dumps([c.to_dict() for c in clients], indent=2))
    elif not clients:
        print("No clients.")
    else:
        _print_board(clients)


def cmd_show(args, store: "SQLiteClientStore"):
    client_id = validate_id(args.id, store)
    client = store.get_client(client_id)
    if args.json:
        print(json.dumps(client.to_dict(), indent=2))
    else:
        _print_client(client)


def cmd_move(args, store: "SQLiteClientStore"):
    client_id = validate_id(args.id, store)
    lane = validate_lane(args.status)
    client = ReorderEngine(store).reposition(client_id, lane=lane, priority=args.priority)
    if args.json:
        print(json.dumps(client.to_dict(), indent=2))
    else:
        _print_client(client)
