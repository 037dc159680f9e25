"""CLI command handlers."""

from .audit import cmd_audit
from .board import cmd_init, cmd_list, cmd_move, cmd_seed, cmd_show

__all__ = ["cmd_audit", "cmd_init", "cmd_list", "cmd_move", "cmd_seed", "cmd_show"]
