"""
Domain Services Package

Architectural Intent:
- Contains the role resolution, rollback selection and dispatch logic
- Services depend on ports only, never on adapters
"""

from cronfleet.domain.services.role_resolution import (
    filter_roles,
    resolve_server_roles,
)
from cronfleet.domain.services.rollback_selection import (
    prepare_for_rollback,
    select_rollback_args,
)
from cronfleet.domain.services.command_dispatch import (
    CommandDispatcher,
    build_command,
)

__all__ = [
    "filter_roles",
    "resolve_server_roles",
    "prepare_for_rollback",
    "select_rollback_args",
    "CommandDispatcher",
    "build_command",
]
