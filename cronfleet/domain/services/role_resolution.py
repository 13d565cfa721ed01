"""
Role Resolution Service

Architectural Intent:
- Decides which hosts receive a crontab command and with which roles
- Requested roles act as a filter over each host's own roles
- Pure functions over values handed in by the caller; no hidden state

Domain Logic:
- Filtered roles follow the order of the requested roles, which is the
  order later emitted in the --roles argument
- An empty request disables filtering: every host the inventory returned is
  kept with its full role list, even if that list is empty
"""

import logging
from typing import Callable, Iterable, Sequence

from cronfleet.domain.value_objects.host import Host

logger = logging.getLogger(__name__)

RoleLookup = Callable[[Host], Sequence[str]]


def filter_roles(host_roles: Iterable[str], requested: Sequence[str]) -> list[str]:
    """Intersection of a host's roles with the requested ones, in requested order."""
    held = set(host_roles)
    return [role for role in dict.fromkeys(requested) if role in held]


def resolve_server_roles(
    requested: Sequence[str],
    hosts: Iterable[Host],
    role_lookup: RoleLookup,
) -> dict[Host, list[str]]:
    assignments: dict[Host, list[str]] = {}

    if not requested:
        # Nothing to filter against: the inventory already returned every host.
        for host in hosts:
            assignments[host] = list(role_lookup(host))
        return assignments

    for host in hosts:
        roles = filter_roles(role_lookup(host), requested)
        if roles:
            assignments[host] = roles
        else:
            logger.debug("Skipping %s: no role in %s", host, list(requested))
    return assignments
