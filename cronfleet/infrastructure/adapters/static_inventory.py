"""
Static Inventory Adapter

Architectural Intent:
- Implements InventoryPort from a role map declared in configuration
- Role map mirrors deploy recipes: {"app": ["web1", "deploy@web2:2222"], "db": ["db1"]}
- Hosts are parsed once and kept in declaration order without duplicates
"""

from typing import Mapping, Sequence
from cronfleet.domain.ports.inventory_port import InventoryPort
from cronfleet.domain.value_objects.host import Host


class StaticInventory(InventoryPort):
    def __init__(self, role_map: Mapping[str, Sequence[str]]):
        self._role_map: dict[str, list[Host]] = {
            role: list(dict.fromkeys(Host.parse(h) for h in hosts))
            for role, hosts in role_map.items()
        }

    def find_servers(self, roles: Sequence[str]) -> list[Host]:
        wanted = set(roles)
        servers: dict[Host, None] = {}
        for role, hosts in self._role_map.items():
            if wanted and role not in wanted:
                continue
            for host in hosts:
                servers.setdefault(host, None)
        return list(servers)

    def role_names_for_host(self, host: Host) -> list[str]:
        return [role for role, hosts in self._role_map.items() if host in hosts]
