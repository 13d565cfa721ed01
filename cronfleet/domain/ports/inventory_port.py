"""
Inventory Port

Architectural Intent:
- Port interface for the host inventory and role membership
- Which hosts exist and which roles they hold is owned outside the core
- Implemented by adapters (static role map, external inventories, etc.)
"""

from abc import ABC, abstractmethod
from typing import Sequence
from cronfleet.domain.value_objects.host import Host


class InventoryPort(ABC):
    """
    Port interface for querying deployment hosts and their roles.
    """

    @abstractmethod
    def find_servers(self, roles: Sequence[str]) -> list[Host]:
        """
        Returns the hosts holding any of the given roles.
        An empty role sequence returns every known host.
        """
        pass

    @abstractmethod
    def role_names_for_host(self, host: Host) -> list[str]:
        """
        Returns the role names the host belongs to.
        """
        pass
