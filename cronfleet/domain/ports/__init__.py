"""
Domain Ports Package

Architectural Intent:
- Contains port interfaces (abstract contracts) for external dependencies
- Ports define what the domain needs, adapters implement how
- Follows Hexagonal Architecture principles
"""

from cronfleet.domain.ports.inventory_port import InventoryPort
from cronfleet.domain.ports.release_port import ReleasePort
from cronfleet.domain.ports.remote_executor_port import RemoteExecutorPort

__all__ = [
    "InventoryPort",
    "ReleasePort",
    "RemoteExecutorPort",
]
