"""
Composition Root

Architectural Intent:
- Dependency injection composition root for the cronfleet application
- Single place where all adapters and use cases are wired together
- No adapter instantiation should occur outside this module (except tests)

Design Decisions:
- Uses a simple dataclass container instead of a DI framework
- Release paths are read over SSH when deploy_to is configured,
  otherwise taken verbatim from configuration
"""

from dataclasses import dataclass
from typing import Optional
from cronfleet.domain.ports.release_port import ReleasePort
from cronfleet.domain.value_objects.host import Host
from cronfleet.infrastructure.config import CronfleetConfig
from cronfleet.infrastructure.adapters.fabric_adapter import FabricAdapter
from cronfleet.infrastructure.adapters.static_inventory import StaticInventory
from cronfleet.infrastructure.adapters.release_adapter import (
    FabricReleaseAdapter,
    StaticReleases,
)
from cronfleet.application.use_cases.update_crontab import UpdateCrontab
from cronfleet.application.use_cases.clear_crontab import ClearCrontab
from cronfleet.application.use_cases.rollback_crontab import RollbackCrontab


@dataclass
class CronfleetContainer:
    """DI container holding all wired dependencies."""

    inventory: StaticInventory
    releases: ReleasePort
    fabric_adapter: FabricAdapter
    update_crontab: UpdateCrontab
    clear_crontab: ClearCrontab
    rollback_crontab: RollbackCrontab


def _release_host(config: CronfleetConfig, inventory: StaticInventory) -> Optional[Host]:
    if config.deploy.release_host:
        return Host.parse(config.deploy.release_host)
    servers = inventory.find_servers(config.crontab.roles)
    return servers[0] if servers else None


def create_releases(config: CronfleetConfig, inventory: StaticInventory) -> ReleasePort:
    host = _release_host(config, inventory)
    if config.deploy.deploy_to and host is not None:
        return FabricReleaseAdapter(config.deploy.deploy_to, host)
    return StaticReleases(
        current=config.deploy.current_release,
        previous=config.deploy.previous_release,
    )


def create_container(config: CronfleetConfig) -> CronfleetContainer:
    """Create and wire all dependencies."""
    inventory = StaticInventory(config.roles)
    releases = create_releases(config, inventory)
    fabric_adapter = FabricAdapter()

    collaborators = (inventory, releases, fabric_adapter, config.crontab)

    return CronfleetContainer(
        inventory=inventory,
        releases=releases,
        fabric_adapter=fabric_adapter,
        update_crontab=UpdateCrontab(*collaborators),
        clear_crontab=ClearCrontab(*collaborators),
        rollback_crontab=RollbackCrontab(*collaborators),
    )
