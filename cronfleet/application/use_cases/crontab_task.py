"""
Crontab Task

Architectural Intent:
- Shared flow of the update, clear and rollback use cases
- Queries the inventory, resolves host roles and dispatches one command per host
- Collaborator failures are logged and reported as a False result
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from cronfleet.domain.errors import CronfleetError
from cronfleet.domain.ports.inventory_port import InventoryPort
from cronfleet.domain.ports.release_port import ReleasePort
from cronfleet.domain.ports.remote_executor_port import RemoteExecutorPort
from cronfleet.domain.services.command_dispatch import CommandDispatcher
from cronfleet.domain.services.role_resolution import resolve_server_roles
from cronfleet.domain.value_objects.dispatch import CrontabOptions, DispatchArgs
from cronfleet.infrastructure.config import CrontabSettings

logger = logging.getLogger(__name__)


class CrontabTask(ABC):
    name = "crontab"

    def __init__(
        self,
        inventory: InventoryPort,
        releases: ReleasePort,
        remote_executor: RemoteExecutorPort,
        settings: CrontabSettings,
    ):
        self.inventory = inventory
        self.releases = releases
        self.dispatcher = CommandDispatcher(remote_executor)
        self.settings = settings

    def options(self, roles: Optional[Sequence[str]] = None) -> CrontabOptions:
        return CrontabOptions(
            roles=tuple(self.settings.roles if roles is None else roles),
            extras={
                "identifier": self.settings.identifier,
                "environment": self.settings.environment,
            },
        )

    @abstractmethod
    def build_args(self, path: Optional[str]) -> DispatchArgs:
        """Returns the command, path and flags to dispatch."""
        pass

    def execute(
        self, roles: Optional[Sequence[str]] = None, path: Optional[str] = None
    ) -> bool:
        options = self.options(roles)
        try:
            servers = self.inventory.find_servers(options.roles)
            if not servers:
                logger.info(
                    "No servers for roles %s, skipping %s", list(options.roles), self.name
                )
                return True

            args = self.build_args(path)
            assignments = resolve_server_roles(
                options.roles, servers, self.inventory.role_names_for_host
            )
            count = self.dispatcher.dispatch(args, options, assignments)
        except CronfleetError as e:
            logger.error("%s failed: %s", self.name, e)
            return False

        logger.info("%s ran on %d host(s).", self.name, count)
        return True
