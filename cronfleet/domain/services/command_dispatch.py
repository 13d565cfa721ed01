"""
Command Dispatch Service

Architectural Intent:
- Turns a host -> roles assignment into one remote command per host
- The command string carries the host's filtered roles; the options bundle
  carries the full requested role set alongside the connection target
- Argument validation happens before any host is contacted

Security:
- Command, path and flags are operator configuration and are passed through
  verbatim; role names come from the inventory
"""

import logging
from typing import Mapping, Sequence

from cronfleet.domain.errors import MissingArgumentError
from cronfleet.domain.ports.remote_executor_port import RemoteExecutorPort
from cronfleet.domain.value_objects.dispatch import (
    CrontabOptions,
    DispatchArgs,
    DispatchOptions,
)
from cronfleet.domain.value_objects.host import Host

logger = logging.getLogger(__name__)

REQUIRED_ARGS = ("command", "path", "flags")


def build_command(command: str, path: str, flags: str, roles: Sequence[str]) -> str:
    line = f"cd {path} && {command} {flags}"
    if roles:
        line = f"{line} --roles {','.join(roles)}"
    return line


def validate_args(args: DispatchArgs) -> None:
    for name in REQUIRED_ARGS:
        if getattr(args, name) is None:
            raise MissingArgumentError(name)


class CommandDispatcher:
    def __init__(self, remote_executor: RemoteExecutorPort):
        self.remote_executor = remote_executor

    def dispatch(
        self,
        args: DispatchArgs,
        options: CrontabOptions,
        assignments: Mapping[Host, Sequence[str]],
    ) -> int:
        """Runs the crontab command once on every assigned host.

        Returns the number of hosts the command was issued to. Failures from
        the executor propagate unchanged.
        """
        validate_args(args)

        for host, roles in assignments.items():
            command = build_command(args.command, args.path, args.flags, roles)
            logger.info(
                "Running on %s: %s",
                host,
                command,
                extra={"host": str(host), "roles": list(roles), "command": command},
            )
            self.remote_executor.run(
                command,
                DispatchOptions(roles=options.roles, host=host, extras=options.extras),
            )
        return len(assignments)
