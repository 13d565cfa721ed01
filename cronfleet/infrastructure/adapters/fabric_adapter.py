"""
Fabric Adapter

Architectural Intent:
- Infrastructure adapter implementing RemoteExecutorPort via Fabric/SSH
- One connection per dispatched host, built from the host's user and port
- Unset user/port are left to Fabric, which falls back to ~/.ssh/config

Security:
- SSH connections use connect_timeout, allow_agent, look_for_keys
"""

import logging
from fabric import Connection
from cronfleet.domain.errors import RemoteCommandError
from cronfleet.domain.ports.remote_executor_port import RemoteExecutorPort
from cronfleet.domain.value_objects.dispatch import DispatchOptions
from cronfleet.domain.value_objects.host import Host

logger = logging.getLogger(__name__)


class FabricAdapter(RemoteExecutorPort):
    """Adapter implementing RemoteExecutorPort via Fabric/SSH."""

    def __init__(self, connect_timeout: int = 30):
        self.connect_timeout = connect_timeout

    def _get_connection(self, host: Host) -> Connection:
        return Connection(
            host=host.host,
            user=host.user,
            port=host.port,
            connect_timeout=self.connect_timeout,
            connect_kwargs={
                "allow_agent": True,
                "look_for_keys": True,
            },
        )

    def run(self, command: str, options: DispatchOptions) -> None:
        host = options.host
        conn = self._get_connection(host)
        try:
            result = conn.run(command, hide=True, warn=True)
        except Exception as e:
            raise RemoteCommandError(str(host), command, str(e)) from e
        finally:
            conn.close()

        if result.failed:
            logger.error("Command failed on %s: %s", host, result.stderr)
            raise RemoteCommandError(str(host), command, result.stderr.strip())
        logger.debug("Command succeeded on %s", host)
