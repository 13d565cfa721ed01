"""
Remote Executor Port

Architectural Intent:
- Port interface for executing a command on a single remote host
- Defines contract for remote execution capabilities
- Implemented by adapters (Fabric, SSH, etc.)
"""

from abc import ABC, abstractmethod
from cronfleet.domain.value_objects.dispatch import DispatchOptions


class RemoteExecutorPort(ABC):
    """
    Port interface for executing commands on remote infrastructure.
    """

    @abstractmethod
    def run(self, command: str, options: DispatchOptions) -> None:
        """
        Runs the command on options.host, connecting with its user and port.
        Raises RemoteCommandError if the command fails.
        """
        pass
