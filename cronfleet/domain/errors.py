"""
Domain Errors

Architectural Intent:
- Error types shared by the domain services, ports and adapters
- Usage errors (MissingArgumentError) are ValueErrors raised before any side effect
- Upstream failures (remote execution, release lookup) derive from CronfleetError
"""


class CronfleetError(Exception):
    """Base class for failures reported by external collaborators."""


class RemoteCommandError(CronfleetError):
    def __init__(self, host: str, command: str, detail: str = "") -> None:
        self.host = host
        self.command = command
        self.detail = detail
        message = f"Command failed on {host}: {command}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ReleaseLookupError(CronfleetError):
    pass


class MissingArgumentError(ValueError):
    """A mandatory dispatch argument was not supplied."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f":{field_name} is required to run crontab commands")
