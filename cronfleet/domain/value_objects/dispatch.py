"""
Dispatch Value Objects

Architectural Intent:
- Immutable bundles passed between role resolution, rollback selection and dispatch
- CrontabOptions is the options structure read once per deploy/rollback event
- DispatchArgs keeps its fields optional so a missing argument stays detectable
- DispatchOptions is what the remote executor receives for a single host
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from cronfleet.domain.value_objects.host import Host


def _frozen_mapping(value: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(value))


@dataclass(frozen=True)
class CrontabOptions:
    """
    Options for one crontab run.

    ``roles`` filters hosts; an empty tuple means every host. ``extras`` are
    passed through to the executor untouched.
    """
    roles: tuple[str, ...] = ()
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "roles", tuple(dict.fromkeys(self.roles)))
        object.__setattr__(self, "extras", _frozen_mapping(self.extras))


@dataclass(frozen=True)
class DispatchArgs:
    command: Optional[str] = None
    path: Optional[str] = None
    flags: Optional[str] = None


@dataclass(frozen=True)
class RollbackArgs:
    path: str
    flags: Optional[str] = None


@dataclass(frozen=True)
class DispatchOptions:
    """Per-host bundle: the full requested role set plus the connection target."""
    roles: tuple[str, ...]
    host: Host
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extras", _frozen_mapping(self.extras))
