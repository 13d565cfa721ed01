"""
Rollback Selection Service

Architectural Intent:
- Chooses the crontab to install when a deploy is rolled back
- Previous release exists: reinstall that release's crontab
- No previous release: clear the crontab from the current release
"""

from dataclasses import replace
from typing import Optional

from cronfleet.domain.ports.release_port import ReleasePort
from cronfleet.domain.value_objects.dispatch import DispatchArgs, RollbackArgs


def select_rollback_args(
    previous_release_path: Optional[str],
    current_release_path: str,
    clear_flags: str,
) -> RollbackArgs:
    if previous_release_path is not None:
        return RollbackArgs(path=previous_release_path)
    return RollbackArgs(path=current_release_path, flags=clear_flags)


def prepare_for_rollback(
    args: DispatchArgs, releases: ReleasePort, clear_flags: str
) -> DispatchArgs:
    """Rewrites dispatch args for a rollback, keeping the command as is.

    The current release is only looked up when there is no previous one.
    """
    previous = releases.previous_release()
    current = "" if previous is not None else releases.current_release()
    selected = select_rollback_args(previous, current, clear_flags)

    if selected.flags is None:
        return replace(args, path=selected.path)
    return replace(args, path=selected.path, flags=selected.flags)
