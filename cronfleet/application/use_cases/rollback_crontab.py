"""
Rollback Crontab Use Case

Architectural Intent:
- Restores the crontab of the previous release during a deploy rollback
- Clears the crontab when there is no previous release to go back to
- The path always comes from release bookkeeping, so execute() takes no path
"""

from typing import Optional, Sequence

from cronfleet.application.use_cases.crontab_task import CrontabTask
from cronfleet.domain.services.rollback_selection import prepare_for_rollback
from cronfleet.domain.value_objects.dispatch import DispatchArgs


class RollbackCrontab(CrontabTask):
    name = "rollback_crontab"

    def build_args(self, path: Optional[str] = None) -> DispatchArgs:
        args = DispatchArgs(
            command=self.settings.command,
            flags=self.settings.update_flags,
        )
        return prepare_for_rollback(args, self.releases, self.settings.clear_flags)

    def execute(self, roles: Optional[Sequence[str]] = None) -> bool:
        return super().execute(roles)
