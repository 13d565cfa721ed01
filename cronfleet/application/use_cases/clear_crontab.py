"""
Clear Crontab Use Case

Architectural Intent:
- Removes the application's crontab entries from every host holding a crontab role
"""

from typing import Optional

from cronfleet.application.use_cases.crontab_task import CrontabTask
from cronfleet.domain.value_objects.dispatch import DispatchArgs


class ClearCrontab(CrontabTask):
    name = "clear_crontab"

    def build_args(self, path: Optional[str] = None) -> DispatchArgs:
        return DispatchArgs(
            command=self.settings.command,
            path=path or self.settings.path or self.releases.current_release(),
            flags=self.settings.clear_flags,
        )
