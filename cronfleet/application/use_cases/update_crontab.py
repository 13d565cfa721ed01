"""
Update Crontab Use Case

Architectural Intent:
- Installs the application's crontab entries on every host holding a crontab role
- Runs from the configured path, or the latest release when none is set
"""

from typing import Optional

from cronfleet.application.use_cases.crontab_task import CrontabTask
from cronfleet.domain.value_objects.dispatch import DispatchArgs


class UpdateCrontab(CrontabTask):
    name = "update_crontab"

    def build_args(self, path: Optional[str] = None) -> DispatchArgs:
        return DispatchArgs(
            command=self.settings.command,
            path=path or self.settings.path or self.releases.current_release(),
            flags=self.settings.update_flags,
        )
