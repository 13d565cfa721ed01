"""
Release Adapters

Architectural Intent:
- Implement ReleasePort for the deploy's release directory layout
- FabricReleaseAdapter reads <deploy_to>/releases on a host over SSH
- StaticReleases serves paths fixed in configuration (or by the CLI)

Domain Logic:
- Release directories are timestamps, so name order is deploy order
- Current release is the newest entry, previous the one before it
"""

import logging
import posixpath
import shlex
from typing import Optional
from fabric import Connection
from cronfleet.domain.errors import ReleaseLookupError
from cronfleet.domain.ports.release_port import ReleasePort
from cronfleet.domain.value_objects.host import Host

logger = logging.getLogger(__name__)


class FabricReleaseAdapter(ReleasePort):
    def __init__(self, deploy_to: str, host: Host, connect_timeout: int = 30):
        if not deploy_to:
            raise ValueError("deploy_to cannot be empty")
        self.deploy_to = deploy_to
        self.host = host
        self.connect_timeout = connect_timeout
        self._releases: Optional[list[str]] = None

    @property
    def releases_path(self) -> str:
        return posixpath.join(self.deploy_to, "releases")

    def _list_releases(self) -> list[str]:
        if self._releases is not None:
            return self._releases

        conn = Connection(
            host=self.host.host,
            user=self.host.user,
            port=self.host.port,
            connect_timeout=self.connect_timeout,
        )
        try:
            result = conn.run(
                f"ls -1 {shlex.quote(self.releases_path)}", hide=True, warn=True
            )
        except Exception as e:
            raise ReleaseLookupError(
                f"Could not list releases on {self.host}: {e}"
            ) from e
        finally:
            conn.close()

        if result.failed:
            logger.warning(
                "Listing %s on %s failed: %s",
                self.releases_path, self.host, result.stderr,
            )
            self._releases = []
        else:
            self._releases = sorted(
                line.strip() for line in result.stdout.splitlines() if line.strip()
            )
        return self._releases

    def current_release(self) -> str:
        releases = self._list_releases()
        if not releases:
            raise ReleaseLookupError(f"No releases found in {self.releases_path}")
        return posixpath.join(self.releases_path, releases[-1])

    def previous_release(self) -> Optional[str]:
        releases = self._list_releases()
        if len(releases) < 2:
            return None
        return posixpath.join(self.releases_path, releases[-2])


class StaticReleases(ReleasePort):
    def __init__(self, current: str = "", previous: Optional[str] = None):
        self.current = current
        self.previous = previous or None

    def current_release(self) -> str:
        if not self.current:
            raise ReleaseLookupError("Current release path is not configured")
        return self.current

    def previous_release(self) -> Optional[str]:
        return self.previous
