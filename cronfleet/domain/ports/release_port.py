"""
Release Port

Architectural Intent:
- Port interface for release/path bookkeeping of the deployment
- The core only asks for the current and previous release paths
"""

from abc import ABC, abstractmethod
from typing import Optional


class ReleasePort(ABC):
    @abstractmethod
    def current_release(self) -> str:
        """
        Returns the path of the latest release.
        Raises ReleaseLookupError when no release exists.
        """
        pass

    @abstractmethod
    def previous_release(self) -> Optional[str]:
        """
        Returns the path of the release before the latest one, or None.
        """
        pass
