"""Runtime Log Store Interface

Persists frontend and server log lines into a size capped store.
"""

from abc import ABC, abstractmethod
from typing import List


class LogStore(ABC):
    """
    Service interface for the runtime log ring buffer

    Only the most recent max_lines lines are kept.
    """

    @abstractmethod
    def append(self, line: str) -> None:
        """
        Append one formatted line, dropping the oldest lines past the cap

        Raises:
            OSError: when the underlying storage cannot be written
        """
        pass

    @abstractmethod
    def read_lines(self) -> List[str]:
        """Return stored lines, oldest first"""
        pass
