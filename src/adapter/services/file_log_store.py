"""File backed Runtime Log Store

Keeps the last N lines of a plain text log file.
"""

import os
import threading
from typing import List
from src.app.services.log_store import LogStore

MAX_LOG_LINES = 100


class FileLogStore(LogStore):
    """
    LogStore writing to a single text file

    The whole file is rewritten on each append. A lock serializes
    writers within the process.
    """

    def __init__(self, file_path: str, max_lines: int = MAX_LOG_LINES):
        self.file_path = os.path.abspath(file_path)
        self.max_lines = max_lines
        self._lock = threading.Lock()

    def _ensure_directory(self) -> None:
        directory = os.path.dirname(self.file_path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory, exist_ok=True)

    def read_lines(self) -> List[str]:
        if not os.path.exists(self.file_path):
            return []
        with open(self.file_path, "r", encoding="utf-8", errors="replace") as r_file:
            lines = [line.strip() for line in r_file.read().splitlines()]
        return [line for line in lines if line]

    def append(self, line: str) -> None:
        with self._lock:
            self._ensure_directory()
            lines = self.read_lines()
            lines.append(line)
            lines = lines[-self.max_lines:]
            with open(self.file_path, "w", encoding="utf-8") as w_file:
                w_file.write("\n".join(lines) + "\n")
