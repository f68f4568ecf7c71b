"""
LogStore Class - Handles file I/O operations

This module gives read-only access to the log file.
"""

import logging
import os
from typing import Iterator

from pokelogs.errors import SourceUnavailable
from pokelogs.models.data_models import HealthStatus

LOGGER = logging.getLogger(__name__)


class LogStore:
    """
    Read-only access to the log file.
    Responsibilities:
    - Read log file lines, once, top to bottom
    - Provide file statistics
    """

    def __init__(self, file_path: str):
        self.file_path = file_path

    def read_lines(self) -> Iterator[str]:
        """Iterator over raw lines in log file; raises SourceUnavailable"""
        try:
            with open(self.file_path, "r", encoding="utf-8", errors="replace") as f:
                for line in f:
                    yield line.rstrip("\n")
        except OSError as exc:
            LOGGER.error("cannot read log file %s: %s", self.file_path, exc)
            raise SourceUnavailable(self.file_path, str(exc)) from exc

    def exists(self) -> bool:
        return os.path.isfile(self.file_path)

    def stat(self) -> HealthStatus:
        """Get file statistics"""
        exists = self.exists()
        size_bytes = os.path.getsize(self.file_path) if exists else 0
        total_lines = sum(1 for _ in self.read_lines()) if exists else 0

        return HealthStatus(
            status="ok" if exists else "missing",
            log_file_exists=exists,
            path=os.path.abspath(self.file_path),
            size_bytes=size_bytes,
            total_lines=total_lines,
        )
