# hospital/utils/hospital_logger.py

import logging
import threading
from datetime import datetime
from typing import List, Optional

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class HospitalLogger:
    """
    Audit log shared by the repositories and services.

    One instance is built when the hospital is wired up and passed to every
    component that writes to it. Entries are kept in memory as
    "[YYYY-MM-DD HH:MM:SS] message" and the bare message is forwarded to the
    standard "hospital" logger so it shows up on the console.
    """

    def __init__(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT, logger: Optional[logging.Logger] = None):
        self.timestamp_format = timestamp_format
        self._logger = logger or logging.getLogger("hospital")
        self._entries: List[str] = []
        self._lock = threading.Lock()

    def log(self, message: str) -> str:
        entry = f"[{datetime.now().strftime(self.timestamp_format)}] {message}"
        with self._lock:
            self._entries.append(entry)
        self._logger.info(message)
        return entry

    def get_logs(self) -> List[str]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
