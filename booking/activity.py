"""In-memory record of booking operation outcomes."""
from __future__ import annotations

import threading
from collections import deque
from datetime import datetime, timezone
from typing import Deque, Dict, List, Optional

DEFAULT_MAX_ENTRIES = 500


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _format_timestamp(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


class ActivityLog:
    """Keeps the most recent operation events, oldest first."""

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._entries: Deque[Dict[str, object]] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def record(
        self,
        operation: str,
        status: str,
        *,
        message: Optional[str] = None,
        reason: Optional[str] = None,
        details: Optional[Dict[str, object]] = None,
    ) -> Dict[str, object]:
        entry: Dict[str, object] = {
            "operation": operation,
            "status": status,
            "recorded_at": _format_timestamp(_utc_now()),
        }
        if reason:
            entry["reason"] = reason
        if message:
            entry["message"] = message
        if details is not None:
            entry["details"] = details

        with self._lock:
            self._entries.append(entry)
        return entry

    def entries(self) -> List[Dict[str, object]]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["ActivityLog"]
