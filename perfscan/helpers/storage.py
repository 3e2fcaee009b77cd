"""
In-memory storage for performance entries
"""

from typing import Dict, List, Optional
import threading

from ..models import PerformanceEntry


class StorageManager:
    """Keeps performance entries keyed by ID, in insertion order"""

    def __init__(self):
        self.performances: Dict[str, PerformanceEntry] = {}
        self._lock = threading.Lock()

    def store_performance(self, entry: PerformanceEntry) -> str:
        """Store one entry and return its ID"""
        with self._lock:
            self.performances[entry.id] = entry
        return entry.id

    def store_performances(self, entries: List[PerformanceEntry]) -> List[str]:
        """Store several entries at once"""
        with self._lock:
            for entry in entries:
                self.performances[entry.id] = entry
        return [entry.id for entry in entries]

    def get_performance(self, performance_id: str) -> PerformanceEntry:
        """Get entry by ID"""
        if performance_id not in self.performances:
            raise KeyError("Performance not found")
        return self.performances[performance_id]

    def list_performances(
        self,
        team_id: Optional[str] = None,
        match_number: Optional[int] = None,
    ) -> List[PerformanceEntry]:
        entries = list(self.performances.values())
        if team_id is not None:
            entries = [e for e in entries if e.team_id == team_id]
        if match_number is not None:
            entries = [e for e in entries if e.match_number == match_number]
        return entries

    def clear(self) -> None:
        with self._lock:
            self.performances.clear()


# Global storage instance
storage = StorageManager()
