"""
Data types shared by the OCR pipeline, storage and the API
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Any, Dict, Optional
import uuid


@dataclass(frozen=True)
class PerformanceRecord:
    """One player's stats row as read off a screenshot.

    Numeric fields stay strings; converting them is up to the caller.
    """
    player_name: str
    kills: str
    assists: str
    damage: str
    survival_time: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def _utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class PerformanceEntry:
    """A typed performance row ready to be stored"""
    team_id: str
    player_id: str
    match_number: int
    slot: int
    map: str
    kills: int = 0
    assists: int = 0
    damage: float = 0.0
    survival_time: float = 0.0
    placement: Optional[int] = None
    added_by: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: str = field(default_factory=_utcnow_iso)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
