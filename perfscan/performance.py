"""
Conversion of parsed OCR records into typed performance entries
"""

import re
from typing import Any, Optional

from .models import PerformanceEntry, PerformanceRecord

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))")


def to_int_or_zero(value: Any) -> int:
    """Leading integer of ``value``; 0 when there is none"""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    m = _INT_PREFIX.match(str(value))
    return int(m.group(1)) if m else 0


def to_float_or_zero(value: Any) -> float:
    """Leading decimal of ``value``; 0.0 when there is none"""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    m = _FLOAT_PREFIX.match(str(value))
    return float(m.group(1)) if m else 0.0


def to_optional_int(value: Any) -> Optional[int]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return to_int_or_zero(value)


def to_performance_entry(
    record: PerformanceRecord,
    team_id: str,
    player_id: str,
    match_number: int,
    slot: int,
    map_name: str,
    added_by: Optional[str] = None,
    placement: Optional[int] = None,
) -> PerformanceEntry:
    return PerformanceEntry(
        team_id=team_id,
        player_id=player_id,
        match_number=match_number,
        slot=slot,
        map=map_name,
        placement=placement,
        kills=to_int_or_zero(record.kills),
        assists=to_int_or_zero(record.assists),
        damage=to_float_or_zero(record.damage),
        survival_time=to_float_or_zero(record.survival_time),
        added_by=added_by,
    )
