"""
Request bodies for the performance endpoints
"""

from typing import List, Optional

from pydantic import BaseModel


class RecordIn(BaseModel):
    player_name: str
    kills: str = "0"
    assists: str = "0"
    damage: str = "0"
    survival_time: str = "0"


class BulkPerformanceIn(BaseModel):
    team_id: Optional[str] = None
    player_id: str
    match_number: int = 1
    map: str
    added_by: Optional[str] = None
    records: List[RecordIn] = []


class ManualPerformanceIn(BaseModel):
    # Form values arrive as strings and are converted server-side
    team_id: Optional[str] = None
    player_id: str
    match_number: str
    slot: str
    map: str
    placement: Optional[str] = None
    kills: Optional[str] = None
    assists: Optional[str] = None
    damage: Optional[str] = None
    survival_time: Optional[str] = None
    added_by: Optional[str] = None
