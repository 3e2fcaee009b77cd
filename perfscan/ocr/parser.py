"""
Parsing of OCR text into per-player performance records.

Three strategies run from strict to lenient and the first one that finds
anything wins:

1. full line   - ``Name 15 5 3200 8.5`` on one line, pipes allowed as separators
2. name/stats  - the name alone on a line, its four stats on a later line
3. positional  - every number in the text, taken four at a time
"""

from __future__ import annotations

import re
import logging
from typing import Callable, List, Optional, Sequence

from ..models import PerformanceRecord

logger = logging.getLogger(__name__)

Strategy = Callable[[str], List[PerformanceRecord]]


# =========================
# Patterns
# =========================

_NAME = r"[A-Za-z][A-Za-z0-9_]{2,15}"
_SEP = r"[| \t]+"

# The fourth field must close the numeric run.
FULL_LINE_RE = re.compile(
    rf"({_NAME})"
    rf"{_SEP}(\d+)"
    rf"{_SEP}(\d+)"
    rf"{_SEP}(\d+)"
    rf"{_SEP}(\d+(?:\.\d+)?)"
    r"(?![\d.])(?![ \t|]*\d)",
    re.ASCII,
)

PLAYER_NAME_RE = re.compile(rf"^{_NAME}$", re.ASCII)
STATS_RE = re.compile(r"(\d+)\s+(\d+)\s+(\d+)\s+(\d+\.?\d*)", re.ASCII)
NUMBER_RE = re.compile(r"\d+\.?\d*", re.ASCII)

FIELDS_PER_RECORD = 4


# =========================
# Strategies
# =========================

def parse_full_line(text: str) -> List[PerformanceRecord]:
    if not text or not text.strip():
        return []
    return [
        PerformanceRecord(
            player_name=m.group(1),
            kills=m.group(2),
            assists=m.group(3),
            damage=m.group(4),
            survival_time=m.group(5),
        )
        for m in FULL_LINE_RE.finditer(text)
    ]


def parse_name_then_stats(text: str) -> List[PerformanceRecord]:
    """
    Pair a name line with the next stats line.
    A new name replaces one that never got stats; stats with no pending
    name are dropped.
    """
    results: List[PerformanceRecord] = []
    if not text:
        return results

    current_player: Optional[str] = None
    for line in text.split("\n"):
        line = line.strip()
        if not line:
            continue

        if PLAYER_NAME_RE.match(line):
            current_player = line
            continue

        m = STATS_RE.search(line)
        if m and current_player:
            results.append(PerformanceRecord(
                player_name=current_player,
                kills=m.group(1),
                assists=m.group(2),
                damage=m.group(3),
                survival_time=m.group(4),
            ))
            current_player = None

    return results


def parse_positional_fallback(text: str) -> List[PerformanceRecord]:
    """Group every number into kills/assists/damage/survival, naming rows Player1..N"""
    if not text:
        return []

    numbers = NUMBER_RE.findall(text)
    complete = len(numbers) - len(numbers) % FIELDS_PER_RECORD

    results: List[PerformanceRecord] = []
    for idx, start in enumerate(range(0, complete, FIELDS_PER_RECORD), start=1):
        kills, assists, damage, survival_time = numbers[start:start + FIELDS_PER_RECORD]
        results.append(PerformanceRecord(
            player_name=f"Player{idx}",
            kills=kills,
            assists=assists,
            damage=damage,
            survival_time=survival_time,
        ))
    return results


# =========================
# Cascade
# =========================

def parse_performance_data(
    text: str,
    strategies: Optional[Sequence[Strategy]] = None,
) -> List[PerformanceRecord]:
    """
    Run the strategies in order and return the first non-empty result.
    Later strategies are not called once one succeeds. Text with nothing
    recognisable gives an empty list.
    """
    if strategies is None:
        strategies = (parse_full_line, parse_name_then_stats, parse_positional_fallback)

    if not text or not text.strip():
        return []

    for strategy in strategies:
        records = strategy(text)
        if records:
            name = getattr(strategy, "__name__", repr(strategy))
            logger.debug(f"{name} matched {len(records)} records")
            return list(records)

    logger.debug("No strategy matched any records")
    return []
