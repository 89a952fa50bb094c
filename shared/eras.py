from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Optional, Tuple
from .models import TimePeriod

TIME_PERIODS: Tuple[TimePeriod, ...] = (
    TimePeriod("prehistoric", "Prehistoric", "prehistoric era"),
    TimePeriod("ancient-egypt", "Ancient Egypt", "ancient Egyptian civilization"),
    TimePeriod("roman-empire", "Roman Empire", "ancient Roman civilization"),
    TimePeriod("medieval", "Medieval", "medieval Europe"),
    TimePeriod("renaissance", "Renaissance", "Renaissance period"),
    TimePeriod("wild-west", "Wild West", "American Wild West era"),
    TimePeriod("roaring-twenties", "1920s", "Roaring Twenties"),
    TimePeriod("future", "Future (Year 3030)", "year 3030"),
)

TIME_PERIODS_BY_ID: Mapping[str, TimePeriod] = MappingProxyType({p.id: p for p in TIME_PERIODS})

def find_time_period(period_id: Optional[str]) -> Optional[TimePeriod]:
    if not period_id:
        return None
    return TIME_PERIODS_BY_ID.get(period_id)
