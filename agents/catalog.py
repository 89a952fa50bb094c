from __future__ import annotations
import logging
from typing import Dict, List
from shared.eras import TIME_PERIODS

logger = logging.getLogger(__name__)

def health() -> Dict[str, str]:
    return {"status": "ok", "message": "Server is running"}

def time_periods() -> List[Dict[str, str]]:
    logger.info("Returning time periods: %d", len(TIME_PERIODS))
    return [p.to_dict() for p in TIME_PERIODS]
