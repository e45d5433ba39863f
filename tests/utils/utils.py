from datetime import datetime, timedelta
from typing import Dict, Optional

__all__ = (
    'drop_none',
    'days_ago',
)


def drop_none(d: Dict):
    return {k: v for k, v in d.items() if v is not None}


def days_ago(n: int, now: Optional[datetime] = None) -> datetime:
    '''
    the same clock time `n` days before `now`
    '''
    if now is None:
        now = datetime.now()
    return now - timedelta(days=n)
