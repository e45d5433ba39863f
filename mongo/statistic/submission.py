'''
Statistics and search over the submission list shown on the dashboard.

Every function here is pure: it works on the serialized form produced by
`Submission.to_dict` and never touches the database, so the caller holds
the current query / selected user and simply calls again when they change.
'''
from collections import Counter
from datetime import date, datetime, timedelta
from typing import (
    Any,
    Dict,
    Iterable,
    List,
    Optional,
    Sequence,
    Union,
)

from mongo import engine

__all__ = (
    'ALL_USERS',
    'UNKNOWN',
    'handle_of',
    'active_streak',
    'compute_statistics',
    'filter_submissions',
    'list_users',
)

Status = engine.Submission.Status
ALL_USERS = 'all'
UNKNOWN = 'Unknown'
# a streak survives as long as the latest submission is at most this old
STREAK_GRACE = timedelta(days=2)

Timestamp = Union[int, float, datetime]


def _ensure_list(submissions) -> Sequence[Dict[str, Any]]:
    if not isinstance(submissions, (list, tuple)):
        raise TypeError('submissions must be a list, '
                        f'got {type(submissions).__name__}')
    return submissions


def _to_day(ts: Timestamp) -> date:
    if isinstance(ts, datetime):
        return ts.date()
    return datetime.fromtimestamp(ts).date()


def _user_of(submission: Dict[str, Any]) -> Dict[str, Any]:
    return submission.get('user') or {}


def handle_of(submission: Dict[str, Any]) -> Optional[str]:
    '''
    the external handle of the submission's owner, `None` if absent
    '''
    return _user_of(submission).get('userId') or None


def active_streak(
    timestamps: Iterable[Timestamp],
    today: Optional[date] = None,
) -> int:
    '''
    Count consecutive calendar days with at least one submission.

    Days are taken on the local clock. The streak is anchored on the most
    recent submission day, and it is broken to zero once that day is more
    than two days before `today`.

    Args:
        timestamps: unix timestamps or datetimes, in any order
        today: defaults to the local current date

    Returns:
        the length of the streak
    '''
    if today is None:
        today = date.today()
    days = sorted({_to_day(ts) for ts in timestamps}, reverse=True)
    if not days:
        return 0
    if today - days[0] > STREAK_GRACE:
        return 0
    streak = 1
    for prev, day in zip(days, days[1:]):
        if prev - day != timedelta(days=1):
            break
        streak += 1
    return streak


def compute_statistics(
    submissions: List[Dict[str, Any]],
    today: Optional[date] = None,
) -> Dict[str, Any]:
    submissions = _ensure_list(submissions)
    total = len(submissions)
    statuses = Counter(
        Status.parse(s.get('status')).value for s in submissions)
    accepted = statuses.get(Status.ACCEPTED.value, 0)
    languages = Counter(
        s.get('codeLanguage') or UNKNOWN for s in submissions)
    return {
        'totalSubmissions': total,
        'acceptedSubmissions': accepted,
        'uniqueProblems': len({s.get('problemUrl') for s in submissions}),
        # absent handles are counted together as a single user
        'uniqueUsers': len({handle_of(s) for s in submissions}),
        'languages': dict(languages),
        'statusCounts': dict(statuses),
        'successRate': accepted / total * 100 if total else 0,
        'activeStreak': active_streak(
            (s['createdAt']
             for s in submissions if s.get('createdAt') is not None),
            today=today,
        ),
    }


def _matches(submission: Dict[str, Any], query: str) -> bool:
    user = _user_of(submission)
    fields = (
        submission.get('problemName'),
        handle_of(submission),
        user.get('city'),
        user.get('region'),
        user.get('country'),
    )
    return any(query in (v or '').lower() for v in fields)


def filter_submissions(
    submissions: List[Dict[str, Any]],
    query: Optional[str] = '',
    selected_user: Optional[str] = ALL_USERS,
) -> List[Dict[str, Any]]:
    '''
    Narrow the full submission list by a selected user and a free-text
    query. The result keeps the input order, and an empty query together
    with `ALL_USERS` returns every submission.
    '''
    submissions = _ensure_list(submissions)
    ret = list(submissions)
    if selected_user and selected_user != ALL_USERS:
        ret = [
            s for s in ret if (handle_of(s) or UNKNOWN) == selected_user
        ]
    query = (query or '').strip().lower()
    if query:
        ret = [s for s in ret if _matches(s, query)]
    return ret


def list_users(submissions: List[Dict[str, Any]]) -> List[str]:
    submissions = _ensure_list(submissions)
    return sorted({handle_of(s) or UNKNOWN for s in submissions})
