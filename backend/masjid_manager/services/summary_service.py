"""
Mosque Summary Service
----------------------
Builds the dashboard summary of a mosque: the next prayer, how many members
it has and how many events are still ahead.

The three reads are independent and not wrapped in a transaction, so a
concurrent write can make the numbers briefly disagree with each other.
Storage errors are not caught here.
"""
from datetime import datetime

from flask import current_app

from ..collection_types import Collection
from ..metrics import PRAYER_TIME_PARSE_FALLBACKS_TOTAL, SUMMARY_DURATION_SECONDS
from .prayer_schedule import resolve_next


def log_parse_fallback(mosque_id):
    """Returns an on_fallback hook that reports unparseable prayer times for a mosque."""
    def hook(time_str):
        PRAYER_TIME_PARSE_FALLBACKS_TOTAL.inc()
        current_app.logger.warning(
            f"Prayer time '{time_str}' for mosque {mosque_id} could not be fully parsed; missing parts default to 0."
        )
    return hook


@SUMMARY_DURATION_SECONDS.time()
def get_mosque_summary(repository, mosque_id, now=None, on_fallback=None):
    """
    Aggregates the summary for one mosque.

    Args:
        repository: The MasjidRepository to read from.
        mosque_id: The tenant to summarize.
        now: Reference instant; defaults to the local wall clock.
        on_fallback: Optional hook for malformed prayer times.

    Returns:
        A dict with 'next_prayer' (id/name/time or None), 'member_count'
        and 'upcoming_event_count'.
    """
    if now is None:
        now = datetime.now()

    member_count = repository.count_records(Collection.MEMBERS, mosque_id)
    upcoming_event_count = repository.count_events_since(mosque_id, now.date().isoformat())

    prayer_times = repository.list_records(Collection.PRAYER_TIMES, mosque_id)
    next_prayer = resolve_next(prayer_times, now, on_fallback)

    return {
        'next_prayer': {
            'id': next_prayer['id'],
            'name': next_prayer['name'],
            'time': next_prayer['time'],
        } if next_prayer else None,
        'member_count': member_count,
        'upcoming_event_count': upcoming_event_count,
    }
