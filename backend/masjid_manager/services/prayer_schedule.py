"""
Prayer Schedule Resolver
------------------------
Works out which prayer of a mosque's daily schedule comes next.

The schedule is treated as an unordered, cyclic list of entries (dicts with
at least a 'time' key). Times may be written as 'HH:MM' or 'hh:mm AM/PM';
parsing is lenient and never raises. A string without an hour and a minute
falls back to 0 for the missing parts, which callers can observe through
the optional ``on_fallback`` hook.
"""
import re
from datetime import datetime
from typing import Callable, Iterable, Mapping, Optional

_DIGIT_RUN = re.compile(r'\d+')

FallbackHook = Callable[[str], None]


def time_to_minutes(time_str: str, on_fallback: Optional[FallbackHook] = None) -> int:
    """
    Converts a time string to minutes since midnight.

    '13:00' and '01:00 PM' both give 780. Hour and minute values are not
    range checked, so '25:99' gives 1599.
    """
    text = time_str or ''
    runs = _DIGIT_RUN.findall(text)
    if len(runs) < 2 and on_fallback is not None:
        on_fallback(text)

    hours = int(runs[0]) if runs else 0
    minutes = int(runs[1]) if len(runs) > 1 else 0

    lowered = text.lower()
    if 'pm' in lowered and hours != 12:
        hours += 12
    if 'am' in lowered and hours == 12:
        hours = 0

    return hours * 60 + minutes


def resolve_next(entries: Iterable[Mapping],
                 reference: Optional[datetime] = None,
                 on_fallback: Optional[FallbackHook] = None) -> Optional[Mapping]:
    """
    Returns the next prayer entry relative to ``reference`` (local now by default).

    The first entry strictly after the reference minute wins; an entry at the
    reference minute has already passed. When every entry has passed, the
    earliest one is returned (tomorrow's first prayer). Entries with equal
    times keep their input order. An empty schedule gives None.
    """
    if reference is None:
        reference = datetime.now()
    reference_minutes = reference.hour * 60 + reference.minute

    timed = [(time_to_minutes(entry.get('time'), on_fallback), entry) for entry in entries]
    if not timed:
        return None

    # sorted() is stable, which gives the tie-break on equal times
    timed = sorted(timed, key=lambda pair: pair[0])
    for minutes, entry in timed:
        if minutes > reference_minutes:
            return entry
    return timed[0][1]
