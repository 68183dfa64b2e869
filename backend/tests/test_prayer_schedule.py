# tests/test_prayer_schedule.py

import datetime

import pytest
from freezegun import freeze_time

from masjid_manager.services.prayer_schedule import resolve_next, time_to_minutes


def at(hour, minute=0):
    return datetime.datetime(2025, 3, 10, hour, minute)

DAILY = [
    {'name': 'Fajr', 'time': '05:00'},
    {'name': 'Dhuhr', 'time': '12:30'},
    {'name': 'Isha', 'time': '20:00'},
]


@pytest.mark.parametrize('time_str, expected', [
    ('05:30', 330),
    ('13:00', 780),
    ('01:00 PM', 780),
    ('01:00 pm', 780),
    ('12:15 PM', 735),
    ('12:15 AM', 15),
    ('05:30 AM', 330),
    ('00:00', 0),
    ('25:99', 1599), # no range checking
])
def test_time_to_minutes(time_str, expected):
    assert time_to_minutes(time_str) == expected

@pytest.mark.parametrize('time_str, expected', [
    ('garbage', 0),
    ('', 0),
    (None, 0),
    ('7', 420),
    ('7 PM', 1140),
])
def test_time_to_minutes_fallback(time_str, expected):
    seen = []
    assert time_to_minutes(time_str, on_fallback=seen.append) == expected
    assert len(seen) == 1

def test_time_to_minutes_no_fallback_for_well_formed_time():
    seen = []
    time_to_minutes('04:45 PM', on_fallback=seen.append)
    assert seen == []


def test_next_prayer_later_today():
    assert resolve_next(DAILY, at(8))['name'] == 'Dhuhr'

def test_wraps_around_after_last_prayer():
    assert resolve_next(DAILY, at(21))['name'] == 'Fajr'

def test_twelve_hour_time_in_the_afternoon():
    entries = [{'name': 'Asr', 'time': '04:00 PM'}]
    assert resolve_next(entries, at(10))['name'] == 'Asr'

def test_empty_schedule():
    assert resolve_next([], at(10)) is None

def test_unparseable_time_counts_as_midnight():
    entries = [{'name': 'Fajr', 'time': 'garbage'}]
    assert resolve_next(entries, at(1))['name'] == 'Fajr'

def test_prayer_at_the_current_minute_has_passed():
    assert resolve_next(DAILY, at(12, 30))['name'] == 'Isha'

def test_one_minute_before_a_prayer():
    assert resolve_next(DAILY, at(12, 29))['name'] == 'Dhuhr'

def test_seconds_are_ignored():
    reference = datetime.datetime(2025, 3, 10, 12, 29, 59)
    assert resolve_next(DAILY, reference)['name'] == 'Dhuhr'

def test_input_order_does_not_matter():
    shuffled = [DAILY[2], DAILY[0], DAILY[1]]
    assert resolve_next(shuffled, at(8))['name'] == 'Dhuhr'
    assert resolve_next(shuffled, at(21))['name'] == 'Fajr'

def test_equal_times_keep_input_order():
    entries = [
        {'id': 'first', 'name': 'Maghrib', 'time': '19:00'},
        {'id': 'second', 'name': 'Maghrib', 'time': '07:00 PM'},
        {'id': 'early', 'name': 'Fajr', 'time': '05:00'},
    ]
    assert resolve_next(entries, at(18))['id'] == 'first'
    # Wraparound picks the earliest time, not the first entry in the input
    assert resolve_next(entries, at(22))['id'] == 'early'

def test_mixed_formats_are_equivalent():
    entries = [
        {'name': 'Dhuhr', 'time': '01:00 PM'},
        {'name': 'Asr', 'time': '16:30'},
    ]
    assert resolve_next(entries, at(12, 59))['name'] == 'Dhuhr'
    assert resolve_next(entries, at(13))['name'] == 'Asr'

def test_returns_the_entry_itself():
    entries = [{'id': 'pt-1', 'name': 'Fajr', 'time': '05:00', 'mosque_id': 'mosque-1'}]
    assert resolve_next(entries, at(6)) is entries[0]

def test_is_idempotent_and_leaves_input_alone():
    entries = [dict(entry) for entry in reversed(DAILY)]
    snapshot = [dict(entry) for entry in entries]
    first = resolve_next(entries, at(13))
    second = resolve_next(entries, at(13))
    assert first is second
    assert entries == snapshot

def test_fallback_hook_sees_malformed_times():
    seen = []
    entries = [{'name': 'Fajr', 'time': 'tbd'}, {'name': 'Dhuhr', 'time': '13:00'}]
    resolve_next(entries, at(10), on_fallback=seen.append)
    assert seen == ['tbd']

@freeze_time("2025-03-10 14:00:00")
def test_reference_defaults_to_now():
    assert resolve_next(DAILY)['name'] == 'Isha'

@pytest.mark.parametrize('hour, minute', [(0, 0), (5, 0), (9, 15), (12, 30), (19, 59), (23, 59)])
def test_result_is_smallest_later_time_or_earliest(hour, minute):
    entries = [
        {'name': 'Isha', 'time': '08:30 PM'},
        {'name': 'Fajr', 'time': '05:30 AM'},
        {'name': 'Asr', 'time': '16:45'},
        {'name': 'Dhuhr', 'time': '01:15 PM'},
        {'name': 'Maghrib', 'time': '19:00'},
    ]
    reference_minutes = hour * 60 + minute
    times = [time_to_minutes(entry['time']) for entry in entries]
    later = [t for t in times if t > reference_minutes]
    expected = min(later) if later else min(times)

    result = resolve_next(entries, at(hour, minute))
    assert time_to_minutes(result['time']) == expected
