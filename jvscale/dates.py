# dates.py - calendar arithmetic for time scales
# Copyright (C) 2019 Jochen Voss <voss@seehuhn.de>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

"""Tick intervals for date/time axes.

Tick intervals are described by :py:class:`TimeInterval` tuples
``(unit, multiplier, duration)``, where `duration` is the approximate
length of the interval in milliseconds.  The approximate durations are
only used to choose an interval; stepping through the ticks uses
calendar arithmetic, so that month and year ticks stay on the same day
of the month.

"""

import calendar
import collections
import datetime
import logging

from . import errors

logger = logging.getLogger(__name__)

TimeInterval = collections.namedtuple(
    'TimeInterval', ['unit', 'multiplier', 'duration'])

DURATION_SEC = 1000
DURATION_MIN = DURATION_SEC * 60
DURATION_HOUR = DURATION_MIN * 60
DURATION_DAY = DURATION_HOUR * 24
DURATION_MONTH = DURATION_DAY * 30
DURATION_YEAR = DURATION_DAY * 365

# in order of increasing duration
DEFAULT_TICK_INTERVALS = (
    TimeInterval('seconds', 1, DURATION_SEC),
    TimeInterval('seconds', 5, DURATION_SEC * 5),
    TimeInterval('seconds', 15, DURATION_SEC * 15),
    TimeInterval('seconds', 30, DURATION_SEC * 30),
    TimeInterval('minutes', 1, DURATION_MIN),
    TimeInterval('minutes', 5, DURATION_MIN * 5),
    TimeInterval('minutes', 15, DURATION_MIN * 15),
    TimeInterval('minutes', 30, DURATION_MIN * 30),
    TimeInterval('hours', 1, DURATION_HOUR),
    TimeInterval('hours', 3, DURATION_HOUR * 3),
    TimeInterval('hours', 6, DURATION_HOUR * 6),
    TimeInterval('hours', 12, DURATION_HOUR * 12),
    TimeInterval('days', 1, DURATION_DAY),
    TimeInterval('days', 2, DURATION_DAY * 2),
    TimeInterval('days', 5, DURATION_DAY * 5),
    TimeInterval('days', 10, DURATION_DAY * 10),
    TimeInterval('months', 1, DURATION_MONTH),
    TimeInterval('months', 3, DURATION_MONTH * 3),
    TimeInterval('years', 1, DURATION_YEAR),
)

# strftime patterns, keyed by unit or by (unit, multiplier)
DISPLAY_FORMATS = {
    'seconds': '%M:%S',
    'minutes': '%H:%M:%S',
    ('hours', 1): '%H:%M:%S',
    'hours': '%d %b %H:%M',
    'days': '%d %b',
    'months': '%b %Y',
    'years': '%Y',
}

_FIXED_UNITS = {'seconds', 'minutes', 'hours', 'days'}


def lookup_tick_interval(raw_interval):
    """Get the shortest tick interval of at least `raw_interval` milliseconds.

    If all intervals are too short, the longest one is returned.

    """
    for interval in DEFAULT_TICK_INTERVALS:
        if interval.duration >= raw_interval:
            return interval
    return DEFAULT_TICK_INTERVALS[-1]

def milliseconds_between(a, b):
    """Get the time from `a` to `b`, in milliseconds."""
    return (b - a) / datetime.timedelta(milliseconds=1)

def last_day_of_month(year, month):
    return calendar.monthrange(year, month)[1]

def add_months(dt, months):
    """Move `dt` by a number of calendar months.

    The day of the month is kept where possible, and reduced to the
    last day of the target month otherwise.

    """
    k = dt.year * 12 + (dt.month - 1) + months
    year, month = divmod(k, 12)
    month += 1
    day = min(dt.day, last_day_of_month(year, month))
    return dt.replace(year=year, month=month, day=day)

def add_interval(dt, interval, count):
    """Get the date/time `count` tick intervals after `dt`.

    Seconds to days are added as fixed durations, months and years
    use calendar arithmetic.

    """
    unit, n, duration = interval
    if unit in _FIXED_UNITS:
        return dt + datetime.timedelta(milliseconds=duration * count)
    elif unit == 'months':
        return add_months(dt, n * count)
    elif unit == 'years':
        return add_months(dt, 12 * n * count)
    raise errors.WrongUsage(f"unknown time unit {unit!r}")

def round_down_multiple(value, multiple):
    return value // multiple * multiple

def round_down_to(dt, interval):
    """Round `dt` down to a boundary of the tick interval.

    All fields smaller than the unit are cleared and the field of the
    unit itself is rounded down to a multiple of the interval's
    multiplier.  Days of the month are counted from 1, so that for
    2-day intervals the boundaries are on days 1, 3, 5, ...  For
    month multipliers above 1 the boundary is the last day of the
    preceding block of months, *e.g.* the end of the previous quarter
    for 3-month intervals.

    """
    unit, n, _ = interval
    midnight = dict(hour=0, minute=0, second=0, microsecond=0)
    if unit == 'seconds':
        return dt.replace(second=round_down_multiple(dt.second, n),
                          microsecond=0)
    elif unit == 'minutes':
        return dt.replace(minute=round_down_multiple(dt.minute, n),
                          second=0, microsecond=0)
    elif unit == 'hours':
        return dt.replace(hour=round_down_multiple(dt.hour, n),
                          minute=0, second=0, microsecond=0)
    elif unit == 'days':
        day = round_down_multiple(dt.day - 1, n) + 1
        return dt.replace(day=day, **midnight)
    elif unit == 'months':
        if n == 1:
            return dt.replace(day=1, **midnight)
        year = dt.year
        month = round_down_multiple(dt.month - 1, n)
        if month == 0:
            year, month = year - 1, 12
        return dt.replace(year=year, month=month,
                          day=last_day_of_month(year, month), **midnight)
    elif unit == 'years':
        return dt.replace(year=round_down_multiple(dt.year, n), month=1, day=1,
                          **midnight)
    raise errors.WrongUsage(f"unknown time unit {unit!r}")

def calculate_end_interval(start, target, interval, max_steps):
    """Step from `start` until `target` is reached.

    Returns:
        A pair ``(end, steps)``, where `end` is the first interval
        boundary at or after `target` and `steps` is the number of
        intervals between `start` and `end`.

    """
    steps = 1
    end = add_interval(start, interval, steps)
    while end < target:
        steps += 1
        end = add_interval(start, interval, steps)
    if steps > max_steps:
        logger.debug("%s: needed %d intervals of %d %s, %d requested",
                     target, steps, interval[1], interval[0], max_steps)
    return end, steps

def guess_display_format(interval):
    unit, n, _ = interval
    return DISPLAY_FORMATS.get((unit, n), DISPLAY_FORMATS[unit])
