#! /usr/bin/env python3

import datetime

import numpy as np
import pytest

from . import errors
from .timescale import Time

UTC = datetime.timezone.utc

def utc(*args):
    return datetime.datetime(*args, tzinfo=UTC)

def test_five_seconds():
    s = Time(domain=(utc(2015, 1, 1, 13, 0, 0, 56000),
                     utc(2015, 1, 1, 13, 0, 5)),
             range=(0, 100))
    ticks = s.ticks_domain()
    assert ticks == [utc(2015, 1, 1, 13, 0, i) for i in range(6)]
    assert s.tick_interval.unit == 'seconds'
    assert s.interval_count == 5
    labels = [s.get_formatted_tick(t) for t in ticks]
    assert labels == ["00:00", "00:01", "00:02", "00:03", "00:04", "00:05"]

    fn = s.domain_to_range_fn()
    assert fn(utc(2015, 1, 1, 13, 0, 1)) == pytest.approx(20.0)
    assert fn(utc(2015, 1, 1, 13, 0, 10)) == pytest.approx(200.0)
    assert fn(utc(2015, 1, 1, 12, 59, 59)) == pytest.approx(-20.0)
    assert s.ticks_range() == pytest.approx([0, 20, 40, 60, 80, 100])

    assert s.range_to_domain(20.0) == utc(2015, 1, 1, 13, 0, 1)

def test_naive():
    s = Time(domain=(datetime.datetime(2015, 1, 1, 13, 0, 0, 56000),
                     datetime.datetime(2015, 1, 1, 13, 0, 5)))
    ticks = s.ticks_domain()
    assert ticks[0] == datetime.datetime(2015, 1, 1, 13)
    assert ticks[-1] == datetime.datetime(2015, 1, 1, 13, 0, 5)
    assert all(t.tzinfo is None for t in ticks)

def test_ten_days():
    s = Time(domain=(utc(2015, 1, 1, 13), utc(2015, 1, 10, 13, 0, 5)),
             range=(0, 100))
    assert s.ticks_domain() == [utc(2015, 1, d) for d in range(1, 12)]
    assert s.domain_to_range(utc(2015, 1, 2, 12)) == pytest.approx(15.0)
    assert s.get_formatted_tick(utc(2015, 1, 2)) == "02 Jan"

    s8 = s.set_interval_count(8)
    assert s8.ticks_domain() == [utc(2015, 1, d) for d in (1, 3, 5, 7, 9, 11)]
    assert len(s.ticks_domain()) == 11

def test_end_of_month_start():
    s = Time(domain=(utc(2015, 11, 30, 13, 0, 0, 56000),
                     utc(2015, 12, 13, 13, 0, 5)))
    assert s.ticks_domain() == [utc(2015, 11, 29)] + \
        [utc(2015, 12, d) for d in range(1, 16, 2)]

def test_months():
    s = Time(domain=(utc(2015, 1, 1, 13), utc(2015, 9, 28, 13)))
    assert s.ticks_domain() == [utc(2015, m, 1) for m in range(1, 11)]

    s = Time(domain=(utc(2015, 1, 15, 13), utc(2015, 9, 15, 13)))
    assert s.ticks_domain() == [utc(2015, m, 1) for m in range(1, 11)]

    s = Time(domain=(utc(2015, 1, 1, 13), utc(2015, 9, 28, 13)),
             interval_count=8)
    assert s.ticks_domain() == [utc(2014, 12, 31), utc(2015, 3, 31),
                                utc(2015, 6, 30), utc(2015, 9, 30)]

def test_quarters():
    s = Time(domain=(utc(2015, 1, 13, 13, 7), utc(2017, 1, 13, 13, 17)))
    assert s.tick_interval.unit == 'months'
    assert s.tick_interval.multiplier == 3
    labels = [s.get_formatted_tick(t) for t in s.ticks_domain()]
    assert labels == ["Dec 2014", "Mar 2015", "Jun 2015", "Sep 2015",
                      "Dec 2015", "Mar 2016", "Jun 2016", "Sep 2016",
                      "Dec 2016", "Mar 2017"]

def test_formats():
    s = Time(domain=(utc(2015, 1, 13, 13, 12), utc(2015, 1, 13, 13, 17)))
    labels = [s.get_formatted_tick(t) for t in s.ticks_domain()]
    assert labels == ["%02d:%02d" % (12 + i // 2, 30 * (i % 2))
                      for i in range(11)]

    s = Time(domain=(utc(2015, 1, 13, 13, 7), utc(2015, 1, 13, 13, 17)))
    labels = [s.get_formatted_tick(t) for t in s.ticks_domain()]
    assert labels == ["13:%02d:00" % m for m in range(7, 18)]

    s = Time(domain=(utc(2015, 1, 13, 13, 7), utc(2015, 1, 14, 13, 17)))
    labels = [s.get_formatted_tick(t) for t in s.ticks_domain()]
    assert labels == ["13 Jan 12:00", "13 Jan 15:00", "13 Jan 18:00",
                      "13 Jan 21:00", "14 Jan 00:00", "14 Jan 03:00",
                      "14 Jan 06:00", "14 Jan 09:00", "14 Jan 12:00",
                      "14 Jan 15:00"]

    s = s.set_tick_formatter(lambda t: t.isoformat())
    assert s.get_formatted_tick(utc(2015, 1, 13)) == "2015-01-13T00:00:00+00:00"

def test_interval_selection():
    t0 = utc(2019, 6, 1, 8)
    s = Time(domain=(t0, t0 + datetime.timedelta(seconds=450)))
    assert s.tick_interval == ('minutes', 1, 60000)

def test_containment():
    rng = np.random.RandomState(3)
    t0 = datetime.datetime(2019, 1, 1)
    for _ in range(200):
        offset = float(rng.uniform(-1e9, 1e9))
        span = 10.0 ** float(rng.uniform(0, 9))
        a = t0 + datetime.timedelta(seconds=offset)
        b = a + datetime.timedelta(seconds=span)
        n = int(rng.randint(2, 15))
        s = Time(domain=(a, b), interval_count=n)
        lo, hi = s.nice_domain
        assert lo <= a and hi >= b, f"[{lo}, {hi}] misses [{a}, {b}]"
        ticks = s.ticks_domain()
        assert ticks[0] == lo and ticks[-1] == hi
        assert all(x < y for x, y in zip(ticks, ticks[1:]))

def test_set_domain():
    t0 = utc(2015, 1, 13)
    t1 = utc(2015, 1, 14)
    s = Time()
    assert s.domain is None
    assert s.ticks_domain() == []
    assert s.domain_to_range(5) == 5
    assert s.get_formatted_tick(t0) == str(t0)

    assert s.set_domain(t1, t0).domain == (t0, t1)
    assert s.set_domain([t1, None, 7, t0]).domain == (t0, t1)
    s2 = s.set_domain([])
    assert s2.domain is None
    assert s2.ticks_domain() == []

    # numbers in the data do not stop the date/times being used
    assert s.set_domain([1, t1, t0]).domain == (t0, t1)
    assert s.set_domain([t1, 1, t0, 2.5]).domain == (t0, t1)
    assert s.set_domain([1, 2]).domain is None

    with pytest.raises(errors.InvalidRange):
        s.set_domain(t0)

def test_many_years():
    s = Time(domain=(datetime.datetime(1015, 6, 1), datetime.datetime(2015, 6, 1)))
    assert s.tick_interval == ('years', 1, 365 * 86400000)
    ticks = s.ticks_domain()
    assert len(ticks) == 1002
    assert ticks[0] == datetime.datetime(1015, 1, 1)
    assert ticks[-1] == datetime.datetime(2016, 1, 1)

def test_invalid():
    with pytest.raises(errors.InvalidRange):
        Time(domain=("fred", 10.0))
    with pytest.raises(errors.InvalidRange):
        Time(domain=(datetime.datetime(2015, 1, 1), utc(2015, 1, 2)))
    with pytest.raises(errors.InvalidRange):
        Time().set_range(("0.0", 100.0))
    with pytest.raises(errors.InvalidOptionValue):
        Time(interval_count=0)
