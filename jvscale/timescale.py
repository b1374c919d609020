# timescale.py - scales for date and time data
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

"""Time Scales
-----------

A :py:class:`Time` scale maps an interval of :py:class:`datetime.datetime`
values onto plotting coordinates.  It is used like a linear scale, but
the ticks are placed on human time units between one second and one
year, chosen from :py:data:`jvscale.dates.DEFAULT_TICK_INTERVALS`, and
the tick labels show only the relevant parts of the date/time.

Naive and timezone-aware date/times can both be used, but not mixed
within one scale.

"""

import datetime
import logging

from . import dates
from . import param
from . import scale
from . import util

logger = logging.getLogger(__name__)


class Time(scale.Scale):

    """A scale for date/time data.

    Args:
        domain (pair, optional): the earliest and latest date/time.
            The two values are swapped if needed.
        range (pair): the plotting coordinates of the ends of the nice
            domain.  Defaults to ``(0.0, 1.0)``.
        interval_count (int): the requested number of ticks.  Defaults
            to 11.
        custom_tick_formatter (function, optional): converts tick
            date/times to label strings.

    The longest tick interval is one year.  The nice domain always
    covers the whole domain, so a domain spanning many years gets one
    tick per year, regardless of the requested interval count.

    """

    OPTIONS = param.TIME

    def _configure(self, opts):
        domain = opts['domain']
        if domain is not None:
            domain = util.validate_range(
                domain, 'domain', normalize=True, dates=True)
        self.domain = domain
        self._requested_count = opts['interval_count']

    def _update(self):
        if self.domain is None:
            self.nice_domain = None
            self.tick_interval = None
            self.interval_count = None
            self.display_format = None
            return

        d0, d1 = self.domain
        count = self._requested_count
        width = dates.milliseconds_between(d0, d1)
        tick_interval = dates.lookup_tick_interval(width / (count - 1))

        min_nice = dates.round_down_to(d0, tick_interval)
        max_nice, steps = dates.calculate_end_interval(
            min_nice, d1, tick_interval, count)
        logger.debug("time domain [%s, %s]: %d ticks of %d %s from %s",
                     d0, d1, steps + 1, tick_interval.multiplier,
                     tick_interval.unit, min_nice)

        self.nice_domain = (min_nice, max_nice)
        self.tick_interval = tick_interval
        """The :py:class:`jvscale.dates.TimeInterval` between ticks (read
        only)."""
        self.interval_count = steps
        self.display_format = dates.guess_display_format(tick_interval)
        """The strftime pattern used for tick labels (read only)."""

    def set_domain(self, a, b=None):
        """Get a copy of the scale with a new domain.

        The domain is given either as two date/times, or as a
        collection of date/times.  Entries which are not date/times
        are ignored; if none are left, the scale has no domain and no
        ticks.

        """
        if b is None:
            lower, upper = util.extents(a, util.is_datetime)
            if lower is None:
                return self._replace(domain=None)
            domain = (lower, upper)
        else:
            domain = (a, b)
        domain = util.validate_range(domain, 'domain', normalize=True,
                                     dates=True)
        return self._replace(domain=domain)

    def set_interval_count(self, interval_count):
        n = param.check_value(self.OPTIONS, 'interval_count', interval_count)
        return self._replace(_requested_count=n)

    def ticks_domain(self):
        if self.nice_domain is None:
            return []
        start = self.nice_domain[0]
        return [dates.add_interval(start, self.tick_interval, i)
                for i in range(self.interval_count + 1)]

    def domain_to_range_fn(self):
        if self.nice_domain is None:
            return util.identity

        d0, d1 = self.nice_domain
        r0, r1 = self.range
        d_width = d1 - d0
        r_width = r1 - r0
        if not d_width:
            return util.identity

        def transform(x):
            # timedelta division is exact to the microsecond
            return r0 + (x - d0) / d_width * r_width
        return transform

    def range_to_domain_fn(self):
        """Get a function which maps range values back to date/times."""
        if self.nice_domain is None:
            return util.identity

        d0, d1 = self.nice_domain
        r0, r1 = self.range
        d_width_us = (d1 - d0) // datetime.timedelta(microseconds=1)
        r_width = r1 - r0
        if r_width == 0:
            return util.identity

        def transform(y):
            ratio = (y - r0) / r_width
            return d0 + datetime.timedelta(microseconds=round(ratio * d_width_us))
        return transform

    def range_to_domain(self, value):
        return self.range_to_domain_fn()(value)

    def get_formatted_tick(self, value):
        if self.custom_tick_formatter is not None:
            return self.custom_tick_formatter(value)
        if self.display_format is None:
            return str(value)
        return value.strftime(self.display_format)
