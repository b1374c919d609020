# linear.py - linear scales for continuous numeric data
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

"""Linear Scales
-------------

A :py:class:`Linear` scale maps an interval of numbers onto an
interval of plotting coordinates.  When the domain is set, the scale
widens it slightly so that the ticks fall on round numbers: for data
in the range 0.0 to 8.7 and 10 requested intervals, the ticks are
placed at 0, 1, 2, ..., 9 instead of 0.0, 0.87, 1.74, and so on.  The
number of intervals is adjusted accordingly.

Typical use::

    y_scale = Linear(range=(0, 200)).set_domain(y_data)
    y_fn = y_scale.domain_to_range_fn()
    plot_y = [y_fn(y) for y in y_data]

"""

from . import nice
from . import param
from . import scale
from . import util


class Linear(scale.Scale):

    """A linear scale for continuous numeric data.

    Args:
        domain (pair, optional): the minimum and maximum data value.
            The two values are swapped if needed.
        range (pair): the plotting coordinates corresponding to the
            ends of the nice domain.  Defaults to ``(0.0, 1.0)``.
        interval_count (int): the requested number of tick intervals.
            Defaults to 10.
        custom_tick_formatter (function, optional): converts tick
            values to label strings.

    """

    OPTIONS = param.LINEAR

    def _configure(self, opts):
        domain = opts['domain']
        if domain is not None:
            domain = util.validate_range(domain, 'domain', normalize=True)
        self.domain = domain
        """The data interval ``(min, max)`` (read only)."""
        self._requested_count = opts['interval_count']

    def _update(self):
        if self.domain is None:
            self.nice_domain = None
            self.interval_size = None
            self.interval_count = None
            self.display_decimals = None
            self._ticks = ()
            return

        settings = nice.nice_settings(
            self.domain[0], self.domain[1], self._requested_count)
        self.nice_domain = settings.nice_domain
        """The domain rounded outwards to tick boundaries (read only)."""
        self.interval_size = settings.interval_size
        """The distance between ticks, in domain units (read only)."""
        self.interval_count = settings.interval_count
        """The adjusted number of tick intervals (read only)."""
        self.display_decimals = settings.display_decimals
        self._ticks = tuple(settings.ticks)

    def set_domain(self, a, b=None):
        """Get a copy of the scale with a new domain.

        The domain can be given either as the two end points `a` and
        `b`, or as a collection `a` of data values, in which case the
        smallest and largest value are used.  Absent or non-numeric
        entries are ignored, and ``(0, 1)`` is used if no values are
        found.

        """
        if b is None:
            lower, upper = util.extents(a, util.is_finite_number)
            if lower is None:
                lower, upper = 0.0, 1.0
            domain = (lower, upper)
        else:
            domain = (a, b)
        domain = util.validate_range(domain, 'domain', normalize=True)
        return self._replace(domain=domain)

    def set_interval_count(self, interval_count):
        """Get a copy of the scale with a new requested number of intervals.

        The number of intervals actually used can be different, see
        :py:attr:`interval_count`.

        """
        n = param.check_value(self.OPTIONS, 'interval_count', interval_count)
        return self._replace(_requested_count=n)

    def ticks_domain(self):
        return list(self._ticks)

    def domain_to_range_fn(self):
        if self.nice_domain is None:
            return util.identity

        d0, d1 = self.nice_domain
        r0, r1 = self.range
        d_width = d1 - d0
        r_width = r1 - r0
        if d_width == 0:
            return util.identity

        def transform(x):
            return r0 + (x - d0) / d_width * r_width
        return transform

    def range_to_domain_fn(self):
        """Get a function which maps range values back to the domain."""
        if self.nice_domain is None:
            return util.identity

        d0, d1 = self.nice_domain
        r0, r1 = self.range
        d_width = d1 - d0
        r_width = r1 - r0
        if r_width == 0:
            return util.identity

        def transform(y):
            return d0 + (y - r0) / r_width * d_width
        return transform

    def range_to_domain(self, value):
        return self.range_to_domain_fn()(value)

    def get_formatted_tick(self, value):
        return util.format_tick_text(
            value, self.display_decimals, self.custom_tick_formatter)
