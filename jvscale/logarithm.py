# logarithm.py - logarithmic scales for continuous numeric data
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

"""Logarithmic Scales
------------------

A :py:class:`Log` scale works like a :py:class:`jvscale.linear.Linear`
scale, except that values are passed through a logarithm before they
are mapped to plotting coordinates.  All settings are given as keyword
options::

    Log(domain=(0, 100),
        tick_positions=[0, 5, 10, 15, 30, 60, 120, 240, 480, 960],
        log_base='base_10',
        negative_numbers='mask',
        linear_range=1)

The ``negative_numbers`` option controls how values ``<= 0`` are
treated:

* ``'mask'`` and ``'clip'`` map them to 0;
* ``'sym'`` draws the logarithm symmetrically, *i.e.* a negative
  value -x is mapped to -log(x).

If ``linear_range`` is set, values with absolute value below this
threshold are used unchanged instead of being logged.

Ticks are placed on round numbers in data units, chosen in the same
way as for linear scales, unless ``tick_positions`` gives an explicit
list.

"""

import math

from . import errors
from . import nice
from . import param
from . import scale
from . import util

LOG_FUNCTIONS = {
    'base_2': math.log2,
    'base_e': math.log,
    'base_10': math.log10,
}


def log_value(v, log_fn, mode, linear_range=None):
    """Take the logarithm of `v`.

    Args:
        v (number): the value to transform.
        log_fn (function): the logarithm to use, *e.g.* ``math.log2``.
        mode (str): one of ``'mask'``, ``'clip'`` or ``'sym'``, see
            the module documentation.
        linear_range (number, optional): values with ``abs(v) <
            linear_range`` are returned unchanged.  For ``'mask'`` and
            ``'clip'`` this only applies to positive values.

    """
    in_linear_range = linear_range is not None and abs(v) < linear_range

    if mode == 'sym':
        if in_linear_range:
            return v
        if v > 0:
            return log_fn(v)
        if v < 0:
            return -log_fn(-v)
        return 0.0
    elif mode in ('mask', 'clip'):
        if v <= 0:
            return 0.0
        if in_linear_range:
            return v
        return log_fn(v)
    raise errors.InvalidOptionValue(f"invalid negative number mode {mode!r}")

def get_domain(domain, data=None, columns=None):
    """Work out the data domain for a log scale.

    An explicit `domain` is used if given.  Otherwise the extents of
    `data` are used, where `data` is a collection of values or, if
    `columns` is given, a list of table rows from which the named
    columns are taken.  If all else fails, ``(0, 1)`` is returned.

    """
    if domain is not None:
        return domain
    if data is not None:
        if columns is None:
            lower, upper = util.extents(data, util.is_finite_number)
        else:
            lower, upper = util.column_extents(
                data, columns, util.is_finite_number)
        if lower is not None:
            return lower, upper
    return 0, 1


class Log(scale.Scale):

    """A logarithmic scale for continuous numeric data.

    See the module documentation and :py:data:`jvscale.param.LOG` for
    the available options.

    """

    OPTIONS = param.LOG

    def _configure(self, opts):
        domain = get_domain(opts['domain'], opts['data'], opts['columns'])
        self.domain = util.validate_range(domain, 'domain', normalize=True)
        self.log_base = opts['log_base']
        self.negative_numbers = opts['negative_numbers']
        self.linear_range = opts['linear_range']
        self._requested_count = opts['interval_count']

        ticks = opts['tick_positions']
        if ticks is not None:
            bad = [x for x in ticks if not util.is_number(x)]
            if bad:
                raise errors.InvalidOptionValue(
                    f"tick_positions must be numbers, not {bad[0]!r}")
        self._requested_ticks = ticks

    def _update(self):
        settings = nice.nice_settings(
            self.domain[0], self.domain[1], self._requested_count,
            self._requested_ticks)
        # The nice domain only affects the choice of ticks, the
        # transformation uses the domain as given.
        self.nice_domain = settings.nice_domain
        self.interval_size = settings.interval_size
        self.interval_count = settings.interval_count
        self.display_decimals = settings.display_decimals
        self.tick_positions = tuple(settings.ticks)

    def set_domain(self, a, b=None):
        """Get a copy of the scale with a new domain.

        The domain is given either as two end points or as a
        collection of data values.

        """
        if b is None:
            domain = get_domain(None, a)
        else:
            domain = (a, b)
        domain = util.validate_range(domain, 'domain', normalize=True)
        return self._replace(domain=domain)

    def set_interval_count(self, interval_count):
        n = param.check_value(self.OPTIONS, 'interval_count', interval_count)
        return self._replace(_requested_count=n)

    def log_fn(self):
        """Get the logarithm used by the scale, as a function of one value."""
        base_fn = LOG_FUNCTIONS[self.log_base]
        mode = self.negative_numbers
        linear_range = self.linear_range

        def fn(v):
            return log_value(v, base_fn, mode, linear_range)
        return fn

    def ticks_domain(self):
        return list(self.tick_positions)

    def domain_to_range_fn(self):
        log_fn = self.log_fn()
        min_log = log_fn(self.domain[0])
        max_log = log_fn(self.domain[1])
        log_width = max_log - min_log
        r0, r1 = self.range
        r_width = r1 - r0

        def transform(x):
            return util.rescale_value(log_fn(x), min_log, log_width, r0, r_width)
        return transform

    def get_formatted_tick(self, value):
        return util.format_tick_text(
            value, self.display_decimals, self.custom_tick_formatter)
