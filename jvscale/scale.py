# scale.py - the common interface of all JvScale scales
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

"""The Scale class
---------------

A scale maps values from the "domain" (the data) to the "range" (the
plotting coordinates) and decides where the axis ticks go.  All scales
provide the same set of methods, so that layout code can use them
without knowing which kind of scale it deals with::

    x_fn = x_scale.domain_to_range_fn()
    y_fn = y_scale.domain_to_range_fn()
    points = [(x_fn(x), y_fn(y)) for x, y in data]

Scales are values: methods like :py:meth:`Scale.set_range` return a
modified copy and never change the scale they are called on.

"""

import abc
import copy

from . import param
from . import util


class Scale(abc.ABC):

    """Base class for the four kinds of scale.

    Args:
        options: keyword options, see the option table of the
            subclass in :py:mod:`jvscale.param`.  Invalid options
            raise a :py:class:`jvscale.errors.WrongUsage` exception.

    """

    OPTIONS = {}

    def __init__(self, **options):
        opts = param.update(self.OPTIONS, options)
        self.range = util.validate_range(opts['range'], 'range')
        """The plotting coordinates ``(start, end)`` (read only).  The
        start may be larger than the end, to flip an axis.

        """
        self.custom_tick_formatter = opts['custom_tick_formatter']
        self._configure(opts)
        self._update()

    @abc.abstractmethod
    def _configure(self, opts):
        """Set the variant specific fields from the validated options."""

    def _update(self):
        """Recompute derived settings after the domain or options changed."""
        pass

    def _replace(self, **fields):
        res = copy.copy(self)
        res.__dict__.update(fields)
        res._update()
        return res

    def __repr__(self):
        return "%s(domain=%r, range=%r)" % (
            self.__class__.__name__, self.domain, self.range)

    @abc.abstractmethod
    def ticks_domain(self):
        """Get the tick positions, in domain units, in order."""

    def ticks_range(self):
        """Get the tick positions, in range units."""
        fn = self.domain_to_range_fn()
        return [fn(x) for x in self.ticks_domain()]

    @abc.abstractmethod
    def domain_to_range_fn(self):
        """Get a function which maps domain values to range values.

        The returned function reflects the state of the scale at the
        time of the call and is suitable for use in tight loops.

        """

    def domain_to_range(self, value):
        """Map a single domain value to the range."""
        return self.domain_to_range_fn()(value)

    def get_range(self):
        return self.range

    def set_range(self, start, end=None):
        """Get a copy of the scale with plotting coordinates [start, end].

        The range can also be given as a single pair.  The range is
        used as given, *i.e.* `start` may be larger than `end`.

        """
        if end is None:
            r = start
        else:
            r = (start, end)
        r = util.validate_range(r, 'range')
        return self._replace(range=r)

    def set_tick_formatter(self, fn):
        """Get a copy of the scale which uses `fn` to format tick labels."""
        fn = param.check_value(self.OPTIONS, 'custom_tick_formatter', fn)
        return self._replace(custom_tick_formatter=fn)

    @abc.abstractmethod
    def get_formatted_tick(self, value):
        """Convert the tick value `value` into a label string."""
