# ordinal.py - scales for categorical data
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

"""Ordinal Scales
--------------

An :py:class:`Ordinal` scale divides the range into one band per
category.  Values are mapped to the centre of their band, and
:py:meth:`Ordinal.get_band` gives the band extent with half the
padding removed at either end, for drawing bars.

"""

from . import param
from . import scale


class Ordinal(scale.Scale):

    """A scale for a finite, ordered list of categories.

    Args:
        domain (list): the category values, in order.  Duplicates are
            not removed.
        range (pair): the plotting coordinates of the outer band
            edges.  Defaults to ``(0.0, 1.0)``.
        padding (number): the gap between neighbouring bands, in range
            units.  Defaults to 0.5.
        custom_tick_formatter (function, optional): converts category
            values to label strings.

    Values which are not in the domain are mapped to the start of the
    range.

    """

    OPTIONS = param.ORDINAL

    def _configure(self, opts):
        self.domain = opts['domain'] or ()
        """The category values, as a tuple (read only)."""
        self.padding = opts['padding']

    def _update(self):
        n = len(self.domain)
        r0, r1 = self.range
        if n == 0:
            self.item_width = 0.0
        else:
            self.item_width = (r1 - r0) / n
        # pad towards the inside of the band, also on flipped axes
        self._flip = 1.0 if r0 < r1 else -1.0

    def set_domain(self, values):
        """Get a copy of the scale with the categories `values`."""
        values = param.check_value(self.OPTIONS, 'domain', values) or ()
        return self._replace(domain=values)

    def set_padding(self, padding):
        padding = param.check_value(self.OPTIONS, 'padding', padding)
        return self._replace(padding=padding)

    def _index(self, value):
        try:
            return self.domain.index(value)
        except ValueError:
            return None

    def ticks_domain(self):
        return list(self.domain)

    def domain_to_range_fn(self):
        """Get a function which maps categories to band centres."""
        start = self.range[0]
        width = self.item_width
        index = self._index

        def transform(value):
            i = index(value)
            if i is None:
                return start
            return start + width / 2 + i * width
        return transform

    def domain_to_range_band_fn(self):
        """Get a function which maps categories to ``(start, end)`` bands."""
        start = self.range[0]
        width = self.item_width
        half_pad = self._flip * self.padding / 2
        index = self._index

        def band(value):
            i = index(value)
            if i is None:
                return start, start
            return start + half_pad + i * width, start + (i+1) * width - half_pad
        return band

    def get_band(self, value):
        """Get the band ``(start, end)`` for the category `value`.

        If the padding is larger than the band width, the band start
        is beyond the band end.

        """
        return self.domain_to_range_band_fn()(value)

    def range_to_domain_fn(self):
        """Get a function which maps plotting coordinates to categories.

        Coordinates outside all bands are mapped to ``None``.

        """
        start = self.range[0]
        width = self.item_width
        domain = self.domain

        def transform(y):
            if width == 0:
                return None
            q = (y - start) / width
            if not 0 <= q < len(domain):
                return None
            return domain[int(q)]
        return transform

    def range_to_domain(self, value):
        return self.range_to_domain_fn()(value)

    def get_formatted_tick(self, value):
        if self.custom_tick_formatter is not None:
            return self.custom_tick_formatter(value)
        return str(value)
