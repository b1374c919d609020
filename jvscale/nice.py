# nice.py - round data domains to human-friendly tick boundaries
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

"""Nice domains
------------

Given a data interval [a, b] and a requested number of tick intervals,
:py:func:`nice_settings` chooses a round tick spacing, widens the
interval outwards to multiples of that spacing and works out how many
decimal places the tick labels need.

"""

import collections
import logging
import math

logger = logging.getLogger(__name__)

# Normalised step sizes, in increasing order.  The last entry is used
# when no other entry is large enough.
AXIS_INTERVAL_BREAKS = (0.1, 0.2, 0.25, 0.4, 0.5, 0.75,
                        1.0, 2.0, 2.5, 4.0, 5.0, 7.5, 10.0)

NiceSettings = collections.namedtuple(
    'NiceSettings',
    ['nice_domain', 'interval_size', 'interval_count', 'display_decimals',
     'ticks'])


def lookup_axis_interval(raw_interval):
    """Round `raw_interval` up to the next entry of the break table."""
    for x in AXIS_INTERVAL_BREAKS:
        if x >= raw_interval:
            return x
    return AXIS_INTERVAL_BREAKS[-1]

def guess_display_decimals(order_of_magnitude):
    if order_of_magnitude > 0:
        return 0
    return 1 - int(round(order_of_magnitude))

def nice_settings(min_d, max_d, interval_count, tick_positions=None):
    """Compute tick spacing and display settings for the domain [min_d, max_d].

    Args:
        min_d (number): the lower end of the data domain.
        max_d (number): the upper end of the data domain, ``>= min_d``.
        interval_count (int): the requested number of tick
            intervals, at least 2.  The returned count is adjusted to
            fit the rounded tick spacing.
        tick_positions (list of numbers, optional): explicit tick
            positions.  If this is given, the positions inside
            [min_d, max_d] are used as ticks instead of the evenly
            spaced ones.

    Returns:
        A :py:class:`NiceSettings` tuple.  The nice domain always
        contains [min_d, max_d].

    """
    width = max_d - min_d
    if width == 0:
        width = 1.0
    unrounded_interval_size = width / (interval_count - 1)
    order_of_magnitude = math.ceil(math.log10(unrounded_interval_size) - 1)
    power_of_ten = 10.0 ** order_of_magnitude

    rounded_interval_size = (
        lookup_axis_interval(unrounded_interval_size / power_of_ten)
        * power_of_ten)
    display_decimals = guess_display_decimals(order_of_magnitude)
    digits = max(display_decimals, 0)

    min_nice = rounded_interval_size * math.floor(min_d / rounded_interval_size)
    max_nice = rounded_interval_size * math.ceil(max_d / rounded_interval_size)
    # the factor guards against (max_nice - min_nice) / size ending up
    # just below an integer
    adjusted_interval_count = int(
        round(1.0001 * (max_nice - min_nice) / rounded_interval_size))

    # Multiples of the interval size have at most `digits` decimal
    # places; rounding removes floating point noise only.
    min_nice = round(min_nice, digits)
    max_nice = round(max_nice, digits)
    rounded_interval_size = round(rounded_interval_size, digits)

    if tick_positions is None:
        ticks = [round(min_nice + i * rounded_interval_size, digits)
                 for i in range(adjusted_interval_count + 1)]
    else:
        ticks = [x for x in tick_positions if min_d <= x <= max_d]
        adjusted_interval_count = max(len(ticks) - 1, 0)

    logger.debug("nice domain for [%g, %g]: [%g, %g], step %g, %d intervals",
                 min_d, max_d, min_nice, max_nice, rounded_interval_size,
                 adjusted_interval_count)

    return NiceSettings(
        nice_domain=(min_nice, max_nice),
        interval_size=rounded_interval_size,
        interval_count=adjusted_interval_count,
        display_decimals=display_decimals,
        ticks=ticks,
    )
