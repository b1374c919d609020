# __init__.py - package directory file for JvScale
# Copyright (C) 2014-2019 Jochen Voss <voss@seehuhn.de>
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

"""Scales and Axis Ticks for Plots
===============================

:copyright: 2014-2019, Jochen Voss
:license: GPL version 3 or newer, see LICENSE for more details

Quick Start
-----------

A scale maps data values (the "domain") to plotting coordinates (the
"range") and chooses the positions and labels of the axis ticks::

    import jvscale

    x = jvscale.Linear(range=(0, 400)).set_domain([0.3, 7.2, 8.7])
    for tick in x.ticks_domain():
        print(x.domain_to_range(tick), x.get_formatted_tick(tick))

Modules
-------

The JvScale package is composed of the following main modules:

* :py:mod:`jvscale.scale`: the interface common to all scales
* :py:mod:`jvscale.linear`, :py:mod:`jvscale.logarithm`,
  :py:mod:`jvscale.ordinal` and :py:mod:`jvscale.timescale`: the
  four kinds of scale
* :py:mod:`jvscale.param`: the options understood by each scale

"""

__title__ = 'jvscale'
__version__ = '0.3'
__author__ = 'Jochen Voss'
__license__ = 'GPLv3+'
__copyright__ = 'Copyright (c) 2014-2019 Jochen Voss'

from .errors import JvScaleError, WrongUsage
from .scale import Scale
from .linear import Linear
from .logarithm import Log, log_value
from .ordinal import Ordinal
from .timescale import Time
