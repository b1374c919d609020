# param.py - options and default values for the JvScale scales
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

"""Option tables for the scale classes.

Each table maps an option name to a tuple ``(type, default value,
description)``.  The type is used by :py:func:`update` to validate
values supplied by the caller.

"""

import numbers

from . import errors

# name: (type, default value, description)
LINEAR = {
    'custom_tick_formatter': ('fn', None, 'function to convert ticks to strings'),
    'domain': ('pair', None, 'minimum and maximum data value'),
    'interval_count': ('count', 10, 'requested number of tick intervals'),
    'range': ('pair', (0.0, 1.0), 'plotting coordinates of the domain ends'),
}

LOG = {
    'columns': ('keys', None, 'column key, or list of keys, to take the domain from'),
    'custom_tick_formatter': ('fn', None, 'function to convert ticks to strings'),
    'data': ('data', None, 'values, or table rows, to take the domain from'),
    'domain': ('pair', None, 'minimum and maximum data value'),
    'interval_count': ('count', 10, 'requested number of tick intervals'),
    'linear_range': ('opt_num', None, 'values closer to zero are not logged'),
    'log_base': ('enum', 'base_2', 'base of the logarithm'),
    'negative_numbers': ('enum', 'clip', 'treatment of values <= 0'),
    'range': ('pair', (0.0, 1.0), 'plotting coordinates of the domain ends'),
    'tick_positions': ('list', None, 'explicit tick positions in data units'),
}

ORDINAL = {
    'custom_tick_formatter': ('fn', None, 'function to convert ticks to strings'),
    'domain': ('list', (), 'the ordered category values'),
    'padding': ('num', 0.5, 'gap between neighbouring bands, in range units'),
    'range': ('pair', (0.0, 1.0), 'plotting coordinates of the outer band edges'),
}

TIME = {
    'custom_tick_formatter': ('fn', None, 'function to convert ticks to strings'),
    'domain': ('pair', None, 'earliest and latest date/time'),
    'interval_count': ('count', 11, 'requested number of tick intervals'),
    'range': ('pair', (0.0, 1.0), 'plotting coordinates of the domain ends'),
}

CHOICES = {
    'log_base': ('base_2', 'base_e', 'base_10'),
    'negative_numbers': ('clip', 'mask', 'sym'),
}


def check_keys(table, options):
    if options is None:
        return {}
    invalid = options.keys() - table.keys()
    if invalid:
        msg = "invalid option %r" % sorted(invalid)[0]
        raise errors.InvalidOptionName(msg)
    return options

def _is_number(x):
    return isinstance(x, numbers.Real) and not isinstance(x, bool)

def check_value(table, key, val):
    """Validate and normalise the value ``val`` for option ``key``."""
    kind = table[key][0]
    if kind == 'count':
        if (not isinstance(val, numbers.Integral) or isinstance(val, bool)
                or val < 2):
            raise errors.InvalidOptionValue(
                f"{key} must be an integer greater than 1, not {val!r}")
        return int(val)
    elif kind == 'num':
        if not _is_number(val):
            raise errors.InvalidOptionValue(
                f"{key} must be a number, not {val!r}")
        return float(val)
    elif kind == 'opt_num':
        if val is None:
            return None
        if not _is_number(val) or val < 0:
            raise errors.InvalidOptionValue(
                f"{key} must be a non-negative number or None, not {val!r}")
        return float(val)
    elif kind == 'enum':
        if val not in CHOICES[key]:
            raise errors.InvalidOptionValue(
                f"option {key} cannot be set to {val!r}, "
                f"valid values are {list(CHOICES[key])}")
        return val
    elif kind == 'fn':
        if val is not None and not callable(val):
            raise errors.InvalidOptionValue(
                f"{key} must be callable, not {val!r}")
        return val
    elif kind == 'list':
        if val is None:
            return None
        if isinstance(val, (str, bytes)):
            raise errors.InvalidOptionValue(
                f"{key} must be a list of values, not the string {val!r}")
        try:
            return tuple(val)
        except TypeError:
            raise errors.InvalidOptionValue(
                f"{key} must be a list of values, not {val!r}") from None
    return val

def update(table, *options, **kwargs):
    """Merge a list of option dictionaries.

    Later entries override earlier ones and defaults are used where no
    values are given.  All values in the result have been checked by
    :py:func:`check_value`.

    """
    if kwargs:
        options = options + (kwargs,)
    options = [dict(opt) for opt in options if opt is not None]

    for opt in options:
        check_keys(table, opt)

    res = {}
    for key, (_, default, _) in table.items():
        val = default
        for opt in options:
            if key in opt:
                val = opt[key]
        res[key] = check_value(table, key, val)
    return res
