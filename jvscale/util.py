# util.py - auxiliary functions for JvScale
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

import datetime
import math
import numbers

import numpy as np

from . import errors


def identity(x):
    return x

def is_number(x):
    return isinstance(x, numbers.Real) and not isinstance(x, bool)

def is_finite_number(x):
    return is_number(x) and math.isfinite(x)

def is_datetime(x):
    return isinstance(x, datetime.datetime)

def _usable(x):
    return is_datetime(x) or is_finite_number(x)

def safe_min(x, current):
    """Fold step for computing a minimum.

    Values which are ``None``, not finite, not numbers or date/times, or
    not comparable to ``current`` are ignored.

    """
    if not _usable(x):
        return current
    if current is None:
        return x
    try:
        return x if x < current else current
    except TypeError:
        return current

def safe_max(x, current):
    """Fold step for computing a maximum, see :py:func:`safe_min`."""
    if not _usable(x):
        return current
    if current is None:
        return x
    try:
        return x if x > current else current
    except TypeError:
        return current

def extents(data, accept=None):
    """Get the smallest and largest value in `data`.

    Entries which are absent or cannot be compared are skipped.  If
    `accept` is given, only entries for which ``accept(x)`` is true are
    considered, so that *e.g.* numbers in a list of date/times do not
    decide the type of the result.  If no usable values are found,
    ``(None, None)`` is returned.

    """
    if data is None:
        return None, None
    if isinstance(data, (str, bytes)):
        raise errors.InvalidRange(
            f"expected a collection of data values, not the string {data!r}")

    if isinstance(data, np.ndarray) and np.issubdtype(data.dtype, np.number):
        aa = data.flatten()
        aa = aa[np.isfinite(aa)]
        if aa.size == 0:
            return None, None
        lower, upper = aa.min().item(), aa.max().item()
        if accept is not None and not accept(lower):
            return None, None
        return lower, upper

    try:
        it = iter(data)
    except TypeError:
        raise errors.InvalidRange(
            f"expected a collection of data values, not {data!r}") from None

    lower = upper = None
    for x in it:
        if accept is not None and not accept(x):
            continue
        lower = safe_min(x, lower)
        upper = safe_max(x, upper)
    return lower, upper

def _cell(row, key):
    try:
        return row[key]
    except (KeyError, IndexError, TypeError):
        return None

def column_extents(rows, columns, accept=None):
    """Get the combined extents of one or more columns of a table.

    `rows` is a sequence of rows, each either a mapping or a sequence,
    and `columns` is a key/index or a list of keys/indices.  `accept`
    is passed on to :py:func:`extents`.

    """
    if isinstance(columns, (str, numbers.Integral)):
        columns = [columns]
    lower = upper = None
    for key in columns:
        a, b = extents([_cell(row, key) for row in rows], accept)
        lower = safe_min(a, lower)
        upper = safe_max(b, upper)
    return lower, upper

def validate_range(r, label, normalize=False, dates=False):
    """Check that `r` is a pair of numbers, or of date/times if `dates` is set.

    Numbers are converted to floats.  If `normalize` is set, the pair
    is returned in increasing order.

    """
    try:
        a, b = r
    except (TypeError, ValueError):
        raise errors.InvalidRange(
            f"{label} - a range should be in the form (0.0, 1.0), "
            f"but {r!r} was supplied") from None

    if dates:
        if not (isinstance(a, datetime.datetime)
                and isinstance(b, datetime.datetime)):
            raise errors.InvalidRange(
                f"{label} - {r!r} must be a pair of date/times")
        if (a.tzinfo is None) != (b.tzinfo is None):
            raise errors.InvalidRange(
                f"{label} - cannot mix naive and aware date/times in {r!r}")
    else:
        if not (is_number(a) and is_number(b)):
            raise errors.InvalidRange(
                f"{label} - {r!r} must be a pair of numbers")
        a, b = float(a), float(b)
        if not (math.isfinite(a) and math.isfinite(b)):
            raise errors.InvalidRange(f"{label} - {r!r} is not finite")

    if normalize and b < a:
        a, b = b, a
    return a, b

def rescale_value(v, domain_min, domain_width, range_min, range_width):
    """Map `v` linearly from the domain to the range.

    If the domain has zero width, `range_min` is returned.

    """
    if domain_width == 0:
        return range_min
    ratio = (v - domain_min) / domain_width
    return range_min + ratio * range_width

def _compact(x):
    s = "%f" % x
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s == "-0":
        s = "0"
    return s

def format_tick_text(tick, display_decimals, custom_tick_formatter=None):
    """Convert a numeric tick value into a label string.

    A custom formatter always takes precedence.  Integers are shown
    without decimals, other numbers use `display_decimals` fixed
    decimal places, or a compact form if `display_decimals` is not
    positive.

    """
    if custom_tick_formatter is not None:
        return custom_tick_formatter(tick)
    if isinstance(tick, numbers.Integral) and not isinstance(tick, bool):
        return str(tick)
    if display_decimals is not None and display_decimals > 0:
        return "%.*f" % (display_decimals, tick)
    return _compact(tick)
