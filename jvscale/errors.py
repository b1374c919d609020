# errors.py - exceptions raised by the JvScale package
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

class JvScaleError(Exception):

    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __str__(self):
        return self.msg


class WrongUsage(JvScaleError):

    pass


class InvalidOptionName(WrongUsage):

    pass


class InvalidOptionValue(WrongUsage):

    pass


class InvalidRange(WrongUsage):

    """A domain or range was not a pair of suitable values."""

    pass
