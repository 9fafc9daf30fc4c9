# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

# This file is part of coreorient.

# coreorient is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# coreorient is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with coreorient.  If not, see <https://www.gnu.org/licenses/>.

"""Conversions between strike, trend, dip direction, dip and plunge.

All angles are decimal degrees. Every function range-checks its input and
wraps its result into the target range by subtracting a full turn, never by
taking a modulo of a negative number.
"""

from coreorient.drill.validate import validate_angle

FULL_TURN = 360.0
RIGHT_ANGLE = 90.0


def clockwise_from_input(value, add, minimum=0.0, maximum=FULL_TURN, field="angle"):
    """Rotate ``value`` clockwise by ``add`` degrees, wrapping into [minimum, maximum)."""
    validate_angle(value, minimum, maximum, field=field)
    output = value + add
    if output >= maximum:
        output -= maximum
    return output


def dip_direction_from_strike(strike):
    """Dip direction lies 90° clockwise of strike (right-hand rule)."""
    return clockwise_from_input(strike, RIGHT_ANGLE, field="strike")


def trend_from_strike(strike):
    """Pole trend lies 90° anticlockwise of strike."""
    return clockwise_from_input(strike, FULL_TURN - RIGHT_ANGLE, field="strike")


def strike_from_trend(trend):
    return clockwise_from_input(trend, RIGHT_ANGLE, field="trend")


def perpendicular_angle(angle, field="angle"):
    """Complement of an angle in [0, 90]."""
    validate_angle(angle, 0.0, RIGHT_ANGLE, field=field)
    return RIGHT_ANGLE - angle


def plunge_from_dip(dip):
    return perpendicular_angle(dip, field="dip")


def dip_from_plunge(plunge):
    return perpendicular_angle(plunge, field="plunge")
