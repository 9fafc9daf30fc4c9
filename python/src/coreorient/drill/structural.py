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

"""Oriented-core structural geometry.

Converts alpha/beta angles measured on oriented drill core into planes in
global coordinates. Rotation conventions follow Stigsson & Munier (2013),
Computers & Geosciences 56
(https://www.sciencedirect.com/science/article/pii/S0098300413000551): the core axis
is the local z-axis, the measured normal is tilted about the local y-axis by
the borehole inclination and then swung about the global z-axis onto the
borehole bearing.

Inputs are decimal degrees. ``Orient`` keeps radians internally.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np

from coreorient.datamodel import DIP, DIP_DIRECTION, PLUNGE, STRIKE, TREND
from coreorient.drill.angles import (
    clockwise_from_input,
    dip_direction_from_strike,
    dip_from_plunge,
    plunge_from_dip,
    strike_from_trend,
    trend_from_strike,
)
from coreorient.drill.validate import validate_angle
from coreorient.log import logger


class ReferenceLine(str, Enum):
    """Side of the core on which the beta reference line is marked."""

    TOP = "top"
    BOTTOM = "bottom"

    def adjust_beta(self, beta):
        """Beta measured from the top-of-hole line, in degrees."""
        if self is ReferenceLine.BOTTOM:
            return clockwise_from_input(beta, 180.0, field="beta")
        return beta


@dataclass(frozen=True)
class Lineation:
    """Trend and plunge of a line, here the downward pole to a plane."""

    trend: float
    plunge: float

    def __post_init__(self):
        validate_angle(self.trend, 0.0, 360.0, field="trend")
        validate_angle(self.plunge, 0.0, 90.0, field="plunge")


@dataclass(frozen=True)
class Plane:
    """A geological plane.

    Strike follows the right-hand rule, so the dip direction is 90° clockwise
    of strike and the pole trend is 90° anticlockwise of it. Any of
    ``dip_direction``, ``trend`` or ``plunge`` left as None is derived from
    strike and dip; supplied values are range checked but not reconciled
    against strike and dip.
    """

    strike: float
    dip: float
    dip_direction: Optional[float] = None
    trend: Optional[float] = None
    plunge: Optional[float] = None
    pole: Lineation = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        validate_angle(self.strike, 0.0, 360.0, field="strike")
        validate_angle(self.dip, 0.0, 90.0, field="dip")

        derived = {
            "dip_direction": dip_direction_from_strike(self.strike) if self.dip_direction is None else self.dip_direction,
            "trend": trend_from_strike(self.strike) if self.trend is None else self.trend,
            "plunge": plunge_from_dip(self.dip) if self.plunge is None else self.plunge,
        }
        validate_angle(derived["dip_direction"], 0.0, 360.0, field="dip_direction")
        for name, value in derived.items():
            object.__setattr__(self, name, value)
        object.__setattr__(self, "pole", Lineation(derived["trend"], derived["plunge"]))

    @classmethod
    def alpha_beta(cls, bearing, inclination, alpha, beta, reference_line=ReferenceLine.TOP):
        """Plane from an oriented-core measurement; see ``Orient``."""
        return Orient(bearing, inclination, alpha, beta, reference_line).into_plane()

    def to_dict(self):
        return {
            STRIKE: self.strike,
            DIP: self.dip,
            DIP_DIRECTION: self.dip_direction,
            TREND: self.trend,
            PLUNGE: self.plunge,
        }


class Orient:
    """A single oriented-core measurement ready for rotation into global coordinates.

    Parameters
    ----------
    bearing : float
        Azimuth of the borehole trajectory, clockwise from North, [0, 360].
    inclination : float
        Angle of the trajectory from horizontal, [-90, 90]. Negative when
        the hole points downward.
    alpha : float
        Acute angle between the fracture plane and the core axis, [0, 90].
        90 means the fracture is perpendicular to the core.
    beta : float
        Clockwise angle, looking down-hole, from the reference line to the
        lower inflexion point of the fracture trace, [0, 360].
    reference_line : ReferenceLine
        Where the reference line is marked. BOTTOM turns beta by 180°.
    """

    __slots__ = ("_bearing", "_inclination", "_alpha", "_beta", "reference_line")

    def __init__(self, bearing, inclination, alpha, beta, reference_line=ReferenceLine.TOP):
        validate_angle(bearing, 0.0, 360.0, field="bearing")
        validate_angle(inclination, -90.0, 90.0, field="inclination")
        validate_angle(alpha, 0.0, 90.0, field="alpha")
        validate_angle(beta, 0.0, 360.0, field="beta")

        reference_line = ReferenceLine(reference_line)
        beta = reference_line.adjust_beta(beta)

        self._bearing = math.radians(bearing)
        self._inclination = math.radians(inclination)
        self._alpha = math.radians(alpha)
        self._beta = math.radians(beta)
        self.reference_line = reference_line

    def __repr__(self):
        return (
            f"Orient(bearing={math.degrees(self._bearing)!r}, "
            f"inclination={math.degrees(self._inclination)!r}, "
            f"alpha={math.degrees(self._alpha)!r}, beta={math.degrees(self._beta)!r})"
        )

    def normal_bh(self):
        """Unit normal of the measured plane in borehole coordinates."""
        return np.array([
            math.cos(self._alpha) * math.cos(self._beta),
            math.cos(self._alpha) * math.sin(self._beta),
            math.sin(self._alpha),
        ])

    def y_rot(self):
        i = math.pi / 2 - self._inclination
        return np.array([
            [math.cos(i), 0.0, math.sin(i)],
            [0.0, 1.0, 0.0],
            [-math.sin(i), 0.0, math.cos(i)],
        ])

    def z_rot(self):
        b = math.pi / 2 - self._bearing
        return np.array([
            [math.cos(b), -math.sin(b), 0.0],
            [math.sin(b), math.cos(b), 0.0],
            [0.0, 0.0, 1.0],
        ])

    def normal_g(self):
        """Unit normal of the measured plane in global (East, North, Up) coordinates."""
        return self.z_rot() @ self.y_rot() @ self.normal_bh()

    def trend_and_plunge(self):
        """Trend and plunge of the downward pole to the measured plane, in radians."""
        nx, ny, nz = self.normal_g()
        if nz > 0.0:
            # Poles are reported on the lower hemisphere
            nx, ny, nz = -nx, -ny, -nz
        horizontal = math.hypot(nx, ny)
        if horizontal == 0.0:
            # Vertical pole: azimuth is undefined and irrelevant to plunge
            logger.debug("Vertical pole for %r, using apparent trend 0", self)
            apparent_trend = 0.0
        else:
            apparent_trend = math.acos(float(np.clip(nx / horizontal, -1.0, 1.0)))

        if ny <= 0.0:
            trend = math.pi / 2 + apparent_trend
        else:
            trend = math.pi / 2 - apparent_trend
        if trend < 0.0:
            trend += 2 * math.pi
        # A tiny negative trend can round up to a full turn
        if trend >= 2 * math.pi:
            trend -= 2 * math.pi

        plunge = -math.asin(float(np.clip(nz, -1.0, 1.0)))
        return trend, plunge

    def pole(self):
        trend, plunge = self.trend_and_plunge()
        return Lineation(math.degrees(trend), math.degrees(plunge))

    def into_plane(self):
        trend, plunge = self.trend_and_plunge()
        trend = math.degrees(trend)
        plunge = math.degrees(plunge)
        strike = strike_from_trend(trend)
        return Plane(
            strike,
            dip_from_plunge(plunge),
            dip_direction=dip_direction_from_strike(strike),
            trend=trend,
            plunge=plunge,
        )
