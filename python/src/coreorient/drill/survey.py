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

"""Survey stations, raw core measurements and depth-interval assignment.

Each survey station owns the half-distance interval around its depth: from
the midpoint with the station above to the midpoint with the station below.
The first station's interval starts at the collar and the last one ends at
the deepest station. A measurement is oriented with the bearing and
inclination of the station whose interval holds its depth.

Interval bounds are closed below and open above, so a depth on a midpoint
goes to the deeper station. The last interval is also closed above so the
deepest station's own depth is covered.
"""

import math
from dataclasses import dataclass

from coreorient.datamodel import BEARING, DEPTH, INCLINATION
from coreorient.drill.validate import (
    DepthOutOfSurveyRangeError,
    OutOfRangeError,
    validate_angle,
    validate_station_depths,
)
from coreorient.log import logger


def _validate_depth(depth):
    if math.isnan(depth) or depth < 0.0:
        raise OutOfRangeError(DEPTH, depth, 0.0, math.inf)
    return depth


@dataclass(frozen=True)
class SurveyStation:
    """Borehole orientation at a measured depth."""

    depth: float
    bearing: float
    inclination: float

    def __post_init__(self):
        _validate_depth(self.depth)
        validate_angle(self.bearing, 0.0, 360.0, field=BEARING)
        validate_angle(self.inclination, -90.0, 90.0, field=INCLINATION)


@dataclass(frozen=True)
class RawMeasurement:
    """Alpha/beta core angles of one structure at a measured depth."""

    depth: float
    alpha: float
    beta: float

    def __post_init__(self):
        _validate_depth(self.depth)
        validate_angle(self.alpha, 0.0, 90.0, field="alpha")
        validate_angle(self.beta, 0.0, 360.0, field="beta")


@dataclass(frozen=True)
class DepthInterval:
    low: float
    high: float
    closed_high: bool = False

    def compare(self, depth):
        """-1 if depth lies above the interval, 1 if below, 0 if inside."""
        if depth < self.low:
            return -1
        if depth > self.high or (depth == self.high and not self.closed_high):
            return 1
        return 0

    def __contains__(self, depth):
        return self.compare(depth) == 0


def station_intervals(stations):
    """Half-distance depth intervals, one per station, in station order.

    Raises InvalidSurveyDataError if the stations are empty, out of depth
    order, or do not start at depth 0.0.
    """
    depths = validate_station_depths([s.depth for s in stations])
    # One shared boundary per adjacent pair keeps the intervals gap free
    bounds = [depths[0]]
    bounds += [upper - (upper - lower) / 2.0 for lower, upper in zip(depths, depths[1:])]
    bounds.append(depths[-1])
    last = len(depths) - 1
    intervals = [
        DepthInterval(bounds[i], bounds[i + 1], closed_high=(i == last))
        for i in range(len(depths))
    ]
    logger.debug("Survey partition: %s", [(iv.low, iv.high) for iv in intervals])
    return intervals


def find_interval(intervals, depth):
    """Binary search of sorted, contiguous intervals for the one holding ``depth``."""
    if math.isnan(depth):
        raise DepthOutOfSurveyRangeError(depth, intervals[0].low, intervals[-1].high)
    lo, hi = 0, len(intervals) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        side = intervals[mid].compare(depth)
        if side == 0:
            return mid
        if side < 0:
            hi = mid - 1
        else:
            lo = mid + 1
    raise DepthOutOfSurveyRangeError(depth, intervals[0].low, intervals[-1].high)


def assign_stations(measurements, stations):
    """Survey station for each measurement, in measurement order."""
    stations = list(stations)
    intervals = station_intervals(stations)
    assigned = [stations[find_interval(intervals, m.depth)] for m in measurements]
    logger.debug("Assigned %d measurements to %d survey stations", len(assigned), len(stations))
    return assigned

