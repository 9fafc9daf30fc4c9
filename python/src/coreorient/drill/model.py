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

"""Borehole container and processing settings.

A Borehole keeps the survey stations and the oriented planes produced from
its raw core measurements together, so the planes can be traced back to the
stations that oriented them.
"""

import pandas as pd

from coreorient.datamodel import DEPTH, PLANE_COLUMNS, STATION_DEPTH
from coreorient.drill.structural import Orient, ReferenceLine
from coreorient.drill.survey import SurveyStation, assign_stations
from coreorient.log import logger


class BoreholeConfig:
    def __init__(self, reference_line=ReferenceLine.TOP, hole_id=None, inclination_positive_down=False, metadata=None):
        self.reference_line = ReferenceLine(reference_line)
        self.hole_id = hole_id
        # Survey tables that record downward holes with positive inclination
        self.inclination_positive_down = inclination_positive_down
        self.metadata = metadata or {}

    def update(self, **kwargs):
        for key, val in kwargs.items():
            if key == "reference_line":
                val = ReferenceLine(val)
            setattr(self, key, val)
        return self

    def to_dict(self):
        return {
            "reference_line": self.reference_line.value,
            "hole_id": self.hole_id,
            "inclination_positive_down": self.inclination_positive_down,
            "metadata": self.metadata,
        }


class Borehole:
    """Oriented structural measurements of a single borehole.

    Parameters
    ----------
    reference_line : ReferenceLine
        Core side carrying the beta reference line, shared by every measurement.
    raw_measurements : iterable of RawMeasurement
        Alpha/beta measurements in any depth order.
    stations : iterable of SurveyStation
        Orientation survey, shallowest first, starting at depth 0.0.

    All measurements are oriented on construction. Any invalid station list,
    out-of-range angle or measurement outside the surveyed depth aborts the
    whole construction.
    """

    def __init__(self, reference_line, raw_measurements, stations):
        self._reference_line = ReferenceLine(reference_line)
        self._stations = tuple(stations)
        measurements = tuple(raw_measurements)

        assigned = assign_stations(measurements, self._stations)
        self._station_depths = tuple(station.depth for station in assigned)
        self._oriented_measurements = tuple(
            Orient(
                station.bearing,
                station.inclination,
                measurement.alpha,
                measurement.beta,
                self._reference_line,
            ).into_plane()
            for measurement, station in zip(measurements, assigned)
        )
        self._depths = tuple(m.depth for m in measurements)
        logger.debug(
            "Oriented %d measurements against %d stations (%s reference line)",
            len(self._oriented_measurements), len(self._stations), self._reference_line.value,
        )

    @classmethod
    def from_config(cls, config, raw_measurements, stations):
        """Build a Borehole using the reference line and inclination sign of ``config``."""
        stations = list(stations)
        if config.inclination_positive_down:
            stations = [
                SurveyStation(s.depth, s.bearing, -s.inclination) for s in stations
            ]
        return cls(config.reference_line, raw_measurements, stations)

    @property
    def reference_line(self):
        return self._reference_line

    @property
    def stations(self):
        return self._stations

    @property
    def oriented_measurements(self):
        return self._oriented_measurements

    def __len__(self):
        return len(self._oriented_measurements)

    def __iter__(self):
        return iter(self._oriented_measurements)

    def to_frame(self, include_depth=False):
        """Oriented planes as a table, one row per input measurement in input order."""
        df = pd.DataFrame(
            [plane.to_dict() for plane in self._oriented_measurements],
            columns=list(PLANE_COLUMNS),
        )
        if include_depth:
            df.insert(0, STATION_DEPTH, list(self._station_depths))
            df.insert(0, DEPTH, list(self._depths))
        return df
