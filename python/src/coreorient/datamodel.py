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

"""
Coreorient Open Data Model

Column names shared by the survey, measurement and oriented-plane tables.

Loaders map common variations in source column names onto these keys, and
also accept user-provided column maps for anything the defaults miss.
"""

HOLE_ID = "hole_id"
DEPTH = "depth"
BEARING = "bearing"
INCLINATION = "inclination"
ALPHA = "alpha"
BETA = "beta"
STRIKE = "strike"
DIP = "dip"
DIP_DIRECTION = "dip_direction"
TREND = "trend"
PLUNGE = "plunge"
STATION_DEPTH = "station_depth"

SURVEY_COLUMNS = (DEPTH, BEARING, INCLINATION)
MEASUREMENT_COLUMNS = (DEPTH, ALPHA, BETA)
PLANE_COLUMNS = (STRIKE, DIP, DIP_DIRECTION, TREND, PLUNGE)
