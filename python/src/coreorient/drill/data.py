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

"""Data loading and table normalization helpers for oriented-core datasets.

Supports CSV or Parquet sources (or DataFrames already in memory) and
applies column standardization towards the coreorient data model, so
downstream functions can expect consistent keys.
"""

import pandas as pd

from coreorient.datamodel import (
    ALPHA,
    BEARING,
    BETA,
    DEPTH,
    HOLE_ID,
    INCLINATION,
    MEASUREMENT_COLUMNS,
    PLANE_COLUMNS,
    SURVEY_COLUMNS,
)
from coreorient.drill.survey import RawMeasurement, SurveyStation
from coreorient.log import logger


# Best guess mapping from common source column names to the coreorient data model.
# Keys of the input source are lowercased and stripped before lookup.
# Stored by target column for readability, then pivoted for lookup.
DEFAULT_COLUMN_MAP = {
    HOLE_ID: ["hole_id", "holeid", "hole id", "hole-id", "bhid"],
    DEPTH: ["depth", "md", "measured_depth", "survey_depth", "surveydepth", "from", "depth_from"],
    BEARING: ["bearing", "azimuth", "az", "azi", "hole_azimuth"],
    INCLINATION: ["inclination", "incl", "inc", "dip", "hole_dip"],
    ALPHA: ["alpha", "alpha_angle", "core_alpha"],
    BETA: ["beta", "beta_angle", "core_beta"],
}

_COLUMN_LOOKUP = {}
for standard_col, variations in DEFAULT_COLUMN_MAP.items():
    for variation in variations:
        _COLUMN_LOOKUP[variation.lower().strip()] = standard_col


def standardize_columns(df, source_column_map=None):
    lookup = dict(_COLUMN_LOOKUP)
    if source_column_map:
        lookup.update({
            str(raw_name).lower().strip(): str(expected_name).lower().strip()
            for raw_name, expected_name in source_column_map.items()
            if raw_name is not None and expected_name is not None
        })

    renamed = {}
    for col in df.columns:
        key = str(col).lower().strip()
        renamed[col] = lookup.get(key, key)
    out = df.rename(columns=renamed)
    if not out.columns.is_unique:
        out = out.loc[:, ~out.columns.duplicated()]
    return out


def coerce_numeric(df, columns):
    out = df.copy()
    for col in columns:
        if col in out.columns:
            out[col] = pd.to_numeric(out[col], errors="coerce")
    return out


def load_table(source, kind="csv", source_column_map=None, **kwargs):
    if isinstance(source, pd.DataFrame):
        df = source.copy()
    elif kind == "csv":
        df = pd.read_csv(source, **kwargs)
    elif kind == "parquet":
        df = pd.read_parquet(source, **kwargs)
    else:
        raise ValueError(f"Unsupported kind: {kind}")
    return standardize_columns(df, source_column_map=source_column_map)


def _load_required(source, label, required, source_column_map=None, **kwargs):
    df = load_table(source, source_column_map=source_column_map, **kwargs)
    for col in required:
        if col not in df.columns:
            raise ValueError(f"{label} table missing column: {col}")
    df = coerce_numeric(df, required)
    if df[list(required)].isna().any().any():
        bad = df.index[df[list(required)].isna().any(axis=1)].tolist()
        raise ValueError(f"{label} table has missing or non-numeric values in rows: {bad[:5]}")
    logger.info("Loaded %d %s rows", len(df), label.lower())
    return df


def load_surveys(source, source_column_map=None, **kwargs):
    """Load a survey table with depth, bearing and inclination columns.

    Row order is kept as given; depth ordering is checked when the stations
    are partitioned, not repaired here.
    """
    return _load_required(source, "Survey", SURVEY_COLUMNS, source_column_map=source_column_map, **kwargs)


def load_measurements(source, source_column_map=None, **kwargs):
    """Load a raw measurement table with depth, alpha and beta columns, in input order."""
    return _load_required(source, "Measurement", MEASUREMENT_COLUMNS, source_column_map=source_column_map, **kwargs)


def surveys_to_stations(df):
    return [
        SurveyStation(float(depth), float(bearing), float(inclination))
        for depth, bearing, inclination in df[list(SURVEY_COLUMNS)].itertuples(index=False)
    ]


def measurements_to_records(df):
    return [
        RawMeasurement(float(depth), float(alpha), float(beta))
        for depth, alpha, beta in df[list(MEASUREMENT_COLUMNS)].itertuples(index=False)
    ]


def planes_to_frame(planes):
    return pd.DataFrame([plane.to_dict() for plane in planes], columns=list(PLANE_COLUMNS))


def write_planes(planes, path, **kwargs):
    """Write oriented planes as CSV with strike, dip, dip_direction, trend, plunge columns."""
    df = planes if isinstance(planes, pd.DataFrame) else planes_to_frame(planes)
    df.to_csv(path, index=False, **kwargs)
    logger.info("Wrote %d oriented planes to %s", len(df), path)
    return path
