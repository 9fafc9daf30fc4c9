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

"""Range checks, error types and QA helpers for survey and measurement tables."""

import pandas as pd

from coreorient.datamodel import ALPHA, BEARING, BETA, DEPTH, INCLINATION


class CoreOrientError(ValueError):
    """Base class for every error raised by the orientation core."""


class OutOfRangeError(CoreOrientError):
    def __init__(self, field, value, minimum, maximum):
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"{field} value {value} is out of range [{minimum}, {maximum}]")


class InvalidSurveyDataError(CoreOrientError):
    """The survey station list cannot anchor a depth partition."""


class DepthOutOfSurveyRangeError(CoreOrientError):
    def __init__(self, depth, low=None, high=None):
        self.depth = depth
        message = f"Measurement depth {depth} is outside the surveyed depth range"
        if low is not None and high is not None:
            message += f" [{low}, {high}]"
        super().__init__(message)


def validate_angle(value, minimum, maximum, field="value"):
    """Return ``value`` unchanged if it lies in the closed interval [minimum, maximum].

    NaN never satisfies the bounds and is rejected as out of range.
    """
    if not minimum <= value <= maximum:
        raise OutOfRangeError(field, value, minimum, maximum)
    return value


def validate_station_depths(depths):
    """Raise InvalidSurveyDataError unless depths are non-empty, ascending and start at 0.0."""
    depths = list(depths)
    if not depths:
        raise InvalidSurveyDataError("Survey station list is empty")
    if depths[0] != 0.0:
        raise InvalidSurveyDataError(
            f"The first survey station depth must be 0.0, got {depths[0]}"
        )
    for prev, cur in zip(depths, depths[1:]):
        if not cur > prev:
            raise InvalidSurveyDataError(
                f"Survey station depths must be strictly ascending: {cur} follows {prev}"
            )
    return depths


def _range_issues(df, col, minimum, maximum, issue_type):
    issues = []
    if col not in df.columns:
        return issues
    for idx, value in df[col].items():
        if pd.isna(value):
            issues.append({"row_index": idx, "type": f"missing_{col}"})
        elif value < minimum or value > maximum:
            issues.append({"row_index": idx, "type": issue_type, "value": value})
    return issues


def validate_surveys(df, depth_col=DEPTH):
    """Collect survey table problems without raising.

    Returns a list of issue dicts: first depth not zero, non-monotonic depths,
    bearing out of [0, 360], inclination out of [-90, 90].
    """
    issues = []
    if df.empty:
        return [{"type": "empty_survey"}]
    depths = pd.to_numeric(df[depth_col], errors="coerce")
    if depths.iloc[0] != 0.0:
        issues.append({"row_index": depths.index[0], "type": "first_depth_not_zero", "value": depths.iloc[0]})
    if not depths.is_monotonic_increasing or depths.duplicated().any():
        issues.append({"type": "non_monotonic_survey"})
    issues += _range_issues(df, BEARING, 0.0, 360.0, "bearing_out_of_range")
    issues += _range_issues(df, INCLINATION, -90.0, 90.0, "inclination_out_of_range")
    return issues


def validate_measurements(df, depth_col=DEPTH):
    """Collect measurement table problems without raising.

    Returns a list of issue dicts: missing or negative depth, alpha out of
    [0, 90], beta out of [0, 360].
    """
    issues = []
    for idx, depth in df[depth_col].items():
        if pd.isna(depth):
            issues.append({"row_index": idx, "type": "missing_depth"})
        elif depth < 0:
            issues.append({"row_index": idx, "type": "negative_depth", "value": depth})
    issues += _range_issues(df, ALPHA, 0.0, 90.0, "alpha_out_of_range")
    issues += _range_issues(df, BETA, 0.0, 360.0, "beta_out_of_range")
    return issues
