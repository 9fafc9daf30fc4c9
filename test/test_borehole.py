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

"""Tests for table loading and the Borehole aggregate."""

import pathlib

import pandas as pd
import pytest

from coreorient.drill import data
from coreorient.drill.model import Borehole, BoreholeConfig
from coreorient.drill.structural import Orient, ReferenceLine
from coreorient.drill.survey import RawMeasurement, SurveyStation
from coreorient.drill.validate import (
    DepthOutOfSurveyRangeError,
    InvalidSurveyDataError,
    OutOfRangeError,
)

DATA_DIR = pathlib.Path(__file__).parent / "data"
SURVEYS_CSV = DATA_DIR / "surveys_sample.csv"
MEASUREMENTS_CSV = DATA_DIR / "measurements_sample.csv"


def _stations():
    return [
        SurveyStation(0.0, 0.0, -45.0),
        SurveyStation(12.5, 90.0, -45.0),
        SurveyStation(16.0, 180.0, -45.0),
        SurveyStation(22.0, 270.0, -45.0),
        SurveyStation(30.0, 10.0, -60.0),
    ]


# ---------------------------------------------------------------------------
# Data loading
# ---------------------------------------------------------------------------

def test_load_surveys_standardizes_columns():
    df = data.load_surveys(SURVEYS_CSV)
    assert {"depth", "bearing", "inclination"} <= set(df.columns)
    assert len(df) == 5
    assert df["inclination"].iloc[0] == pytest.approx(-55.3)


def test_load_measurements():
    df = data.load_measurements(MEASUREMENTS_CSV)
    assert list(df.columns) == ["depth", "alpha", "beta"]
    assert df["depth"].tolist() == [1.0, 10.0, 20.0, 30.0]


def test_load_surveys_missing_column():
    bad = pd.DataFrame({"depth": [0.0], "bearing": [10.0]})
    with pytest.raises(ValueError, match="missing column: inclination"):
        data.load_surveys(bad)


def test_load_measurements_non_numeric():
    bad = pd.DataFrame({"depth": [1.0, 2.0], "alpha": [45.0, "n/a"], "beta": [10.0, 20.0]})
    with pytest.raises(ValueError, match="non-numeric"):
        data.load_measurements(bad)


def test_source_column_map_overrides_defaults():
    raw = pd.DataFrame({"SampleDepth": [1.0], "CA": [45.0], "CB": [90.0]})
    df = data.load_measurements(raw, source_column_map={"SampleDepth": "depth", "CA": "alpha", "CB": "beta"})
    assert df[["depth", "alpha", "beta"]].iloc[0].tolist() == [1.0, 45.0, 90.0]


def test_load_table_unsupported_kind():
    with pytest.raises(ValueError, match="Unsupported kind"):
        data.load_table(SURVEYS_CSV, kind="xlsx")


def test_records_from_tables():
    stations = data.surveys_to_stations(data.load_surveys(SURVEYS_CSV))
    measurements = data.measurements_to_records(data.load_measurements(MEASUREMENTS_CSV))
    assert stations[1] == SurveyStation(12.5, 262.7, -55.3)
    assert measurements[0] == RawMeasurement(1.0, 65.0, 230.0)


def test_records_reject_out_of_range_rows():
    df = pd.DataFrame({"depth": [1.0], "alpha": [95.0], "beta": [10.0]})
    with pytest.raises(OutOfRangeError, match="alpha"):
        data.measurements_to_records(df)


def test_write_planes_round_trip(tmp_path):
    planes = [Orient(262.7, -55.3, 65.0, 230.0).into_plane()]
    out = data.write_planes(planes, tmp_path / "planes.csv")
    df = pd.read_csv(out)
    assert list(df.columns) == ["strike", "dip", "dip_direction", "trend", "plunge"]
    assert round(df["strike"].iloc[0]) == 16
    assert round(df["plunge"].iloc[0]) == 36


# ---------------------------------------------------------------------------
# Borehole
# ---------------------------------------------------------------------------

def test_borehole_from_sample_tables():
    stations = data.surveys_to_stations(data.load_surveys(SURVEYS_CSV))
    measurements = data.measurements_to_records(data.load_measurements(MEASUREMENTS_CSV))
    hole = Borehole(ReferenceLine.TOP, measurements, stations)
    assert len(hole) == 4
    for plane in hole.oriented_measurements:
        assert round(plane.strike) == 16
        assert round(plane.dip) == 54
        assert round(plane.dip_direction) == 106
        assert round(plane.pole.trend) == 286
        assert round(plane.pole.plunge) == 36


def test_borehole_uses_station_of_each_interval():
    measurements = [RawMeasurement(d, 90.0, 180.0) for d in (20.0, 1.0, 14.25, 16.0, 30.0)]
    hole = Borehole(ReferenceLine.TOP, measurements, _stations())
    stations = {s.depth: s for s in _stations()}
    for plane, station_depth in zip(hole.oriented_measurements, (22.0, 0.0, 16.0, 16.0, 30.0)):
        station = stations[station_depth]
        expected = Orient(station.bearing, station.inclination, 90.0, 180.0).into_plane()
        assert plane == expected


def test_borehole_reference_line_applies_to_all_measurements():
    stations = _stations()
    measurements = [RawMeasurement(1.0, 65.0, 50.0), RawMeasurement(13.0, 40.0, 300.0)]
    bottom = Borehole(ReferenceLine.BOTTOM, measurements, stations)
    top = Borehole(
        ReferenceLine.TOP,
        [RawMeasurement(m.depth, m.alpha, (m.beta + 180.0) % 360.0) for m in measurements],
        stations,
    )
    for b, t in zip(bottom, top):
        assert b.trend == pytest.approx(t.trend)
        assert b.plunge == pytest.approx(t.plunge)
    assert bottom.reference_line is ReferenceLine.BOTTOM


def test_borehole_first_station_not_zero():
    stations = [SurveyStation(5.0, 0.0, -45.0), SurveyStation(10.0, 0.0, -45.0)]
    with pytest.raises(InvalidSurveyDataError):
        Borehole(ReferenceLine.TOP, [RawMeasurement(6.0, 45.0, 10.0)], stations)
    with pytest.raises(InvalidSurveyDataError):
        Borehole(ReferenceLine.TOP, [], stations)


def test_borehole_measurement_beyond_survey():
    measurements = [RawMeasurement(1.0, 45.0, 10.0), RawMeasurement(31.0, 45.0, 10.0)]
    with pytest.raises(DepthOutOfSurveyRangeError) as excinfo:
        Borehole(ReferenceLine.TOP, measurements, _stations())
    assert excinfo.value.depth == 31.0


def test_borehole_is_read_only():
    hole = Borehole(ReferenceLine.TOP, [RawMeasurement(1.0, 90.0, 180.0)], _stations())
    with pytest.raises(AttributeError):
        hole.oriented_measurements = ()
    assert isinstance(hole.stations, tuple)
    assert isinstance(hole.oriented_measurements, tuple)


def test_borehole_to_frame():
    measurements = [RawMeasurement(d, 90.0, 180.0) for d in (20.0, 1.0)]
    hole = Borehole(ReferenceLine.TOP, measurements, _stations())
    df = hole.to_frame()
    assert list(df.columns) == ["strike", "dip", "dip_direction", "trend", "plunge"]
    assert len(df) == 2
    with_depth = hole.to_frame(include_depth=True)
    assert with_depth["depth"].tolist() == [20.0, 1.0]
    assert with_depth["station_depth"].tolist() == [22.0, 0.0]


def test_borehole_from_config_negates_positive_down_inclination():
    config = BoreholeConfig(inclination_positive_down=True)
    stations = [SurveyStation(0.0, 262.7, 55.3), SurveyStation(10.0, 262.7, 55.3)]
    hole = Borehole.from_config(config, [RawMeasurement(2.0, 65.0, 230.0)], stations)
    plane = hole.oriented_measurements[0]
    assert round(plane.pole.trend) == 286
    assert round(plane.pole.plunge) == 36
    assert hole.stations[0].inclination == -55.3


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def test_borehole_config_round_trip():
    config = BoreholeConfig(hole_id="LOU3-001")
    assert config.reference_line is ReferenceLine.TOP
    config.update(reference_line="bottom", metadata={"logger": "core shed"})
    assert config.reference_line is ReferenceLine.BOTTOM
    assert config.to_dict() == {
        "reference_line": "bottom",
        "hole_id": "LOU3-001",
        "inclination_positive_down": False,
        "metadata": {"logger": "core shed"},
    }
