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

"""Typer-based CLI for orienting core measurements."""

from pathlib import Path
from typing import Optional

import typer

from coreorient.drill import data
from coreorient.drill.model import Borehole, BoreholeConfig
from coreorient.drill.structural import Plane, ReferenceLine
from coreorient.drill.validate import CoreOrientError
from coreorient.log import logger, set_debug_mode

app = typer.Typer(name="coreorient", help="Orient alpha/beta core measurements into planes")


def _reference_line(bottom: bool) -> ReferenceLine:
    return ReferenceLine.BOTTOM if bottom else ReferenceLine.TOP


def _fail(exc: Exception) -> None:
    logger.debug("Command failed", exc_info=True)
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")) -> None:
    set_debug_mode(debug)


@app.command()
def borehole(
    surveys: Path = typer.Option(..., "--surveys", help="CSV with depth,bearing,inclination"),
    measurements: Path = typer.Option(..., "--measurements", help="CSV with depth,alpha,beta"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="CSV path for oriented planes"),
    bottom: bool = typer.Option(False, "--bottom", help="Reference line is on the bottom of the core"),
    positive_down: bool = typer.Option(False, "--positive-down", help="Survey inclinations are positive downward"),
) -> None:
    """Orient every measurement against its nearest survey station."""

    config = BoreholeConfig(reference_line=_reference_line(bottom), inclination_positive_down=positive_down)
    try:
        stations = data.surveys_to_stations(data.load_surveys(surveys))
        raw = data.measurements_to_records(data.load_measurements(measurements))
        hole = Borehole.from_config(config, raw, stations)
    except (ValueError, OSError) as exc:
        _fail(exc)

    table = hole.to_frame()
    typer.echo(table.to_string(index=False))
    if output is None:
        typer.echo("No output file specified. Use --output to write a CSV.")
        return
    data.write_planes(table, output)
    typer.echo(f"Output written to: {output}")


@app.command("orient-one")
def orient_one(
    bearing: float = typer.Option(..., help="Borehole bearing, degrees clockwise from North"),
    inclination: float = typer.Option(..., help="Borehole inclination, degrees, positive downward"),
    alpha: float = typer.Option(..., help="Alpha core angle [0, 90]"),
    beta: float = typer.Option(..., help="Beta core angle [0, 360]"),
    bottom: bool = typer.Option(False, "--bottom", help="Reference line is on the bottom of the core"),
) -> None:
    """Orient a single alpha/beta measurement."""

    try:
        plane = Plane.alpha_beta(bearing, -inclination, alpha, beta, _reference_line(bottom))
    except CoreOrientError as exc:
        _fail(exc)

    for key, value in plane.to_dict().items():
        typer.echo(f"{key}: {value:.1f}")


if __name__ == "__main__":  # pragma: no cover - CLI entry
    app()
