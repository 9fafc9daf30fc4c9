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

"""Plotly views of oriented structural measurements.

Both plots take the oriented-plane table produced by
``Borehole.to_frame(include_depth=True)`` or ``data.planes_to_frame``.
The tadpole log keeps depth increasing downward.
"""

import math

import pandas as pd
import plotly.graph_objects as go

from coreorient.datamodel import DEPTH, DIP, DIP_DIRECTION, PLUNGE, TREND


def plot_tadpole_log(df,
    depth_col=DEPTH,
    dip_col=DIP,
    dipdir_col=DIP_DIRECTION,
    tail_scale=0.2,
    color="#0f172a",
    height=400,
    width=220):
    """Plot a tadpole log for oriented planes.

    Each plane renders a circle at its measured depth with a tail pointing
    toward the dip direction. Tail length scales with dip and tail_scale.
    """
    if df.empty or any(col not in df.columns for col in (depth_col, dip_col, dipdir_col)):
        return go.Figure()

    safe = df[[depth_col, dip_col, dipdir_col]].dropna()
    if safe.empty:
        return go.Figure()

    tail_shapes = []
    for depth, dip, dipdir in safe.itertuples(index=False):
        az_rad = math.radians(float(dipdir))
        length = tail_scale * (abs(float(dip)) / 90.0)
        tail_shapes.append(dict(
            type="line",
            x0=0.0, y0=float(depth),
            x1=math.sin(az_rad) * length, y1=float(depth) + math.cos(az_rad) * length,
            line=dict(color=color, width=2),
        ))

    fig = go.Figure(go.Scatter(
        x=[0.0] * len(safe),
        y=safe[depth_col],
        mode="markers",
        marker=dict(size=8, color=color),
        customdata=safe[[dip_col, dipdir_col]].values,
        hovertemplate="Depth: %{y:.2f}<br>Dip: %{customdata[0]:.1f}°<br>Dip dir: %{customdata[1]:.1f}°<extra></extra>",
        showlegend=False,
    ))
    fig.update_layout(
        shapes=tail_shapes,
        height=height,
        width=width,
        margin=dict(l=50, r=10, t=10, b=30),
        plot_bgcolor="#ffffff",
        xaxis=dict(visible=False, range=[-tail_scale * 1.5, tail_scale * 1.5]),
    )
    fig.update_yaxes(autorange="reversed", title_text="Depth (m)", showgrid=True, gridcolor="#e2e8f0")
    return fig


def plot_poles(df, trend_col=TREND, plunge_col=PLUNGE, color="#dc2626", height=400, width=400):
    """Lower-hemisphere polar plot of plane poles.

    Angular position is the pole trend clockwise from North; radius is
    90 - plunge, so vertical poles sit at the centre.
    """
    if df.empty or trend_col not in df.columns or plunge_col not in df.columns:
        return go.Figure()
    safe = df[[trend_col, plunge_col]].apply(pd.to_numeric, errors="coerce").dropna()
    if safe.empty:
        return go.Figure()

    fig = go.Figure(go.Scatterpolar(
        theta=safe[trend_col],
        r=90.0 - safe[plunge_col],
        mode="markers",
        marker=dict(size=7, color=color),
        hovertemplate="Trend: %{theta:.1f}°<br>Plunge: %{customdata:.1f}°<extra></extra>",
        customdata=safe[plunge_col],
        showlegend=False,
    ))
    fig.update_layout(
        height=height,
        width=width,
        polar=dict(
            angularaxis=dict(rotation=90, direction="clockwise"),
            radialaxis=dict(range=[0, 90], showticklabels=False),
        ),
    )
    return fig
