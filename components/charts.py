"""Plotly chart builders for the classroom map."""

import plotly.graph_objects as go
from typing import Dict, List

from models.group import Group
from models.assignment import AllocationResult
from engine.topology import SeatTopology
from components.colors import group_color
from config.defaults import COURSE_LABELS, EMPTY_SEAT_COLOR, FAMILY_OUTLINE_COLORS


def classroom_map(
    topology: SeatTopology,
    groups: List[Group],
    result: AllocationResult = None,
    title: str = "Classroom",
) -> go.Figure:
    """Seat map: fill colour = mentor group, outline = desk family, dashed ring = floor seat."""
    labels: Dict[str, str] = {g.group_id: g.label for g in groups}
    seat_map = result.seat_map() if result else {}

    xs, ys, fills, outlines, symbols, texts, hovers = [], [], [], [], [], [], []
    for seat in topology.seats:
        x, y = seat.position
        xs.append(x)
        ys.append(100 - y)  # positions are measured from the top
        outlines.append(FAMILY_OUTLINE_COLORS[seat.family.value])
        symbols.append("square" if seat.family.value == "robot" else "circle")

        a = seat_map.get(seat.seat_id)
        if a:
            fills.append(group_color(a.group_id))
            texts.append(f"{seat.seat_id}<br>{COURSE_LABELS[a.course.value][0]}")
            hovers.append(
                f"Seat {seat.seat_id}<br>{labels.get(a.group_id, a.group_id)}"
                f"<br>{COURSE_LABELS[a.course.value]}"
            )
        else:
            fills.append(EMPTY_SEAT_COLOR)
            texts.append(seat.seat_id)
            tier = f" ({seat.tier.value})" if seat.tier else ""
            hovers.append(f"Seat {seat.seat_id}<br>{seat.family.value}{tier}<br>free")

    fig = go.Figure(data=[go.Scatter(
        x=xs, y=ys,
        mode="markers+text",
        text=texts,
        textposition="middle center",
        hovertext=hovers,
        hoverinfo="text",
        marker=dict(
            size=44,
            color=fills,
            symbol=symbols,
            line=dict(color=outlines, width=3),
        ),
    )])

    for seat_id in topology.overflow_seat_ids:
        x, y = topology.seat(seat_id).position
        fig.add_shape(
            type="circle",
            x0=x - 5, x1=x + 5, y0=100 - y - 5, y1=100 - y + 5,
            line=dict(color="#999999", dash="dot"),
        )

    fig.update_layout(
        title=title,
        height=620,
        showlegend=False,
        xaxis=dict(range=[0, 100], visible=False),
        yaxis=dict(range=[0, 100], visible=False, scaleanchor="x"),
        plot_bgcolor="#FFFFFF",
        margin=dict(l=10, r=10, t=40, b=10),
    )
    return fig
