from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

from ..graph import Vertex, WUGraph

_EDGE_COLOR = "rgba(160,160,160,0.5)"
_TREE_COLOR = "#d62728"  # red
_VERTEX_COLOR = "#1f77b4"  # blue
_ISOLATED_COLOR = "#cccccc"


def _layout(graph: WUGraph, *, use_3d: bool, seed: int) -> Dict[Vertex, Tuple[float, float, float]]:
    import networkx as nx

    raw = nx.spring_layout(graph.to_networkx(), dim=3 if use_3d else 2, seed=seed)
    pos: Dict[Vertex, Tuple[float, float, float]] = {}
    for v, p in raw.items():
        z = float(p[2]) if use_3d else 0.0
        pos[v] = (float(p[0]), float(p[1]), z)
    return pos


def build_plotly_figure(
    graph: WUGraph,
    *,
    tree: Optional[WUGraph] = None,
    title: str = "WUGraph",
    use_3d: bool = False,
    seed: int = 0,
):
    import plotly.graph_objects as go

    pos = _layout(graph, use_3d=use_3d, seed=seed)

    # Base edges (light). Self-edges have no visible segment.
    ex, ey, ez = [], [], []
    for u, v, _w in graph.edges():
        if u == v:
            continue
        pu, pv = pos[u], pos[v]
        ex += [pu[0], pv[0], None]
        ey += [pu[1], pv[1], None]
        ez += [pu[2], pv[2], None]

    # Tree edges (thick)
    tx, ty, tz, ttext = [], [], [], []
    if tree is not None:
        for u, v, w in tree.edges():
            pu, pv = pos[u], pos[v]
            tx += [pu[0], pv[0], None]
            ty += [pu[1], pv[1], None]
            tz += [pu[2], pv[2], None]
            ttext += [f"{u!r}-{v!r}: {w}"] * 3

    # Vertices
    vx, vy, vz, vtext, vcolor = [], [], [], [], []
    for v in graph.get_vertices():
        p = pos[v]
        vx.append(p[0])
        vy.append(p[1])
        vz.append(p[2])
        degree = graph.degree(v)
        vtext.append(f"vertex={v!r}<br>degree={degree}")
        vcolor.append(_VERTEX_COLOR if degree else _ISOLATED_COLOR)

    if use_3d:
        traces = [
            go.Scatter3d(x=ex, y=ey, z=ez, mode="lines", line=dict(width=2, color=_EDGE_COLOR), hoverinfo="none", name="edges"),
        ]
        if tree is not None:
            traces.append(
                go.Scatter3d(x=tx, y=ty, z=tz, mode="lines", line=dict(width=8, color=_TREE_COLOR), text=ttext, hoverinfo="text", name="spanning tree")
            )
        traces.append(
            go.Scatter3d(
                x=vx,
                y=vy,
                z=vz,
                mode="markers",
                marker=dict(size=7, color=vcolor, line=dict(width=0)),
                text=vtext,
                hoverinfo="text",
                name="vertices",
            )
        )
        fig = go.Figure(data=traces)
        fig.update_layout(
            title=title,
            scene=dict(
                xaxis=dict(visible=False),
                yaxis=dict(visible=False),
                zaxis=dict(visible=False),
            ),
            margin=dict(l=0, r=0, t=40, b=0),
        )
    else:
        traces = [
            go.Scatter(x=ex, y=ey, mode="lines", line=dict(width=1, color=_EDGE_COLOR), hoverinfo="none", name="edges"),
        ]
        if tree is not None:
            traces.append(
                go.Scatter(x=tx, y=ty, mode="lines", line=dict(width=4, color=_TREE_COLOR), text=ttext, hoverinfo="text", name="spanning tree")
            )
        traces.append(
            go.Scatter(
                x=vx,
                y=vy,
                mode="markers",
                marker=dict(size=10, color=vcolor, line=dict(width=0)),
                text=vtext,
                hoverinfo="text",
                name="vertices",
            )
        )
        fig = go.Figure(data=traces)
        fig.update_layout(
            title=title,
            xaxis=dict(visible=False),
            yaxis=dict(visible=False, scaleanchor="x", scaleratio=1),
            margin=dict(l=0, r=0, t=40, b=0),
        )

    return fig


def write_plotly_html(
    graph: WUGraph,
    *,
    out_path: str | Path,
    tree: Optional[WUGraph] = None,
    title: str = "WUGraph",
    use_3d: bool = False,
) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig = build_plotly_figure(graph, tree=tree, title=title, use_3d=use_3d)
    fig.write_html(str(out_path), include_plotlyjs="cdn", full_html=True)
    return out_path
