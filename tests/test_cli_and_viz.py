from __future__ import annotations

import pytest

from wugraph import minimum_spanning_tree, random_graph
from wugraph.cli import main
from wugraph.viz import build_plotly_figure, write_plotly_html


def test_figure_has_tree_trace():
    g = random_graph(8, density=0.6, seed=5)
    fig = build_plotly_figure(g, tree=minimum_spanning_tree(g))
    names = [t.name for t in fig.data]
    assert names == ["edges", "spanning tree", "vertices"]
    assert len(fig.data[-1].x) == 8


def test_figure_without_tree_3d():
    g = random_graph(6, density=0.5, seed=1)
    g.add_edge(0, 0, 3)
    fig = build_plotly_figure(g, use_3d=True)
    assert [t.name for t in fig.data] == ["edges", "vertices"]


def test_write_html(tmp_path):
    g = random_graph(5, density=1.0, seed=0)
    out = write_plotly_html(g, out_path=tmp_path / "nested" / "g.html", tree=minimum_spanning_tree(g))
    assert out.exists()
    assert "plotly" in out.read_text(encoding="utf-8").lower()


def test_cli_mst_verify(capsys):
    assert main(["mst", "20", "--density", "0.3", "--seed", "7", "--verify"]) == 0
    out = capsys.readouterr().out
    assert "Graph: vertices=20" in out
    assert "Verified against networkx" in out


def test_cli_reports_disconnected(capsys):
    assert main(["mst", "4", "--density", "0"]) == 0
    out = capsys.readouterr().out
    assert "edges=0" in out
    assert "disconnected" in out


def test_cli_visualize(tmp_path, capsys):
    out_path = tmp_path / "graph.html"
    assert main(["visualize", "6", "--seed", "1", "--out", str(out_path)]) == 0
    assert out_path.exists()
    assert str(out_path) in capsys.readouterr().out


def test_cli_mst_writes_html(tmp_path):
    out_path = tmp_path / "mst.html"
    assert main(["mst", "6", "--seed", "2", "--out", str(out_path), "--3d"]) == 0
    assert out_path.exists()


def test_figure_for_large_graph():
    g = random_graph(500, density=0.005, seed=0)
    fig = build_plotly_figure(g, tree=minimum_spanning_tree(g))
    assert len(fig.data[-1].x) == 500


def test_cli_rejects_unknown_log_level():
    with pytest.raises(SystemExit) as exc:
        main(["--log-level", "verbose", "mst", "3"])
    assert exc.value.code == 2


def test_cli_rejects_unknown_log_level_from_env(monkeypatch):
    monkeypatch.setenv("WUGRAPH_LOG_LEVEL", "verbose")
    with pytest.raises(SystemExit) as exc:
        main(["mst", "3"])
    assert exc.value.code == 2


def test_cli_log_level_from_env(monkeypatch, capsys):
    monkeypatch.setenv("WUGRAPH_LOG_LEVEL", "debug")
    assert main(["mst", "5", "--seed", "1"]) == 0
    assert "Graph: vertices=5" in capsys.readouterr().out


def test_cli_log_level_flag_is_case_insensitive(capsys):
    assert main(["--log-level", "info", "mst", "4", "--seed", "3"]) == 0
    assert "Spanning forest" in capsys.readouterr().out
