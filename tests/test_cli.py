"""Tests for the adjgraph command line."""
import pytest

from adjgraph.cli import main


GRAPH = """4
A
B
C
D
1 2
2 1
2 3
3 2
3 4
4 3
0 0
"""


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text(GRAPH, encoding="utf-8")
    return path


def test_cli_enumerates(graph_file, capsys):
    assert main([str(graph_file), "-k", "2"]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["1 2", "2 3", "3 4"]
    assert "[k=2] 3 connected subgraphs" in captured.err


def test_cli_path_and_display_all(graph_file, capsys):
    main([str(graph_file), "--path", "1", "9", "--display-all"])
    out = capsys.readouterr().out
    assert out.startswith("Description")
    assert out.rstrip().endswith("DISPLAY ERROR: No path exists")


def test_cli_capacity(graph_file, capsys):
    main([str(graph_file), "-k", "2", "--capacity", "2"])
    assert capsys.readouterr().out.splitlines() == ["1 2"]


def test_cli_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "nope.txt")])
    assert exc.value.code == 2


def test_cli_draw(graph_file, tmp_path, capsys):
    prefix = tmp_path / "out"
    main([str(graph_file), "-k", "3", "--draw", str(prefix), "--limit", "1"])
    assert (tmp_path / "out_graph.png").exists()
    assert (tmp_path / "out_sub0.png").exists()
    assert not (tmp_path / "out_sub1.png").exists()
