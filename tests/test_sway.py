import json
import subprocess
from unittest import mock

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sovview.sway import grid_rows, read_tree, run_swaymsg, workspaces_on_output
from sovview.tree import Workspace


def _done(stdout):
    return subprocess.CompletedProcess(["swaymsg"], 0, stdout=stdout, stderr="")


@mock.patch("sovview.sway.subprocess.run")
def test_run_swaymsg_returns_output(run):
    run.return_value = _done("[]")
    assert run_swaymsg("get_tree") == "[]"
    assert run.call_args.args[0] == ["swaymsg", "-t", "get_tree"]


@mock.patch("sovview.sway.subprocess.run")
def test_run_swaymsg_failure_raises(run):
    run.side_effect = subprocess.CalledProcessError(1, ["swaymsg"])
    with pytest.raises(subprocess.CalledProcessError):
        run_swaymsg("get_workspaces")


@mock.patch("sovview.sway.subprocess.run")
def test_read_tree_combines_both_queries(run):
    listing = [{"type": "workspace", "num": 3, "output": "eDP-1",
                "rect": {"x": 0, "y": 0, "width": 100, "height": 50}}]
    tree = {"nodes": [{"type": "workspace", "num": 3, "nodes": [
        {"name": "Editor", "app_id": "editor",
         "rect": {"x": 5, "y": 6, "width": 40, "height": 30}}]}]}
    run.side_effect = [_done(json.dumps(listing)), _done(json.dumps(tree))]
    (workspace,) = read_tree()
    assert workspace.number == listing[0]["num"]
    assert [w.appid for w in workspace.windows] == ["editor"]
    assert [c.args[0][2] for c in run.call_args_list] == ["get_workspaces", "get_tree"]


def test_workspaces_on_output_filters_in_order():
    spaces = [
        Workspace(number=1, output="a"),
        Workspace(number=2, output="b"),
        Workspace(number=3, output="a"),
    ]
    assert workspaces_on_output(spaces, "a") == [spaces[0], spaces[2]]
    assert workspaces_on_output(spaces, "missing") == []


def test_grid_rows_pinned():
    assert grid_rows(6, 5) == 2
    assert grid_rows(0, 5) == 0


def test_grid_rows_rejects_zero_columns():
    with pytest.raises(ValueError):
        grid_rows(3, 0)


@given(st.integers(min_value=0, max_value=500), st.integers(min_value=1, max_value=50))
def test_grid_rows_fits_exactly(count, columns):
    rows = grid_rows(count, columns)
    assert rows * columns >= count
    assert (rows - 1) * columns < count or rows == 0