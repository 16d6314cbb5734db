"""Querying the compositor and arranging workspaces for the overview."""

from __future__ import annotations

import subprocess

from .tree import extract


def run_swaymsg(kind):
    """Run ``swaymsg -t kind`` and return its standard output.

    Raises CalledProcessError when the command fails.
    """
    completed = subprocess.run(
        ["swaymsg", "-t", kind],
        capture_output=True,
        text=True,
        check=True,
    )
    return completed.stdout


def read_tree():
    """Ask the compositor for workspaces and the window tree and combine them."""
    workspaces_json = '{"items":' + run_swaymsg("get_workspaces") + "}"
    tree_json = run_swaymsg("get_tree")
    return extract(workspaces_json, tree_json)


def workspaces_on_output(workspaces, output):
    """Workspaces shown on the named output, in their original order."""
    return [workspace for workspace in workspaces if workspace.output == output]


def grid_rows(count, columns):
    """Number of rows needed to lay out count thumbnails in columns."""
    if columns <= 0:
        raise ValueError("columns must be positive")
    return -(-count // columns)