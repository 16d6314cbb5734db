"""Read workspaces and their windows from the compositor's JSON output."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field

from . import log
from .jsonpaths import flatten
from .paths import remove_last_component

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Window:
    """A window's rectangle relative to its workspace, title and application id."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    title: str | None = None
    appid: str | None = None


@dataclass
class Workspace:
    """A workspace with its rectangle, number, focus, output and windows."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    number: int = 0
    focused: bool = False
    output: str | None = None
    windows: list[Window] = field(default_factory=list)


def _atoi(text):
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def lookup(pairs, position, path):
    """Value for path, searching forward from position first, then backward.

    Returns None when no pair has that path.
    """
    for key, value in pairs[position:]:
        if key == path:
            return value
    for key, value in reversed(pairs[: position + 1]):
        if key == path:
            return value
    return None


def _fields(pairs, position, base, names):
    return {name: lookup(pairs, position, base + name) for name in names}


def _read_workspaces(pairs):
    workspaces = []
    for index, (key, value) in enumerate(pairs):
        if "/type" not in key or value != "workspace":
            continue
        found = _fields(
            pairs,
            index,
            remove_last_component(key),
            ("rect/x", "rect/y", "rect/width", "rect/height", "output", "num", "focused"),
        )
        workspace = Workspace()
        if found["rect/x"] is not None:
            workspace.x = _atoi(found["rect/x"])
        if found["rect/y"] is not None:
            workspace.y = _atoi(found["rect/y"])
        if found["rect/width"] is not None:
            workspace.width = _atoi(found["rect/width"])
        if found["rect/height"] is not None:
            workspace.height = _atoi(found["rect/height"])
        if found["focused"] is not None:
            workspace.focused = found["focused"] == "true"
        if found["num"] is not None:
            workspace.number = _atoi(found["num"])
        if found["output"] is not None:
            workspace.output = found["output"]
        workspaces.append(workspace)
        log.debug(
            os.path.basename(__file__),
            sys._getframe().f_lineno,
            "Found workspace, num : %d output : %s",
            workspace.number,
            workspace.output,
        )
    return workspaces


def _assign_windows(pairs, workspaces):
    current = 0
    for index, (key, value) in enumerate(pairs):
        if "type" in key and value == "workspace":
            number = lookup(pairs, index, remove_last_component(key) + "num")
            if number is not None:
                current = _atoi(number)

        if "app_id" not in key or current <= -1:
            continue

        found = _fields(
            pairs,
            index,
            remove_last_component(key),
            ("name", "app_id", "rect/x", "rect/y", "rect/width", "rect/height"),
        )
        x = _atoi(found["rect/x"]) if found["rect/x"] is not None else 0
        y = _atoi(found["rect/y"]) if found["rect/y"] is not None else 0
        width = _atoi(found["rect/width"]) if found["rect/width"] is not None else 0
        height = _atoi(found["rect/height"]) if found["rect/height"] is not None else 0
        log.debug(
            os.path.basename(__file__),
            sys._getframe().f_lineno,
            "Found window, appid %s title %s %d %d %d %d",
            found["app_id"],
            found["name"],
            x,
            y,
            width,
            height,
        )
        for workspace in workspaces:
            if workspace.number == current:
                x -= workspace.x
                y -= workspace.y
                workspace.windows.append(
                    Window(x, y, width, height, found["name"], found["app_id"])
                )


def extract(workspaces_json, tree_json):
    """Build workspaces from the workspace listing and fill in windows from the tree.

    Objects of type "workspace" in workspaces_json describe the workspaces;
    windows in tree_json are placed on the workspace whose number encloses them.
    """
    workspaces = _read_workspaces(flatten(workspaces_json))
    _assign_windows(flatten(tree_json), workspaces)
    return workspaces