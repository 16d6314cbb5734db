"""Helpers for building and normalizing file system paths."""

from __future__ import annotations

import os


def _home():
    return os.environ.get("HOME", "")


def append(root, component):
    """Join component to root with exactly one separating slash from root."""
    if root.endswith("/"):
        return f"{root}{component}"
    return f"{root}/{component}"


def remove_last_component(path):
    """Return path up to and including the slash before its last component.

    The first character is never considered a separator; a path shorter than
    two characters gives "/", and one without such a slash gives "".
    """
    if len(path) < 2:
        return "/"
    cut = path.rfind("/", 1, len(path) - 1)
    if cut == -1:
        return ""
    return path[: cut + 1]


def extension(path):
    """Return the text after the last dot, or "" when there is none."""
    dot = path.rfind(".")
    if dot == -1:
        return ""
    return path[dot + 1 :]


def filename(path):
    """Return the last component without its extension."""
    dot = path.rfind(".")
    end = dot if dot != -1 else len(path)
    start = path.rfind("/") + 1
    return path[start:end]


def normalize(path, execpath):
    """Expand a leading tilde, anchor relative paths at execpath, drop one trailing slash."""
    if path.startswith("~"):
        result = f"{_home()}{path[1:]}"
    elif not path.startswith("/"):
        result = f"{execpath}/{path}"
    else:
        result = path
    if result.endswith("/"):
        result = result[:-1]
    return result


def normalize_tokens(path):
    """Resolve ".", ".." and "~" components and rebuild an absolute path."""
    parts = []
    for token in (part for part in path.split("/") if part):
        if token.startswith("~"):
            parts.append(_home())
        elif token == "..":
            if parts:
                parts.pop()
        elif token != ".":
            parts.append(token)
    if not parts:
        return "/"
    return "".join(f"/{part}" for part in parts)