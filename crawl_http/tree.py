"""
crawl_http.tree
================
Result tree produced by a crawl.

A crawl returns a :class:`Directory` whose ``name`` is ``None``; its
``items`` hold :class:`Directory` and :class:`File` nodes in the order the
links were found.  ``to_dict()`` gives the playlist-style record format::

    {"items": [
        {"name": "b", "items": [...]},
        {"name": "c.mp3", "downloaderArg": "http://host/a/c.mp3"}
    ]}
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class File:
    name: str
    reference: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "downloaderArg": self.reference}

    def iter_files(self):
        yield self


@dataclass
class Directory:
    name: "str | None" = None
    items: "list[TreeNode]" = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.name is not None:
            out["name"] = self.name
        out["items"] = [item.to_dict() for item in self.items]
        return out

    def iter_files(self):
        """Yield every :class:`File` below this directory, depth first."""
        for item in self.items:
            yield from item.iter_files()

    def count(self) -> tuple[int, int]:
        """Return ``(directories, files)`` below this node."""
        dirs = files = 0
        for item in self.items:
            if isinstance(item, Directory):
                sub_dirs, sub_files = item.count()
                dirs += 1 + sub_dirs
                files += sub_files
            else:
                files += 1
        return dirs, files


TreeNode = Union[Directory, File]


def from_dict(data: dict[str, Any]) -> TreeNode:
    """Rebuild a node from the output of ``to_dict()``."""
    if "items" in data:
        return Directory(
            name=data.get("name"),
            items=[from_dict(item) for item in data["items"]],
        )
    return File(name=data["name"], reference=data["downloaderArg"])


def dumps(tree: TreeNode, indent: int = 2) -> str:
    """Serialise *tree* to JSON."""
    return json.dumps(tree.to_dict(), indent=indent, ensure_ascii=False)
