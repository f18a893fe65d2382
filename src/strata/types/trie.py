"""Typed structures for the serialized route trie."""

from __future__ import annotations

from typing import TypedDict


class SerializedBinding(TypedDict):
    """One file bound to a route node."""

    key: str
    path: str
    module: str
    ext: str


class SerializedNode(TypedDict):
    """A route node with its bindings and children."""

    route: str
    depth: int
    bindings: list[SerializedBinding]
    children: dict[str, "SerializedNode"]


class SerializedTrie(TypedDict):
    """Versioned envelope stored under the router's cache namespace."""

    version: int
    root: SerializedNode
