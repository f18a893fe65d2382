"""Route trie built from the route files of every module on a search path.

Each node stands for one request path segment and may bind one file per
extension slot. Files are bound in search-path order and the first file to
claim a slot keeps it, which is how higher-precedence modules win.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from strata.constants.resolving import DEFAULT_EXTENSION_KEY, INDEX_STEM, ROUTE_ROOT, TRIE_FORMAT_VERSION
from strata.io import Filesystem
from strata.model import AppBinding, RouteResult, SearchPathEntry
from strata.resolver.listing import list_route_files
from strata.types import SerializedBinding, SerializedNode, SerializedTrie

logger = logging.getLogger(__name__)


class RouteNode:
    """A trie node: bindings for this route plus child nodes per segment."""

    def __init__(self, route: str = ROUTE_ROOT, depth: int = 0) -> None:
        self.route = route
        self.depth = depth
        self.bindings: dict[str, AppBinding] = {}
        self.children: dict[str, RouteNode] = {}

    def child(self, segment: str) -> RouteNode:
        """Return the child for ``segment``, creating it when missing."""
        node = self.children.get(segment)
        if node is None:
            route = f"/{segment}" if self.route == ROUTE_ROOT else f"{self.route}/{segment}"
            node = RouteNode(route, self.depth + 1)
            self.children[segment] = node
        return node

    def bind(self, path: Path, ext: str, module: str) -> bool:
        """Bind ``path`` under ``ext`` unless that slot is taken. Returns whether it was bound."""
        key = ext or DEFAULT_EXTENSION_KEY
        if key in self.bindings:
            return False
        self.bindings[key] = AppBinding(path=path, module=module, route=self.route, ext=ext, depth=self.depth)
        return True

    def match(self, segments: Iterable[str], ext: str) -> RouteResult | None:
        """Match request segments, returning the binding and the unmatched remainder.

        A segment that names a child always descends into it, even when
        nothing deeper matches; there is no fallback to shallower bindings.
        When no child matches, the segment stays in the remainder unless it
        is ``index``. ``ext`` is stripped from a segment before looking up
        children.
        """
        node = self
        parts = list(segments)
        while True:
            part = parts.pop(0) if parts else ""
            key = part[: -len(ext)] if ext and part.endswith(ext) else part
            child = node.children.get(key) if part else None
            if child is None:
                if part and key != INDEX_STEM:
                    parts.insert(0, part)
                break
            node = child

        binding = node.bindings.get(ext) if ext else None
        if binding is None:
            binding = node.bindings.get(DEFAULT_EXTENSION_KEY)

        result_ext: str | None
        if binding is not None:
            result_ext = ext or binding.ext
        elif not ext and node.bindings:
            binding = next(iter(node.bindings.values()))
            result_ext = None
        else:
            return None

        return RouteResult(
            path=binding.path,
            module=binding.module,
            route=binding.route,
            ext=result_ext,
            depth=binding.depth,
            remainder=tuple(parts),
        )

    def __repr__(self) -> str:
        return f"RouteNode({self.route!r}, bindings={len(self.bindings)}, children={len(self.children)})"


def build_trie(
    entries: Iterable[SearchPathEntry],
    fs: Filesystem,
    suffix: str,
    *,
    logger: logging.Logger | None = None,
) -> RouteNode:
    """Scan every module root in search order and bind its route files."""
    log = logger if logger is not None else logging.getLogger(__name__)
    index_name = INDEX_STEM + suffix
    root = RouteNode()
    for entry in entries:
        bound = 0
        for path in list_route_files(fs, entry.root, suffix, index_name):
            if _bind_file(root, path, entry, suffix, index_name):
                bound += 1
        log.debug("Bound %d route files from module %s (%s)", bound, entry.module, entry.root)
    return root


def _bind_file(root: RouteNode, path: Path, entry: SearchPathEntry, suffix: str, index_name: str) -> bool:
    *dirs, filename = path.relative_to(entry.root).parts
    node = root
    for segment in dirs:
        node = node.child(segment)

    if filename == index_name:
        return node.bind(path, "", entry.module)

    name = filename[: -len(suffix)]
    if not name:
        return False

    ext = ""
    ext_pos = name.rfind(".")
    if ext_pos > 0:
        name, ext = name[:ext_pos], name[ext_pos:]
    return node.child(name).bind(path, ext, entry.module)


def iter_bindings(node: RouteNode) -> Iterator[AppBinding]:
    """Yield every binding depth-first, parents before children."""
    yield from node.bindings.values()
    for child in node.children.values():
        yield from iter_bindings(child)


def serialize_trie(root: RouteNode) -> SerializedTrie:
    """Encode the trie as a versioned JSON-compatible document."""
    return {"version": TRIE_FORMAT_VERSION, "root": _serialize_node(root)}


def deserialize_trie(payload: object) -> RouteNode | None:
    """Decode :func:`serialize_trie` output; malformed or foreign payloads give ``None``."""
    if not isinstance(payload, dict) or payload.get("version") != TRIE_FORMAT_VERSION:
        return None
    try:
        return _deserialize_node(payload.get("root"))
    except (KeyError, TypeError, ValueError) as exc:
        logger.debug("Discarding malformed cached route trie: %s", exc)
        return None


def _serialize_node(node: RouteNode) -> SerializedNode:
    bindings: list[SerializedBinding] = [
        {"key": key, "path": str(binding.path), "module": binding.module, "ext": binding.ext}
        for key, binding in node.bindings.items()
    ]
    return {
        "route": node.route,
        "depth": node.depth,
        "bindings": bindings,
        "children": {segment: _serialize_node(child) for segment, child in node.children.items()},
    }


def _deserialize_node(raw: object) -> RouteNode:
    if not isinstance(raw, dict):
        raise TypeError("route node must be a mapping")

    route = raw["route"]
    depth = raw["depth"]
    if not isinstance(route, str) or isinstance(depth, bool) or not isinstance(depth, int):
        raise ValueError("route node has an invalid route or depth")

    node = RouteNode(route, depth)
    for item in raw["bindings"]:
        key, path, module, ext = item["key"], item["path"], item["module"], item["ext"]
        if not all(isinstance(value, str) for value in (key, path, module, ext)):
            raise ValueError(f"invalid binding in route {route}")
        node.bindings[key] = AppBinding(path=Path(path), module=module, route=route, ext=ext, depth=depth)

    children = raw["children"]
    if not isinstance(children, dict):
        raise TypeError("route children must be a mapping")
    for segment, child in children.items():
        node.children[segment] = _deserialize_node(child)
    return node
