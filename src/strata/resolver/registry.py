"""Registry owning one resolver per reference type.

Modules are registered once with the registry, which hands each resolver
the module's sub directory for that type (``template/``, ``assets/``,
``app/``...) when it exists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Self, TypeAlias

from strata.cache import CacheStore
from strata.constants.discovery import BASE_MODULE_NAME, BASE_MODULE_PRECEDENCE, VENDOR_SCAN_DEPTH
from strata.constants.resolving import DEFAULT_ROUTE_SUFFIX, RESOLVER_KIND_FLAT, RESOLVER_KIND_ROUTER
from strata.exceptions import (
    DuplicateResolverTypeError,
    InvalidPathError,
    PathNotFoundError,
    UnknownModuleError,
    UnknownResolverTypeError,
)
from strata.io import Filesystem, LocalFilesystem
from strata.model import RouteResult, SearchPathEntry
from strata.resolver.flat import FlatResolver
from strata.resolver.router import Router
from strata.utils import join_module_name

Resolver: TypeAlias = FlatResolver | Router


@dataclass
class _ResolverSlot:
    sub_path: str
    resolver: Resolver


class ResolverRegistry:
    """Named resolvers sharing one cache, filesystem, and module list."""

    def __init__(
        self,
        cache: CacheStore | None = None,
        *,
        filesystem: Filesystem | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.cache = cache
        self.filesystem: Filesystem = filesystem or LocalFilesystem()
        self.logger = logger or logging.getLogger(__name__)
        self._slots: dict[str, _ResolverSlot] = {}
        self._modules: dict[str, SearchPathEntry] = {}
        self._authoritative = False

    def add_resolver_type(
        self,
        type_name: str,
        sub_path: str,
        extension: str = "",
        *,
        kind: str = RESOLVER_KIND_FLAT,
        suffix: str = DEFAULT_ROUTE_SUFFIX,
    ) -> Self:
        """Create a resolver for ``type_name`` looking in ``<module>/<sub_path>``.

        ``extension`` is appended to flat references that lack it. ``suffix``
        is the file suffix a router treats as a route file.
        """
        if type_name in self._slots:
            raise DuplicateResolverTypeError(f"Duplicate resolver type: {type_name}")

        resolver: Resolver
        if kind == RESOLVER_KIND_ROUTER:
            resolver = Router(type_name, suffix, cache=self.cache, filesystem=self.filesystem, logger=self.logger)
        elif kind == RESOLVER_KIND_FLAT:
            resolver = FlatResolver(
                type_name, extension, cache=self.cache, filesystem=self.filesystem, logger=self.logger
            )
        else:
            raise ValueError(f"Unknown resolver kind: {kind}")

        resolver.authoritative = self._authoritative
        self._slots[type_name] = _ResolverSlot(sub_path=sub_path, resolver=resolver)
        return self

    def get_resolver(self, type_name: str) -> Resolver:
        return self._slot(type_name).resolver

    def set_resolver(self, type_name: str, resolver: Resolver) -> Self:
        """Replace the resolver of an existing type, attaching the shared cache."""
        slot = self._slot(type_name)
        if self.cache is not None:
            resolver.cache = self.cache
        resolver.authoritative = self._authoritative
        slot.resolver = resolver
        return self

    def get_resolvers(self) -> dict[str, Resolver]:
        return {name: slot.resolver for name, slot in self._slots.items()}

    def resolve(self, type_name: str, reference: str) -> Path | RouteResult | None:
        return self._slot(type_name).resolver.resolve(reference)

    @property
    def authoritative(self) -> bool:
        """Whether resolvers trust cached results without re-checking the disk."""
        return self._authoritative

    @authoritative.setter
    def authoritative(self, value: bool) -> None:
        for slot in self._slots.values():
            slot.resolver.authoritative = value
        self._authoritative = value

    def register_module(self, name: str, root: str | Path, precedence: int) -> Self:
        """Add ``root``'s type sub directories to every resolver that has one."""
        root = Path(root)
        if not self.filesystem.is_dir(root):
            raise PathNotFoundError(f"Path does not exist: {root}")

        found: list[str] = []
        for type_name, slot in self._slots.items():
            type_path = root / slot.sub_path
            if self.filesystem.is_dir(type_path):
                slot.resolver.add_to_search_path(name, type_path, precedence)
                found.append(type_name)

        if not found:
            self.logger.debug("No resolvable items found in module: %s", name)
            return self

        self._modules[name] = SearchPathEntry(module=name, root=root, precedence=precedence)
        self.logger.debug("Registered module %s (%s) for %s", name, root, ", ".join(found))
        return self

    def get_modules(self) -> dict[str, Path]:
        """Return ``{module: root}`` in search order."""
        ordered = sorted(self._modules.values(), key=lambda entry: entry.sort_key)
        return {entry.module: entry.root for entry in ordered}

    def get_module_entries(self) -> list[SearchPathEntry]:
        return sorted(self._modules.values(), key=lambda entry: entry.sort_key)

    def set_precedence(self, module: str, precedence: int) -> Self:
        """Change ``module``'s precedence in every resolver that holds it.

        Resolvers without the module are skipped, so modules added directly
        to a single resolver can be reordered from here too.
        """
        for slot in self._slots.values():
            try:
                slot.resolver.set_precedence(module, precedence)
            except UnknownModuleError:
                continue

        entry = self._modules.get(module)
        if entry is not None:
            self._modules[module] = SearchPathEntry(module=module, root=entry.root, precedence=precedence)
        return self

    def auto_configure_from_vendor(self, vendor_dir: str | Path) -> Self:
        """Register the project root and every ``vendor/<org>/<package>`` directory.

        The project root (the vendor directory's parent) becomes module
        ``base`` with precedence 0. Vendor packages follow in name order with
        precedence 1, 2, ...
        """
        vendor_dir = Path(vendor_dir)
        if not self.filesystem.is_dir(vendor_dir):
            raise InvalidPathError(f"Not a path: {vendor_dir}")

        self.register_module(BASE_MODULE_NAME, vendor_dir.parent, BASE_MODULE_PRECEDENCE)

        modules = self.find_modules(vendor_dir, "", VENDOR_SCAN_DEPTH)
        for precedence, name in enumerate(sorted(modules), start=BASE_MODULE_PRECEDENCE + 1):
            self.register_module(name, modules[name], precedence)

        self.logger.info("Discovered %d vendor modules in %s", len(modules), vendor_dir)
        return self

    def find_modules(self, path: Path, prefix: str, depth: int) -> dict[str, Path]:
        """Map dotted module names to directories ``depth + 1`` levels below ``path``."""
        if not self.filesystem.is_dir(path):
            raise InvalidPathError(f"Not a path: {path}")

        modules: dict[str, Path] = {}
        for entry_name in sorted(self.filesystem.list_entries(path)):
            module_path = path / entry_name
            if not self.filesystem.is_dir(module_path):
                continue

            module_name = join_module_name(prefix, entry_name)
            if depth > 0:
                modules.update(self.find_modules(module_path, module_name, depth - 1))
            else:
                modules[module_name] = module_path
        return modules

    def _slot(self, type_name: str) -> _ResolverSlot:
        slot = self._slots.get(type_name)
        if slot is None:
            raise UnknownResolverTypeError(f"Unknown resolver type: {type_name}")
        return slot

    def __repr__(self) -> str:
        return f"ResolverRegistry(types={list(self._slots)}, modules={len(self._modules)})"
