"""Exceptions raised while configuring resolvers.

Failing to find a reference is never an exception: resolvers return ``None``.
Everything here signals a configuration mistake at the call that made it.
"""

from __future__ import annotations

from strata.exceptions.base import StrataError


class PathNotFoundError(StrataError, FileNotFoundError):
    """A search path or module root does not exist or cannot be read."""


class UnknownModuleError(StrataError, LookupError):
    """A module was never added to the resolver being queried.

    The registry catches this when fanning out precedence changes, since not
    every resolver holds every module.
    """


class UnknownResolverTypeError(StrataError, LookupError):
    """No resolver is registered under the requested type name."""


class DuplicateResolverTypeError(StrataError, ValueError):
    """A resolver type name was registered twice."""


class InvalidPathError(StrataError, ValueError):
    """Auto-configuration was pointed at a vendor directory that does not exist."""
