"""Filesystem access used by resolvers and module discovery."""

from .filesystem import Filesystem, LocalFilesystem

__all__ = ["Filesystem", "LocalFilesystem"]
