"""Storage layer: abstract interface and implementations."""

from .base import StorageProtocol
from .local_fs import LocalFileSystem

__all__ = ["StorageProtocol", "LocalFileSystem"]
