"""Shared infrastructure helpers (locking, logging)."""

from .locks import ReadWriteLock

__all__ = ["ReadWriteLock"]
