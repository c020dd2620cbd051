#!/usr/bin/env python3
"""
DataStore Mixin - Common functionality for file-backed stores.

Provides the shared metadata methods used by the CLI to describe what a
store currently holds.
"""

from abc import abstractmethod
from datetime import datetime
from pathlib import Path


class DataStoreMixin:
    """
    Mixin providing common DataStore functionality.

    Subclasses must implement:
    - exists() -> bool
    - item_count() -> int | None
    - summary_text() -> str

    and set ``self.path`` to the file backing the store.
    """

    path: Path

    @abstractmethod
    def exists(self) -> bool:
        """Check if data exists in storage."""
        ...

    @abstractmethod
    def item_count(self) -> int | None:
        """Get count of items/records in stored data."""
        ...

    @abstractmethod
    def summary_text(self) -> str:
        """Get human-readable summary of current data state."""
        ...

    def last_modified(self) -> datetime | None:
        """Get timestamp of the backing file."""
        if not self.exists():
            return None
        return datetime.fromtimestamp(self.path.stat().st_mtime)

    def size_bytes(self) -> int | None:
        """Get size of the backing file in bytes."""
        if not self.exists():
            return None
        return self.path.stat().st_size

    def age_days(self) -> int | None:
        """
        Get age of data in days since last modification.

        Returns:
            Number of days since last modification, or None if data doesn't exist
        """
        last_mod = self.last_modified()
        if last_mod is None:
            return None
        return (datetime.now() - last_mod).days
