"""Host adapters."""

from flowlint.adapters.base import ElementHandle, Host, StyleHandle
from flowlint.adapters.snapshot import SnapshotHost

__all__ = ["Host", "ElementHandle", "StyleHandle", "SnapshotHost"]
