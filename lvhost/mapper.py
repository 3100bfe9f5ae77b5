"""Thread-safe URI to URID mapping."""

from __future__ import annotations

import threading

from .symap import Symap


class Mapper:
    """Map URIs to integer URIDs and back, safe to share between threads."""

    def __init__(self) -> None:
        self._symap = Symap()
        self._lock = threading.Lock()

    def map_uri(self, uri: str) -> int:
        """Return the URID for `uri`, assigning a new one if necessary."""
        with self._lock:
            return self._symap.map(uri)

    def unmap_uri(self, urid: int) -> str | None:
        """Return the URI for `urid`, or None if it is not mapped."""
        with self._lock:
            return self._symap.unmap(urid)