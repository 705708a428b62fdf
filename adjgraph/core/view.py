"""
Minimal read capability shared by every storage backend.
Algorithms are written against this protocol, never against a concrete graph class.
"""
from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class GraphView(Protocol):
    def vertex_count(self) -> int:
        """Number of vertices; valid vertex ids are ``0 .. vertex_count() - 1``."""
        ...

    def neighbors(self, v: int) -> Iterator[tuple[int, Any]]:
        """Yield ``(w, label)`` for every edge ``v -> w``."""
        ...
