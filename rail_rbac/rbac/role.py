"""
Role node of the role hierarchy.

A role is a named principal (user or group, the graph does not distinguish
them) holding an ordered list of direct roles it inherits from.
"""

from __future__ import annotations

import threading
from typing import Optional


class Role:
    """
    A single node in the role graph.

    Edges are references to peer ``Role`` objects owned by the same manager.
    Each node guards its edge list with its own lock; the name is immutable,
    so it can be read from any thread without locking.
    """

    __slots__ = ("name", "separator", "_roles", "_lock")

    def __init__(self, name: str, separator: str = "::"):
        self.name = name
        self.separator = separator
        self._roles: list[Role] = []
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"Role({self.name!r})"

    @property
    def domain(self) -> Optional[str]:
        """Domain part of a domain-scoped name, ``None`` for global roles."""
        if self.separator not in self.name:
            return None
        return self.name.split(self.separator, 1)[0]

    @property
    def local_name(self) -> str:
        """Name without its domain prefix."""
        if self.separator not in self.name:
            return self.name
        return self.name.split(self.separator, 1)[1]

    def _snapshot(self) -> list[Role]:
        with self._lock:
            return list(self._roles)

    def add_role(self, other: Role) -> None:
        """Add a direct edge to ``other`` unless one with the same name exists."""
        with self._lock:
            if any(role.name == other.name for role in self._roles):
                return
            self._roles.append(other)

    def delete_role(self, other: Role) -> None:
        """Drop every direct edge whose target is named like ``other``."""
        with self._lock:
            self._roles = [role for role in self._roles if role.name != other.name]

    def has_role(self, name: str, hierarchy_level: int) -> bool:
        """
        Depth-first search for ``name`` following at most ``hierarchy_level`` edges.

        The budget bounds traversal, so cycles terminate without a visited set.
        """
        if self.name == name:
            return True
        if hierarchy_level <= 0:
            return False
        for role in self._snapshot():
            if role.has_role(name, hierarchy_level - 1):
                return True
        return False

    def get_roles(self) -> list[str]:
        """Names of the direct roles, in insertion order."""
        return [role.name for role in self._snapshot()]

    def has_direct_role(self, name: str) -> bool:
        return any(role.name == name for role in self._snapshot())


__all__ = ["Role"]
