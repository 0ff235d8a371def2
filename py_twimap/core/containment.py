"""Directed containment graph (child -> parent) with cycle-guarded walks."""

from typing import Callable, Dict, Iterable, Iterator, Optional

import structlog

from .models import ContainmentEdge

logger = structlog.get_logger()


class ContainmentGraph:
    """
    Adjacency mapping from each child key to its single parent key.

    Containment data is extracted from prose, so the graph may contain
    cycles, dangling parents and contradicting edges. Walks never loop and
    never raise on bad data.
    """

    def __init__(self, parents: Optional[Dict[str, str]] = None):
        self._parent_of: Dict[str, str] = dict(parents or {})

    @classmethod
    def from_edges(cls, edges: Iterable[ContainmentEdge]) -> "ContainmentGraph":
        """Build the graph; the last edge for a duplicated child wins."""
        parents: Dict[str, str] = {}
        overridden = 0
        for edge in edges:
            if not edge.child or not edge.parent:
                continue
            if edge.child in parents and parents[edge.child] != edge.parent:
                overridden += 1
            parents[edge.child] = edge.parent
        if overridden:
            logger.debug("Conflicting containment edges", overridden=overridden)
        return cls(parents)

    def __len__(self):
        return len(self._parent_of)

    def __contains__(self, key):
        return key in self._parent_of

    def parent_of(self, key: str) -> Optional[str]:
        return self._parent_of.get(key)

    def ancestors(self, key: str, include_self: bool = True) -> Iterator[str]:
        """
        Yield the chain of keys above ``key``.

        Stops when the chain runs out or the moment a key would repeat.

        Args:
            key: Starting key
            include_self: Whether ``key`` itself is yielded first
        """
        visited = set()
        current = key if include_self else self._parent_of.get(key)
        if not include_self:
            visited.add(key)
        while current:
            if current in visited:
                return
            visited.add(current)
            yield current
            current = self._parent_of.get(current)

    def find_ancestor(
        self,
        key: str,
        predicate: Callable[[str], bool],
        include_self: bool = True,
    ) -> Optional[str]:
        """First key on the chain from ``key`` matching ``predicate``, else None."""
        for candidate in self.ancestors(key, include_self=include_self):
            if predicate(candidate):
                return candidate
        return None

    def has_cycle(self, key: str) -> bool:
        """True when walking up from ``key`` revisits a key."""
        visited = set()
        current = key
        while current:
            if current in visited:
                return True
            visited.add(current)
            current = self._parent_of.get(current)
        return False
