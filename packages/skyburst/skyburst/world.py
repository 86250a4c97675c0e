"""World - entity and component storage with queries."""

from __future__ import annotations

from typing import Any, Generator

from skyburst.types import DeadEntityError, EntityId


class World:
    def __init__(self) -> None:
        self._components: dict[type, dict[int, Any]] = {}
        self._next_id: int = 0
        self._alive: set[int] = set()

    def spawn(self) -> EntityId:
        eid = self._next_id
        self._next_id += 1
        self._alive.add(eid)
        return eid

    def despawn(self, entity_id: EntityId) -> None:
        self._alive.discard(entity_id)
        for store in self._components.values():
            store.pop(entity_id, None)

    def attach(self, entity_id: EntityId, component: Any) -> None:
        ctype = type(component)
        if entity_id not in self._alive:
            raise DeadEntityError(
                entity_id,
                f"Cannot attach {ctype.__name__} to dead entity {entity_id}",
            )
        self._components.setdefault(ctype, {})[entity_id] = component

    def query(
        self, *ctypes: type
    ) -> Generator[tuple[EntityId, tuple[Any, ...]], None, None]:
        """Yield ``(eid, components)`` for entities holding every type, in spawn order."""
        if not ctypes:
            return
        base_store = self._components.get(ctypes[0])
        if base_store is None:
            return
        for eid in list(base_store):
            if eid not in self._alive:
                continue
            components: list[Any] = []
            for ctype in ctypes:
                store = self._components.get(ctype)
                if store is None or eid not in store:
                    break
                components.append(store[eid])
            else:
                yield eid, tuple(components)

    def count(self) -> int:
        return len(self._alive)
