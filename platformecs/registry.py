"""Entity component registry: entities, component storage and systems."""

from __future__ import annotations

import bisect
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from platformecs.errors import (
    ComponentNotRegisterError,
    InvalidEntityIdError,
    TooMuchEntitiesError,
)
from platformecs.sparse_array import Entity, SparseArray

T = TypeVar("T")


class Registry:
    """Owns the entities, one sparse array per component type, and the systems."""

    def __init__(self, max_entities: int = 1024) -> None:
        self._max_entities = max_entities
        self._entity_count = 0
        self._containers: Dict[type, SparseArray[Any]] = {}
        self._systems: List[Callable[[], None]] = []
        self._empty_indexes: List[int] = []

    @property
    def max_entities(self) -> int:
        """Maximum number of entities at once."""
        return self._max_entities

    @property
    def entity_count(self) -> int:
        """Number of entity slots handed out so far, dead ones included."""
        return self._entity_count

    @property
    def free_ids(self) -> List[int]:
        """Sorted ids of killed or skipped entities, available for reuse."""
        return list(self._empty_indexes)

    def register_component(self, component_type: Type[T]) -> SparseArray[T]:
        """Register a component type and return its array.

        Registering an already registered type keeps the existing array.
        """
        array = self._containers.get(component_type)
        if array is None:
            array = SparseArray(component_type)
            self._containers[component_type] = array
        array.resize(self._max_entities)
        return array

    def get_component(self, component_type: Type[T]) -> SparseArray[T]:
        """Return the array of a registered component type."""
        try:
            return self._containers[component_type]
        except KeyError:
            raise ComponentNotRegisterError() from None

    def is_component_registered(self, component_type: type) -> bool:
        """Tell whether a component type has been registered."""
        return component_type in self._containers

    def spawn_entity(self, entity_id: Optional[int] = None) -> Entity:
        """Create an entity, reusing a freed id first, or with the given id."""
        if entity_id is None:
            return self._spawn_next()
        return self._spawn_with_id(int(entity_id))

    def _spawn_next(self) -> Entity:
        if self._empty_indexes:
            return Entity(self._empty_indexes.pop(0))
        if self._entity_count > self._max_entities:
            raise TooMuchEntitiesError()
        entity_id = self._entity_count
        self._entity_count += 1
        return Entity(entity_id)

    def _spawn_with_id(self, entity_id: int) -> Entity:
        if entity_id < 0 or entity_id > self._max_entities:
            raise InvalidEntityIdError()
        if self._empty_indexes:
            position = bisect.bisect_left(self._empty_indexes, entity_id)
            if position != len(self._empty_indexes):
                del self._empty_indexes[position]
            return Entity(entity_id)
        if entity_id < self._entity_count:
            raise InvalidEntityIdError()
        self._empty_indexes.extend(range(self._entity_count, entity_id))
        self._empty_indexes.sort()
        self._entity_count = entity_id + 1
        return Entity(entity_id)

    def get_entity_by_id(self, entity_id: int) -> Entity:
        """Return the entity with this id, raising if it is not alive."""
        entity_id = int(entity_id)
        if entity_id < 0 or entity_id > self._entity_count or entity_id > self._max_entities:
            raise InvalidEntityIdError()
        position = bisect.bisect_left(self._empty_indexes, entity_id)
        if position < len(self._empty_indexes) and self._empty_indexes[position] == entity_id:
            raise InvalidEntityIdError()
        return Entity(entity_id)

    def kill_entity(self, entity: int) -> None:
        """Free the entity's id and remove all of its components."""
        bisect.insort(self._empty_indexes, int(entity))
        for array in self._containers.values():
            array.erase(entity)

    def add_component(self, entity: int, component: T) -> T:
        """Attach a component to an entity; the array is chosen by the component's type."""
        return self.get_component(type(component)).insert_at(entity, component)

    def emplace_component(self, component_type: Type[T], entity: int, *args: int) -> T:
        """Create default components of a type on one or more entities."""
        return self.get_component(component_type).emplace_at(entity, *args)

    def remove_component(self, component_type: type, entity: int) -> None:
        """Remove the component of a type from an entity."""
        self.get_component(component_type).erase(entity)

    def add_system(self, system: Callable[..., Any], *args: type) -> None:
        """Add a system called with the arrays of the given component types."""
        component_types = args

        def run() -> None:
            system(*(self.get_component(kind) for kind in component_types))

        self._systems.append(run)

    def run_systems(self) -> None:
        """Run every system in the order it was added."""
        for system in self._systems:
            system()