"""Scenes and the manager that loads, updates and unloads them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional

from platformecs.errors import InvalidSceneNameError, SceneNotRegisterError
from platformecs.sparse_array import Entity


class Scene(ABC):
    """A game scene with a load / update / unload life cycle."""

    @abstractmethod
    def load(self) -> None:
        """Create what the scene needs."""

    @abstractmethod
    def unload(self) -> None:
        """Release what the scene created."""

    @abstractmethod
    def add_entity_to_unload(self, entity: Entity) -> None:
        """Record an entity to be removed when the scene unloads."""

    @abstractmethod
    def update(self) -> None:
        """Advance the scene by one frame."""


class SceneManager:
    """Keeps the registered scenes by name and tracks the one that is loaded."""

    def __init__(self) -> None:
        self._scenes: Dict[str, Scene] = {}
        self._current: Optional[str] = None

    @property
    def current_scene(self) -> Optional[str]:
        """Name of the loaded scene, or None."""
        return self._current

    @property
    def scene_names(self) -> list:
        """Names of the registered scenes, in registration order."""
        return list(self._scenes)

    def register_scene(self, name: str, scene: Scene) -> None:
        """Register a scene under a new, non-empty name."""
        if not name or name in self._scenes:
            raise InvalidSceneNameError()
        self._scenes[name] = scene

    def unregister_scene(self, name: str) -> None:
        """Remove a registered scene; it stops being current if it was."""
        if name not in self._scenes:
            raise SceneNotRegisterError()
        del self._scenes[name]
        if self._current == name:
            self._current = None

    def load_scene(self, name: str) -> None:
        """Make a registered scene current and load it.

        The previously loaded scene is not unloaded.
        """
        scene = self._scenes.get(name)
        if scene is None:
            raise SceneNotRegisterError()
        self._current = name
        scene.load()

    def unload_scene(self) -> None:
        """Unload the current scene, if any."""
        if self._current is None:
            return
        scene = self._scenes[self._current]
        self._current = None
        scene.unload()

    def update_current_scene(self) -> None:
        """Update the current scene, if any."""
        if self._current is not None:
            self._scenes[self._current].update()

    def add_entity_to_current_scene_unload(self, entity: Entity) -> None:
        """Hand an entity to the current scene to be removed when it unloads."""
        if self._current is not None:
            self._scenes[self._current].add_entity_to_unload(entity)