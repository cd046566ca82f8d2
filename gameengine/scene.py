"""Scenes, scene factories and the manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class BaseScene(ABC):
    """A game scene with a lifecycle driven by a SceneManager."""

    scene_manager: Optional["SceneManager"] = None

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the scene when it becomes active."""

    @abstractmethod
    def finalize(self) -> None:
        """Release the scene when it is replaced or shut down."""

    @abstractmethod
    def update(self) -> None:
        """Advance the scene by one frame."""

    @abstractmethod
    def draw(self) -> None:
        """Render the scene."""

    def attach(self, scene_manager: "SceneManager") -> None:
        """Record the manager running this scene."""
        self.scene_manager = scene_manager


class AbstractSceneFactory(ABC):
    """Creates scenes by name."""

    @abstractmethod
    def create_scene(self, scene_name: str) -> BaseScene:
        """Return a new scene for ``scene_name``."""


class SceneManager:
    """Runs one scene at a time and switches to a scheduled one on update."""

    def __init__(self, scene_factory: Optional[AbstractSceneFactory] = None) -> None:
        self.scene_factory = scene_factory
        self._scene: Optional[BaseScene] = None
        self._next_scene: Optional[BaseScene] = None

    def schedule(self, scene: BaseScene) -> None:
        """Make ``scene`` the one to switch to on the next update."""
        self._next_scene = scene

    def change_scene(self, scene_name: str) -> None:
        """Create the named scene with the factory and schedule it.

        Raises RuntimeError without a factory or while a change is pending.
        """
        if self.scene_factory is None:
            raise RuntimeError("No scene factory has been set.")
        if self._next_scene is not None:
            raise RuntimeError("A scene change is already pending.")
        self._next_scene = self.scene_factory.create_scene(scene_name)

    def _active(self) -> BaseScene:
        if self._scene is None:
            raise RuntimeError("No scene is active.")
        return self._scene

    def update(self) -> None:
        """Switch to a scheduled scene if any, then update the active scene."""
        if self._next_scene is not None:
            if self._scene is not None:
                self._scene.finalize()
            self._scene, self._next_scene = self._next_scene, None
            self._scene.attach(self)
            self._scene.initialize()
        self._active().update()

    def draw(self) -> None:
        """Draw the active scene."""
        self._active().draw()

    def finalize(self) -> None:
        """Finalize and drop the active scene."""
        self._active().finalize()
        self._scene = None