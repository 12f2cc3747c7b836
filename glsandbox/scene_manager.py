"""Scenes, the stack that switches between them, and shared app state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from glsandbox.window import Window


class Scene:
    """A demo screen; subclasses override the hooks they need."""

    def update(self, dt: float) -> None:
        """Advance the scene by ``dt`` seconds."""

    def render(self) -> None:
        """Draw the scene."""

    def draw_ui(self, ui) -> None:
        """Add the scene's controls to the UI panel."""


class _Pending(Enum):
    NONE = auto()
    ADDING = auto()
    REMOVING = auto()


class SceneManager:
    """A stack of scenes whose changes take effect on the next update()."""

    def __init__(self) -> None:
        self._scenes: list[Scene] = []
        self._status = _Pending.NONE
        self._new_scene: Scene | None = None
        self._replacing = True

    def __len__(self) -> int:
        return len(self._scenes)

    def add_scene(self, scene: Scene, replacing: bool = True) -> None:
        """Queue a scene to be pushed, optionally replacing the top one."""
        self._status = _Pending.ADDING
        self._replacing = replacing
        self._new_scene = scene

    def erase_scene(self) -> None:
        """Queue removal of the top scene."""
        self._status = _Pending.REMOVING

    def update(self) -> None:
        """Apply the queued change, if any."""
        if self._status is _Pending.REMOVING and self._scenes:
            self._scenes.pop()
            self._status = _Pending.NONE

        if self._status is _Pending.ADDING:
            if self._scenes and self._replacing:
                self._scenes.pop()
            self._scenes.append(self._new_scene)
            self._new_scene = None
            self._status = _Pending.NONE

    def clear(self) -> None:
        self._scenes.clear()

    def current(self) -> Scene:
        """The scene on top of the stack."""
        if not self._scenes:
            raise LookupError("no active scene")
        return self._scenes[-1]


@dataclass
class SceneData:
    """State shared by the application and every scene."""

    window: Window = field(default_factory=Window)
    scene_manager: SceneManager = field(default_factory=SceneManager)