"""Drawable objects, event-handling controls, groups of both, and scenes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from siegeengine.point import Point


class GameObject:
    """Something that is drawn and updated while it is visible."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        w: float = 0.0,
        h: float = 0.0,
        anchor_x: float = 0.0,
        anchor_y: float = 0.0,
    ) -> None:
        self.visible = True
        self.position = Point(x, y)
        self.size = Point(w, h)
        self.anchor = Point(anchor_x, anchor_y)

    def draw(self, surface: Any) -> None:
        """Draw onto the surface; the base object draws nothing."""

    def update(self, delta_time: float) -> None:
        """Advance game logic by the elapsed time; the base object does nothing."""


class Control:
    """Something that receives keyboard and mouse events; every handler defaults to a no-op."""

    def on_key_down(self, key_code: int) -> None:
        """Handle a pressed key."""

    def on_key_up(self, key_code: int) -> None:
        """Handle a released key."""

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        """Handle a pressed mouse button at window coordinates."""

    def on_mouse_up(self, button: int, mx: int, my: int) -> None:
        """Handle a released mouse button at window coordinates."""

    def on_mouse_move(self, mx: int, my: int) -> None:
        """Handle the mouse moving to window coordinates."""

    def on_mouse_scroll(self, mx: int, my: int, delta: int) -> None:
        """Handle a scroll of the mouse wheel."""


class Group(GameObject, Control):
    """An object and control that holds other objects and controls in order.

    Updates and draws go to visible children; events go to every control.
    Children may remove themselves from the group while being called.
    """

    def __init__(self) -> None:
        super().__init__()
        self._objects: list[GameObject] = []
        self._controls: list[Control] = []

    def add_object(self, obj: GameObject) -> None:
        """Append an object; it is drawn after those already present."""
        self._objects.append(obj)

    def insert_object(self, obj: GameObject, before: GameObject) -> None:
        """Insert an object just before another object of this group."""
        self._objects.insert(self._index_of(self._objects, before), obj)

    def add_control(self, ctrl: Control) -> None:
        """Append a control."""
        self._controls.append(ctrl)

    def add_control_object(self, ctrl: Control) -> None:
        """Add something that is both an object and a control to both lists."""
        if not isinstance(ctrl, GameObject):
            raise TypeError("The control must inherit both GameObject and Control.")
        self._objects.append(ctrl)
        self._controls.append(ctrl)

    def remove_object(self, obj: GameObject) -> None:
        """Remove an object; raises ValueError if it is not in the group."""
        del self._objects[self._index_of(self._objects, obj)]

    def remove_control(self, ctrl: Control) -> None:
        """Remove a control; raises ValueError if it is not in the group."""
        del self._controls[self._index_of(self._controls, ctrl)]

    def remove_control_object(self, ctrl: Control) -> None:
        """Remove something from both the control and the object list."""
        self.remove_control(ctrl)
        self.remove_object(ctrl)  # type: ignore[arg-type]

    def clear(self) -> None:
        """Remove every object and control."""
        self._objects.clear()
        self._controls.clear()

    def objects(self) -> list[GameObject]:
        """Return the objects in drawing order."""
        return list(self._objects)

    def controls(self) -> list[Control]:
        """Return the controls in order."""
        return list(self._controls)

    @staticmethod
    def _index_of(items: list, item: object) -> int:
        found = next((i for i, candidate in enumerate(items) if candidate is item), None)
        if found is None:
            raise ValueError("item is not in this group")
        return found

    def update(self, delta_time: float) -> None:
        for obj in list(self._objects):
            if obj.visible:
                obj.update(delta_time)

    def draw(self, surface: Any) -> None:
        for obj in list(self._objects):
            if obj.visible:
                obj.draw(surface)

    def on_key_down(self, key_code: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_key_down(key_code)

    def on_key_up(self, key_code: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_key_up(key_code)

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_down(button, mx, my)

    def on_mouse_up(self, button: int, mx: int, my: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_up(button, mx, my)

    def on_mouse_move(self, mx: int, my: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_move(mx, my)

    def on_mouse_scroll(self, mx: int, my: int, delta: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_scroll(mx, my, delta)


class Scene(Group, ABC):
    """A group that forms one screen of the game.

    Set-up belongs in initialize and tear-down in terminate, so that a scene
    can be entered and left many times.
    """

    BACKGROUND = (0, 0, 0)

    @abstractmethod
    def initialize(self) -> None:
        """Build the scene's contents."""

    def terminate(self) -> None:
        """Tear the scene down, removing all its children."""
        self.clear()

    def draw(self, surface: Any) -> None:
        surface.fill(self.BACKGROUND)
        super().draw(surface)