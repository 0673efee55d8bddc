"""Keyboard and mouse state with per-frame edge detection."""

from enum import IntEnum

import pygame

from .vector2 import Vector2


class MouseButton(IntEnum):
    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


def _pygame_keyboard():
    return pygame.key.get_pressed()


def _pygame_mouse():
    return pygame.mouse.get_pos(), pygame.mouse.get_pressed()


class InputSystem:
    """Polls input devices once per frame and remembers the previous frame.

    ``keyboard_source`` returns a fresh indexable snapshot of key states;
    ``mouse_source`` returns ``((x, y), (left, middle, right))``. Both
    default to reading from pygame.
    """

    def __init__(self, keyboard_source=None, mouse_source=None):
        self._keyboard_source = keyboard_source or _pygame_keyboard
        self._mouse_source = mouse_source or _pygame_mouse
        self._keys = ()
        self._prev_keys = ()
        self._mouse_position = Vector2(0.0, 0.0)
        self._prev_mouse_position = Vector2(0.0, 0.0)
        self._buttons = (False, False, False)
        self._prev_buttons = (False, False, False)

    def initialize(self):
        """Take the first snapshot of the keyboard and mouse position."""
        self._keys = self._keyboard_source()
        self._prev_keys = self._keys
        position, _ = self._mouse_source()
        self._mouse_position = Vector2(float(position[0]), float(position[1]))
        self._prev_mouse_position = Vector2(*self._mouse_position)

    def shutdown(self):
        """Release input resources; nothing is held between frames."""

    def update(self):
        """Move the current state to previous and read the devices again."""
        self._prev_keys = self._keys
        self._keys = self._keyboard_source()

        self._prev_mouse_position = self._mouse_position
        self._prev_buttons = self._buttons
        position, buttons = self._mouse_source()
        self._mouse_position = Vector2(float(position[0]), float(position[1]))
        self._buttons = tuple(bool(b) for b in buttons[:3])

    def key_down(self, key):
        return bool(self._keys[key])

    def previous_key_down(self, key):
        return bool(self._prev_keys[key])

    def key_pressed(self, key):
        return not self._prev_keys[key] and bool(self._keys[key])

    def key_released(self, key):
        return bool(self._prev_keys[key]) and not self._keys[key]

    def mouse_button_down(self, button):
        return self._buttons[MouseButton(button)]

    def previous_mouse_button_down(self, button):
        return self._prev_buttons[MouseButton(button)]

    def mouse_button_pressed(self, button):
        index = MouseButton(button)
        return not self._prev_buttons[index] and self._buttons[index]

    def mouse_button_released(self, button):
        index = MouseButton(button)
        return self._prev_buttons[index] and not self._buttons[index]

    @property
    def mouse_position(self):
        return self._mouse_position

    @property
    def previous_mouse_position(self):
        return self._prev_mouse_position