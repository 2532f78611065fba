"""Keyboard state tracking across frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Hashable, Iterable, Optional


class KeyStatus(Enum):
    """State of a key derived from the previous and the current frame."""

    NONE = 0
    JUST_PRESSED = 1
    HELD = 2
    JUST_RELEASED = 3


@dataclass
class KeyboardState:
    """Keys pressed in the current frame and in the previous one."""

    current: FrozenSet[Hashable] = field(default_factory=frozenset)
    previous: FrozenSet[Hashable] = field(default_factory=frozenset)

    def key_state(self, key: Hashable) -> KeyStatus:
        """Status of ``key`` from its previous and current values."""
        was_down = key in self.previous
        is_down = key in self.current
        if not was_down:
            return KeyStatus.JUST_PRESSED if is_down else KeyStatus.NONE
        return KeyStatus.HELD if is_down else KeyStatus.JUST_RELEASED

    def is_up(self, key: Hashable) -> bool:
        """True when the key is up or just released."""
        return key not in self.current

    def is_free(self, key: Hashable) -> bool:
        """True when the key is up and not just released."""
        return self.key_state(key) is KeyStatus.NONE

    def is_just_pressed(self, key: Hashable) -> bool:
        """True when the key was pressed this frame."""
        return self.key_state(key) is KeyStatus.JUST_PRESSED

    def is_down(self, key: Hashable) -> bool:
        """True when the key is down or just pressed."""
        return key in self.current

    def is_held(self, key: Hashable) -> bool:
        """True when the key is down and not just pressed."""
        return self.key_state(key) is KeyStatus.HELD

    def is_just_released(self, key: Hashable) -> bool:
        """True when the key was released this frame."""
        return self.key_state(key) is KeyStatus.JUST_RELEASED


@dataclass
class InputManager:
    """Feeds keyboard snapshots into a KeyboardState, one frame at a time."""

    state: KeyboardState = field(default_factory=KeyboardState)

    def prepare_for_update(self) -> None:
        """Copy the current key values to the previous frame's."""
        self.state.previous = self.state.current

    def poll_inputs(
        self,
        pressed_keys: Optional[Iterable[Hashable]] = None,
        quit_requested: bool = False,
    ) -> bool:
        """Record the pressed keys; return False when a quit was requested."""
        if pressed_keys is not None:
            self.state.current = frozenset(pressed_keys)
        return not quit_requested