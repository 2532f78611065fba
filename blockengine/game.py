"""Game-state stack and the per-frame game driver."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Hashable, Iterable, List, Optional

from blockengine.keyboard import InputManager, KeyboardState


class GameState(ABC):
    """A scene managed by Game."""

    game: Optional["Game"] = None

    @abstractmethod
    def load(self) -> None:
        """Set the scene up."""

    @abstractmethod
    def clean(self) -> None:
        """Release what the scene holds."""

    @abstractmethod
    def handle_event(self, keyboard: KeyboardState) -> None:
        """React to the current input state."""

    @abstractmethod
    def update(self, dt: int) -> None:
        """Advance the scene by ``dt`` milliseconds."""

    @abstractmethod
    def draw(self) -> None:
        """Draw the scene."""

    @abstractmethod
    def pause(self) -> None:
        """Called when another scene is pushed on top."""

    @abstractmethod
    def resume(self) -> None:
        """Called when the scene on top is popped."""

    def set_game(self, game: "Game") -> None:
        """Attach the scene to its game."""
        self.game = game


class Game:
    """Drives the top game state of a stack of states."""

    def __init__(self) -> None:
        self.is_running = False
        self.window_width = 0
        self.window_height = 0
        self.input_manager: Optional[InputManager] = None
        self.states: List[GameState] = []

    def init(self, screen_width: int, screen_height: int) -> None:
        """Record the window size, start running and set up input."""
        self.window_width = screen_width
        self.window_height = screen_height
        self.is_running = True
        self.input_manager = InputManager()

    @property
    def current_state(self) -> GameState:
        """The state on top of the stack."""
        if not self.states:
            raise RuntimeError("no active game state")
        return self.states[-1]

    def handle_inputs(
        self,
        pressed_keys: Optional[Iterable[Hashable]] = None,
        quit_requested: bool = False,
    ) -> None:
        """Advance the input frame and pass the keyboard state to the top state."""
        if self.input_manager is None:
            raise RuntimeError("game is not initialised")
        self.input_manager.prepare_for_update()
        self.is_running = self.input_manager.poll_inputs(pressed_keys, quit_requested)
        self.current_state.handle_event(self.input_manager.state)

    def update(self, dt: int) -> None:
        """Update the top state."""
        self.current_state.update(dt)

    def render(self) -> None:
        """Draw the top state."""
        self.current_state.draw()

    def change_state(self, state: GameState) -> None:
        """Replace the top state with ``state``."""
        if self.states:
            self.states.pop().clean()
        state.set_game(self)
        self.states.append(state)
        state.load()

    def push_state(self, state: GameState) -> None:
        """Pause the top state and put ``state`` above it."""
        if self.states:
            self.states[-1].pause()
        self.states.append(state)
        state.load()

    def pop_state(self) -> None:
        """Remove the top state and resume the one below."""
        if self.states:
            self.states.pop().clean()
        if self.states:
            self.states[-1].resume()