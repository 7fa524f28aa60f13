# MIT License (see LICENSE)
"""
Keyboard input for the agent.

Key presses are not applied when they happen. They are pushed onto an
InputQueue and drained once at the start of each frame, before
integration, so the ordering of input and physics is deterministic
regardless of how the host delivers events.
"""
from __future__ import annotations
from collections import deque
from enum import Enum
import logging

import numpy as np

from .constants import KEY_IMPULSE
from .types import Agent
from .util import f64

logger = logging.getLogger(__name__)


class Key(Enum):
    """Arrow keys understood by the agent."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def from_name(cls, name: str) -> "Key | None":
        """
        Map a host key name to a Key.

        Accepts browser names ("ArrowUp") and pygame names ("up").
        Unknown names return None.
        """
        n = name.strip().lower()
        if n.startswith("arrow"):
            n = n[len("arrow"):]
        try:
            return cls(n)
        except ValueError:
            return None


# Unit direction of the acceleration impulse for each key
_DIRECTIONS: dict[Key, tuple[float, float]] = {
    Key.UP: (0.0, 1.0),
    Key.DOWN: (0.0, -1.0),
    Key.RIGHT: (1.0, 0.0),
    Key.LEFT: (-1.0, 0.0),
}


def impulse_for(key: Key, magnitude: float = KEY_IMPULSE) -> np.ndarray:
    """
    Acceleration delta for one press of `key`.

    Up/Down act on the y axis, Left/Right on the x axis.
    """
    dx, dy = _DIRECTIONS[key]
    return f64([dx * magnitude, dy * magnitude])


class InputQueue:
    """
    FIFO of pending key presses.

    Usage:
        queue = InputQueue()
        queue.push(Key.UP)           # from the event handler
        queue.drain(agent)           # once per frame, before the step

    Repeated presses accumulate additively in the agent's acceleration.
    """

    def __init__(self, magnitude: float = KEY_IMPULSE) -> None:
        self.magnitude = magnitude
        self._pending: deque[Key] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def push(self, key: Key | str) -> bool:
        """
        Queue a key press.

        Args:
            key: A Key or a host key name. Unrecognized names are ignored.

        Returns:
            True if the press was queued.
        """
        if isinstance(key, str):
            resolved = Key.from_name(key)
            if resolved is None:
                logger.debug("Ignoring unbound key %r", key)
                return False
            key = resolved
        elif not isinstance(key, Key):
            raise TypeError(f"Expected Key or str, got {type(key).__name__}")
        self._pending.append(key)
        return True

    def drain(self, agent: Agent) -> int:
        """
        Apply every queued press to the agent in arrival order.

        Returns:
            Number of presses applied.
        """
        n = 0
        while self._pending:
            agent.apply_impulse(impulse_for(self._pending.popleft(), self.magnitude))
            n += 1
        if n:
            logger.debug("Applied %d key impulse(s), acceleration=%s", n, agent.acceleration)
        return n

    def clear(self) -> None:
        """Drop all pending presses."""
        self._pending.clear()
