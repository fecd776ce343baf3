"""Game state driven by input events and a frame clock."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from splitshot.world import (
    ANGLE_TURN,
    KEY_BACK,
    KEY_FORWARD,
    KEY_JUMP,
    KEY_LEFT,
    KEY_RIGHT,
    MAP_BOX_SCALE,
    MAX_PLAYER_COUNT,
    Player,
    init_edges,
    init_players,
    shoot,
    update,
    whose_keyboard,
    whose_mouse,
)

TURN_STEP = 0x00080000
PITCH_LIMIT = 0x40000000
FPS_INTERVAL_NS = 999_999_999


class Outcome(Enum):
    """What the main loop should do after an event or frame."""

    CONTINUE = "continue"
    SUCCESS = "success"


class Key(Enum):
    """Keys the game reacts to."""

    W = "w"
    A = "a"
    S = "s"
    D = "d"
    SPACE = "space"
    ESCAPE = "escape"


_KEY_BITS = {
    Key.W: KEY_FORWARD,
    Key.A: KEY_LEFT,
    Key.S: KEY_BACK,
    Key.D: KEY_RIGHT,
    Key.SPACE: KEY_JUMP,
}


class GameState:
    """All players, the arena and the rules for routing input to players."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.players: list[Player] = init_players(MAX_PLAYER_COUNT)
        self.player_count = 1
        self.edges = init_edges(MAP_BOX_SCALE)
        self.rng = rng if rng is not None else random.Random()

    @property
    def active(self) -> list[Player]:
        """The players currently in the game."""
        return self.players[: self.player_count]

    def _claim(self, attr: str, device: int) -> None:
        for i, player in enumerate(self.players):
            if getattr(player, attr) == 0:
                setattr(player, attr, device)
                self.player_count = max(self.player_count, i + 1)
                return

    def quit(self) -> Outcome:
        return Outcome.SUCCESS

    def mouse_removed(self, mouse: int) -> Outcome:
        for player in self.active:
            if player.mouse == mouse:
                player.mouse = 0
        return Outcome.CONTINUE

    def keyboard_removed(self, keyboard: int) -> Outcome:
        for player in self.active:
            if player.keyboard == keyboard:
                player.keyboard = 0
        return Outcome.CONTINUE

    def mouse_motion(self, mouse: int, xrel: float, yrel: float) -> Outcome:
        """Turn the mouse owner's view, or give an unknown mouse to a free player."""
        index = whose_mouse(mouse, self.active)
        if index is not None:
            player = self.players[index]
            player.yaw = (player.yaw - int(xrel) * TURN_STEP) % ANGLE_TURN
            player.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, player.pitch - int(yrel) * TURN_STEP))
        elif mouse:
            self._claim("mouse", mouse)
        return Outcome.CONTINUE

    def mouse_button_down(self, mouse: int) -> Outcome:
        index = whose_mouse(mouse, self.active)
        if index is not None:
            shoot(index, self.active, self.rng)
        return Outcome.CONTINUE

    def key_down(self, keyboard: int, key) -> Outcome:
        """Press a movement key, or give an unknown keyboard to a free player."""
        index = whose_keyboard(keyboard, self.active)
        if index is not None:
            self.players[index].wasd |= _KEY_BITS.get(key, 0)
        elif keyboard:
            self._claim("keyboard", keyboard)
        return Outcome.CONTINUE

    def key_up(self, keyboard: int, key) -> Outcome:
        if key == Key.ESCAPE:
            return Outcome.SUCCESS
        index = whose_keyboard(keyboard, self.active)
        if index is not None:
            self.players[index].wasd &= ~_KEY_BITS.get(key, 0) & 0x1F
        return Outcome.CONTINUE

    def step(self, dt_ns: int) -> Outcome:
        update(self.active, dt_ns)
        return Outcome.CONTINUE


@dataclass
class FrameClock:
    """Tracks frame deltas and a frames-per-second label refreshed each second."""

    accu: int = 0
    last: int = 0
    past: int = 0
    text: str = ""

    def tick(self, now_ns: int) -> int:
        """Record a frame at now_ns and return the nanoseconds since the previous one."""
        dt_ns = now_ns - self.past
        if now_ns - self.last > FPS_INTERVAL_NS:
            self.last = now_ns
            self.text = f"{self.accu} fps"
            self.accu = 0
        self.past = now_ns
        self.accu += 1
        return dt_ns