"""Players, arena geometry and the physics of the split-screen shooter."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Optional, Sequence

MAP_BOX_SCALE = 16
MAP_BOX_EDGES_LEN = 12 + MAP_BOX_SCALE * 2
MAX_PLAYER_COUNT = 4

# Angles are binary: a full turn is 2**32 units.
ANGLE_TURN = 1 << 32
BIN_RAD = math.pi / 2147483648.0

DRAG_RATE = 6.0
ACCELERATION = 60.0
GRAVITY = 25.0
JUMP_SPEED = 8.4375

KEY_FORWARD = 1
KEY_LEFT = 2
KEY_BACK = 4
KEY_RIGHT = 8
KEY_JUMP = 16

_CUBE_EDGES = (
    (0, 1), (1, 3), (3, 2), (2, 0),
    (7, 6), (6, 4), (4, 5), (5, 7),
    (6, 2), (3, 7), (0, 4), (5, 1),
)

Edge = tuple[float, float, float, float, float, float]


@dataclass
class Player:
    """One player: position, velocity, view angles and input devices."""

    pos: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    vel: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    yaw: int = 0
    pitch: int = 0
    radius: float = 0.5
    height: float = 1.5
    color: tuple[int, int, int] = (0xFF, 0xFF, 0xFF)
    wasd: int = 0
    mouse: int = 0
    keyboard: int = 0


def _player_color(index: int) -> tuple[int, int, int]:
    bit = 1 << (index // 2)
    base = (
        0 if bit & 2 else 0xFF,
        0 if bit & 1 else 0xFF,
        0 if bit & 4 else 0xFF,
    )
    if index & 1:
        return base
    return tuple(c ^ 0xFF for c in base)  # type: ignore[return-value]


def init_players(count: int = MAX_PLAYER_COUNT) -> list[Player]:
    """Create players at their starting corners, facing the centre."""
    players = []
    for i in range(count):
        sign_x = -1.0 if i & 1 else 1.0
        sign_z = sign_x * (-1.0 if i & 2 else 1.0)
        yaw = 0x20000000 + (0x80000000 if i & 1 else 0) + (0x40000000 if i & 2 else 0)
        players.append(
            Player(
                pos=[8.0 * sign_x, 0.0, 8.0 * sign_z],
                yaw=yaw % ANGLE_TURN,
                pitch=-0x08000000,
                color=_player_color(i),
            )
        )
    return players


def init_edges(scale: int = MAP_BOX_SCALE) -> list[Edge]:
    """Return the arena's line segments: the cube's 12 edges, then the floor grid."""
    r = float(scale)

    def corner(n: int) -> tuple[float, float, float]:
        return tuple(r if n & (1 << axis) else -r for axis in range(3))  # type: ignore[return-value]

    edges: list[Edge] = [corner(a) + corner(b) for a, b in _CUBE_EDGES]
    offsets = [float(i * 2) - r for i in range(scale)]
    edges.extend((-r, -r, d, r, -r, d) for d in offsets)
    edges.extend((d, -r, -r, d, -r, r) for d in offsets)
    return edges


def whose_mouse(mouse: int, players: Sequence[Player]) -> Optional[int]:
    """Index of the first player using this mouse, or None."""
    return next((i for i, p in enumerate(players) if p.mouse == mouse), None)


def whose_keyboard(keyboard: int, players: Sequence[Player]) -> Optional[int]:
    """Index of the first player using this keyboard, or None."""
    return next((i for i, p in enumerate(players) if p.keyboard == keyboard), None)


def aim_direction(yaw: int, pitch: int) -> tuple[float, float, float]:
    """Unit vector a player with these view angles is looking along."""
    yaw_rad = BIN_RAD * yaw
    pitch_rad = BIN_RAD * pitch
    cos_pitch = math.cos(pitch_rad)
    return (
        -math.sin(yaw_rad) * cos_pitch,
        math.sin(pitch_rad),
        -math.cos(yaw_rad) * cos_pitch,
    )


def shoot(shooter: int, players: Sequence[Player], rng=None) -> list[int]:
    """Fire along the shooter's aim; respawn every player hit and return their indices."""
    rng = rng if rng is not None else random
    src = players[shooter]
    x0, y0, z0 = src.pos
    vx, vy, vz = aim_direction(src.yaw, src.pitch)
    vv = vx * vx + vy * vy + vz * vz
    hits = []
    for i, target in enumerate(players):
        if i == shooter:
            continue
        r, h = target.radius, target.height
        dx = target.pos[0] - x0
        dz = target.pos[2] - z0
        rr = r * r
        hit = False
        for offset in (0.0, r - h):
            dy = target.pos[1] - y0 + offset
            vd = vx * dx + vy * dy + vz * dz
            if vd < 0:
                continue
            dd = dx * dx + dy * dy + dz * dz
            if vd * vd >= vv * (dd - rr):
                hit = True
        if hit:
            target.pos[:] = [
                MAP_BOX_SCALE * (rng.randrange(256) - 128) / 256 for _ in range(3)
            ]
            hits.append(i)
    return hits


def update(players: Sequence[Player], dt_ns: int) -> None:
    """Advance every player's motion by dt_ns nanoseconds, keeping them in the arena."""
    time = dt_ns * 1e-9
    drag = math.exp(-time * DRAG_RATE)
    diff = 1.0 - drag
    scale = float(MAP_BOX_SCALE)
    for player in players:
        rad = player.yaw * math.pi / 2147483648.0
        cos, sin = math.cos(rad), math.sin(rad)
        wasd = player.wasd
        dir_x = (1.0 if wasd & KEY_RIGHT else 0.0) - (1.0 if wasd & KEY_LEFT else 0.0)
        dir_z = (1.0 if wasd & KEY_BACK else 0.0) - (1.0 if wasd & KEY_FORWARD else 0.0)
        norm = dir_x * dir_x + dir_z * dir_z
        if norm == 0:
            acc_x = acc_z = 0.0
        else:
            root = math.sqrt(norm)
            acc_x = ACCELERATION * (cos * dir_x + sin * dir_z) / root
            acc_z = ACCELERATION * (-sin * dir_x + cos * dir_z) / root

        vel_x, vel_y, vel_z = player.vel
        player.vel[0] = vel_x - vel_x * diff + diff * acc_x / DRAG_RATE
        player.vel[1] = vel_y - GRAVITY * time
        player.vel[2] = vel_z - vel_z * diff + diff * acc_z / DRAG_RATE
        player.pos[0] += (time - diff / DRAG_RATE) * acc_x / DRAG_RATE + diff * vel_x / DRAG_RATE
        player.pos[1] += -0.5 * GRAVITY * time * time + vel_y * time
        player.pos[2] += (time - diff / DRAG_RATE) * acc_z / DRAG_RATE + diff * vel_z / DRAG_RATE

        bound = scale - player.radius
        pos_x = max(min(bound, player.pos[0]), -bound)
        pos_y = max(min(bound, player.pos[1]), player.height - scale)
        pos_z = max(min(bound, player.pos[2]), -bound)
        if player.pos[0] != pos_x:
            player.vel[0] = 0.0
        if player.pos[1] != pos_y:
            player.vel[1] = JUMP_SPEED if wasd & KEY_JUMP else 0.0
        if player.pos[2] != pos_z:
            player.vel[2] = 0.0
        player.pos[:] = [pos_x, pos_y, pos_z]