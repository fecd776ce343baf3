import math
import random

import pytest

from splitshot.world import (
    ANGLE_TURN,
    JUMP_SPEED,
    MAP_BOX_EDGES_LEN,
    MAP_BOX_SCALE,
    Player,
    init_edges,
    init_players,
    shoot,
    update,
    whose_keyboard,
    whose_mouse,
)


def _duel(target_pos):
    players = init_players(2)
    players[0].pos = [0.0, 0.0, 0.0]
    players[0].yaw = 0
    players[0].pitch = 0
    players[1].pos = list(target_pos)
    return players


def test_init_players_positions_and_angles():
    players = init_players(4)
    assert len(players) == 4
    for p in players:
        assert [abs(c) for c in p.pos] == [8.0, 0.0, 8.0]
        assert p.pitch == -0x08000000
        assert p.vel == [0.0, 0.0, 0.0]
        assert p.mouse == 0 and p.keyboard == 0 and p.wasd == 0
        assert 0 <= p.yaw < ANGLE_TURN
    assert players[0].yaw == 0x20000000
    assert players[1].yaw == 0x20000000 + 0x80000000
    assert players[3].yaw == 0x20000000 + 0x80000000 + 0x40000000


def test_init_players_distinct_pure_colors():
    colors = [p.color for p in init_players(4)]
    assert len(set(colors)) == 4
    for color in colors:
        assert set(color) <= {0, 0xFF}


def test_init_edges_layout():
    edges = init_edges(MAP_BOX_SCALE)
    assert len(edges) == MAP_BOX_EDGES_LEN
    r = float(MAP_BOX_SCALE)
    for edge in edges:
        assert all(-r <= c <= r for c in edge)
    for edge in edges[:12]:
        a, b = edge[:3], edge[3:]
        assert all(abs(c) == r for c in edge)
        assert sum(1 for x, y in zip(a, b) if x != y) == 1
    for edge in edges[12:]:
        assert edge[1] == -r and edge[4] == -r


def test_init_edges_cube_covers_all_corners():
    edges = init_edges(4)
    corners = {e[:3] for e in edges[:12]} | {e[3:] for e in edges[:12]}
    assert len(corners) == 8


def test_whose_mouse_and_keyboard():
    players = [Player(mouse=3, keyboard=5), Player(mouse=7, keyboard=5)]
    assert whose_mouse(7, players) == 1
    assert whose_mouse(42, players) is None
    assert whose_keyboard(5, players) == 0
    assert whose_keyboard(6, players) is None


def test_shoot_hits_target_ahead_and_respawns_it():
    players = _duel((0.0, 0.0, -5.0))
    hits = shoot(0, players, random.Random(3))
    assert hits == [1]
    for c in players[1].pos:
        assert (c * 256 / MAP_BOX_SCALE).is_integer()
        assert -128 <= c * 256 / MAP_BOX_SCALE <= 127
    assert players[0].pos == [0.0, 0.0, 0.0]


def test_shoot_ignores_target_behind():
    players = _duel((0.0, 0.0, 5.0))
    assert shoot(0, players, random.Random(3)) == []
    assert players[1].pos == [0.0, 0.0, 5.0]


def test_shoot_misses_off_axis_target():
    players = _duel((5.0, 0.0, -5.0))
    assert shoot(0, players, random.Random(3)) == []
    assert players[1].pos == [5.0, 0.0, -5.0]


def test_shoot_hits_lower_sphere():
    players = _duel((0.0, 1.0, -5.0))
    assert shoot(0, players, random.Random(3)) == [1]


def test_update_zero_time_changes_nothing():
    players = init_players(4)
    before = [(list(p.pos), list(p.vel)) for p in players]
    update(players, 0)
    assert [(p.pos, p.vel) for p in players] == before


def test_update_floor_stops_fall():
    p = Player(pos=[0.0, 1.5 - MAP_BOX_SCALE, 0.0])
    update([p], 16_000_000)
    assert p.pos[1] == pytest.approx(1.5 - MAP_BOX_SCALE)
    assert p.vel[1] == 0.0


def test_update_floor_with_jump_key_launches():
    p = Player(pos=[0.0, 1.5 - MAP_BOX_SCALE, 0.0], wasd=16)
    update([p], 16_000_000)
    assert p.vel[1] == JUMP_SPEED


def test_update_wall_stops_motion():
    bound = MAP_BOX_SCALE - 0.5
    p = Player(pos=[bound, 0.0, 0.0], wasd=8)
    update([p], 16_000_000)
    assert p.pos[0] == bound
    assert p.vel[0] == 0.0


def test_update_forward_moves_negative_z():
    p = Player(wasd=1)
    update([p], 16_000_000)
    assert p.pos[2] < 0.0
    assert p.vel[2] < 0.0
    assert p.pos[0] == pytest.approx(0.0)


def test_update_quarter_turn_rotates_motion():
    p = Player(wasd=1, yaw=0x40000000)
    update([p], 16_000_000)
    assert p.pos[0] < 0.0
    assert abs(p.pos[2]) < 1e-9


def test_update_diagonal_is_normalised():
    straight = Player(wasd=1)
    diagonal = Player(wasd=1 | 8)
    update([straight, diagonal], 16_000_000)
    assert math.hypot(diagonal.vel[0], diagonal.vel[2]) == pytest.approx(
        math.hypot(straight.vel[0], straight.vel[2])
    )


def test_update_drag_slows_velocity():
    p = Player(vel=[10.0, 0.0, 0.0])
    update([p], 16_000_000)
    assert 0.0 < p.vel[0] < 10.0
    assert p.pos[0] > 0.0