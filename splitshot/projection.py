"""Camera maths: view matrices, segment clipping and screen layout."""

from __future__ import annotations

import math
from typing import NamedTuple, Optional, Sequence

from splitshot.world import BIN_RAD

CIRCLE_DRAW_SIDES = 32

Vec3 = tuple[float, float, float]
Matrix = tuple[Vec3, Vec3, Vec3]
Point = tuple[float, float]


class Viewport(NamedTuple):
    """A player's screen region, its centre and its focal length in pixels."""

    rect: tuple[int, int, int, int]
    center_x: float
    center_y: float
    focal: float


def camera_matrix(yaw: int, pitch: int) -> Matrix:
    """World-to-camera rotation for binary yaw and pitch angles."""
    yaw_rad = BIN_RAD * yaw
    pitch_rad = BIN_RAD * pitch
    cy, sy = math.cos(yaw_rad), math.sin(yaw_rad)
    cp, sp = math.cos(pitch_rad), math.sin(pitch_rad)
    return (
        (cy, 0.0, -sy),
        (sy * sp, cp, cy * sp),
        (sy * cp, -sp, cy * cp),
    )


def transform(mat: Matrix, point: Sequence[float], origin: Sequence[float] = (0.0, 0.0, 0.0)) -> Vec3:
    """Rotate point, taken relative to origin, into camera space."""
    rel = [p - o for p, o in zip(point, origin)]
    return tuple(sum(m * r for m, r in zip(row, rel)) for row in mat)  # type: ignore[return-value]


def clip_segment(
    a: Sequence[float], b: Sequence[float], x: float, y: float, z: float, w: float = 1.0
) -> Optional[tuple[Point, Point]]:
    """Clip a camera-space segment to the plane z = -w and project it.

    Returns the two screen points, or None when the segment lies wholly
    in front of the plane.
    """
    ax, ay, az = a
    bx, by, bz = b
    if az >= -w and bz >= -w:
        return None
    dx = ax - bx
    dy = ay - by
    if az > -w:
        t = (-w - bz) / (az - bz)
        ax = bx + dx * t
        ay = by + dy * t
        az = -w
    elif bz > -w:
        t = (-w - az) / (bz - az)
        bx = ax - dx * t
        by = ay - dy * t
        bz = -w
    pax = -z * ax / az
    pay = -z * ay / az
    pbx = -z * bx / bz
    pby = -z * by / bz
    return (x + pax, y - pay), (x + pbx, y - pby)


def circle_points(r: float, x: float, y: float, sides: int = CIRCLE_DRAW_SIDES) -> list[Point]:
    """Closed polyline approximating a circle: sides + 1 points."""
    points = []
    for i in range(sides + 1):
        ang = 2.0 * math.pi * i / sides
        points.append((x + r * math.cos(ang), y + r * math.sin(ang)))
    return points


def split_viewports(width: int, height: int, count: int) -> list[Viewport]:
    """Divide the screen among count players: full, two rows, or a 2x2 grid."""
    if count <= 0:
        return []
    part_hor = 2 if count > 2 else 1
    part_ver = 2 if count > 1 else 1
    size_hor = width / part_hor
    size_ver = height / part_ver
    focal = 0.5 * math.sqrt(size_hor * size_hor + size_ver * size_ver)
    views = []
    for i in range(count):
        mod_x = i % part_hor
        mod_y = i // part_hor
        rect = (int(mod_x * size_hor), int(mod_y * size_ver), int(size_hor), int(size_ver))
        views.append(
            Viewport(
                rect=rect,
                center_x=(mod_x + 0.5) * size_hor,
                center_y=(mod_y + 0.5) * size_ver,
                focal=focal,
            )
        )
    return views