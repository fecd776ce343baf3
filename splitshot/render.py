"""Drawing of the split-screen views and the interactive game loop."""

from __future__ import annotations

import time
from typing import Optional

import pygame

from splitshot.projection import (
    camera_matrix,
    circle_points,
    clip_segment,
    split_viewports,
    transform,
)
from splitshot.state import FrameClock, GameState, Key, Outcome

WINDOW_TITLE = "examples/demo/woodeneye-008"
WINDOW_SIZE = (640, 480)
FRAME_BUDGET_NS = 999_999

BACKGROUND = (0, 0, 0)
GRID_COLOR = (64, 64, 64)
CROSSHAIR_COLOR = (255, 255, 255)
TEXT_COLOR = (255, 255, 255)
CROSSHAIR_HALF = 10

# The event layer merges all physical devices, so one mouse and one
# keyboard identifier stand for them.
MOUSE_ID = 1
KEYBOARD_ID = 1

_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def draw_scene(
    surface: pygame.Surface,
    state: GameState,
    debug_text: str = "",
    font: Optional[pygame.font.Font] = None,
) -> None:
    """Render every active player's view of the arena onto surface."""
    width, height = surface.get_size()
    surface.set_clip(None)
    surface.fill(BACKGROUND)
    players = state.active
    views = split_viewports(width, height, len(players))
    for i, (player, view) in enumerate(zip(players, views)):
        surface.set_clip(pygame.Rect(view.rect))
        mat = camera_matrix(player.yaw, player.pitch)
        cx, cy, focal = view.center_x, view.center_y, view.focal

        for edge in state.edges:
            a = transform(mat, edge[:3], player.pos)
            b = transform(mat, edge[3:], player.pos)
            segment = clip_segment(a, b, cx, cy, focal, 1.0)
            if segment is not None:
                pygame.draw.line(surface, GRID_COLOR, segment[0], segment[1])

        for j, target in enumerate(players):
            if i == j:
                continue
            for k in (0, 1):
                point = (
                    target.pos[0],
                    target.pos[1] + (target.radius - target.height) * k,
                    target.pos[2],
                )
                dx, dy, dz = transform(mat, point, player.pos)
                if not dz < 0:
                    continue
                r_eff = target.radius * focal / dz
                points = circle_points(r_eff, cx - focal * dx / dz, cy + focal * dy / dz)
                pygame.draw.lines(surface, target.color, False, points)

        pygame.draw.line(
            surface, CROSSHAIR_COLOR, (cx, cy - CROSSHAIR_HALF), (cx, cy + CROSSHAIR_HALF)
        )
        pygame.draw.line(
            surface, CROSSHAIR_COLOR, (cx - CROSSHAIR_HALF, cy), (cx + CROSSHAIR_HALF, cy)
        )

    surface.set_clip(None)
    if font is not None and debug_text:
        surface.blit(font.render(debug_text, False, TEXT_COLOR), (0, 0))


def _dispatch(state: GameState, event: pygame.event.Event) -> Outcome:
    """Route one event to the game state."""
    if event.type == pygame.QUIT:
        return state.quit()
    if getattr(event, "touch", False):
        return Outcome.CONTINUE
    if event.type == pygame.MOUSEMOTION:
        xrel, yrel = event.rel
        return state.mouse_motion(MOUSE_ID, xrel, yrel)
    if event.type == pygame.MOUSEBUTTONDOWN:
        return state.mouse_button_down(MOUSE_ID)
    if event.type == pygame.KEYDOWN:
        return state.key_down(KEYBOARD_ID, _KEYS.get(event.key))
    if event.type == pygame.KEYUP:
        return state.key_up(KEYBOARD_ID, _KEYS.get(event.key))
    return Outcome.CONTINUE


def _make_font() -> Optional[pygame.font.Font]:
    try:
        pygame.font.init()
        return pygame.font.Font(None, 16)
    except (pygame.error, ImportError):
        return None


def main(argv=None) -> int:
    """Open the window and play until the window closes or Escape is released."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.event.set_grab(True)
        pygame.mouse.set_visible(False)
        font = _make_font()
        state = GameState()
        clock = FrameClock()
        start = time.perf_counter_ns()
        while True:
            for event in pygame.event.get():
                if _dispatch(state, event) is Outcome.SUCCESS:
                    return 0
            now = time.perf_counter_ns() - start
            dt_ns = now - clock.past
            state.step(dt_ns)
            draw_scene(screen, state, clock.text, font)
            pygame.display.flip()
            clock.tick(now)
            elapsed = time.perf_counter_ns() - start - now
            if elapsed < FRAME_BUDGET_NS:
                time.sleep((FRAME_BUDGET_NS - elapsed) / 1e9)
    except pygame.error:
        return 1
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())