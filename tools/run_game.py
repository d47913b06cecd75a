# tools/run_game.py
# Playable pygame front end: keys → GameSession.move, tiles from the theme,
# HUD + subtitles along the bottom, tones through the mixer when audio is on.

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional

import pygame

# Project imports
try:
    from homeward.config import AccessibilitySettings
    from homeward.engine.feedback import CallbackFeedback
    from homeward.engine.movement import Direction
    from homeward.engine.state import GameSession
    from homeward.mapgen.layouts import grid_from_layout
    from homeward.render.palette import theme_for, tile_size_for
    from homeward.render.tileset import Tileset
    from homeward.ui.hud import INSTRUCTIONS, Subtitles, status_line, win_banner
except Exception as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

PYGAME_KEYS = {
    pygame.K_UP: Direction.UP, pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN, pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT, pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT, pygame.K_d: Direction.RIGHT,
}

HUD_LINES = 3

# ---------- Main ----------

def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Homeward maze runtime")
    parser.add_argument("--level", type=int, default=1)
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible mazes")
    parser.add_argument("--classic", action="store_true", help="start on the fixed 7x7 layout")
    parser.add_argument("--width", type=int, default=720, help="window width in pixels")
    parser.add_argument("--height", type=int, default=720, help="window height in pixels")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--high-contrast", action="store_true")
    parser.add_argument("--large-text", action="store_true")
    parser.add_argument("--no-audio", action="store_true")
    parser.add_argument("--subtitles", action="store_true")
    parser.add_argument("--icons", action="store_true", help="draw glyphs instead of flat colours")
    parser.add_argument("--palette", default="normal",
                        choices=["normal", "protanopia", "deuteranopia", "tritanopia"])
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    settings = AccessibilitySettings(
        high_contrast=args.high_contrast,
        audio_enabled=not args.no_audio,
        large_text=args.large_text,
        subtitles=args.subtitles,
        use_icons=args.icons,
        color_blind_mode=args.palette,
    )

    pygame.init()
    subtitles = Subtitles()

    play_tone = lambda kind: None
    if settings.audio_enabled:
        try:
            from homeward.render.audio import MixerTones
            play_tone = MixerTones().play_tone
        except pygame.error as e:
            print("[run_game] Audio unavailable, continuing silently:", e)

    session = GameSession(
        args.level,
        rng=random.Random(args.seed),
        settings=settings,
        feedback=CallbackFeedback(speak=subtitles.speak, play_tone=play_tone),
        grid=grid_from_layout() if args.classic else None,
    )

    font = pygame.font.SysFont(None, 28 if settings.large_text else 20)
    line_h = font.get_linesize()
    hud_h = HUD_LINES * line_h + 8
    screen = pygame.display.set_mode((args.width, args.height))
    clock = pygame.time.Clock()
    theme = theme_for(settings)

    def build_tileset() -> Tileset:
        grid = session.grid
        tile = tile_size_for((args.width, args.height - hud_h), (grid.width, grid.height))
        pygame.display.set_caption(f"Homeward — level {session.level}")
        return Tileset(tile, theme, use_icons=settings.use_icons)

    tileset = build_tileset()
    subtitles.speak(INSTRUCTIONS)

    running = True
    while running:
        # --- Input ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    session.reset()
                elif event.key in (pygame.K_RETURN, pygame.K_SPACE) and session.won:
                    session.next_level()
                    tileset = build_tileset()
                elif event.key in PYGAME_KEYS:
                    session.move(PYGAME_KEYS[event.key])

        # --- Rendering ---
        grid = session.grid
        tile = tileset.tile_size
        screen.fill(theme.path)
        for y in range(grid.height):
            for x in range(grid.width):
                kind = "path" if grid.is_open(x, y) else "wall"
                screen.blit(tileset.get(kind), (x * tile, y * tile))
        gx, gy = grid.goal
        screen.blit(tileset.get("goal"), (gx * tile, gy * tile))
        px, py = session.position
        screen.blit(tileset.get("player"), (px * tile, py * tile))

        # HUD: status, banner or subtitle
        y0 = args.height - hud_h + 4
        lines = [status_line(session.level, session.moves, session.position)]
        if session.won:
            lines.append(win_banner(session.moves) + "  Press Enter for the next level.")
        if subtitles.text and settings.subtitles:
            lines.append(subtitles.text)
        pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(0, y0 - 4, args.width, hud_h))
        for i, text in enumerate(lines[:HUD_LINES]):
            screen.blit(font.render(text, True, (230, 230, 230)), (8, y0 + i * line_h))

        subtitles.tick()
        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
