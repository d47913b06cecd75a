#!/usr/bin/env python3
# Render a generated maze (or a TSV of 0/1 cells) to a PNG using Pillow.

import argparse, os, random
from PIL import Image, ImageDraw

from homeward.config import AccessibilitySettings
from homeward.grid import Grid
from homeward.mapgen.generator import generate_maze
from homeward.render.palette import theme_for
from homeward.tiles import WALL

def read_tsv(path):
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line:
                continue
            rows.append([int(x) for x in line.split("\t")])
    try:
        return Grid.from_matrix(rows)
    except ValueError as e:
        raise SystemExit(f"{path}: {e}")

def render(grid, tile_size, theme, player=None):
    img = Image.new("RGB", (grid.width * tile_size, grid.height * tile_size), theme.path)
    draw = ImageDraw.Draw(img)
    for y in range(grid.height):
        for x in range(grid.width):
            if grid.get(x, y) == WALL:
                x0, y0 = x * tile_size, y * tile_size
                draw.rectangle([x0, y0, x0 + tile_size - 1, y0 + tile_size - 1], fill=theme.wall)
    gx, gy = grid.goal
    draw.rectangle([gx * tile_size, gy * tile_size, (gx + 1) * tile_size - 1, (gy + 1) * tile_size - 1], fill=theme.goal)
    px, py = player if player is not None else grid.start
    r = tile_size / 3
    cx, cy = px * tile_size + tile_size / 2, py * tile_size + tile_size / 2
    draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=theme.player)
    return img

def main():
    ap = argparse.ArgumentParser(description="Render a maze to PNG")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--level", type=int)
    src.add_argument("--tsv", type=str)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--tile", type=int, default=24)
    ap.add_argument("--palette", default="normal",
                    choices=["normal", "protanopia", "deuteranopia", "tritanopia"])
    ap.add_argument("--high-contrast", action="store_true")
    ap.add_argument("--out", required=True)
    args = ap.parse_args()

    grid = read_tsv(args.tsv) if args.tsv else generate_maze(args.level, random.Random(args.seed))
    settings = AccessibilitySettings(high_contrast=args.high_contrast, color_blind_mode=args.palette)
    img = render(grid, args.tile, theme_for(settings))
    os.makedirs(os.path.dirname(os.path.abspath(args.out)), exist_ok=True)
    img.save(args.out)
    print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
