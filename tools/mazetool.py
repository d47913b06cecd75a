#!/usr/bin/env python3
import argparse, csv, logging, random
from homeward.mapgen.generator import generate_maze
from homeward.mapgen.size import interior_size, loop_count
from homeward.mapgen.verify import border_is_wall, cycle_count, is_solvable, shortest_path_length
from homeward.tiles import WALL

def write_tsv(mat, path):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        for r in mat:
            w.writerow(r)

def ascii_rows(grid, wall='#', path='.'):
    rows = []
    for y in range(grid.height):
        line = []
        for x in range(grid.width):
            if (x, y) == grid.start:
                line.append('S')
            elif (x, y) == grid.goal:
                line.append('G')
            else:
                line.append(wall if grid.get(x, y) == WALL else path)
        rows.append(''.join(line))
    return rows

def cmd_emit(args):
    grid = generate_maze(args.level, random.Random(args.seed))
    write_tsv(grid.as_matrix(), args.out)
    print(f"Wrote {args.out} ({grid.width}x{grid.height})")

def cmd_show(args):
    grid = generate_maze(args.level, random.Random(args.seed))
    for row in ascii_rows(grid):
        print(row)
    print(f"level {args.level}: {grid.width}x{grid.height}, shortest path {shortest_path_length(grid)} moves")

def cmd_check(args):
    rng = random.Random(args.seed)
    bad = 0
    for lvl in range(1, args.levels + 1):
        for _ in range(args.runs):
            grid = generate_maze(lvl, rng)
            inner = interior_size(lvl)
            problems = []
            if not is_solvable(grid):
                problems.append("goal unreachable")
            if not border_is_wall(grid):
                problems.append("open border")
            if cycle_count(grid) > loop_count(lvl, inner):
                problems.append("too many loops")
            if problems:
                bad += 1
                print(f"level {lvl}: " + ", ".join(problems))
    print(f"Checked {args.levels * args.runs} mazes, {bad} bad")
    return 1 if bad else 0

def main():
    p = argparse.ArgumentParser()
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--level', type=int, required=True)
    p1.add_argument('--seed', type=int, default=None)
    p1.add_argument('--out', type=str, required=True)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('show')
    p2.add_argument('--level', type=int, default=1)
    p2.add_argument('--seed', type=int, default=None)
    p2.set_defaults(func=cmd_show)
    p3 = sub.add_parser('check')
    p3.add_argument('--levels', type=int, default=30)
    p3.add_argument('--runs', type=int, default=20)
    p3.add_argument('--seed', type=int, default=0)
    p3.set_defaults(func=cmd_check)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    return args.func(args) or 0

if __name__ == '__main__':
    raise SystemExit(main())
