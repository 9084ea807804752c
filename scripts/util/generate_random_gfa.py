#!/usr/bin/env python3
"""
Write a random bidirected GFA graph for trying out gfawalk.

Segments get random A/T/C/G sequences. Links only run from lower to higher
segment numbers unless --loops is given, in which case that many links are
added in the opposite direction so the graph contains cycles.

Usage:
    python generate_random_gfa.py out.gfa --segments 20 --links 40 --seed 1
    python generate_random_gfa.py out.gfa --loops 3
"""

import argparse
import random
from pathlib import Path

BASES = ["A", "T", "C", "G"]
SIGNS = ["+", "-"]


def generate_gfa_lines(segments, links, loops=0, min_len=1, max_len=8, seed=None):
    rng = random.Random(seed)
    lines = ["H\tVN:Z:1.0"]
    for name in range(1, segments + 1):
        length = rng.randint(min_len, max_len)
        sequence = "".join(rng.choice(BASES) for _ in range(length))
        lines.append(f"S\t{name}\t{sequence}")
    if segments < 2:
        return lines
    for count in range(links + loops):
        a, b = sorted(rng.sample(range(1, segments + 1), 2))
        if count >= links:
            a, b = b, a
        lines.append(f"L\t{a}\t{rng.choice(SIGNS)}\t{b}\t{rng.choice(SIGNS)}\t0M")
    return lines


def main():
    parser = argparse.ArgumentParser(description="Generate a random GFA graph")
    parser.add_argument("output", type=Path, help="Output GFA path")
    parser.add_argument("--segments", type=int, default=10)
    parser.add_argument("--links", type=int, default=15)
    parser.add_argument("--loops", type=int, default=0, help="Links closing cycles")
    parser.add_argument("--min-len", type=int, default=1)
    parser.add_argument("--max-len", type=int, default=8)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    lines = generate_gfa_lines(
        args.segments,
        args.links,
        loops=args.loops,
        min_len=args.min_len,
        max_len=args.max_len,
        seed=args.seed,
    )
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text("\n".join(lines) + "\n", encoding="utf-8")
    print(f"Wrote {args.segments} segments and {args.links + args.loops} links to {args.output}")


if __name__ == "__main__":
    main()
