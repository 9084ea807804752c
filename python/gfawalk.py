"""Command line entrypoint for gfawalk pattern search and k-mer ranking."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Sequence, Tuple

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from gfawalk_core import (
    NO_NODE,
    GFAFormatError,
    InvalidSegment,
    SequenceGraph,
    contains,
    linearize,
    read_gfa,
    resolve_destination,
    resolve_source,
    top_kmers,
)

DEFAULT_PATTERN = "TTCA"
DEFAULT_K = 3
DEFAULT_TOP = 10


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Search a pattern and rank k-mers along the walks of a GFA graph"
    )
    parser.add_argument("graph", type=Path, help="Path to the input GFA file")
    parser.add_argument(
        "--pattern",
        default=DEFAULT_PATTERN,
        help="Pattern to look for along source-to-destination walks",
    )
    parser.add_argument(
        "-k",
        type=int,
        default=DEFAULT_K,
        help="K-mer length used for the frequency ranking",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_TOP,
        help="Number of most frequent k-mers to report",
    )
    parser.add_argument(
        "--kmers-fasta",
        type=Path,
        help="Optional FASTA path for the ranked k-mers",
    )
    args = parser.parse_args(argv)
    if args.k < 1:
        parser.error("-k must be a positive integer")
    if args.top < 0:
        parser.error("--top must not be negative")
    return args


def load_graph(path: Path) -> SequenceGraph:
    try:
        return read_gfa(path)
    except OSError as exc:
        raise SystemExit(f"Couldn't open the input file: {exc}") from exc
    except (GFAFormatError, InvalidSegment) as exc:
        raise SystemExit(f"Invalid GFA file {path}: {exc}") from exc


def write_kmers(path: Path, ranking: List[Tuple[str, int]]) -> None:
    records = [
        SeqRecord(Seq(kmer), id=f"kmer_{rank}", description=f"count={count}")
        for rank, (kmer, count) in enumerate(ranking, start=1)
    ]
    path.parent.mkdir(parents=True, exist_ok=True)
    SeqIO.write(records, path, "fasta")


def run(args: argparse.Namespace) -> None:
    print(f'Reading input file "{args.graph}"... ', end="", flush=True)
    graph = load_graph(args.graph)
    print("done!")
    print(f"Segments              : {graph.segment_count}")
    print(f"Edges                 : {graph.edge_count}")

    print("Checking whether the graph is acyclic... ", end="", flush=True)
    graph, was_cyclic = linearize(graph)
    print("done!")
    if was_cyclic:
        print("The graph was cyclic, and has now been rendered acyclic!")
    else:
        print("The graph was already acyclic!")

    source = resolve_source(graph)
    if source == NO_NODE:
        raise SystemExit("No source node was found in the graph")
    destination = resolve_destination(graph, source)
    if destination == NO_NODE:
        raise SystemExit(f"No destination node is reachable from {source}")
    print(f"Source                : {source}")
    print(f"Destination           : {destination}")
    print()

    print(f'Checking if pattern "{args.pattern}" is contained within a path...')
    if contains(graph, args.pattern.upper(), source, destination):
        print("The pattern was found!")
    else:
        print("The pattern was NOT found!")
    print()

    print(f"Ranking the top {args.top} most frequent K-mers with K={args.k}:")
    ranking = top_kmers(graph, args.k, args.top, source, destination)
    if not ranking:
        print("No k-mers were found!")
    for rank, (kmer, count) in enumerate(ranking, start=1):
        print(f"{rank}. {kmer} - {count}")

    if args.kmers_fasta is not None:
        write_kmers(args.kmers_fasta, ranking)
        print(f"\nK-mers written to {args.kmers_fasta}")


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    run(args)


if __name__ == "__main__":
    main()
