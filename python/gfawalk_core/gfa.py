"""Minimal GFA reader producing a :class:`SequenceGraph`.

Only segment (``S``) and link (``L``) records are interpreted; header lines
are skipped and any other record type is ignored with a warning.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Dict, Iterable, List, Set, Tuple, Union

from .graph import OrientedNode, SequenceGraph

ORIENTATIONS = {"+": False, "-": True}


class GFAFormatError(ValueError):
    """Malformed GFA record."""

    def __init__(self, line_number: int, message: str) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


def _orientation(line_number: int, marker: str) -> bool:
    try:
        return ORIENTATIONS[marker]
    except KeyError:
        raise GFAFormatError(
            line_number, f"orientation must be '+' or '-', got {marker!r}"
        ) from None


def parse_gfa(lines: Iterable[str]) -> SequenceGraph:
    """Build a graph from GFA text lines.

    Segments get indices in the order they appear. Links are resolved after
    every segment has been read, so a link may name a segment declared
    further down the file.
    """

    return _build_graph(lines)


def _build_graph(lines: Iterable[str]) -> SequenceGraph:
    # Must be called directly from parse_gfa/read_gfa (warning stacklevel).
    graph = SequenceGraph()
    segments: Dict[str, int] = {}
    links: List[Tuple[int, str, bool, str, bool]] = []
    skipped: Set[str] = set()

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip() or line.startswith("#"):
            continue
        fields = line.split("\t")
        record = fields[0]
        if record == "H":
            continue
        if record == "S":
            if len(fields) < 3:
                raise GFAFormatError(line_number, "segment record needs a name and a sequence")
            name, sequence = fields[1], fields[2]
            if name in segments:
                raise GFAFormatError(line_number, f"duplicate segment name {name!r}")
            segments[name] = graph.add_segment(sequence.upper())
        elif record == "L":
            if len(fields) < 5:
                raise GFAFormatError(line_number, "link record needs two oriented segments")
            links.append(
                (
                    line_number,
                    fields[1],
                    _orientation(line_number, fields[2]),
                    fields[3],
                    _orientation(line_number, fields[4]),
                )
            )
        elif record not in skipped:
            skipped.add(record)
            warnings.warn(
                f"Ignoring unsupported GFA record type {record!r} (first seen on line {line_number})",
                stacklevel=3,
            )

    for line_number, from_name, from_reverse, to_name, to_reverse in links:
        for name in (from_name, to_name):
            if name not in segments:
                raise GFAFormatError(line_number, f"link refers to unknown segment {name!r}")
        graph.add_edge(
            OrientedNode(segments[from_name], from_reverse),
            OrientedNode(segments[to_name], to_reverse),
        )

    return graph


def read_gfa(path: Union[str, Path]) -> SequenceGraph:
    """Read a GFA file from ``path``."""

    with Path(path).open("r", encoding="utf-8") as handle:
        return _build_graph(handle)
