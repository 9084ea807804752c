"""Core graph engine for pattern search and k-mer ranking on GFA graphs."""

from .alphabet import (
    ALPHABET,
    PRIME,
    SIGMA,
    complement,
    decode_kmer,
    encode_kmer,
    is_valid,
)
from .graph import (
    NO_NODE,
    Edge,
    InvalidSegment,
    OrientedNode,
    SequenceGraph,
    UnknownNode,
)
from .linearize import linearize
from .endpoints import (
    resolve_source,
    resolve_destination,
)
from .walks import (
    Walk,
    iter_walks,
)
from .search import contains
from .kmers import (
    count_kmers,
    top_kmers,
)
from .gfa import (
    GFAFormatError,
    parse_gfa,
    read_gfa,
)

__all__ = [
    "ALPHABET",
    "PRIME",
    "SIGMA",
    "complement",
    "decode_kmer",
    "encode_kmer",
    "is_valid",
    "NO_NODE",
    "Edge",
    "InvalidSegment",
    "OrientedNode",
    "SequenceGraph",
    "UnknownNode",
    "linearize",
    "resolve_source",
    "resolve_destination",
    "Walk",
    "iter_walks",
    "contains",
    "count_kmers",
    "top_kmers",
    "GFAFormatError",
    "parse_gfa",
    "read_gfa",
]
