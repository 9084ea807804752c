"""Nucleotide alphabet tables and base-4 helpers shared by the traversals."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from Bio.Seq import Seq

# Digit order matters: decoding pads with ALPHABET[0].
ALPHABET = ("A", "T", "C", "G")
DIGITS: Mapping[str, int] = MappingProxyType(
    {symbol: digit for digit, symbol in enumerate(ALPHABET)}
)

SIGMA = len(ALPHABET)  # radix of the Karp-Rabin fingerprint
PRIME = 402309354485303  # modulus of the Karp-Rabin fingerprint


def is_valid(text: str) -> bool:
    """Return ``True`` when every symbol of ``text`` belongs to the alphabet."""

    return all(symbol in DIGITS for symbol in text)


def complement(text: str) -> str:
    """Return the reverse complement of ``text`` (A<->T, C<->G, reversed)."""

    return str(Seq(text).reverse_complement())


def encode_kmer(text: str) -> int:
    """Read ``text`` as a base-4 numeral using the alphabet digits."""

    code = 0
    for symbol in text:
        code = code * SIGMA + DIGITS[symbol]
    return code


def decode_kmer(code: int, k: int) -> str:
    """Inverse of :func:`encode_kmer` for a k-mer of width ``k``.

    Leading zero digits are significant, so the result is always left padded
    with the zero symbol: ``decode_kmer(0, 3) == "AAA"`` and
    ``decode_kmer(1, 2) == "AT"``.
    """

    symbols = [ALPHABET[0]] * k
    position = k - 1
    while code and position >= 0:
        code, digit = divmod(code, SIGMA)
        symbols[position] = ALPHABET[digit]
        position -= 1
    return "".join(symbols)
