from functools import total_ordering

from motif_tools.sequence import ALPHABET, find_exact, find_fuzzy

COMPLEMENT = {'A': 'T', 'T': 'A', 'C': 'G', 'G': 'C'}


class InvalidDnaError(ValueError):
    def __init__(self, text, index):
        self.text = text
        self.index = index
        self.symbol = text[index]
        super().__init__(f"Invalid nucleotide {self.symbol!r} at position {index} (expected one of {ALPHABET})")


def complement_symbol(symbol):
    try:
        return COMPLEMENT[symbol]
    except KeyError:
        raise ValueError(f"Cannot complement unsupported symbol {symbol!r}") from None


@total_ordering
class Dna:
    """An immutable DNA string over A, C, G and T.

    `Dna.parse` validates untrusted text. `Dna.unchecked` skips validation and is
    meant for values derived from an already validated sequence, such as the
    k-mers of one.
    """

    __slots__ = ("_seq",)

    def __init__(self, seq):
        if isinstance(seq, Dna):
            self._seq = seq.seq
            return
        for i, symbol in enumerate(seq):
            if symbol not in COMPLEMENT:
                raise InvalidDnaError(seq, i)
        self._seq = seq

    @classmethod
    def parse(cls, text):
        return cls(text.strip())

    @classmethod
    def unchecked(cls, text):
        dna = cls.__new__(cls)
        dna._seq = text
        return dna

    @property
    def seq(self):
        return self._seq

    def __str__(self):
        return self._seq

    def __repr__(self):
        return f"Dna({self._seq!r})"

    def __len__(self):
        return len(self._seq)

    def __iter__(self):
        return iter(self._seq)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Dna.unchecked(self._seq[index])
        return self._seq[index]

    def __eq__(self, other):
        if isinstance(other, Dna):
            return self._seq == other._seq
        if isinstance(other, str):
            return self._seq == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Dna):
            return self._seq < other._seq
        if isinstance(other, str):
            return self._seq < other
        return NotImplemented

    def __hash__(self):
        return hash(self._seq)

    def kmer(self, k, i):
        if i < 0 or i + k > len(self._seq):
            raise IndexError(f"{k}-mer at {i} is outside a sequence of length {len(self._seq)}")
        return Dna.unchecked(self._seq[i:i + k])

    def kmers(self, k):
        return KmerWindows(self, k)

    def complement(self):
        return Dna.unchecked("".join(complement_symbol(symbol) for symbol in self._seq))

    def reverse(self):
        return Dna.unchecked(self._seq[::-1])

    def reverse_complement(self):
        return self.complement().reverse()

    def find(self, pattern, predicate=None):
        pattern = str(pattern)
        if predicate is None:
            offsets = find_exact(self._seq, pattern)
            return offsets, [Dna.unchecked(pattern) for _ in offsets]
        offsets, matches = find_fuzzy(self._seq, pattern, predicate)
        return offsets, [Dna.unchecked(match) for match in matches]


class KmerWindows:
    """Overlapping k-mers of a sequence; iterating again starts over."""

    def __init__(self, dna, k):
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        self.dna = dna
        self.k = k

    def __len__(self):
        return max(len(self.dna) - self.k + 1, 0)

    def __iter__(self):
        for i in range(len(self)):
            yield self.dna.kmer(self.k, i)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return [self.dna.kmer(self.k, j) for j in range(*i.indices(len(self)))]
        if i < 0:
            i += len(self)
        if not 0 <= i < len(self):
            raise IndexError(f"window {i} out of range")
        return self.dna.kmer(self.k, i)
