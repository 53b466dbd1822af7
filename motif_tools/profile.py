import logging
from enum import Enum

import numpy as np
import pandas as pd

from motif_tools.dna import Dna
from motif_tools.sequence import ALPHABET, SYMBOL_TO_NUMBER

logger = logging.getLogger(__name__)


class Averaging(Enum):
    PLAIN = "plain"
    LAPLACE = "laplace"

    @classmethod
    def from_pseudocounts(cls, pseudocounts):
        return cls.LAPLACE if pseudocounts else cls.PLAIN


class Profile:
    """4 x k matrix where row i, column j is the frequency of ALPHABET[i] at position j.

    PLAIN divides counts by the number of motifs. LAPLACE uses (count + 1) / (2 * n),
    which keeps every value non-zero; columns are not renormalised, so probabilities
    under LAPLACE are relative and only comparable within one profile.
    """

    def __init__(self, matrix):
        matrix = np.asarray(matrix, dtype=float)
        if matrix.ndim != 2 or matrix.shape[0] != len(ALPHABET):
            raise ValueError(f"Profile needs {len(ALPHABET)} rows of equal length, got shape {matrix.shape}")
        if (matrix < 0).any():
            raise ValueError("Profile values must be non-negative")
        self._matrix = matrix
        self._rows = matrix.tolist()

    @classmethod
    def build(cls, motifs, averaging=Averaging.PLAIN):
        if len(motifs) == 0:
            raise ValueError("Cannot build a profile from an empty motif collection")
        k = len(motifs[0])
        if k == 0:
            raise ValueError("Cannot build a profile from empty motifs")
        counts = np.zeros((len(ALPHABET), k))
        for motif in motifs:
            if len(motif) != k:
                raise ValueError(f"Motif {str(motif)!r} has length {len(motif)}, expected {k}")
            for i, nucleotide in enumerate(motif):
                counts[SYMBOL_TO_NUMBER[nucleotide], i] += 1
        n = len(motifs)
        if averaging is Averaging.LAPLACE:
            return cls((counts + 1) / (2 * n))
        return cls(counts / n)

    @classmethod
    def from_rows(cls, rows):
        rows = [list(row) for row in rows]
        if len(rows) != len(ALPHABET):
            raise ValueError(f"Profile needs {len(ALPHABET)} rows, got {len(rows)}")
        widths = {len(row) for row in rows}
        if len(widths) != 1 or 0 in widths:
            raise ValueError("Profile rows must be non-empty and of equal length")
        return cls(rows)

    @property
    def width(self):
        return self._matrix.shape[1]

    @property
    def matrix(self):
        return self._matrix.copy()

    def __len__(self):
        return self.width

    def __repr__(self):
        return f"Profile(width={self.width})"

    def value_at(self, symbol, column):
        if symbol not in SYMBOL_TO_NUMBER:
            raise KeyError(f"Unsupported symbol {symbol!r}")
        if not 0 <= column < self.width:
            raise IndexError(f"Column {column} out of range for profile of width {self.width}")
        return self._rows[SYMBOL_TO_NUMBER[symbol]][column]

    def column(self, column):
        return [(symbol, self.value_at(symbol, column)) for symbol in ALPHABET]

    def most_popular(self, column):
        best_symbol, best_value = None, -1.0
        for symbol, value in self.column(column):
            if value > best_value:
                best_symbol, best_value = symbol, value
        return best_symbol

    def probability(self, kmer):
        if len(kmer) != self.width:
            raise ValueError(f"k-mer of length {len(kmer)} does not fit profile of width {self.width}")
        prob = 1.0
        for i, nucleotide in enumerate(kmer):
            prob *= self._rows[SYMBOL_TO_NUMBER[nucleotide]][i]
        return prob

    def kmer_probabilities(self, dna):
        for kmer in Dna(dna).kmers(self.width):
            yield self.probability(kmer), kmer

    def most_probable_kmer(self, dna, k=None):
        if k is not None and k != self.width:
            raise ValueError(f"k={k} does not match profile width {self.width}")
        max_prob = -1.0
        best_kmer = None
        for prob, kmer in self.kmer_probabilities(dna):
            if prob > max_prob:
                max_prob = prob
                best_kmer = kmer
        if best_kmer is None:
            raise ValueError(f"Sequence of length {len(dna)} is shorter than profile width {self.width}")
        return max_prob, best_kmer

    def random_kmer(self, dna, rng):
        """Draw one window of `dna` with probability proportional to its profile probability."""
        kmers = []
        weights = []
        for prob, kmer in self.kmer_probabilities(dna):
            kmers.append(kmer)
            weights.append(prob)
        if not kmers:
            raise ValueError(f"Sequence of length {len(dna)} is shorter than profile width {self.width}")
        if sum(weights) == 0:
            logger.debug("All windows have zero probability, sampling uniformly")
            return kmers[rng.randrange(len(kmers))]
        return rng.choices(kmers, weights=weights)[0]

    def consensus(self):
        return Dna.unchecked("".join(self.most_popular(i) for i in range(self.width)))

    def to_frame(self):
        return pd.DataFrame(self._matrix, index=list(ALPHABET), columns=range(1, self.width + 1))
