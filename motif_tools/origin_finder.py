import logging
from abc import ABC
from collections import defaultdict

from motif_tools.dna import Dna
from motif_tools.sequence import (
    find_exact,
    find_fuzzy,
    hamming_distance,
    min_indices,
    neighbors,
    number_to_pattern,
    pattern_to_number,
)

logger = logging.getLogger(__name__)


class OFBase(ABC):
    def reverse_complement(self, sequence):
        return str(Dna(sequence).reverse_complement())

    def hamming_distance(self, s1, s2):
        return hamming_distance(s1, s2)

    def generate_neighbors(self, pattern, d):
        return neighbors(pattern, d)

    def count_kmer_occurrences(self, text, k):
        counts = defaultdict(int)
        for i in range(len(text) - k + 1):
            kmer = text[i:i+k]
            counts[kmer] += 1
        return counts

    def check_k(self, text, k):
        if k <= 0 or k > len(text):
            raise ValueError(f"k={k} must be between 1 and the text length ({len(text)})")

    def check_d(self, d):
        if d < 0:
            raise ValueError(f"d must be non-negative, got {d}")


class PatternCount(OFBase):
    def run(self, text, pattern):
        return len(find_exact(text, pattern))


class PatternMatching(OFBase):
    def run(self, text, pattern):
        return find_exact(text, pattern)


class ApproximatePatternMatching(OFBase):
    def run(self, text, pattern, d):
        self.check_d(d)
        offsets, _ = find_fuzzy(text, pattern, lambda window, pat: self.hamming_distance(window, pat) <= d)
        return offsets


class ApproximatePatternCount(ApproximatePatternMatching):
    def run(self, text, pattern, d):
        return len(super().run(text, pattern, d))


class ReverseComplement(OFBase):
    def run(self, text):
        return self.reverse_complement(text)


class HammingDistance(OFBase):
    def run(self, s1, s2):
        return self.hamming_distance(s1, s2)


class Neighbors(OFBase):
    def run(self, pattern, d):
        return sorted(self.generate_neighbors(pattern, d))


class GCSkews(OFBase):
    def skew(self, text):
        values = [0]
        for base in text:
            if base == 'G':
                values.append(values[-1] + 1)
            elif base == 'C':
                values.append(values[-1] - 1)
            else:
                values.append(values[-1])
        return values

    def run(self, text):
        return min_indices(self.skew(text))


class FrequentWords(OFBase):
    def run(self, text, k):
        self.check_k(text, k)
        counts = self.count_kmer_occurrences(text, k)
        max_count = max(counts.values())
        return sorted(kmer for kmer, count in counts.items() if count == max_count)


class FrequentKmers(OFBase):
    def run(self, text, k, d, reverse_complements=True):
        self.check_k(text, k)
        self.check_d(d)
        counts = self.count_kmer_occurrences(text, k)
        close = defaultdict(int)
        for kmer, count in counts.items():
            for pattern in self.generate_neighbors(kmer, d):
                close[pattern] += count
            if reverse_complements:
                for pattern in self.generate_neighbors(self.reverse_complement(kmer), d):
                    close[pattern] += count
        max_count = max(close.values())
        logger.debug("Most frequent (%d, %d)-mers appear %d times", k, d, max_count)
        return sorted((pattern, count) for pattern, count in close.items() if count == max_count)


class ClumpFinding(OFBase):
    def run(self, genome, k, L, t):
        self.check_k(genome, k)
        if L < k or L > len(genome):
            raise ValueError(f"Window length L={L} must be between k={k} and the genome length ({len(genome)})")
        frequencies = [0] * (4 ** k)
        clumps = set()
        window = genome[:L]
        for i in range(L - k + 1):
            frequencies[pattern_to_number(window[i:i+k])] += 1
        for index, count in enumerate(frequencies):
            if count >= t:
                clumps.add(index)
        for i in range(1, len(genome) - L + 1):
            frequencies[pattern_to_number(genome[i-1:i-1+k])] -= 1
            index = pattern_to_number(genome[i+L-k:i+L])
            frequencies[index] += 1
            if frequencies[index] >= t:
                clumps.add(index)
        return sorted(number_to_pattern(index, k) for index in clumps)
