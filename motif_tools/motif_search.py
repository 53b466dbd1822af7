import logging
import random

from motif_tools.config import DEFAULT_PARAMS
from motif_tools.dna import Dna
from motif_tools.profile import Averaging, Profile
from motif_tools.sequence import ALPHABET, find_fuzzy, hamming_distance, neighbors, permutations_with_repetition

logger = logging.getLogger(__name__)


class MotifSearchError(ValueError):
    pass


def consensus(motifs):
    return Profile.build(motifs, Averaging.PLAIN).consensus()


def score(motifs):
    center = consensus(motifs)
    return sum(hamming_distance(motif, center) for motif in motifs)


def distance(dnas, pattern):
    """Sum over `dnas` of the smallest Hamming distance between `pattern` and any window."""
    pattern = str(pattern)
    k = len(pattern)
    total = 0
    for dna in dnas:
        text = str(dna)
        if k == 0 or k > len(text):
            raise ValueError(f"Pattern of length {k} does not fit a sequence of length {len(text)}")
        total += min(hamming_distance(pattern, text[i:i + k]) for i in range(len(text) - k + 1))
    return total


class MotifSearch:
    def __init__(self, seed=None):
        self.rng = random.Random(seed)

    def validate(self, sequences, k, t=None):
        if not sequences:
            raise MotifSearchError("DNA collection is empty")
        dnas = [Dna(seq) for seq in sequences]
        if t is not None and t != len(dnas):
            raise MotifSearchError(f"Expected t={t} sequences, got {len(dnas)}")
        if k <= 0:
            raise MotifSearchError(f"k must be positive, got {k}")
        shortest = min(len(dna) for dna in dnas)
        if k > shortest:
            raise MotifSearchError(f"k={k} is longer than the shortest sequence ({shortest})")
        return dnas

    def validate_count(self, name, value):
        if value is None or value < 1:
            raise MotifSearchError(f"{name} must be at least 1, got {value}")
        return value

    def score(self, motifs):
        return score(motifs)

    def consensus(self, motifs):
        return consensus(motifs)

    def first_kmers(self, dnas, k):
        return [dna.kmer(k, 0) for dna in dnas]

    def most_probable_kmer(self, dna, profile):
        _, kmer = profile.most_probable_kmer(dna)
        return kmer

    def random_kmer(self, dna, k):
        start = self.rng.randint(0, len(dna) - k)
        return dna.kmer(k, start)


class MotifEnumeration(MotifSearch):
    def occurs_with_mismatches(self, text, pattern, d):
        offsets, _ = find_fuzzy(text, pattern, lambda window, pat: hamming_distance(window, pat) <= d)
        return len(offsets) > 0

    def run(self, sequences, k, d):
        if d < 0:
            raise MotifSearchError(f"d must be non-negative, got {d}")
        dnas = self.validate(sequences, k)
        texts = [str(dna) for dna in dnas]
        logger.info("Enumerating (%d, %d)-motifs over %d sequences", k, d, len(texts))
        motifs = set()
        rejected = set()
        for kmer in dnas[0].kmers(k):
            for candidate in neighbors(str(kmer), d):
                if candidate in motifs or candidate in rejected:
                    continue
                if all(self.occurs_with_mismatches(text, candidate, d) for text in texts):
                    motifs.add(candidate)
                else:
                    rejected.add(candidate)
        logger.debug("Checked %d candidates, kept %d", len(motifs) + len(rejected), len(motifs))
        return {Dna.unchecked(motif) for motif in motifs}


class MedianString(MotifSearch):
    def run(self, sequences, k):
        dnas = self.validate(sequences, k)
        logger.info("Searching all %d %d-mers for the median string", 4 ** k, k)
        best_distance = None
        median = None
        for symbols in permutations_with_repetition(ALPHABET, k):
            pattern = "".join(symbols)
            current = distance(dnas, pattern)
            if best_distance is None or current < best_distance:
                best_distance = current
                median = pattern
                logger.debug("New median %s at distance %d", median, best_distance)
        return Dna.unchecked(median)


class GreedyMotifSearch(MotifSearch):
    def __init__(self, pseudocounts=False):
        super().__init__()
        self.averaging = Averaging.from_pseudocounts(pseudocounts)

    def run(self, sequences, k, t=None):
        dnas = self.validate(sequences, k, t)
        logger.info("Greedy motif search: k=%d, t=%d, averaging=%s", k, len(dnas), self.averaging.value)
        best_motifs = self.first_kmers(dnas, k)
        best_score = self.score(best_motifs)
        for seed in dnas[0].kmers(k):
            motifs = [seed]
            for dna in dnas[1:]:
                profile = Profile.build(motifs, self.averaging)
                motifs.append(self.most_probable_kmer(dna, profile))
            current_score = self.score(motifs)
            if current_score < best_score:
                best_score = current_score
                best_motifs = motifs
                logger.debug("Seed %s improved score to %d", seed, best_score)
        return best_motifs


class RandomMotifSearch(MotifSearch):
    def __init__(self, seed=None, max_iterations=None):
        super().__init__(seed)
        if max_iterations is None:
            max_iterations = DEFAULT_PARAMS["max_inner_iterations"]
        self.max_iterations = self.validate_count("max_iterations", max_iterations)

    def iterate(self, dnas, k):
        motifs = [self.random_kmer(dna, k) for dna in dnas]
        best_motifs = motifs
        best_score = self.score(motifs)
        for _ in range(self.max_iterations):
            profile = Profile.build(motifs, Averaging.LAPLACE)
            motifs = [self.most_probable_kmer(dna, profile) for dna in dnas]
            current_score = self.score(motifs)
            if current_score < best_score:
                best_score = current_score
                best_motifs = motifs
            else:
                break
        return best_motifs, best_score

    def run(self, sequences, k, t=None, restarts=None):
        if restarts is None:
            restarts = DEFAULT_PARAMS["randomized_restarts"]
        self.validate_count("restarts", restarts)
        dnas = self.validate(sequences, k, t)
        logger.info("Randomized motif search: k=%d, t=%d, restarts=%d", k, len(dnas), restarts)
        best_motifs = self.first_kmers(dnas, k)
        best_score = self.score(best_motifs)
        for restart in range(restarts):
            motifs, current_score = self.iterate(dnas, k)
            if current_score < best_score:
                best_score = current_score
                best_motifs = motifs
                logger.debug("Restart %d improved score to %d", restart, best_score)
        return best_motifs


class GibbsSamplerMotifSearch(MotifSearch):
    def sample(self, dnas, k, n):
        motifs = [self.random_kmer(dna, k) for dna in dnas]
        best_motifs = motifs[:]
        best_score = self.score(best_motifs)
        for _ in range(n):
            i = self.rng.randrange(len(dnas))
            profile = Profile.build(motifs[:i] + motifs[i + 1:], Averaging.LAPLACE)
            motifs[i] = profile.random_kmer(dnas[i], self.rng)
            current_score = self.score(motifs)
            if current_score < best_score:
                best_score = current_score
                best_motifs = motifs[:]
        return best_motifs, best_score

    def run(self, sequences, k, t, n, restarts=None):
        if restarts is None:
            restarts = DEFAULT_PARAMS["gibbs_restarts"]
        self.validate_count("restarts", restarts)
        self.validate_count("n", n)
        dnas = self.validate(sequences, k, t)
        if len(dnas) < 2:
            raise MotifSearchError("Gibbs sampling needs at least two sequences")
        logger.info("Gibbs sampler: k=%d, t=%d, n=%d, restarts=%d", k, len(dnas), n, restarts)
        best_motifs = self.first_kmers(dnas, k)
        best_score = self.score(best_motifs)
        for restart in range(restarts):
            motifs, current_score = self.sample(dnas, k, n)
            if current_score < best_score:
                best_score = current_score
                best_motifs = motifs
                logger.debug("Restart %d improved score to %d", restart, best_score)
        return best_motifs
