"""Tests for the replication origin utilities."""

import pytest

from motif_tools.origin_finder import (
    ApproximatePatternCount,
    ApproximatePatternMatching,
    ClumpFinding,
    FrequentKmers,
    FrequentWords,
    GCSkews,
    Neighbors,
    PatternCount,
    PatternMatching,
    ReverseComplement,
)

APPROXIMATE_TEXT = (
    "CGCCCGAATCCAGAACGCATTCCCATATTTCGGGACCACTGGCCTCCACGGTACGGACGTCAATCAAATGCCTAGCGGCTTGTGGTTTCTCCTACGCTCC"
)
FREQUENT_TEXT = "ACGTTGCATGTCGCATGATGCATGAGAGCT"


def test_pattern_count():
    assert PatternCount().run("GCGCG", "GCG") == 2


def test_pattern_matching():
    assert PatternMatching().run("GATATATGCATATACTT", "ATAT") == [1, 3, 9]


def test_approximate_pattern_matching():
    assert ApproximatePatternMatching().run(APPROXIMATE_TEXT, "ATTCTGGA", 3) == [6, 7, 26, 27, 78]


def test_approximate_pattern_matching_rejects_negative_d():
    with pytest.raises(ValueError):
        ApproximatePatternMatching().run("ACGTACGT", "ACG", -1)


def test_approximate_pattern_count():
    assert ApproximatePatternCount().run("TTTAGAGCCTTCAGAGG", "GAGG", 2) == 4


def test_reverse_complement():
    assert ReverseComplement().run("AAAACCCGGT") == "ACCGGGTTTT"


def test_neighbors_sorted():
    assert Neighbors().run("A", 1) == ["A", "C", "G", "T"]


def test_skew_values():
    assert GCSkews().skew("GAGCCACCGCGATA") == [0, 1, 1, 2, 1, 0, 0, -1, -2, -1, -2, -1, -1, -1, -1]


def test_minimum_skew_positions():
    assert GCSkews().run("GAGCCACCGCGATA") == [8, 10]
    assert GCSkews().run("TAAAGACTGCCGAGAGGCCAACACGAGTGCTAGAACGAGGGGCGTAAACGCGGGTCCGAT") == [11, 24]


def test_frequent_words():
    assert FrequentWords().run(FREQUENT_TEXT, 4) == ["CATG", "GCAT"]


def test_frequent_words_rejects_bad_k():
    with pytest.raises(ValueError):
        FrequentWords().run("ACGT", 5)


def test_frequent_words_with_mismatches():
    result = FrequentKmers().run(FREQUENT_TEXT, 4, 1, reverse_complements=False)
    assert [pattern for pattern, _ in result] == ["ATGC", "ATGT", "GATG"]


def test_frequent_words_with_mismatches_and_reverse_complements():
    result = FrequentKmers().run(FREQUENT_TEXT, 4, 1)
    assert [pattern for pattern, _ in result] == ["ACAT", "ATGT"]


def test_frequent_words_with_mismatches_rejects_negative_d():
    with pytest.raises(ValueError):
        FrequentKmers().run(FREQUENT_TEXT, 4, -1)


def test_clump_finding():
    genome = "CGGACTCGACAGATGTGAAGAACGACAATGTGAAGACTCGACACGACAGAGTGAAGAGAAGAGGAAACATTGTAA"
    assert ClumpFinding().run(genome, 5, 50, 4) == ["CGACA", "GAAGA"]
