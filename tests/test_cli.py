"""Tests for the command-line interface."""

import pytest
from typer.testing import CliRunner

from cli import app

runner = CliRunner()


def invoke(*args, input=None):
    return runner.invoke(app, [str(arg) for arg in args], input=input)


def test_motif_enumerate(write_dataset, enumeration_dnas):
    path = write_dataset(["3 1"] + enumeration_dnas)
    result = invoke("motif", "enumerate", path)
    assert result.exit_code == 0
    assert result.output == "ATA ATT GTT TTT\n"


def test_motif_median_from_stdin(median_dnas):
    result = invoke("motif", "median", "-", input="\n".join(["3"] + median_dnas) + "\n")
    assert result.exit_code == 0
    assert len(result.output.strip()) == 3


def test_motif_greedy(write_dataset, greedy_dnas):
    path = write_dataset(["3 5"] + greedy_dnas)
    result = invoke("motif", "greedy", path)
    assert result.exit_code == 0
    assert result.output.split() == ["CAG", "CAG", "CAA", "CAA", "CAA"]


def test_motif_greedy_pseudocounts(write_dataset, greedy_dnas):
    path = write_dataset(["3 5"] + greedy_dnas)
    result = invoke("motif", "greedy", path, "--pseudocounts")
    assert result.exit_code == 0
    assert result.output.split() == ["TTC", "ATC", "TTC", "ATC", "TTC"]


def test_motif_randomized_is_reproducible(write_dataset, randomized_dnas):
    path = write_dataset(["8 5"] + randomized_dnas)
    first = invoke("motif", "randomized", path, "--restarts", 10, "--seed", 1)
    second = invoke("motif", "randomized", path, "--restarts", 10, "--seed", 1)
    assert first.exit_code == 0
    assert first.output == second.output
    assert len(first.output.split()) == 5


def test_motif_gibbs(write_dataset, randomized_dnas):
    path = write_dataset(["8 5 50"] + randomized_dnas)
    result = invoke("motif", "gibbs", path, "--restarts", 2, "--seed", 4)
    assert result.exit_code == 0
    motifs = result.output.split()
    assert len(motifs) == 5
    assert all(motif in dna for motif, dna in zip(motifs, randomized_dnas))


def test_motif_most_probable(write_dataset, profile_rows, profile_text):
    path = write_dataset([profile_text, "5"] + [" ".join(str(v) for v in row) for row in profile_rows])
    result = invoke("motif", "most-probable", path)
    assert result.exit_code == 0
    assert result.output == "CCGAG\n"


def test_motif_profile(write_dataset):
    path = write_dataset(["AC", "AG", "TG"])
    result = invoke("motif", "profile", path)
    assert result.exit_code == 0
    assert "Consensus: AG" in result.output
    assert "Score: 2" in result.output
    assert "0.667" in result.output


@pytest.mark.parametrize(
    "lines, message",
    [
        (["3 1", "ACGU"], "Invalid nucleotide"),
        (["x 1", "ACGT"], "integer"),
        (["5 1", "ACGT"], "longer than the shortest"),
    ],
)
def test_motif_errors_exit_with_code_1(write_dataset, lines, message):
    path = write_dataset(lines)
    result = invoke("motif", "enumerate", path)
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert message in result.output


def test_missing_file_exits_with_code_1(tmp_path):
    result = invoke("motif", "median", tmp_path / "missing.txt")
    assert result.exit_code == 1
    assert "not found" in result.output


def test_origin_pattern_count():
    result = invoke("origin", "pattern-count", input="GCGCG\nGCG\n")
    assert result.exit_code == 0
    assert result.output == "2\n"


def test_origin_reverse_complement():
    result = invoke("origin", "reverse-complement", input="AAAACCCGGT\n")
    assert result.output == "ACCGGGTTTT\n"


def test_origin_approximate_match_count():
    result = invoke("origin", "approximate-match", "--count", input="GAGG\nTTTAGAGCCTTCAGAGG\n2\n")
    assert result.output == "4\n"


def test_origin_hamming_unequal_lengths():
    result = invoke("origin", "hamming", input="ACGT\nACG\n")
    assert result.exit_code == 1
    assert "equal lengths" in result.output


def test_origin_neighbors_negative_distance():
    result = invoke("origin", "neighbors", input="ACG\n-1\n")
    assert result.exit_code == 1
    assert "non-negative" in result.output


def test_origin_mismatches():
    result = invoke("origin", "mismatches", input="ACGTTGCATGTCGCATGATGCATGAGAGCT\n4 1\n")
    assert result.output == "ACAT ATGT\n"


def test_origin_skew_writes_chart(tmp_path):
    output = tmp_path / "skew.png"
    result = invoke("origin", "skew", "-o", output, input="GAGCCACCGCGATA\n")
    assert result.exit_code == 0
    assert result.output.splitlines()[0] == "8 10"
    assert output.exists()


def test_verbose_flag():
    result = invoke("-v", "origin", "pattern-count", input="GCGCG\nGCG\n")
    assert result.exit_code == 0
