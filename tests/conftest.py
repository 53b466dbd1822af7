"""Fixtures for testing motif_tools."""

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest


@pytest.fixture
def enumeration_dnas():
    return ["ATTTGGC", "TGCCTTA", "CGGTATC", "GAAGAAG"]


@pytest.fixture
def median_dnas():
    return ["AAATTGACGCAT", "GACGACCACGTT", "CGTCAGCGCCTG", "GCTGAGCACCGG", "AGTTCGGGACAG"]


@pytest.fixture
def greedy_dnas():
    return ["GGCGTTCAGGCA", "AAGAATCAGTCA", "CAAGGAGTTCGC", "CACGTCAATCAC", "CAATAATATTCG"]


@pytest.fixture
def randomized_dnas():
    return [
        "CGCCCCTCTCGGGGGTGTTCAGTAAACGGCCA",
        "GGGCGAGGTATGTGTAAGTGCCAAGGTGCCAG",
        "TAGTACCGAGACCGAAAGAAGTATACAGGCGT",
        "TAGATCAAGTTTCAGGTGCACGTCGGTGAACC",
        "AATCCACCAGCTCCACGTGCAATGTTGGCCTA",
    ]


@pytest.fixture
def profile_rows():
    return [
        [0.2, 0.2, 0.3, 0.2, 0.3],
        [0.4, 0.3, 0.1, 0.5, 0.1],
        [0.3, 0.3, 0.5, 0.2, 0.4],
        [0.1, 0.2, 0.1, 0.1, 0.2],
    ]


@pytest.fixture
def profile_text():
    return "ACCTGTTTATTGCCTAAGTTCCGAACAAACCCAATATAGCCCGAGGGCCT"


@pytest.fixture
def write_dataset(tmp_path):
    def write(lines, name="dataset.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return write
