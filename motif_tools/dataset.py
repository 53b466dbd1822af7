import logging
from pathlib import Path

import typer
from Bio import SeqIO

from motif_tools.config import DEFAULT_PARAMS
from motif_tools.dna import Dna
from motif_tools.profile import Profile

logger = logging.getLogger(__name__)

FASTA_SUFFIXES = {".fa", ".fasta", ".fna"}


class DatasetError(ValueError):
    pass


def read_text(source):
    if source is None or str(source) == "-":
        return typer.get_text_stream("stdin").read()
    if hasattr(source, "read"):
        return source.read()
    path = Path(source)
    if not path.is_file():
        raise DatasetError(f"File '{source}' not found.")
    return path.read_text(encoding="utf-8")


def load_lines(source):
    """Non-blank, stripped lines of a file path, an open handle, or standard input for "-"."""
    lines = [line.strip() for line in read_text(source).splitlines()]
    return [line for line in lines if line]


def is_fasta(source):
    return source is not None and Path(str(source)).suffix.lower() in FASTA_SUFFIXES


def load_fasta(source):
    path = Path(source)
    if not path.is_file():
        raise DatasetError(f"File '{source}' not found.")
    records = list(SeqIO.parse(str(path), "fasta"))
    if not records:
        raise DatasetError(f"No FASTA records found in '{source}'.")
    logger.info("Loaded %d FASTA records from %s", len(records), path)
    return [parse_dna(str(record.seq).upper()) for record in records]


def load_sequences(source):
    if is_fasta(source):
        return load_fasta(source)
    return [parse_dna(line) for line in load_lines(source)]


def parse_dna(text):
    return Dna.parse(text)


def parse_int(text):
    try:
        return int(text.strip())
    except ValueError:
        raise DatasetError(f"Expected an integer, got {text!r}") from None


def parse_ints(line, count=None):
    values = [parse_int(token) for token in line.split()]
    if count is not None and len(values) != count:
        raise DatasetError(f"Expected {count} integers, got {len(values)} in {line!r}")
    return values


def parse_floats(line):
    try:
        return [float(token) for token in line.split()]
    except ValueError:
        raise DatasetError(f"Expected numbers, got {line!r}") from None


def parse_motif_dataset(lines, count):
    """Split a dataset into its leading integer parameters and the DNA strings below them."""
    if not lines:
        raise DatasetError("Dataset is empty")
    params = parse_ints(lines[0], count)
    dnas = [parse_dna(line) for line in lines[1:]]
    if not dnas:
        raise DatasetError("Dataset has no DNA strings")
    return params, dnas


def parse_profile_dataset(lines):
    if len(lines) < 6:
        raise DatasetError(f"Expected a text, k and four profile rows, got {len(lines)} lines")
    text = parse_dna(lines[0])
    k = parse_int(lines[1])
    profile = Profile.from_rows(parse_floats(line) for line in lines[2:6])
    return text, k, profile


def format_sequence(dna):
    return str(dna)


def format_collection(values, separator=None):
    if separator is None:
        separator = DEFAULT_PARAMS["output_separator"]
    return separator.join(str(value) for value in values)


def print_sequence(dna):
    typer.echo(format_sequence(dna))


def print_collection(values, separator=None):
    typer.echo(format_collection(values, separator))
