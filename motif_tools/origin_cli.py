import matplotlib.pyplot as plt
import typer

from motif_tools.dataset import DatasetError, load_lines, load_sequences, parse_int, parse_ints, print_collection
from motif_tools.origin_finder import (
    ApproximatePatternCount,
    ApproximatePatternMatching,
    ClumpFinding,
    FrequentKmers,
    FrequentWords,
    GCSkews,
    HammingDistance,
    Neighbors,
    PatternCount,
    PatternMatching,
    ReverseComplement,
)

app = typer.Typer(help="Locate replication origins: k-mer counts, pattern matches and skew diagrams.")


def fail(error):
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


def read_exact(file, count):
    lines = load_lines(file)
    if len(lines) < count:
        raise DatasetError(f"Expected {count} lines, got {len(lines)}")
    return lines[:count]


@app.command("pattern-count")
def pattern_count(file: str = typer.Argument("-", help="Text, then pattern ('-' for stdin)")):
    try:
        text, pattern = read_exact(file, 2)
        count = PatternCount().run(text, pattern)
    except ValueError as e:
        fail(e)
    typer.echo(count)


@app.command("pattern-match")
def pattern_match(file: str = typer.Argument("-", help="Pattern, then genome ('-' for stdin)")):
    try:
        pattern, genome = read_exact(file, 2)
        positions = PatternMatching().run(genome, pattern)
    except ValueError as e:
        fail(e)
    print_collection(positions, " ")


@app.command("approximate-match")
def approximate_match(
    file: str = typer.Argument("-", help="Pattern, text, then d ('-' for stdin)"),
    count: bool = typer.Option(False, "--count", help="Print the number of matches instead of their positions."),
):
    try:
        pattern, text, d = read_exact(file, 3)
        d = parse_int(d)
        if count:
            result = ApproximatePatternCount().run(text, pattern, d)
        else:
            result = ApproximatePatternMatching().run(text, pattern, d)
    except ValueError as e:
        fail(e)
    if count:
        typer.echo(result)
    else:
        print_collection(result, " ")


@app.command("reverse-complement")
def reverse_complement(file: str = typer.Argument("-", help="DNA string ('-' for stdin)")):
    try:
        (text,) = read_exact(file, 1)
        result = ReverseComplement().run(text)
    except ValueError as e:
        fail(e)
    typer.echo(result)


@app.command("hamming")
def hamming(file: str = typer.Argument("-", help="Two strings of equal length ('-' for stdin)")):
    try:
        first, second = read_exact(file, 2)
        result = HammingDistance().run(first, second)
    except ValueError as e:
        fail(e)
    typer.echo(result)


@app.command("neighbors")
def neighbors(file: str = typer.Argument("-", help="Pattern, then d ('-' for stdin)")):
    try:
        pattern, d = read_exact(file, 2)
        result = Neighbors().run(pattern, parse_int(d))
    except ValueError as e:
        fail(e)
    print_collection(result)


@app.command("frequent")
def frequent(file: str = typer.Argument("-", help="Text, then k ('-' for stdin)")):
    try:
        text, k = read_exact(file, 2)
        result = FrequentWords().run(text, parse_int(k))
    except ValueError as e:
        fail(e)
    print_collection(result, " ")


@app.command("mismatches")
def mismatches(
    file: str = typer.Argument("-", help="Text, then 'k d' ('-' for stdin)"),
    reverse: bool = typer.Option(True, "--reverse/--no-reverse", help="Also count reverse complements."),
):
    try:
        text, params = read_exact(file, 2)
        k, d = parse_ints(params, 2)
        result = FrequentKmers().run(text, k, d, reverse_complements=reverse)
    except ValueError as e:
        fail(e)
    print_collection((pattern for pattern, _ in result), " ")


@app.command("clumps")
def clumps(file: str = typer.Argument("-", help="Genome, then 'k L t' ('-' for stdin)")):
    try:
        genome, params = read_exact(file, 2)
        k, L, t = parse_ints(params, 3)
        result = ClumpFinding().run(genome, k, L, t)
    except ValueError as e:
        fail(e)
    print_collection(result, " ")


@app.command("skew")
def skew(
    file: str = typer.Argument("-", help="Genome as plain text or FASTA ('-' for stdin)"),
    plot: bool = typer.Option(False, "--plot", help="Display the skew diagram."),
    output: str = typer.Option(None, "--output", "-o", help="Save the skew diagram as PNG."),
):
    try:
        genome = "".join(str(dna) for dna in load_sequences(file))
        skews = GCSkews()
        values = skews.skew(genome)
        minima = skews.run(genome)
    except ValueError as e:
        fail(e)
    print_collection(minima, " ")

    if not plot and not output:
        return
    plt.figure(figsize=(10, 5))
    plt.plot(range(len(values)), values, color="steelblue")
    for position in minima:
        plt.axvline(position, color="red", linestyle="--", alpha=0.5)
    plt.title("Skew Diagram")
    plt.xlabel("Position")
    plt.ylabel("#G - #C")
    plt.tight_layout()
    if output:
        plt.savefig(output, dpi=300)
        typer.echo(f"Chart saved as: {output}")
    if plot:
        plt.show()
    plt.close()
