import typer

from motif_tools.config import DEFAULT_PARAMS
from motif_tools.dataset import (
    load_lines,
    load_sequences,
    parse_motif_dataset,
    parse_profile_dataset,
    print_collection,
    print_sequence,
)
from motif_tools.motif_search import (
    GibbsSamplerMotifSearch,
    GreedyMotifSearch,
    MedianString,
    MotifEnumeration,
    RandomMotifSearch,
    consensus,
    score,
)
from motif_tools.profile import Averaging, Profile

app = typer.Typer(help="Find regulatory motifs in collections of DNA strings.")


def fail(error):
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


@app.command("enumerate")
def enumerate_motifs(
    file: str = typer.Argument("-", help="Dataset: 'k d' followed by DNA strings ('-' for stdin)"),
):
    try:
        (k, d), dnas = parse_motif_dataset(load_lines(file), 2)
        motifs = MotifEnumeration().run(dnas, k, d)
    except ValueError as e:
        fail(e)
    print_collection(sorted(motifs), " ")


@app.command("median")
def median(
    file: str = typer.Argument("-", help="Dataset: 'k' followed by DNA strings ('-' for stdin)"),
):
    try:
        (k,), dnas = parse_motif_dataset(load_lines(file), 1)
        result = MedianString().run(dnas, k)
    except ValueError as e:
        fail(e)
    print_sequence(result)


@app.command("greedy")
def greedy(
    file: str = typer.Argument("-", help="Dataset: 'k t' followed by DNA strings ('-' for stdin)"),
    pseudocounts: bool = typer.Option(False, "--pseudocounts", help="Build profiles with Laplace pseudocounts."),
):
    try:
        (k, t), dnas = parse_motif_dataset(load_lines(file), 2)
        motifs = GreedyMotifSearch(pseudocounts=pseudocounts).run(dnas, k, t)
    except ValueError as e:
        fail(e)
    print_collection(motifs)


@app.command("randomized")
def randomized(
    file: str = typer.Argument("-", help="Dataset: 'k t' followed by DNA strings ('-' for stdin)"),
    restarts: int = typer.Option(DEFAULT_PARAMS["randomized_restarts"], "--restarts", "-r", help="Number of random restarts."),
    seed: int = typer.Option(None, "--seed", help="Seed for reproducible runs."),
):
    try:
        (k, t), dnas = parse_motif_dataset(load_lines(file), 2)
        motifs = RandomMotifSearch(seed=seed).run(dnas, k, t, restarts)
    except ValueError as e:
        fail(e)
    print_collection(motifs)


@app.command("gibbs")
def gibbs(
    file: str = typer.Argument("-", help="Dataset: 'k t N' followed by DNA strings ('-' for stdin)"),
    restarts: int = typer.Option(DEFAULT_PARAMS["gibbs_restarts"], "--restarts", "-r", help="Number of random restarts."),
    seed: int = typer.Option(None, "--seed", help="Seed for reproducible runs."),
):
    try:
        (k, t, n), dnas = parse_motif_dataset(load_lines(file), 3)
        motifs = GibbsSamplerMotifSearch(seed=seed).run(dnas, k, t, n, restarts)
    except ValueError as e:
        fail(e)
    print_collection(motifs)


@app.command("most-probable")
def most_probable(
    file: str = typer.Argument("-", help="Dataset: text, k and four profile rows A, C, G, T ('-' for stdin)"),
):
    try:
        text, k, profile = parse_profile_dataset(load_lines(file))
        _, kmer = profile.most_probable_kmer(text, k)
    except ValueError as e:
        fail(e)
    print_sequence(kmer)


@app.command("profile")
def profile(
    file: str = typer.Argument("-", help="Motifs, one per line or FASTA ('-' for stdin)"),
    pseudocounts: bool = typer.Option(False, "--pseudocounts", help="Build the profile with Laplace pseudocounts."),
):
    try:
        motifs = load_sequences(file)
        matrix = Profile.build(motifs, Averaging.from_pseudocounts(pseudocounts))
        center = consensus(motifs)
        total = score(motifs)
    except ValueError as e:
        fail(e)
    typer.echo(matrix.to_frame().to_string(float_format=lambda v: f"{v:.3f}"))
    typer.echo(f"\nConsensus: {center}")
    typer.echo(f"Score: {total}")
