import logging

import typer
from motif_tools import motif_cli, origin_cli

app = typer.Typer(help="Find replication origins and regulatory motifs in DNA, one course problem at a time.")

app.add_typer(motif_cli.app, name="motif", help="Motif enumeration, median string, greedy, randomized and Gibbs search")
app.add_typer(origin_cli.app, name="origin", help="Pattern counts, frequent words, neighbors and skew diagrams")


def setup_logging(verbose):
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    if verbose:
        logging.getLogger("matplotlib").setLevel(logging.WARNING)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log algorithm progress to stderr.")):
    setup_logging(verbose)


if __name__ == "__main__":
    app()
