import typer

from methodsuper import __version__
from methodsuper.logging_config import setup_logging
from methodsuper.cli import chains
from methodsuper.cli.config import CLIConfig
from methodsuper.cli.output import echo

app = typer.Typer()

# Global CLI callback for flags that apply to all commands
@app.callback()
def global_options(
    human: bool = typer.Option(
        False,
        "--human",
        "-H",
        help="Enable human mode: rich tables and colors (also via METHODSUPER_HUMAN_MODE env var)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log chain construction and resolution steps"
    ),
):
    """
    methodsuper: inspect ancestor chains and super resolution.

    Machine mode is DEFAULT (plain JSON output).
    Use --human/-H for pretty output.
    """
    if human:
        CLIConfig.set_machine_mode(False)
        setup_logging(level="DEBUG" if verbose else "INFO", force=True)
    else:
        # Machine mode keeps stdout parseable
        setup_logging(level="DEBUG" if verbose else "INFO", suppress_console=not verbose, force=True)


app.add_typer(chains.app, name="inspect", help="Ancestor chain and super resolution commands")


@app.command()
def version():
    """Print the methodsuper version."""
    echo(__version__)


if __name__ == "__main__":
    app()
