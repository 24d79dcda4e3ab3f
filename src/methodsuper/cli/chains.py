"""
CLI Chain Commands

chain, supers
"""

import typer

from rich.table import Table
from rich.markup import escape

from methodsuper.cli.config import CLIConfig
from methodsuper.diagnostics import chain_report, super_chain_report
from methodsuper.exceptions import NoOverrideError
from methodsuper.hosts.python_host import PythonAncestorGraph
from methodsuper.resolution import ChainLinearizer, Level, ResolutionContext, SuperResolver
from .common import load_class_or_exit
from .output import get_console, print_error, print_json

app = typer.Typer()
console = get_console()


def _format_methods(methods: dict) -> str:
    return "; ".join(
        f"{visibility}: {', '.join(names)}" for visibility, names in methods.items()
    )


@app.command("chain")
def chain(
    target: str = typer.Argument(..., help="Class to inspect, as 'package.module:ClassName'."),
    include_trivial: bool = typer.Option(False, "--include-trivial", help="Keep ancestors every class shares (object, type)."),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON."),
):
    """
    Display the ancestor chain searched for super calls, with each entry's methods.
    """
    cls = load_class_or_exit(target)
    graph = PythonAncestorGraph()
    built = ChainLinearizer(graph).build(cls, exclude_trivial=not include_trivial)
    report = chain_report(graph, built)

    if CLIConfig.is_machine_mode() or json_output:
        print_json(report.model_dump())
        return

    table = Table(title=f"Ancestor chain of {escape(report.root)}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Entry", style="cyan")
    table.add_column("Instance methods")
    table.add_column("Class methods", style="magenta")

    for entry in report.entries:
        table.add_row(
            str(entry.index),
            escape(entry.label),
            escape(_format_methods(entry.instance_methods)),
            escape(_format_methods(entry.class_methods)),
        )

    console.print(table)
    if not report.entries:
        console.print("[dim]No ancestor contributes methods.[/dim]")


@app.command("supers")
def supers(
    target: str = typer.Argument(..., help="Class owning the method, as 'package.module:ClassName'."),
    method: str = typer.Argument(..., help="Method name."),
    class_level: bool = typer.Option(False, "--class-level", "-c", help="Resolve a class-level method (classmethod or metaclass method)."),
    include_trivial: bool = typer.Option(False, "--include-trivial", help="Keep ancestors every class shares (object, type)."),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON."),
):
    """
    Display the owner of a method and every override reachable through super.
    """
    cls = load_class_or_exit(target)
    resolver = SuperResolver(PythonAncestorGraph(), exclude_trivial=not include_trivial)
    context = ResolutionContext(
        root=cls,
        level=Level.CLASS if class_level else Level.INSTANCE,
        name=method,
    )

    try:
        report = super_chain_report(resolver, context)
    except NoOverrideError as e:
        print_error(str(e), code="METHOD_NOT_FOUND", input_value=method)
        raise typer.Exit(code=1)

    if CLIConfig.is_machine_mode() or json_output:
        print_json(report.model_dump())
        return

    table = Table(title=f"super chain of {escape(report.root)}.{escape(report.name)} ({report.level})")
    table.add_column("Step", justify="right", style="dim")
    table.add_column("Owner", style="cyan")
    table.add_column("Visibility")
    table.add_column("Remaining", justify="right", style="dim")

    for step in report.steps:
        table.add_row(str(step.step), escape(step.label), step.visibility, str(step.remaining))

    console.print(table)
    if report.stopped:
        console.print(f"[yellow]{escape(report.stopped.message)}[/yellow]")
