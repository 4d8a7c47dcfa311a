"""
CLI commands for offline password strength analysis.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import json

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from passeval.exceptions import InvalidInputError
from passeval.strength.models import CRITERIA_INFO, StrengthLevel, StrengthReport

console = Console()


def strength_color(strength: StrengthLevel) -> str:
    """Get color for strength level."""
    colors = {
        StrengthLevel.NONE: "dim",
        StrengthLevel.VERY_WEAK: "bold red",
        StrengthLevel.WEAK: "red",
        StrengthLevel.MODERATE: "yellow",
        StrengthLevel.STRONG: "green",
        StrengthLevel.VERY_STRONG: "bold green",
    }
    return colors.get(strength, "white")


def render_report(report: StrengthReport) -> None:
    """Print a strength report."""
    color = strength_color(report.strength)

    console.print(Panel(
        f"Fortaleza: [{color}]{report.strength.label}[/{color}]\n\n"
        f"Puntuación: [bold]{report.score}/100[/bold]\n"
        f"Entropía: {report.entropy:.1f} bits\n"
        f"Tiempo de crackeo estimado: [cyan]{report.crack_time.display}[/cyan]",
        title="Fortaleza de la Contraseña",
    ))

    table = Table(title="Criterios de Seguridad")
    table.add_column("Criterio", style="cyan")
    table.add_column("Detalle", style="dim")
    table.add_column("Estado", justify="center")

    for name, met in report.checks.items():
        label, description = CRITERIA_INFO[name]
        status = "[green]✓[/green]" if met else "[red]✗[/red]"
        table.add_row(label, description, status)

    console.print(table)

    if report.feedback:
        console.print("\n[bold]Recomendaciones:[/bold]")
        for item in report.feedback:
            console.print(f"  - {item}")


@click.command("analyze")
@click.option("--password", "-p", help="Password to analyze (or prompts securely)")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def analyze_password(
    ctx: click.Context,
    password: str | None,
    json_output: bool,
) -> None:
    """Analyze password strength offline.

    Nothing is sent over the network.

    Example:
        passeval analyze
    """
    if password is None:
        password = click.prompt("Password to analyze", hide_input=True)

    try:
        report = ctx.obj["evaluator"].evaluate(password)
    except InvalidInputError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    if json_output:
        click.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
        return

    if report.is_empty:
        console.print("[yellow]No password given[/yellow]")
        return

    render_report(report)
