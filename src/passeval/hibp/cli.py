"""
CLI commands for Pwned Passwords breach checks.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import json
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from passeval.evaluator import user_message
from passeval.exceptions import ConfigurationError, PasswordEvaluatorError
from passeval.hibp.client import BreachClient
from passeval.hibp.models import BreachReport, RiskLevel

console = Console()


def risk_color(risk: RiskLevel) -> str:
    """Get color for risk level."""
    colors = {
        RiskLevel.SAFE: "green",
        RiskLevel.LOW: "yellow",
        RiskLevel.MEDIUM: "orange3",
        RiskLevel.HIGH: "red",
        RiskLevel.CRITICAL: "bold red",
    }
    return colors.get(risk, "white")


def render_breach(report: BreachReport) -> None:
    """Print a breach report."""
    color = risk_color(report.risk_level)

    if not report.exposed:
        console.print(Panel(
            f"[green]No encontrada en filtraciones.[/green]\n\n"
            f"{report.risk_description}\n\n"
            f"Riesgo: [{color}]{report.risk_level.value.upper()}[/{color}]",
            title="Verificación de Exposición",
        ))
    else:
        console.print(Panel(
            f"[red]Contraseña expuesta![/red]\n\n"
            f"{report.risk_description}\n\n"
            f"Riesgo: [{color}]{report.risk_level.value.upper()}[/{color}]",
            title="Verificación de Exposición",
        ))


@click.group()
@click.pass_context
def hibp(ctx: click.Context) -> None:
    """Pwned Passwords - breach checking commands.

    Passwords are checked with k-anonymity: only the first 5 characters
    of their SHA-1 hash are sent to https://api.pwnedpasswords.com.
    """
    ctx.ensure_object(dict)


@hibp.command("password")
@click.option("--password", "-p", help="Password to check (or prompts securely)")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def check_password(
    ctx: click.Context,
    password: str | None,
    json_output: bool,
) -> None:
    """Check if a password has been exposed in data breaches.

    Example:
        passeval hibp password
    """
    if password is None:
        password = click.prompt("Password to check", hide_input=True)

    evaluator = ctx.obj["evaluator"]

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task("Checking password...", total=None)
            report = evaluator.verify_sync(password)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise SystemExit(1)
    except PasswordEvaluatorError as e:
        console.print(f"[red]Error: {user_message(e)}[/red]")
        raise SystemExit(1)

    if json_output:
        click.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
        return

    render_breach(report)


@hibp.command("passwords")
@click.argument("passwords_file", type=click.Path(exists=True))
@click.option("--output", "-o", type=click.Path(), help="Output file for results")
@click.pass_context
def check_passwords_batch(
    ctx: click.Context,
    passwords_file: str,
    output: str | None,
) -> None:
    """Check multiple passwords from a file.

    File should contain one password per line. Empty lines are skipped.
    Passwords are never echoed; results are identified by their line
    number in the file.

    Example:
        passeval hibp passwords passwords.txt
    """
    text = Path(passwords_file).read_text(encoding="utf-8")
    items = []
    for lineno, line in enumerate(text.split("\n"), start=1):
        line = line.rstrip("\r")
        if line:
            items.append((lineno, line))

    if not items:
        console.print("[yellow]No items found in file[/yellow]")
        return

    evaluator = ctx.obj["evaluator"]
    console.print(f"Checking {len(items)} passwords...")

    async def _check_batch():
        results = []
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total}"),
            console=console,
        ) as progress:
            task = progress.add_task("Checking...", total=len(items))

            for lineno, item in items:
                try:
                    report = await evaluator.verify(item)
                    results.append((lineno, report, None))
                except ConfigurationError:
                    raise
                except PasswordEvaluatorError as e:
                    results.append((lineno, None, user_message(e)))
                progress.advance(task)

        return results

    try:
        results = asyncio.run(_check_batch())
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise SystemExit(1)

    # Summary
    exposed = [r for _, r, _ in results if r and r.exposed]
    failed = [err for _, _, err in results if err]
    console.print(f"\n[bold]Results:[/bold] {len(exposed)}/{len(results)} passwords found in breaches")
    if failed:
        console.print(f"[yellow]{len(failed)} password(s) could not be checked[/yellow]")

    # Risk distribution
    risk_counts = {}
    for _, r, _ in results:
        if r:
            risk_counts[r.risk_level] = risk_counts.get(r.risk_level, 0) + 1

    console.print("\n[bold]Risk Distribution:[/bold]")
    for risk in RiskLevel:
        count = risk_counts.get(risk, 0)
        color = risk_color(risk)
        console.print(f"  [{color}]{risk.value.upper()}[/{color}]: {count}")

    # Save to file
    if output:
        output_data = [
            {
                "line": lineno,
                "identifier": "***",
                "result": report.to_dict() if report else None,
                "error": error,
            }
            for lineno, report, error in results
        ]
        Path(output).write_text(
            json.dumps(output_data, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        console.print(f"\n[green]Results saved to {output}[/green]")


@hibp.command("config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show breach-check configuration."""
    config = ctx.obj["evaluator"].config

    table = Table(title="Breach Check Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Password API URL", BreachClient.PWNED_PASSWORDS_API)
    table.add_row("User-Agent", BreachClient.USER_AGENT)
    table.add_row("Request Timeout", f"{config.request_timeout:g}s")
    table.add_row("Server", f"{config.server_host}:{config.server_port}")
    table.add_row("Log Level", config.log_level)

    console.print(table)

    for error in config.validate():
        console.print(f"[red]{error}[/red]")
