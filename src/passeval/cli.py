"""
Password Evaluator CLI - Main entry point for the command-line interface.
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from passeval import __version__
from passeval.config import EvaluatorConfig
from passeval.evaluator import PasswordEvaluator, user_message
from passeval.exceptions import ConfigurationError, PasswordEvaluatorError

console = Console()


def setup_logging(level: str) -> None:
    """Configure root logging once for CLI use."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


@click.group()
@click.version_option(version=__version__, prog_name="passeval")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Password Evaluator - strength analysis and breach exposure checks

    Strength analysis runs entirely offline. Breach checks use the
    Pwned Passwords k-anonymity API and never send the password.
    """
    config = EvaluatorConfig.from_env()
    if verbose:
        setup_logging("DEBUG")
    elif config.has_valid_log_level:
        setup_logging(config.log_level)
    else:
        setup_logging("WARNING")
        logging.getLogger(__name__).warning(
            f"Unknown log level {config.log_level!r}, using WARNING"
        )

    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    ctx.obj.setdefault("evaluator", PasswordEvaluator(config=config))


@main.command("check")
@click.option("--password", "-p", help="Password to evaluate (or prompts securely)")
@click.option("--offline", is_flag=True, help="Skip the breach check")
@click.pass_context
def check(ctx: click.Context, password: str | None, offline: bool) -> None:
    """Analyze strength and check breach exposure of one password.

    Example:
        passeval check
    """
    from passeval.hibp.cli import render_breach
    from passeval.strength.cli import render_report

    if password is None:
        password = click.prompt("Password to evaluate", hide_input=True)

    evaluator = ctx.obj["evaluator"]

    try:
        report = evaluator.evaluate(password)
    except PasswordEvaluatorError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    render_report(report)

    if offline:
        return

    try:
        breach = evaluator.verify_sync(password)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise SystemExit(1)
    except PasswordEvaluatorError as e:
        console.print(f"[red]Error: {user_message(e)}[/red]")
        raise SystemExit(1)

    render_breach(breach)


# Import and register subcommand groups
from passeval.strength.cli import analyze_password
from passeval.hibp.cli import hibp

main.add_command(analyze_password)
main.add_command(hibp)

from passeval.server import add_server_commands
add_server_commands(main)


if __name__ == "__main__":
    main()
