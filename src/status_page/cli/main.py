"""Command line entry point for running health checks."""

import sys

import click
from rich.console import Console
from rich.table import Table

from ..config import get_settings
from ..exceptions import UnknownProviderError
from ..monitor import Monitor
from ..monitoring import CheckStatus, OverallStatus
from ..providers import BUILTIN_PROVIDERS
from ..utils import setup_logging

console = Console()


@click.group()
def main():
    """Run status page health checks."""


@main.command()
@click.option(
    "--provider",
    "-p",
    "providers",
    multiple=True,
    help="Provider key to check (repeatable). Defaults to STATUS_PAGE_PROVIDERS.",
)
@click.option(
    "--timeout",
    type=float,
    help="Per-probe timeout in seconds",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Verbose output",
)
def check(providers, timeout, verbose):
    """Run one check cycle and exit non-zero when a probe fails."""
    setup_logging(level="DEBUG" if verbose else "WARNING")

    settings = get_settings()
    if providers or timeout is not None:
        update = {}
        if providers:
            update["providers"] = list(providers)
        if timeout is not None:
            update["probe_timeout"] = timeout
        settings = settings.model_copy(update=update)

    try:
        monitor = Monitor.from_settings(settings)
    except UnknownProviderError as e:
        raise click.BadParameter(str(e), param_hint="--provider")

    report = monitor.check()

    table = Table(title=f"Status: {report.status.value}")
    table.add_column("Provider", style="cyan")
    table.add_column("Status")
    table.add_column("Message")

    for result in report.results:
        style = "green" if result.status == CheckStatus.OK else "red"
        table.add_row(result.name, f"[{style}]{result.status.value}[/{style}]", result.message)

    console.print(table)
    console.print(f"Checked at {report.timestamp:%Y-%m-%d %H:%M:%S}")

    sys.exit(0 if report.status == OverallStatus.OK else 1)


@main.command("providers")
def list_providers():
    """List built-in provider keys."""
    for key, provider in BUILTIN_PROVIDERS.items():
        console.print(f"[cyan]{key:10}[/cyan] {provider.description}")


if __name__ == "__main__":
    main()
