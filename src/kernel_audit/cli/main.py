"""Main CLI entry point for kernel-audit."""

import sys

import typer
from rich.console import Console

from kernel_audit.cli import check, fingerprint, locate

app = typer.Typer(
    name="kernel-audit",
    help="Check that the running Linux kernel is the one that will be booted next.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register subcommands
app.command(name="check")(check.check_cmd)
app.command(name="fingerprint")(fingerprint.fingerprint_cmd)
app.command(name="locate")(locate.locate_cmd)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print each step to standard output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
) -> None:
    """
    kernel-audit: find out whether a reboot is pending a kernel update.

    - [bold]check[/bold]: Monitoring plugin comparing running and on-disk kernels
    - [bold]fingerprint[/bold]: Show the version string found in a kernel image
    - [bold]locate[/bold]: Show which kernel image will be booted next
    """
    from kernel_audit.utils.logging import configure_logging

    if verbose:
        configure_logging(level="DEBUG", stream=sys.stdout)
    elif quiet:
        configure_logging(level="ERROR")
    else:
        configure_logging(level="WARNING")


@app.command()
def version() -> None:
    """Show the kernel-audit version."""
    from kernel_audit import __version__

    console.print(f"kernel-audit version {__version__}")


if __name__ == "__main__":
    app()
