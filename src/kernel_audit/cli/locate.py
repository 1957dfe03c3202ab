"""CLI command for kernel image discovery."""

from pathlib import Path
from typing import Optional

import typer

from kernel_audit.cli.utils import (
    NO_BOOTLOADER_HELP,
    NO_CONVENTIONAL_HELP,
    NO_HEURISTIC_HELP,
    console,
    load_config_or_exit,
    locator_options,
)
from kernel_audit.utils.errors import KernelAuditError


def locate_cmd(
    no_bootloader: bool = typer.Option(False, "--no-bootloader", help=NO_BOOTLOADER_HELP),
    no_conventional: bool = typer.Option(False, "--no-conventional", help=NO_CONVENTIONAL_HELP),
    no_heuristic: bool = typer.Option(False, "--no-heuristic", help=NO_HEURISTIC_HELP),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file",
    ),
) -> None:
    """
    Show which kernel image will be booted next, and how it was found.

    Example:
        kernel-audit locate --no-bootloader
    """
    from kernel_audit.core.locator import KernelImageLocator
    from kernel_audit.renderers.terminal import TerminalRenderer

    cfg = load_config_or_exit(config)
    locator = KernelImageLocator.from_config(cfg.sources)

    try:
        image = locator.locate(locator_options(no_bootloader, no_conventional, no_heuristic))
    except KernelAuditError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    TerminalRenderer(console).render_candidate(image)
