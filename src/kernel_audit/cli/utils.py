"""Shared utilities for CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from kernel_audit.core.locator import LocatorOptions
from kernel_audit.utils.config import KernelAuditConfig, load_config
from kernel_audit.utils.errors import ConfigurationError

# Shared console instance
console = Console()

NO_BOOTLOADER_HELP = "Do not consult the bootloader configuration"
NO_CONVENTIONAL_HELP = "Do not try the conventional kernel image paths"
NO_HEURISTIC_HELP = "Do not scan directories for kernel images"


def load_config_or_exit(config_path: Path | None) -> KernelAuditConfig:
    """Load the configuration, exiting with status 1 on error."""
    try:
        return load_config(config_path)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)


def locator_options(no_bootloader: bool, no_conventional: bool, no_heuristic: bool) -> LocatorOptions:
    """Translate the --no-* flags into locator options."""
    return LocatorOptions(
        use_bootloader=not no_bootloader,
        use_conventional=not no_conventional,
        use_heuristic=not no_heuristic,
    )
