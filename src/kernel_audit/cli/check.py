"""CLI command for the running kernel check."""

from pathlib import Path
from typing import Optional

import typer

from kernel_audit.cli.utils import (
    NO_BOOTLOADER_HELP,
    NO_CONVENTIONAL_HELP,
    NO_HEURISTIC_HELP,
    locator_options,
)
from kernel_audit.models.check import CheckReport, CheckStatus
from kernel_audit.utils.config import StatusStyle, load_config, resolve_status_style
from kernel_audit.utils.errors import ConfigurationError
from kernel_audit.utils.logging import flush_logging


def check_cmd(
    image: Optional[Path] = typer.Argument(
        None,
        help="Kernel image to compare against (skips discovery)",
    ),
    no_bootloader: bool = typer.Option(False, "--no-bootloader", help=NO_BOOTLOADER_HELP),
    no_conventional: bool = typer.Option(False, "--no-conventional", help=NO_CONVENTIONAL_HELP),
    no_heuristic: bool = typer.Option(False, "--no-heuristic", help=NO_HEURISTIC_HELP),
    long_status: Optional[bool] = typer.Option(
        None,
        "--long-status/--short-status",
        help="Status line prefix style (default: $KERNEL_AUDIT_STATUS_STYLE or config)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file",
    ),
) -> None:
    """
    Check that the running kernel matches the kernel booted next.

    Prints a monitoring plugin status line and exits with
    0 (OK), 1 (WARNING: mismatch) or 3 (UNKNOWN).

    Example:
        kernel-audit check
        kernel-audit check /boot/vmlinuz-6.1.0-13-amd64
    """
    from kernel_audit.core.checker import KernelChecker
    from kernel_audit.renderers.status import StatusRenderer

    override = None
    if long_status is not None:
        override = StatusStyle.LONG if long_status else StatusStyle.SHORT

    try:
        cfg = load_config(config)
        style = resolve_status_style(cfg, override)
    except ConfigurationError as e:
        report = CheckReport(status=CheckStatus.UNKNOWN, summary=e.message)
        _emit(StatusRenderer(override or StatusStyle.SHORT).render(report))
        raise typer.Exit(report.exit_code)

    checker = KernelChecker.from_config(cfg)
    result = checker.check(
        image=image,
        options=locator_options(no_bootloader, no_conventional, no_heuristic),
    )

    _emit(StatusRenderer(style).render(result.report))
    raise typer.Exit(result.report.exit_code)


def _emit(text: str) -> None:
    """Write the status text after any pending diagnostics."""
    flush_logging()
    typer.echo(text)
