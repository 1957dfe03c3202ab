"""CLI command for extracting kernel fingerprints."""

from pathlib import Path
from typing import Optional

import typer

from kernel_audit.cli.utils import console, load_config_or_exit
from kernel_audit.utils.errors import KernelAuditError


def fingerprint_cmd(
    path: Optional[Path] = typer.Argument(
        None,
        help="Kernel image or text file to scan",
    ),
    running: bool = typer.Option(
        False,
        "--running",
        "-r",
        help="Read the running kernel instead of a file",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file",
    ),
) -> None:
    """
    Show the kernel version and build string found in a file.

    Example:
        kernel-audit fingerprint /boot/vmlinuz-6.1.0-13-amd64
        kernel-audit fingerprint --running
    """
    from kernel_audit.extractors.binary import BinaryScanner
    from kernel_audit.extractors.running import RunningKernelReader
    from kernel_audit.renderers.terminal import TerminalRenderer

    if path is None and not running:
        console.print("[red]Error:[/red] give a PATH or --running")
        raise typer.Exit(1)
    if path is not None and running:
        console.print("[red]Error:[/red] PATH and --running are mutually exclusive")
        raise typer.Exit(1)

    cfg = load_config_or_exit(config)

    try:
        if running:
            reader = RunningKernelReader(cfg.sources.running_source)
            with console.status("Reading running kernel..."):
                fingerprint = reader.read()
            source = str(reader.source)
        else:
            scanner = BinaryScanner.from_config(cfg.scan)
            with console.status(f"Scanning {path}..."):
                fingerprint = scanner.scan(path)
            source = str(path)
    except KernelAuditError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    TerminalRenderer(console).render_fingerprint(fingerprint, source)
