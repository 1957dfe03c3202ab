"""Terminal renderer for kernel-audit output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from kernel_audit.models.kernel import CandidateImage, Fingerprint


class TerminalRenderer:
    """Renderer for rich terminal output of fingerprints and images.

    Example:
        renderer = TerminalRenderer()
        renderer.render_fingerprint(fingerprint, source="/proc/version")
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the terminal renderer.

        Args:
            console: Rich console to use. Creates a new one if None.
        """
        self._console = console or Console()

    def render_fingerprint(self, fingerprint: Fingerprint, source: str) -> None:
        table = Table(title="Kernel Fingerprint", show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        table.add_row("Source", escape(source))
        table.add_row("Version", escape(fingerprint.version))
        table.add_row("Build", escape(fingerprint.build))
        self._console.print(table)

    def render_candidate(self, image: CandidateImage) -> None:
        lines = [f"[bold]Path:[/bold] {escape(str(image.path))}"]
        if image.symlink_target is not None:
            lines.append(f"[bold]Symlink to:[/bold] {escape(image.symlink_target)}")
        lines.append(f"[bold]Found by:[/bold] {image.provenance.value}")
        self._console.print(Panel("\n".join(lines), title="Kernel Image"))
