"""Output renderers."""

from kernel_audit.renderers.status import StatusRenderer
from kernel_audit.renderers.terminal import TerminalRenderer

__all__ = [
    "StatusRenderer",
    "TerminalRenderer",
]
