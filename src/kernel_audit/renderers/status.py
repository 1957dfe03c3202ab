"""Monitoring plugin status text."""

from __future__ import annotations

from kernel_audit.models.check import CheckReport, CheckStatus
from kernel_audit.utils.config import StatusStyle

_LONG_PREFIX = "KERNEL"


class StatusRenderer:
    """Renders a check report as plugin output.

    The first line is the status line monitoring frameworks parse, e.g.
    ``WARNING: version mismatch: ...``; the optional second line carries both
    fingerprints and the inspected image.

    Example:
        renderer = StatusRenderer(StatusStyle.LONG)
        print(renderer.render(result.report))
    """

    def __init__(self, style: StatusStyle = StatusStyle.SHORT) -> None:
        self._style = style

    @property
    def style(self) -> StatusStyle:
        return self._style

    def prefix(self, status: CheckStatus) -> str:
        if self._style is StatusStyle.LONG:
            return f"{_LONG_PREFIX} {status.name}"
        return status.name

    def status_line(self, report: CheckReport) -> str:
        return f"{self.prefix(report.status)}: {report.summary}"

    def render(self, report: CheckReport) -> str:
        lines = [self.status_line(report)]
        if report.details:
            lines.append(report.details)
        return "\n".join(lines)
