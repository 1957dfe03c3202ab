"""Kernel check result models."""

from enum import IntEnum

from pydantic import BaseModel, Field

from kernel_audit.models.common import AuditError
from kernel_audit.models.kernel import CandidateImage, Fingerprint


class CheckStatus(IntEnum):
    """Monitoring plugin states; the value is the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


class CheckReport(BaseModel):
    """Outcome of comparing the running kernel with the on-disk image."""

    model_config = {"frozen": True}

    status: CheckStatus = Field(description="Overall state")
    summary: str = Field(description="One-line summary of the outcome")
    running: Fingerprint | None = Field(default=None, description="Running kernel fingerprint")
    installed: Fingerprint | None = Field(default=None, description="On-disk image fingerprint")
    image: CandidateImage | None = Field(default=None, description="Image that was inspected")

    @property
    def exit_code(self) -> int:
        return int(self.status)

    @property
    def details(self) -> str | None:
        """Second status line with both fingerprints and the image path."""
        parts: list[str] = []
        if self.running is not None:
            parts.append(f"running: {self.running}")
        if self.image is not None:
            on_disk = f"on-disk ({self.image.provenance.value}) {self.image.display_path}"
            if self.installed is not None:
                on_disk = f"{on_disk}: {self.installed}"
            parts.append(on_disk)
        return "; ".join(parts) if parts else None


class CheckResult(BaseModel):
    """Result of a kernel check operation."""

    model_config = {"frozen": True}

    success: bool = Field(description="Whether both fingerprints were determined")
    report: CheckReport = Field(description="The report, UNKNOWN when success is False")
    errors: list[AuditError] = Field(default_factory=list, description="Errors that occurred")

    @classmethod
    def ok(cls, report: CheckReport) -> "CheckResult":
        """Create a successful result."""
        return cls(success=True, report=report)

    @classmethod
    def fail(cls, report: CheckReport, errors: list[AuditError]) -> "CheckResult":
        """Create a failed result."""
        return cls(success=False, report=report, errors=errors)
