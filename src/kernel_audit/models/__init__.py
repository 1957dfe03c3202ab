"""Data models for kernel-audit.

All models are Pydantic BaseModel with frozen=True for immutability.
"""

from kernel_audit.models.check import CheckReport, CheckResult, CheckStatus
from kernel_audit.models.common import AuditError
from kernel_audit.models.kernel import (
    BootConfig,
    CandidateImage,
    Fingerprint,
    Ordering,
    Provenance,
)

__all__ = [
    # Kernel
    "BootConfig",
    "CandidateImage",
    "Fingerprint",
    "Ordering",
    "Provenance",
    # Check
    "CheckReport",
    "CheckResult",
    "CheckStatus",
    # Common
    "AuditError",
]
