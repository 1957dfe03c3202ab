"""Error types for kernel-audit."""

from __future__ import annotations

from typing import Any

from kernel_audit.models.common import AuditError


class KernelAuditError(Exception):
    """Base exception for kernel-audit."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_audit_error(self) -> AuditError:
        """Convert to AuditError model."""
        return AuditError(code=self.code, message=self.message, details=self.details)


class SourceUnreadableError(KernelAuditError):
    """A required file could not be opened or read."""

    def __init__(self, path: str, reason: str | None = None):
        message = f"Cannot read {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            code="SOURCE_UNREADABLE",
            details={"path": path},
        )


class NoFingerprintFoundError(KernelAuditError):
    """No kernel fingerprint was found in an exhausted input."""

    def __init__(self, source: str):
        super().__init__(
            f"No kernel version string found in {source}",
            code="NO_FINGERPRINT_FOUND",
            details={"source": source},
        )


class NoImageFoundError(KernelAuditError):
    """Every enabled discovery strategy failed to find a kernel image."""

    def __init__(self, strategies: list[str]):
        tried = ", ".join(strategies) if strategies else "none enabled"
        super().__init__(
            f"Could not find a kernel image (strategies tried: {tried})",
            code="NO_IMAGE_FOUND",
            details={"strategies": strategies},
        )


class MalformedBootConfigError(KernelAuditError):
    """The bootloader configuration cannot be used to pick a kernel."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Malformed bootloader config {path}: {reason}",
            code="MALFORMED_BOOT_CONFIG",
            details={"path": path},
        )


class RankingArityMismatchError(KernelAuditError):
    """Two kernel image names carry versions with different component counts."""

    def __init__(self, first: str, second: str):
        super().__init__(
            f"Cannot rank kernel images with incompatible version schemes: {first}, {second}",
            code="RANKING_ARITY_MISMATCH",
            details={"names": [first, second]},
        )


class ConfigurationError(KernelAuditError):
    """Configuration error."""

    def __init__(self, message: str, config_key: str | None = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details)
