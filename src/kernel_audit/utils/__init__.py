"""Utility functions for kernel-audit."""

from kernel_audit.utils.config import (
    KernelAuditConfig,
    OutputConfig,
    ScanConfig,
    SourcesConfig,
    StatusStyle,
    load_config,
    resolve_status_style,
)
from kernel_audit.utils.errors import (
    ConfigurationError,
    KernelAuditError,
    MalformedBootConfigError,
    NoFingerprintFoundError,
    NoImageFoundError,
    RankingArityMismatchError,
    SourceUnreadableError,
)
from kernel_audit.utils.logging import (
    configure_logging,
    flush_logging,
    get_logger,
    get_logger_with_context,
)

__all__ = [
    # Logging
    "configure_logging",
    "flush_logging",
    "get_logger",
    "get_logger_with_context",
    # Errors
    "KernelAuditError",
    "SourceUnreadableError",
    "NoFingerprintFoundError",
    "NoImageFoundError",
    "MalformedBootConfigError",
    "RankingArityMismatchError",
    "ConfigurationError",
    # Config
    "KernelAuditConfig",
    "SourcesConfig",
    "ScanConfig",
    "OutputConfig",
    "StatusStyle",
    "load_config",
    "resolve_status_style",
]
