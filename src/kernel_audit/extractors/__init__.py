"""Fingerprint extractors.

Extractors turn a text line, a binary kernel image, or the running kernel's
self-description into a :class:`~kernel_audit.models.kernel.Fingerprint`.
"""

from kernel_audit.extractors.binary import BinaryScanner, ScanState, detect_compression
from kernel_audit.extractors.fingerprint import FINGERPRINT_PATTERN, extract_fingerprint
from kernel_audit.extractors.running import RunningKernelReader

__all__ = [
    "BinaryScanner",
    "FINGERPRINT_PATTERN",
    "RunningKernelReader",
    "ScanState",
    "detect_compression",
    "extract_fingerprint",
]
