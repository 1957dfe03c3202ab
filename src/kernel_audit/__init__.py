"""kernel-audit: check whether the running Linux kernel is the one booted next.

After a kernel package upgrade the machine keeps running the old kernel
until it is rebooted. kernel-audit compares the version string of the
running kernel with the one embedded in the kernel image the bootloader
will load next, and reports a mismatch as a monitoring plugin would.

Usage:
    # Library API
    from kernel_audit import KernelChecker

    result = KernelChecker().check()
    print(result.report.status.name, result.report.summary)

    # Single pieces
    from kernel_audit import BinaryScanner, KernelImageLocator

    image = KernelImageLocator().locate()
    fingerprint = BinaryScanner().scan(image.path)

CLI:
    kernel-audit check [IMAGE]
    kernel-audit fingerprint <path> | --running
    kernel-audit locate
"""

__version__ = "0.1.0"

# Core classes
from kernel_audit.core.bootloader import BootloaderConfigResolver
from kernel_audit.core.checker import KernelChecker
from kernel_audit.core.locator import KernelImageLocator, LocatorOptions
from kernel_audit.core.ranking import VersionRanker

# Extractors
from kernel_audit.extractors.binary import BinaryScanner
from kernel_audit.extractors.fingerprint import extract_fingerprint
from kernel_audit.extractors.running import RunningKernelReader

# Models
from kernel_audit.models.check import CheckReport, CheckResult, CheckStatus
from kernel_audit.models.kernel import CandidateImage, Fingerprint, Ordering, Provenance

# Renderers
from kernel_audit.renderers.status import StatusRenderer

__all__ = [
    # Version
    "__version__",
    # Core
    "BootloaderConfigResolver",
    "KernelChecker",
    "KernelImageLocator",
    "LocatorOptions",
    "VersionRanker",
    # Extractors
    "BinaryScanner",
    "RunningKernelReader",
    "extract_fingerprint",
    # Models
    "CandidateImage",
    "CheckReport",
    "CheckResult",
    "CheckStatus",
    "Fingerprint",
    "Ordering",
    "Provenance",
    # Renderers
    "StatusRenderer",
]
