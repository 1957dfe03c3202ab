"""Core domain logic for kernel-audit.

This module provides the main library API for checking whether the running
kernel is the one that will be booted next.
"""

from kernel_audit.core.bootloader import BootloaderConfigResolver, default_entry, parse_boot_config
from kernel_audit.core.checker import KernelChecker, compare_fingerprints
from kernel_audit.core.locator import KernelImageLocator, LocatorOptions
from kernel_audit.core.ranking import VersionRanker, compare_versions, version_key

__all__ = [
    "BootloaderConfigResolver",
    "KernelChecker",
    "KernelImageLocator",
    "LocatorOptions",
    "VersionRanker",
    "compare_fingerprints",
    "compare_versions",
    "default_entry",
    "parse_boot_config",
    "version_key",
]
