"""KernelChecker comparing the running kernel with the on-disk image."""

from __future__ import annotations

from pathlib import Path

from kernel_audit.core.locator import KernelImageLocator, LocatorOptions
from kernel_audit.extractors.binary import BinaryScanner
from kernel_audit.extractors.running import RunningKernelReader
from kernel_audit.models.check import CheckReport, CheckResult, CheckStatus
from kernel_audit.models.kernel import CandidateImage, Fingerprint, Provenance
from kernel_audit.utils.config import KernelAuditConfig
from kernel_audit.utils.errors import KernelAuditError, SourceUnreadableError
from kernel_audit.utils.logging import get_logger

logger = get_logger(__name__)


def compare_fingerprints(
    running: Fingerprint,
    installed: Fingerprint,
    image: CandidateImage,
) -> CheckReport:
    """Compare two fingerprints field by field.

    The version is compared first; the build only matters when the versions agree.
    """
    if running.version != installed.version:
        summary = (
            f"version mismatch: running kernel {running.version} "
            f"but {image.path} is {installed.version}"
        )
        status = CheckStatus.WARNING
    elif running.build != installed.build:
        summary = (
            f"build mismatch: running kernel {running.version} {running.build} "
            f"but {image.path} is {installed.build}"
        )
        status = CheckStatus.WARNING
    else:
        summary = f"running kernel matches {image.path}: {running.version}"
        status = CheckStatus.OK

    return CheckReport(
        status=status,
        summary=summary,
        running=running,
        installed=installed,
        image=image,
    )


class KernelChecker:
    """Checker for whether the running kernel is the one booted next.

    Example:
        checker = KernelChecker()
        result = checker.check()
        print(result.report.status.name, result.report.summary)
    """

    def __init__(
        self,
        reader: RunningKernelReader | None = None,
        scanner: BinaryScanner | None = None,
        locator: KernelImageLocator | None = None,
    ) -> None:
        self._reader = reader or RunningKernelReader()
        self._scanner = scanner or BinaryScanner()
        self._locator = locator or KernelImageLocator()

    @classmethod
    def from_config(cls, config: KernelAuditConfig) -> "KernelChecker":
        """Build a checker from the loaded configuration."""
        return cls(
            reader=RunningKernelReader(config.sources.running_source),
            scanner=BinaryScanner.from_config(config.scan),
            locator=KernelImageLocator.from_config(config.sources),
        )

    def check(
        self,
        image: Path | str | None = None,
        options: LocatorOptions | None = None,
    ) -> CheckResult:
        """Compare the running kernel with the kernel image booted next.

        Args:
            image: Explicit image path; skips discovery when given
            options: Enabled discovery strategies

        Returns:
            CheckResult; on failure its report has UNKNOWN status
        """
        candidate: CandidateImage | None = None
        try:
            if image is not None:
                candidate = self._explicit(Path(image))
            else:
                candidate = self._locator.locate(options)
            logger.info("Inspecting %s (%s)", candidate.display_path, candidate.provenance.value)

            installed = self._scanner.scan(candidate.path)
            running = self._reader.read()
        except KernelAuditError as e:
            logger.debug("Check failed: %s", e.message)
            report = CheckReport(status=CheckStatus.UNKNOWN, summary=e.message, image=candidate)
            return CheckResult.fail(report, [e.to_audit_error()])

        return CheckResult.ok(compare_fingerprints(running, installed, candidate))

    @staticmethod
    def _explicit(path: Path) -> CandidateImage:
        try:
            return CandidateImage.at(path, Provenance.EXPLICIT)
        except OSError as e:
            raise SourceUnreadableError(str(path), e.strerror or str(e)) from e
