"""Fingerprint of the currently running kernel."""

from __future__ import annotations

from pathlib import Path

from kernel_audit.extractors.fingerprint import extract_fingerprint
from kernel_audit.models.kernel import Fingerprint
from kernel_audit.utils.config import DEFAULT_RUNNING_SOURCE
from kernel_audit.utils.errors import NoFingerprintFoundError, SourceUnreadableError
from kernel_audit.utils.logging import get_logger

logger = get_logger(__name__)


class RunningKernelReader:
    """Reads the version string the running kernel reports about itself."""

    def __init__(self, source: Path | str = DEFAULT_RUNNING_SOURCE) -> None:
        self._source = Path(source)

    @property
    def source(self) -> Path:
        return self._source

    def read(self) -> Fingerprint:
        """Read the running kernel's fingerprint.

        Returns:
            Fingerprint parsed from the first line of the source

        Raises:
            SourceUnreadableError: If the source cannot be opened or read
            NoFingerprintFoundError: If its line is not a kernel version string
        """
        try:
            with open(self._source, "r", encoding="utf-8", errors="replace") as f:
                line = f.readline()
        except OSError as e:
            raise SourceUnreadableError(str(self._source), e.strerror or str(e)) from e

        fingerprint = extract_fingerprint(line.rstrip("\r\n"))
        if fingerprint is None:
            raise NoFingerprintFoundError(str(self._source))

        logger.debug("Running kernel: %s", fingerprint)
        return fingerprint
