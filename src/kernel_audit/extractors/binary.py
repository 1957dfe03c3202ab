"""Fingerprint scanning of binary kernel images."""

from __future__ import annotations

import bz2
import functools
import gzip
import lzma
import re
import string
from contextlib import contextmanager
from enum import Enum, auto
from pathlib import Path
from typing import BinaryIO, Iterator

from kernel_audit.extractors.fingerprint import extract_fingerprint
from kernel_audit.models.kernel import Fingerprint
from kernel_audit.utils.config import DEFAULT_CHUNK_SIZE, DEFAULT_MIN_RUN_LENGTH, ScanConfig
from kernel_audit.utils.errors import NoFingerprintFoundError, SourceUnreadableError
from kernel_audit.utils.logging import get_logger

logger = get_logger(__name__)

_PRINTABLE = re.escape(string.printable.encode("ascii"))
_PRINTABLE_RUN = re.compile(b"[" + _PRINTABLE + b"]+")
_NON_PRINTABLE_RUN = re.compile(b"[^" + _PRINTABLE + b"]+")

# Whole-file compression formats, by magic number
_COMPRESSED_FORMATS: list[tuple[bytes, str]] = [
    (b"\x1f\x8b", "gzip"),
    (b"BZh", "bzip2"),
    (b"\xfd7zXZ\x00", "xz"),
]
_OPENERS = {
    "gzip": gzip.open,
    "bzip2": bz2.open,
    "xz": lzma.open,
}
_DECOMPRESSION_ERRORS = (OSError, EOFError, lzma.LZMAError)


class ScanState(Enum):
    """States of the printable-run scanner."""

    AWAITING_CHUNK = auto()
    ACCUMULATING_RUN = auto()
    MATCHING = auto()


def iter_chunks(stream: BinaryIO, chunk_size: int) -> Iterator[bytes]:
    """Yield bounded reads from a binary stream until it is exhausted."""
    return iter(functools.partial(stream.read, chunk_size), b"")


def detect_compression(head: bytes) -> str | None:
    """Name the compression format a file starts with, if any."""
    for magic, name in _COMPRESSED_FORMATS:
        if head.startswith(magic):
            return name
    return None


class BinaryScanner:
    """Finds a kernel fingerprint embedded in an arbitrary binary file.

    The file is read in bounded chunks. Runs of printable characters are
    reassembled across chunk boundaries, and every run of at least
    ``min_run_length`` characters is handed to the version string grammar
    until one matches.

    Example:
        scanner = BinaryScanner()
        fingerprint = scanner.scan(Path("/boot/vmlinuz-3.2.0-4-amd64"))
        print(fingerprint.version)
    """

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        min_run_length: int = DEFAULT_MIN_RUN_LENGTH,
        decompress: bool = True,
    ) -> None:
        """Initialize the scanner.

        Args:
            chunk_size: Bytes read from the file per chunk
            min_run_length: Shorter printable runs are skipped
            decompress: Scan the decompressed stream of gzip, bzip2 and xz files
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if min_run_length <= 0:
            raise ValueError("min_run_length must be positive")
        self._chunk_size = chunk_size
        self._min_run_length = min_run_length
        self._decompress = decompress

    @classmethod
    def from_config(cls, config: ScanConfig) -> "BinaryScanner":
        return cls(
            chunk_size=config.chunk_size,
            min_run_length=config.min_run_length,
            decompress=config.decompress,
        )

    def scan(self, path: Path | str) -> Fingerprint:
        """Scan a file for a kernel fingerprint.

        Args:
            path: File to scan

        Returns:
            The first fingerprint found

        Raises:
            SourceUnreadableError: If the file cannot be opened or read
            NoFingerprintFoundError: If the whole file holds no fingerprint
        """
        path = Path(path)
        try:
            with self._open(path) as stream:
                fingerprint = self.scan_stream(stream)
        except _DECOMPRESSION_ERRORS as e:
            raise SourceUnreadableError(str(path), str(e)) from e

        if fingerprint is None:
            raise NoFingerprintFoundError(str(path))
        logger.debug("Found %s in %s", fingerprint, path)
        return fingerprint

    @contextmanager
    def _open(self, path: Path) -> Iterator[BinaryIO]:
        try:
            raw = open(path, "rb")
        except OSError as e:
            raise SourceUnreadableError(str(path), e.strerror or str(e)) from e

        with raw:
            compression = None
            if self._decompress:
                compression = detect_compression(raw.read(8))
                raw.seek(0)

            if compression is None:
                yield raw
                return

            logger.debug("Scanning %s stream of %s", compression, path)
            with _OPENERS[compression](raw) as stream:
                yield stream

    def scan_stream(self, stream: BinaryIO) -> Fingerprint | None:
        """Scan an open binary stream, returning None when it is exhausted."""
        chunks = iter_chunks(stream, self._chunk_size)
        state = ScanState.AWAITING_CHUNK
        buffer = b""
        pos = 0
        run = bytearray()
        exhausted = False

        while True:
            if state is ScanState.AWAITING_CHUNK:
                buffer, pos = next(chunks, b""), 0
                if buffer:
                    state = ScanState.ACCUMULATING_RUN
                    continue
                exhausted = True
                if len(run) < self._min_run_length:
                    return None
                state = ScanState.MATCHING

            elif state is ScanState.ACCUMULATING_RUN:
                if not run:
                    skipped = _NON_PRINTABLE_RUN.match(buffer, pos)
                    if skipped:
                        pos = skipped.end()

                printable = _PRINTABLE_RUN.match(buffer, pos)
                if printable:
                    run += printable.group()
                    pos = printable.end()

                if pos >= len(buffer):
                    # The run may continue in the next chunk
                    state = ScanState.AWAITING_CHUNK
                elif len(run) >= self._min_run_length:
                    state = ScanState.MATCHING
                else:
                    run.clear()

            elif state is ScanState.MATCHING:
                fingerprint = extract_fingerprint(run.decode("ascii"))
                if fingerprint is not None:
                    return fingerprint
                run.clear()
                if exhausted:
                    return None
                state = ScanState.ACCUMULATING_RUN if pos < len(buffer) else ScanState.AWAITING_CHUNK
