"""KernelImageLocator for finding the kernel image booted next."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from kernel_audit.core.bootloader import BootloaderConfigResolver
from kernel_audit.core.ranking import VersionRanker
from kernel_audit.models.kernel import CandidateImage, Provenance
from kernel_audit.utils.config import (
    DEFAULT_CONVENTIONAL_PATHS,
    DEFAULT_HEURISTIC_DIRS,
    DEFAULT_IMAGE_PREFIX,
    SourcesConfig,
)
from kernel_audit.utils.errors import NoImageFoundError, SourceUnreadableError
from kernel_audit.utils.logging import get_logger, get_logger_with_context

logger = get_logger(__name__)


class LocatorOptions(BaseModel):
    """Which discovery strategies are enabled."""

    model_config = {"frozen": True}

    use_bootloader: bool = Field(default=True, description="Ask the bootloader config")
    use_conventional: bool = Field(default=True, description="Try fixed conventional paths")
    use_heuristic: bool = Field(default=True, description="Scan directories for kernel images")

    @property
    def enabled(self) -> list[Provenance]:
        strategies = []
        if self.use_bootloader:
            strategies.append(Provenance.BOOTLOADER)
        if self.use_conventional:
            strategies.append(Provenance.CONVENTIONAL)
        if self.use_heuristic:
            strategies.append(Provenance.HEURISTIC)
        return strategies


class KernelImageLocator:
    """Locator for the kernel image a machine will boot next.

    Strategies are tried in order: the bootloader's default entry, a short
    list of conventional paths, and finally a scan of a few directories for
    files named like kernel images.

    Example:
        locator = KernelImageLocator()
        image = locator.locate(LocatorOptions(use_bootloader=False))
        print(image.display_path, image.provenance)
    """

    def __init__(
        self,
        root: Path | str = Path("/"),
        bootloader_configs: list[str] | None = None,
        conventional_paths: list[str] | None = None,
        heuristic_dirs: list[str] | None = None,
        image_prefix: str = DEFAULT_IMAGE_PREFIX,
        ranker: VersionRanker | None = None,
    ) -> None:
        """Initialize the locator.

        Args:
            root: Filesystem root every path is resolved against
            bootloader_configs: Bootloader config files relative to root
            conventional_paths: Fixed image paths relative to root
            heuristic_dirs: Directories relative to root scanned for images
            image_prefix: Filename prefix identifying kernel images
            ranker: Ranker used to pick among unlabeled image files
        """
        self._root = Path(root)
        self._resolver = BootloaderConfigResolver(self._root, bootloader_configs)
        self._conventional_paths = list(
            conventional_paths if conventional_paths is not None else DEFAULT_CONVENTIONAL_PATHS
        )
        self._heuristic_dirs = list(heuristic_dirs if heuristic_dirs is not None else DEFAULT_HEURISTIC_DIRS)
        self._image_prefix = image_prefix
        self._ranker = ranker or VersionRanker()

    @classmethod
    def from_config(cls, sources: SourcesConfig) -> "KernelImageLocator":
        return cls(
            root=sources.root,
            bootloader_configs=sources.bootloader_configs,
            conventional_paths=sources.conventional_paths,
            heuristic_dirs=sources.heuristic_dirs,
            image_prefix=sources.image_prefix,
        )

    def locate(self, options: LocatorOptions | None = None) -> CandidateImage:
        """Find the kernel image booted next.

        Args:
            options: Enabled strategies (all by default)

        Returns:
            The first candidate found, tagged with its provenance

        Raises:
            NoImageFoundError: If every enabled strategy fails
            RankingArityMismatchError: If the heuristic scan cannot rank image names
            SourceUnreadableError: If the chosen image cannot be stat'ed
        """
        options = options or LocatorOptions()
        strategies = {
            Provenance.BOOTLOADER: self._from_bootloader,
            Provenance.CONVENTIONAL: self._from_conventional_paths,
            Provenance.HEURISTIC: self._from_heuristic_scan,
        }

        for provenance in options.enabled:
            log = get_logger_with_context(__name__, strategy=provenance.value)
            path = strategies[provenance]()
            if path is None:
                log.debug("No kernel image found")
                continue
            log.info("Found kernel image %s", path)
            try:
                return CandidateImage.at(path, provenance)
            except OSError as e:
                raise SourceUnreadableError(str(path), e.strerror or str(e)) from e

        raise NoImageFoundError([p.value for p in options.enabled])

    def _from_bootloader(self) -> Path | None:
        return self._resolver.resolve()

    def _from_conventional_paths(self) -> Path | None:
        for name in self._conventional_paths:
            path = self._root / name
            try:
                if path.exists():
                    return path
            except OSError as e:
                logger.debug("Cannot stat %s: %s", path, e)
        return None

    def _from_heuristic_scan(self) -> Path | None:
        for name in self._heuristic_dirs:
            directory = self._root / name
            path = self._scan_directory(directory)
            if path is not None:
                return path
        return None

    def _scan_directory(self, directory: Path) -> Path | None:
        """Pick the primary kernel image in one directory.

        Symlinks win over regular files; the shortest symlink name is taken
        as the primary pointer. Otherwise the highest-versioned file wins.
        """
        try:
            names = sorted(os.listdir(directory))
        except OSError:
            return None

        symlinks: list[str] = []
        files: list[str] = []
        for name in names:
            if not name.startswith(self._image_prefix):
                continue
            path = directory / name
            try:
                if path.is_symlink():
                    symlinks.append(name)
                elif path.is_file():
                    files.append(name)
            except OSError as e:
                logger.debug("Cannot stat %s: %s", path, e)

        if symlinks:
            return directory / min(symlinks, key=len)
        if files:
            best = self._ranker.highest(files)
            if best is not None:
                return directory / best
        return None
