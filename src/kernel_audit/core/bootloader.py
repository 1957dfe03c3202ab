"""Default boot entry lookup in GRUB configuration files."""

from __future__ import annotations

import re
from pathlib import Path, PurePosixPath

from kernel_audit.models.kernel import BootConfig
from kernel_audit.utils.config import DEFAULT_BOOTLOADER_CONFIGS
from kernel_audit.utils.errors import MalformedBootConfigError
from kernel_audit.utils.logging import get_logger

logger = get_logger(__name__)

_KERNEL_DIRECTIVE = re.compile(r"^\s*(?:kernel|linux)\s+(\S+)")
_DEFAULT_DIRECTIVE = re.compile(r"""^\s*(?:set\s+)?default\s*(?:=|\s)\s*["']?(\d+)["']?\s*$""")
# GRUB device prefix, e.g. "(hd0,1)/vmlinuz"
_DEVICE_PREFIX = re.compile(r"^\([^)]*\)")


def parse_boot_config(text: str, source: Path | str) -> BootConfig:
    """Collect kernel entries and the default index from a GRUB config.

    Non-numeric defaults such as ``saved`` are ignored; the last numeric
    ``default`` directive wins.
    """
    entries: list[str] = []
    default_index = 0

    for line in text.splitlines():
        kernel = _KERNEL_DIRECTIVE.match(line)
        if kernel:
            entries.append(_DEVICE_PREFIX.sub("", kernel.group(1)))
            continue
        default = _DEFAULT_DIRECTIVE.match(line)
        if default:
            default_index = int(default.group(1))

    return BootConfig(source=Path(source), entries=entries, default_index=default_index)


def default_entry(config: BootConfig) -> str:
    """Return the kernel path of the default boot entry.

    Raises:
        MalformedBootConfigError: If there are no entries or the index is out of range
    """
    if not config.entries:
        raise MalformedBootConfigError(str(config.source), "no kernel entries")
    if config.default_index >= len(config.entries):
        raise MalformedBootConfigError(
            str(config.source),
            f"default entry {config.default_index} out of range "
            f"({len(config.entries)} entries)",
        )
    return config.entries[config.default_index]


class BootloaderConfigResolver:
    """Finds the kernel image the bootloader will boot by default.

    The entry path in the configuration may refer to a different mount
    layout than the one visible here (``/boot`` as its own partition shows up
    as ``/vmlinuz-...`` to GRUB), so it is looked up as written, then by
    basename under ``boot/``, then by basename at the root.

    Example:
        resolver = BootloaderConfigResolver(root=Path("/"))
        image = resolver.resolve()
    """

    def __init__(
        self,
        root: Path | str = Path("/"),
        config_files: list[str] | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            root: Filesystem root all paths are resolved against
            config_files: Configuration files relative to root, tried in order
        """
        self._root = Path(root)
        self._config_files = list(config_files if config_files is not None else DEFAULT_BOOTLOADER_CONFIGS)

    def _under_root(self, path: str) -> Path:
        return self._root / path.lstrip("/")

    def load(self) -> BootConfig | None:
        """Parse the first existing, readable configuration file."""
        for name in self._config_files:
            path = self._under_root(name)
            try:
                if not path.is_file():
                    continue
                text = path.read_text(encoding="utf-8", errors="replace")
            except OSError as e:
                logger.debug("Cannot read %s: %s", path, e)
                continue
            logger.debug("Using bootloader config %s", path)
            return parse_boot_config(text, path)
        return None

    def candidates(self, entry: str) -> list[Path]:
        """Locations tried for a configured kernel path, in order."""
        basename = PurePosixPath(entry).name
        return [
            self._under_root(entry),
            self._root / "boot" / basename,
            self._root / basename,
        ]

    def resolve(self) -> Path | None:
        """Return the default entry's kernel image, or None if it cannot be determined."""
        config = self.load()
        if config is None:
            logger.debug("No bootloader config found")
            return None

        try:
            entry = default_entry(config)
        except MalformedBootConfigError as e:
            logger.warning("%s", e.message)
            return None

        for path in self.candidates(entry):
            try:
                found = path.exists()
            except OSError as e:
                logger.debug("Cannot stat %s: %s", path, e)
                continue
            if found:
                logger.debug("Default boot entry %s resolved to %s", entry, path)
                return path

        logger.debug("Default boot entry %s not found on disk", entry)
        return None
