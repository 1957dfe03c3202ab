"""Configuration file support for kernel-audit."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from kernel_audit.utils.errors import ConfigurationError

STATUS_STYLE_ENV = "KERNEL_AUDIT_STATUS_STYLE"

# Lookup defaults, shared by the config models and the components themselves
DEFAULT_RUNNING_SOURCE = Path("/proc/version")
DEFAULT_BOOTLOADER_CONFIGS = ("boot/grub/grub.cfg", "boot/grub/menu.lst")
DEFAULT_CONVENTIONAL_PATHS = ("vmlinuz", "boot/vmlinuz", "boot/vmlinux", "boot/kernel/kernel")
DEFAULT_HEURISTIC_DIRS = ("boot", ".")
DEFAULT_IMAGE_PREFIX = "vmlinu"
DEFAULT_CHUNK_SIZE = 4096
DEFAULT_MIN_RUN_LENGTH = 40


class StatusStyle(str, Enum):
    """Prefix style of the status line."""

    SHORT = "short"
    LONG = "long"


class SourcesConfig(BaseModel):
    """Where kernel information is looked up.

    Every path except ``running_source`` is interpreted relative to ``root``.
    """

    root: Path = Field(default=Path("/"), description="Filesystem root for image discovery")
    running_source: Path = Field(
        default=DEFAULT_RUNNING_SOURCE,
        description="Single-line source of the running kernel's version string",
    )
    bootloader_configs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BOOTLOADER_CONFIGS),
        description="Bootloader configuration files, tried in order",
    )
    conventional_paths: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CONVENTIONAL_PATHS),
        description="Fixed kernel image locations, tried in order",
    )
    heuristic_dirs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_HEURISTIC_DIRS),
        description="Directories scanned for kernel images, in order",
    )
    image_prefix: str = Field(default=DEFAULT_IMAGE_PREFIX, description="Filename prefix of kernel images")


class ScanConfig(BaseModel):
    """Binary scanning configuration."""

    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0, description="Bytes read per chunk")
    min_run_length: int = Field(
        default=DEFAULT_MIN_RUN_LENGTH,
        gt=0,
        description="Shortest printable run that is checked for a version string",
    )
    decompress: bool = Field(default=True, description="Scan inside gzip/bzip2/xz images")


class OutputConfig(BaseModel):
    """Output configuration."""

    status_style: StatusStyle = Field(default=StatusStyle.SHORT, description="Status line prefix style")


class KernelAuditConfig(BaseModel):
    """Main configuration for kernel-audit."""

    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def get_config_paths() -> list[Path]:
    """Get possible configuration file paths.

    Returns:
        List of paths to check for configuration files
    """
    paths = []

    # Current directory
    paths.append(Path.cwd() / ".kernel-audit.yaml")
    paths.append(Path.cwd() / ".kernel-audit.yml")

    # Home directory
    home = Path.home()
    paths.append(home / ".kernel-audit.yaml")
    paths.append(home / ".config" / "kernel-audit" / "config.yaml")

    # XDG config directory
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        paths.append(Path(xdg_config) / "kernel-audit" / "config.yaml")

    return paths


def load_config(config_path: Path | str | None = None) -> KernelAuditConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration

    Raises:
        ConfigurationError: If the file is missing, not YAML, or fails validation
    """
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            return _load_config_file(path)
        raise ConfigurationError(f"Config file not found: {config_path}")

    for path in get_config_paths():
        if path.exists():
            return _load_config_file(path)

    return KernelAuditConfig()


def _load_config_file(path: Path) -> KernelAuditConfig:
    """Load configuration from a specific file."""
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}")
    except OSError as e:
        raise ConfigurationError(f"Failed to read config file {path}: {e}")

    if data is None:
        return KernelAuditConfig()
    try:
        return KernelAuditConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config file {path}: {e}")


def resolve_status_style(
    config: KernelAuditConfig,
    override: StatusStyle | None = None,
) -> StatusStyle:
    """Pick the status style once at startup.

    An explicit override wins, then the environment variable, then the config file.

    Raises:
        ConfigurationError: If the environment variable holds an unknown style
    """
    if override is not None:
        return override

    env_value = os.environ.get(STATUS_STYLE_ENV)
    if env_value:
        try:
            return StatusStyle(env_value.strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"{STATUS_STYLE_ENV} must be one of: "
                + ", ".join(s.value for s in StatusStyle),
                config_key=STATUS_STYLE_ENV,
            )

    return config.output.status_style
