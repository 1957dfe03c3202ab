"""Kernel fingerprint and image data models."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class Fingerprint(BaseModel):
    """The (version, build) pair identifying a specific kernel build."""

    model_config = {"frozen": True}

    version: str = Field(min_length=1, description="Kernel release, e.g. '3.2.0-4-amd64'")
    build: str = Field(
        min_length=1,
        description="Build identifier from the '#<n>' marker through its date, e.g. '#1 SMP Debian 3.2.60-1+deb7u1'",
    )

    def __str__(self) -> str:
        return f"{self.version} {self.build}"


class Provenance(str, Enum):
    """Which discovery strategy produced a kernel image path."""

    EXPLICIT = "explicit"
    BOOTLOADER = "bootloader"
    CONVENTIONAL = "conventional"
    HEURISTIC = "heuristic"


class CandidateImage(BaseModel):
    """A kernel image believed to be the one booted next."""

    model_config = {"frozen": True}

    path: Path = Field(description="Path of the image as queried")
    provenance: Provenance = Field(description="Strategy that produced this path")
    symlink_target: str | None = Field(
        default=None,
        description="Link text when path is a symlink (one hop, not resolved further)",
    )

    @classmethod
    def at(cls, path: Path, provenance: Provenance) -> "CandidateImage":
        """Create a candidate, recording the link text if path is a symlink."""
        target = str(path.readlink()) if path.is_symlink() else None
        return cls(path=path, provenance=provenance, symlink_target=target)

    @property
    def display_path(self) -> str:
        """Path as shown in reports, disclosing a symlink target."""
        if self.symlink_target is not None:
            return f"{self.path} -> {self.symlink_target}"
        return str(self.path)


class Ordering(str, Enum):
    """Result of comparing two kernel image names by version."""

    LESS = "less"
    GREATER = "greater"
    EQUAL = "equal"
    INCOMPARABLE = "incomparable"


class BootConfig(BaseModel):
    """Boot entries parsed from a bootloader configuration file."""

    model_config = {"frozen": True}

    source: Path = Field(description="Configuration file the entries came from")
    entries: list[str] = Field(default_factory=list, description="Kernel paths in file order")
    default_index: int = Field(default=0, ge=0, description="Index of the default entry")
