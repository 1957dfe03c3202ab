"""Ranking of kernel image files by the version in their names."""

from __future__ import annotations

import re
from typing import Iterable

from kernel_audit.models.kernel import Ordering
from kernel_audit.utils.errors import RankingArityMismatchError

VersionKey = tuple[int, ...]

# "vmlinuz-2.6.32-10-amd64" -> "2.6.32-10"
_NAME_VERSION = re.compile(r"vmlinu[xz]-(\d+\.\d+\.\d+(?:[.-]\d+)*)")
_COMPONENT_SEP = re.compile(r"[.-]")


def version_key(name: str) -> VersionKey | None:
    """Parse the numeric version out of a kernel image filename.

    Returns:
        The version components, or None if the name carries no version
    """
    match = _NAME_VERSION.search(name)
    if match is None:
        return None
    return tuple(int(part) for part in _COMPONENT_SEP.split(match.group(1)))


def compare_versions(name_a: str, name_b: str) -> Ordering:
    """Compare two kernel image filenames by version.

    Names without a version rank below names with one. Versions compare
    numerically, component by component. Versions with different component
    counts are INCOMPARABLE.
    """
    key_a, key_b = version_key(name_a), version_key(name_b)

    if key_a is None or key_b is None:
        if key_a is None and key_b is None:
            return Ordering.EQUAL
        return Ordering.LESS if key_a is None else Ordering.GREATER

    if len(key_a) != len(key_b):
        return Ordering.INCOMPARABLE

    for a, b in zip(key_a, key_b):
        if a != b:
            return Ordering.LESS if a < b else Ordering.GREATER
    return Ordering.EQUAL


class VersionRanker:
    """Picks the highest-versioned kernel image among unlabeled files.

    Example:
        ranker = VersionRanker()
        best = ranker.highest(["vmlinuz-2.6.32-9", "vmlinuz-2.6.32-10"])
        # "vmlinuz-2.6.32-10"
    """

    def compare(self, name_a: str, name_b: str) -> Ordering:
        return compare_versions(name_a, name_b)

    def highest(self, names: Iterable[str]) -> str | None:
        """Return the highest-ranked name; ties keep the first one seen.

        Raises:
            RankingArityMismatchError: If two versions have different component counts
        """
        best: str | None = None
        for name in names:
            if best is None:
                best = name
                continue
            ordering = self.compare(best, name)
            if ordering is Ordering.INCOMPARABLE:
                raise RankingArityMismatchError(best, name)
            if ordering is Ordering.LESS:
                best = name
        return best
