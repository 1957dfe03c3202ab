"""Kernel version strings and fake kernel images shared by the tests."""

import errno
from pathlib import Path

DEBIAN_BANNER = (
    "Linux version 3.2.0-4-amd64 (debian-kernel@lists.debian.org) "
    "(gcc version 4.6.3 (Debian 4.6.3-14) ) #1 SMP Debian 3.2.60-1+deb7u1"
)
DEBIAN_IMAGE_STRING = (
    "3.2.0-4-amd64 (debian-kernel@lists.debian.org) #1 SMP Debian 3.2.60-1+deb7u1"
)
DEBIAN_NEWER_IMAGE_STRING = (
    "3.2.0-5-amd64 (debian-kernel@lists.debian.org) #1 SMP Debian 3.2.63-2"
)
UBUNTU_BANNER = (
    "Linux version 5.15.0-82-generic (buildd@lcy02-amd64-027) "
    "(gcc (Ubuntu 11.3.0-1ubuntu1~22.04.1) 11.3.0, GNU ld (GNU Binutils for Ubuntu) 2.38) "
    "#91-Ubuntu SMP Mon Aug 14 14:14:14 UTC 2023"
)
CENTOS_BANNER = (
    "Linux version 2.6.32-431.el6.x86_64 (mockbuild@c6b8.bsys.dev.centos.org) "
    "(gcc version 4.4.7 20120313 (Red Hat 4.4.7-4) (GCC) ) #1 SMP Fri Nov 22 03:15:09 UTC 2013"
)
BOOKWORM_BANNER = (
    "Linux version 6.1.0-13-amd64 (debian-kernel@lists.debian.org) "
    "(gcc-12 (Debian 12.2.0-14) 12.2.0, GNU ld (GNU Binutils for Debian) 2.40) "
    "#1 SMP PREEMPT_DYNAMIC Debian 6.1.55-1 (2023-09-29)"
)


def kernel_image_bytes(version_string: str, padding: int = 10000) -> bytes:
    """Build a fake kernel image: binary noise around an embedded version string."""
    noise = bytes(range(0, 32)) * (padding // 32)
    return noise + b"\x00" + version_string.encode("ascii") + b"\x00" + noise


def deny_stat(monkeypatch, method: str, denied: Path) -> None:
    """Make ``Path.<method>`` fail with EACCES for ``denied`` and anything below it.

    Stands in for a directory the monitoring user may not search, which
    root-run tests cannot produce with chmod.
    """
    original = getattr(Path, method)

    def guarded(self, *args, **kwargs):
        if self == denied or denied in self.parents:
            raise PermissionError(errno.EACCES, "Permission denied", str(self))
        return original(self, *args, **kwargs)

    monkeypatch.setattr(Path, method, guarded)
