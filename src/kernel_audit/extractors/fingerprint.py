"""Kernel version string grammar.

A kernel identifies itself with a line such as::

    Linux version 3.2.0-4-amd64 (debian-kernel@lists.debian.org) (gcc version 4.6.3 (Debian 4.6.3-14) ) #1 SMP Debian 3.2.60-1+deb7u1

The running kernel reports it with the ``Linux version`` prefix, kernel
images usually embed it without. From such a line two fields are captured:
the release (``3.2.0-4-amd64``) and the build identifier, which starts at the
last ``#<n>`` marker on the line (``#1 SMP Debian 3.2.60-1+deb7u1``).
"""

from __future__ import annotations

import re

from kernel_audit.models.kernel import Fingerprint

# e.g. "Thu, 28 Aug 2014 10:00:00 +0200"
_RFC2822_DATE = (
    r"(?:[A-Z][a-z]{2}, )?\d{1,2} [A-Z][a-z]{2} \d{4} "
    r"\d{2}:\d{2}:\d{2} (?:[+-]\d{4}|[A-Z]{2,5})"
)

# The first alternative may match nothing after the marker; real-world
# build strings rely on it.
_BUILD = (
    r"#\d+"
    r"(?:"
    rf".*(?:{_RFC2822_DATE})?"
    r"|.*\b20\d\d"
    r"|.*\d+\.\d+\.\d+(?:\.\d+)*(?: ?\(\d{4}-\d{2}-\d{2}\))?"
    r")"
)

FINGERPRINT_PATTERN = re.compile(
    rf"^(?:Linux version )?(\d+\.\d+\S+).*({_BUILD})$",
    re.MULTILINE,
)


def extract_fingerprint(text: str) -> Fingerprint | None:
    """Find the first line of text that holds a kernel version string.

    Args:
        text: Arbitrary text, possibly multi-line or full of garbage

    Returns:
        The fingerprint of the first matching line, or None if no line matches
    """
    if not text or "#" not in text:
        return None

    match = FINGERPRINT_PATTERN.search(text)
    if match is None:
        return None

    version, build = match.group(1), match.group(2)
    if not version or not build:
        return None
    return Fingerprint(version=version, build=build)
