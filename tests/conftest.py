"""Shared test fixtures for kernel-audit tests."""

import logging
from pathlib import Path

import pytest

from helpers import DEBIAN_BANNER, DEBIAN_IMAGE_STRING, kernel_image_bytes
from kernel_audit.utils.config import STATUS_STYLE_ENV


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keep tests away from user config files and the status style variable."""
    monkeypatch.delenv(STATUS_STYLE_ENV, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    # CLI runs bind handlers to captured streams that are closed afterwards
    logging.getLogger("kernel_audit").handlers = []


@pytest.fixture
def fake_root(tmp_path) -> Path:
    """An empty directory standing in for the filesystem root."""
    root = tmp_path / "root"
    (root / "boot" / "grub").mkdir(parents=True)
    return root


@pytest.fixture
def running_source(tmp_path) -> Path:
    """A /proc/version stand-in for the Debian 3.2.0-4 kernel."""
    path = tmp_path / "proc_version"
    path.write_text(DEBIAN_BANNER + "\n")
    return path


@pytest.fixture
def debian_image(fake_root) -> Path:
    """A kernel image for the Debian 3.2.0-4 kernel under boot/."""
    path = fake_root / "boot" / "vmlinuz-3.2.0-4-amd64"
    path.write_bytes(kernel_image_bytes(DEBIAN_IMAGE_STRING))
    return path
