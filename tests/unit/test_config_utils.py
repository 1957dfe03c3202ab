"""Unit tests for the config module."""

from pathlib import Path

import pytest

from kernel_audit.core.locator import KernelImageLocator
from kernel_audit.models.kernel import Provenance
from kernel_audit.utils.config import (
    DEFAULT_CONVENTIONAL_PATHS,
    STATUS_STYLE_ENV,
    KernelAuditConfig,
    OutputConfig,
    ScanConfig,
    SourcesConfig,
    StatusStyle,
    get_config_paths,
    load_config,
    resolve_status_style,
)
from kernel_audit.utils.errors import ConfigurationError


class TestSourcesConfig:
    """Tests for SourcesConfig model."""

    def test_default_values(self):
        """Test default values."""
        config = SourcesConfig()
        assert config.root == Path("/")
        assert config.running_source == Path("/proc/version")
        assert config.bootloader_configs == ["boot/grub/grub.cfg", "boot/grub/menu.lst"]
        assert config.conventional_paths == ["vmlinuz", "boot/vmlinuz", "boot/vmlinux", "boot/kernel/kernel"]
        assert config.heuristic_dirs == ["boot", "."]
        assert config.image_prefix == "vmlinu"

    def test_defaults_match_components(self, fake_root):
        """Test a default-configured locator behaves like a default locator."""
        (fake_root / "boot" / "grub" / "menu.lst").write_text("kernel /boot/vmlinuz-a\n")
        (fake_root / "boot" / "vmlinuz-a").write_bytes(b"")

        from_config = KernelImageLocator.from_config(SourcesConfig(root=fake_root)).locate()
        direct = KernelImageLocator(root=fake_root).locate()
        assert from_config == direct
        assert direct.provenance is Provenance.BOOTLOADER

    def test_default_lists_not_shared(self):
        """Test each instance gets its own default lists."""
        first = SourcesConfig()
        first.conventional_paths.append("extra")
        assert SourcesConfig().conventional_paths == list(DEFAULT_CONVENTIONAL_PATHS)


class TestScanConfig:
    """Tests for ScanConfig model."""

    def test_default_values(self):
        """Test default values."""
        config = ScanConfig()
        assert config.chunk_size == 4096
        assert config.min_run_length == 40
        assert config.decompress is True

    @pytest.mark.parametrize("field", ["chunk_size", "min_run_length"])
    def test_must_be_positive(self, field):
        """Test sizes must be positive."""
        with pytest.raises(ValueError):
            ScanConfig(**{field: 0})


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self):
        """Test defaults when no config file exists."""
        assert load_config() == KernelAuditConfig()

    def test_explicit_file(self, tmp_path):
        """Test loading an explicit file."""
        path = tmp_path / "config.yaml"
        path.write_text("output:\n  status_style: long\nscan:\n  chunk_size: 512\n")

        config = load_config(path)
        assert config.output.status_style is StatusStyle.LONG
        assert config.scan.chunk_size == 512
        assert config.sources == SourcesConfig()

    def test_search_path(self, tmp_path):
        """Test a config in the current directory is found."""
        (tmp_path / ".kernel-audit.yaml").write_text("sources:\n  root: /mnt/target\n")
        assert load_config().sources.root == Path("/mnt/target")

    def test_empty_file(self, tmp_path):
        """Test an empty file gives defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == KernelAuditConfig()

    def test_missing_explicit_file(self, tmp_path):
        """Test a missing explicit file is an error."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Test malformed YAML is an error."""
        path = tmp_path / "config.yaml"
        path.write_text("output: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        """Test values failing validation are an error."""
        path = tmp_path / "config.yaml"
        path.write_text("output:\n  status_style: loud\n")
        with pytest.raises(ConfigurationError, match="Invalid config file"):
            load_config(path)


class TestConfigPaths:
    """Tests for get_config_paths."""

    def test_order(self, tmp_path):
        """Test the current directory is searched before the home directory."""
        paths = get_config_paths()
        assert paths[0] == tmp_path / ".kernel-audit.yaml"
        assert paths[2] == Path.home() / ".kernel-audit.yaml"

    def test_xdg(self, tmp_path, monkeypatch):
        """Test XDG_CONFIG_HOME is searched when set."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        assert get_config_paths()[-1] == tmp_path / "xdg" / "kernel-audit" / "config.yaml"


class TestResolveStatusStyle:
    """Tests for resolve_status_style."""

    def test_config_default(self):
        """Test the config value is used without overrides."""
        config = KernelAuditConfig(output=OutputConfig(status_style=StatusStyle.LONG))
        assert resolve_status_style(config) is StatusStyle.LONG

    def test_env_beats_config(self, monkeypatch):
        """Test the environment variable beats the config file."""
        monkeypatch.setenv(STATUS_STYLE_ENV, " LONG ")
        assert resolve_status_style(KernelAuditConfig()) is StatusStyle.LONG

    def test_override_beats_env(self, monkeypatch):
        """Test an explicit override beats the environment variable."""
        monkeypatch.setenv(STATUS_STYLE_ENV, "long")
        assert resolve_status_style(KernelAuditConfig(), StatusStyle.SHORT) is StatusStyle.SHORT

    def test_invalid_env(self, monkeypatch):
        """Test an unknown style is an error."""
        monkeypatch.setenv(STATUS_STYLE_ENV, "loud")
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_status_style(KernelAuditConfig())
        assert exc_info.value.details == {"config_key": STATUS_STYLE_ENV}
