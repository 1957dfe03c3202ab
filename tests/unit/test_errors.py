"""Unit tests for the errors module."""

import pytest

from kernel_audit.models.common import AuditError
from kernel_audit.utils.errors import (
    ConfigurationError,
    KernelAuditError,
    MalformedBootConfigError,
    NoFingerprintFoundError,
    NoImageFoundError,
    RankingArityMismatchError,
    SourceUnreadableError,
)


class TestKernelAuditError:
    """Tests for base KernelAuditError."""

    def test_basic_error(self):
        """Test basic error creation."""
        error = KernelAuditError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "UNKNOWN_ERROR"
        assert error.details == {}

    def test_to_audit_error(self):
        """Test conversion to the AuditError model."""
        error = KernelAuditError("Test error", code="TEST_ERROR", details={"key": "value"})
        audit_error = error.to_audit_error()

        assert isinstance(audit_error, AuditError)
        assert audit_error.code == "TEST_ERROR"
        assert audit_error.details == {"key": "value"}
        assert str(audit_error) == "[TEST_ERROR] Test error"


class TestSpecificErrors:
    """Tests for the kernel-audit error kinds."""

    @pytest.mark.parametrize(
        "error,code",
        [
            (SourceUnreadableError("/proc/version"), "SOURCE_UNREADABLE"),
            (NoFingerprintFoundError("/vmlinuz"), "NO_FINGERPRINT_FOUND"),
            (NoImageFoundError(["heuristic"]), "NO_IMAGE_FOUND"),
            (MalformedBootConfigError("grub.cfg", "no entries"), "MALFORMED_BOOT_CONFIG"),
            (RankingArityMismatchError("vmlinuz-6.1.0", "vmlinuz-6.1.0-13"), "RANKING_ARITY_MISMATCH"),
            (ConfigurationError("bad"), "CONFIG_ERROR"),
        ],
    )
    def test_codes(self, error, code):
        """Test each error kind carries its code and is a KernelAuditError."""
        assert isinstance(error, KernelAuditError)
        assert error.code == code

    def test_source_unreadable_reason(self):
        """Test the reason is appended to the message."""
        error = SourceUnreadableError("/proc/version", "Permission denied")
        assert error.message == "Cannot read /proc/version: Permission denied"
        assert error.details == {"path": "/proc/version"}

    def test_no_image_lists_strategies(self):
        """Test the strategies tried are part of the message."""
        error = NoImageFoundError(["bootloader", "heuristic"])
        assert "bootloader, heuristic" in error.message
        assert error.details["strategies"] == ["bootloader", "heuristic"]

    def test_no_image_without_strategies(self):
        """Test the message when every strategy was disabled."""
        assert "none enabled" in NoImageFoundError([]).message

    def test_configuration_error_key(self):
        """Test the config key is recorded when given."""
        assert ConfigurationError("bad", config_key="output").details == {"config_key": "output"}
        assert ConfigurationError("bad").details == {}
