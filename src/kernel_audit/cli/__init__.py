"""Command-line interface for kernel-audit."""
