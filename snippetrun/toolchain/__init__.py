"""Compiler and executable invocation for snippet artifacts."""

from .compiler import BuildError, RunError, Toolchain, ToolchainError

__all__ = ["BuildError", "RunError", "Toolchain", "ToolchainError"]
