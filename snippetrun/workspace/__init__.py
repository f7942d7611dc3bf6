"""Workspace management for snippet source files and compiled binaries."""

from .manager import WorkspaceManager

__all__ = ["WorkspaceManager"]
