"""Sequential extract-compile-run pipeline."""

from .runner import SnippetRunner

__all__ = ["SnippetRunner"]
