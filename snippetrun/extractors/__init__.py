"""Extraction components for snippetrun."""

from .snippet_extractor import SnippetExtractor

__all__ = [
    "SnippetExtractor",
]
