"""
Centralized Pydantic schemas for snippetrun.

Single source of truth for the data flowing through the snippet pipeline:
the scanned document, the snippets extracted from it, the artifacts written
to disk and the outcome of building and running each of them.
"""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# EXTRACTION SCHEMAS
# ============================================================================

class Document(BaseModel):
    """Documentation file scanned for snippets. Read once, never mutated."""
    model_config = ConfigDict(frozen=True)

    path: Path = Field(description="Location the document was read from")
    content: str = Field(description="Full text content of the document")


class Snippet(BaseModel):
    """A code block extracted from a document."""
    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="Zero-based position in extraction order")
    body: str = Field(description="Verbatim text found between the snippet tags")


# ============================================================================
# BUILD SCHEMAS
# ============================================================================

class Artifact(BaseModel):
    """Files produced on disk for a single snippet."""
    index: int = Field(ge=0, description="Index of the snippet this artifact was built from")
    source_path: Path = Field(description="Snippet source file, e.g. 'snippet_0.d'")
    binary_path: Path = Field(description="Compiled executable, e.g. 'snippet_0'")

    @property
    def file_name(self) -> str:
        return self.source_path.name


class SnippetOutcome(BaseModel):
    """Result of building and running one artifact."""
    artifact: Artifact
    exit_code: Optional[int] = Field(
        None,
        description="Exit code of the executed binary"
    )

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class RunResult(BaseModel):
    """Summary of a complete extract-compile-run pass."""
    document: Path = Field(description="Document that was scanned")
    outcomes: List[SnippetOutcome] = Field(default_factory=list, description="Outcomes in snippet order")
    removed_stale: int = Field(0, description="Number of stale artifact files removed during cleanup")
    duration_seconds: float = Field(0.0, description="Wall-clock time of the whole run")

    @property
    def total_snippets(self) -> int:
        return len(self.outcomes)
