"""Workspace management for snippet artifacts.

Owns the artifact naming convention (``<prefix><index><extension>`` for
sources, ``<prefix><index>`` for binaries), removes stale artifacts left by a
previous run and persists snippet bodies to disk.
"""

import re
import logging
from pathlib import Path
from typing import List

from snippetrun.schemas import Artifact, Snippet

logger = logging.getLogger(__name__)

# Compiler by-products sitting next to the binary (dmd leaves the object file)
BYPRODUCT_SUFFIXES = (".o", ".obj")


class WorkspaceManager:
    """Manages artifact files inside a working directory."""

    def __init__(self, workdir: Path, prefix: str = "snippet_", extension: str = ".d"):
        """Initialize workspace manager.

        Args:
            workdir: Directory holding the artifacts
            prefix: File name prefix shared by all artifacts
            extension: Extension of persisted snippet sources
        """
        self.workdir = Path(workdir)
        self.prefix = prefix
        self.extension = extension

        suffixes = "|".join(re.escape(s) for s in (extension, *BYPRODUCT_SUFFIXES))
        self._artifact_pattern = re.compile(
            rf"^{re.escape(prefix)}\d+(?:{suffixes})?$"
        )

    def artifact_for(self, index: int) -> Artifact:
        """Return the artifact paths for the snippet at ``index``."""
        stem = f"{self.prefix}{index}"
        return Artifact(
            index=index,
            source_path=self.workdir / f"{stem}{self.extension}",
            binary_path=self.workdir / stem,
        )

    def is_artifact(self, path: Path) -> bool:
        """Check whether a file name follows the artifact naming convention."""
        return bool(self._artifact_pattern.match(path.name))

    def find_artifacts(self) -> List[Path]:
        """List existing artifact files in the working directory, sorted by name."""
        if not self.workdir.is_dir():
            return []
        return sorted(
            path for path in self.workdir.iterdir()
            if path.is_file() and self.is_artifact(path)
        )

    def clean(self) -> int:
        """Remove all artifacts from previous runs.

        Returns:
            Number of files removed
        """
        removed = 0
        for path in self.find_artifacts():
            path.unlink(missing_ok=True)
            logger.debug(f"Removed stale artifact: {path.name}")
            removed += 1

        if removed:
            logger.info(f"Removed {removed} stale artifact files from {self.workdir}")
        return removed

    def persist(self, snippet: Snippet) -> Artifact:
        """Write a snippet body verbatim to its source file.

        Args:
            snippet: Snippet to persist

        Returns:
            Artifact describing the written source and its future binary
        """
        artifact = self.artifact_for(snippet.index)
        self.workdir.mkdir(parents=True, exist_ok=True)
        with open(artifact.source_path, "w", encoding="utf-8", newline="") as f:
            f.write(snippet.body)
        logger.debug(f"Wrote {len(snippet.body)} chars to {artifact.file_name}")
        return artifact
