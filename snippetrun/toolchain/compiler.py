"""
External toolchain invocation.

Compiles persisted snippets with an external compiler/linker against a fixed
third-party library and executes the resulting binaries. Processes inherit
stdout/stderr so compiler diagnostics and program output reach the caller
unchanged.
"""

import os
import subprocess
import logging
from pathlib import Path
from typing import List

from snippetrun.schemas import Artifact

logger = logging.getLogger(__name__)

# Exit status a shell reports when the command cannot be found
COMMAND_NOT_FOUND = 127


class ToolchainError(RuntimeError):
    """Raised when an external process exits non-zero for a snippet."""

    step = "Step"

    def __init__(self, artifact: Artifact, returncode: int, name: str):
        self.artifact = artifact
        self.returncode = returncode
        super().__init__(
            f"{self.step} of {name} failed with exit code {returncode}"
        )


class BuildError(ToolchainError):
    """Raised when the compiler exits non-zero for a snippet."""

    step = "Build"

    def __init__(self, artifact: Artifact, returncode: int):
        super().__init__(artifact, returncode, artifact.file_name)


class RunError(ToolchainError):
    """Raised when a compiled snippet exits non-zero."""

    step = "Run"

    def __init__(self, artifact: Artifact, returncode: int):
        super().__init__(artifact, returncode, artifact.binary_path.name)


class Toolchain:
    """
    Compile and run snippet artifacts.

    The compile command is ``<compiler> -I<include_dir> <source> <library>``,
    executed inside the artifact's directory so the binary lands next to its
    source under the same stem.
    """

    def __init__(self, compiler: str, include_dir: str, library: str):
        """
        Initialize toolchain.

        Args:
            compiler: Compiler/linker executable (e.g. ``dmd``)
            include_dir: Include path of the third-party library; ``~`` is expanded
            library: Static library linked into every snippet; ``~`` is expanded
        """
        self.compiler = compiler
        self.include_dir = os.path.expanduser(include_dir)
        self.library = os.path.expanduser(library)

    def build_command(self, artifact: Artifact) -> List[str]:
        """Return the compiler invocation for an artifact."""
        return [
            self.compiler,
            f"-I{self.include_dir}",
            artifact.source_path.name,
            self.library,
        ]

    def build(self, artifact: Artifact) -> None:
        """
        Compile an artifact's source into its binary.

        Args:
            artifact: Artifact whose source file has been written

        Raises:
            BuildError: If the compiler exits non-zero or cannot be started
        """
        cmd = self.build_command(artifact)
        logger.debug(f"Running compiler: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, cwd=_workdir(artifact))
        except FileNotFoundError:
            logger.error(f"Compiler not found: {self.compiler}")
            raise BuildError(artifact, COMMAND_NOT_FOUND)

        if result.returncode != 0:
            raise BuildError(artifact, result.returncode)

    def run(self, artifact: Artifact) -> int:
        """
        Execute a compiled artifact with no arguments.

        Args:
            artifact: Artifact whose binary has been built

        Returns:
            Exit code of the binary (always 0)

        Raises:
            RunError: If the binary exits non-zero; the task stops here
        """
        cmd = [f"./{artifact.binary_path.name}"]
        logger.debug(f"Running artifact: {cmd[0]}")

        result = subprocess.run(cmd, cwd=_workdir(artifact))
        if result.returncode != 0:
            raise RunError(artifact, result.returncode)
        return result.returncode


def _workdir(artifact: Artifact) -> Path:
    return artifact.source_path.parent
