"""
Pipeline runner that drives the snippet extract-compile-run task.

Steps, strictly sequential with one snippet in flight at a time:
1. Remove stale artifacts from a previous run
2. Load the document and extract tagged snippets
3. For each snippet: persist it, compile it, run the binary
"""

import time
import logging
from typing import Optional

from rich.console import Console

from snippetrun.config import RunnerConfig
from snippetrun.extractors import SnippetExtractor
from snippetrun.schemas import RunResult, SnippetOutcome
from snippetrun.toolchain import Toolchain
from snippetrun.workspace import WorkspaceManager

logger = logging.getLogger(__name__)

PROGRESS_RULE = "-" * 20


class SnippetRunner:
    """Extracts, builds and runs every snippet embedded in a document."""

    def __init__(self, config: RunnerConfig, console: Optional[Console] = None):
        """
        Initialize the snippet runner.

        Args:
            config: Runner configuration (document, naming, toolchain)
            console: Console for progress lines (default: a new stdout console)
        """
        self.config = config
        self.console = console or Console()

        self.workspace = WorkspaceManager(
            workdir=config.workdir,
            prefix=config.prefix,
            extension=config.extension,
        )
        self.extractor = SnippetExtractor(language_tag=config.language_tag)
        self.toolchain = Toolchain(
            compiler=config.compiler,
            include_dir=config.include_dir,
            library=config.library,
        )

    def clean(self) -> int:
        """Remove artifacts left by previous runs. Returns the number removed."""
        return self.workspace.clean()

    def run(self) -> RunResult:
        """
        Run the whole task.

        Returns:
            RunResult with one outcome per snippet, in document order

        Raises:
            FileNotFoundError: If the document does not exist
            OSError: If the document cannot be read
            UnicodeDecodeError: If the document is not valid UTF-8
            BuildError: If compiling any snippet fails; later snippets are skipped
            RunError: If a compiled snippet exits non-zero; later snippets are skipped
        """
        start_time = time.time()
        document_path = self.config.document_path

        removed = self.clean()

        document = self.extractor.load(document_path)
        snippets = self.extractor.extract(document)
        logger.info(f"Found {len(snippets)} snippets in {document_path}")

        result = RunResult(document=document_path, removed_stale=removed)

        for snippet in snippets:
            artifact = self.workspace.persist(snippet)
            self.console.print(
                f"{PROGRESS_RULE} Working on {artifact.file_name}",
                markup=False,
                highlight=False,
            )
            self.toolchain.build(artifact)
            exit_code = self.toolchain.run(artifact)
            result.outcomes.append(SnippetOutcome(artifact=artifact, exit_code=exit_code))

        result.duration_seconds = time.time() - start_time
        return result
