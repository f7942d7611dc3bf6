"""
Snippet extraction from documentation.

Finds code blocks wrapped in a language-tagged ``<code>`` element, e.g.::

    <code language="dlang">
    void main() {}
    </code>

Blocks may span several lines. Bodies are kept verbatim, nothing is
stripped or validated.
"""

import re
import logging
from pathlib import Path
from typing import List

from snippetrun.schemas import Document, Snippet

logger = logging.getLogger(__name__)


class SnippetExtractor:
    """
    Extract tagged code snippets from a document.

    The tag pattern is non-greedy and matches across newlines, so each
    ``<code language="...">`` element yields exactly one snippet.
    """

    TAG_TEMPLATE = '<code language="{language}">(.*?)</code>'

    def __init__(self, language_tag: str = "dlang"):
        """
        Initialize snippet extractor.

        Args:
            language_tag: Value of the ``language`` attribute to match
        """
        self.language_tag = language_tag
        self.pattern = re.compile(
            self.TAG_TEMPLATE.format(language=re.escape(language_tag)),
            re.DOTALL
        )

    def load(self, path: Path) -> Document:
        """
        Read a document into memory.

        Args:
            path: Path to the documentation file

        Returns:
            Document holding the full file content

        Raises:
            FileNotFoundError: If the document does not exist
            OSError: If the document cannot be read
            UnicodeDecodeError: If the document is not valid UTF-8
        """
        logger.debug(f"Loading document: {path}")
        # newline='' keeps CRLF and friends so bodies reach disk unchanged
        with open(path, encoding="utf-8", newline="") as f:
            content = f.read()
        return Document(path=path, content=content)

    def extract(self, document: Document) -> List[Snippet]:
        """
        Extract all snippets from a document in document order.

        Args:
            document: Loaded document

        Returns:
            List of snippets, empty if the document has no tagged blocks
        """
        snippets = [
            Snippet(index=index, body=match.group(1))
            for index, match in enumerate(self.pattern.finditer(document.content))
        ]
        logger.debug(f"Extracted {len(snippets)} snippets from {document.path.name}")
        return snippets

    def extract_from_file(self, path: Path) -> List[Snippet]:
        """Load a document and extract its snippets."""
        return self.extract(self.load(path))
