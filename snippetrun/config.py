"""Runner configuration.

Defaults reproduce the fixed setup of the snippet task: scan ``index.html``
for ``<code language="dlang">`` blocks and build them with ``dmd`` against
tinyredis. Any field can be overridden through a ``SNIPPETRUN_<FIELD>``
environment variable (a ``.env`` file is honoured) or from the CLI.
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv, find_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "SNIPPETRUN_"

TINYREDIS_ROOT = "~/.dub/packages/tinyredis-2.1.1/tinyredis"


class RunnerConfig(BaseModel):
    """Settings for a snippet run."""
    document: Path = Field(Path("index.html"), description="Documentation file scanned for snippets")
    workdir: Path = Field(Path("."), description="Directory where artifacts are written, built and run")
    language_tag: str = Field("dlang", description="Value of the language attribute on the <code> tag")
    prefix: str = Field("snippet_", description="File name prefix shared by all artifacts")
    extension: str = Field(".d", description="Extension of the persisted snippet source files")
    compiler: str = Field("dmd", description="Compiler/linker executable")
    include_dir: str = Field(f"{TINYREDIS_ROOT}/source", description="Include path of the third-party library")
    library: str = Field(f"{TINYREDIS_ROOT}/libtinyredis.a", description="Static library linked into every snippet")

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **overrides: Any
    ) -> "RunnerConfig":
        """
        Build a config from defaults, environment variables and explicit overrides.

        Args:
            environ: Mapping to read ``SNIPPETRUN_*`` variables from. When None,
                     a ``.env`` file is loaded and ``os.environ`` is used.
            **overrides: Field values taking precedence over the environment.
                         ``None`` values are ignored.

        Returns:
            RunnerConfig
        """
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ

        values: Dict[str, Any] = {}
        for name in cls.model_fields:
            env_value = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if env_value:
                values[name] = env_value

        values.update({k: v for k, v in overrides.items() if v is not None})
        if values:
            logger.debug(f"Config overrides: {sorted(values)}")
        return cls(**values)

    @property
    def document_path(self) -> Path:
        """Document location, resolved against the working directory when relative."""
        document = self.document.expanduser()
        if document.is_absolute():
            return document
        return self.workdir / document
