import io
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

import pytest
from rich.console import Console

from snippetrun.config import RunnerConfig
from snippetrun.toolchain import compiler as compiler_module


class FakeProcesses:
    """Stands in for subprocess.run: records calls, mimics dmd and the binaries."""

    def __init__(self):
        self.calls: List[List[str]] = []
        self.build_failures: Dict[str, int] = {}
        self.run_exit_codes: Dict[str, int] = {}
        self.missing_compiler = False

    def __call__(self, cmd, cwd: Optional[Path] = None, **kwargs):
        self.calls.append(list(cmd))
        cwd = Path(cwd or ".")

        if cmd[0].startswith("./"):
            name = cmd[0][2:]
            return subprocess.CompletedProcess(cmd, self.run_exit_codes.get(name, 0))

        if self.missing_compiler:
            raise FileNotFoundError(cmd[0])

        source = cmd[2]
        if source in self.build_failures:
            return subprocess.CompletedProcess(cmd, self.build_failures[source])

        stem = Path(source).stem
        (cwd / stem).write_text("binary")
        (cwd / f"{stem}.o").write_text("object")
        return subprocess.CompletedProcess(cmd, 0)

    @property
    def build_calls(self) -> List[List[str]]:
        return [c for c in self.calls if not c[0].startswith("./")]

    @property
    def run_calls(self) -> List[List[str]]:
        return [c for c in self.calls if c[0].startswith("./")]


@pytest.fixture
def processes(monkeypatch) -> FakeProcesses:
    fake = FakeProcesses()
    monkeypatch.setattr(compiler_module.subprocess, "run", fake)
    return fake


@pytest.fixture
def config(tmp_path) -> RunnerConfig:
    return RunnerConfig(workdir=tmp_path)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def write_document(tmp_path):
    """Write an index.html wrapping each body in a dlang code tag."""

    def _write(*bodies: str, name: str = "index.html", prefix: str = "<html><body>\n") -> Path:
        content = prefix + "\n<p>between</p>\n".join(
            f'<code language="dlang">{body}</code>' for body in bodies
        )
        path = tmp_path / name
        path.write_text(content + "\n</body></html>\n")
        return path

    return _write


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so variables loaded from a .env during the test are removed afterwards
    for name in RunnerConfig.model_fields:
        variable = f"SNIPPETRUN_{name.upper()}"
        monkeypatch.setenv(variable, "")
        monkeypatch.delenv(variable)
