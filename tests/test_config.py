"""Configuration defaults and overrides."""

from pathlib import Path

from snippetrun.config import RunnerConfig


def test_defaults_match_snippet_task():
    config = RunnerConfig()

    assert config.document == Path("index.html")
    assert config.language_tag == "dlang"
    assert config.prefix == "snippet_"
    assert config.extension == ".d"
    assert config.compiler == "dmd"
    assert config.include_dir == "~/.dub/packages/tinyredis-2.1.1/tinyredis/source"
    assert config.library == "~/.dub/packages/tinyredis-2.1.1/tinyredis/libtinyredis.a"


def test_environment_overrides_defaults():
    config = RunnerConfig.from_env(
        environ={"SNIPPETRUN_COMPILER": "ldc2", "SNIPPETRUN_WORKDIR": "/tmp/build"}
    )

    assert config.compiler == "ldc2"
    assert config.workdir == Path("/tmp/build")
    assert config.prefix == "snippet_"


def test_explicit_overrides_win_over_environment():
    config = RunnerConfig.from_env(
        environ={"SNIPPETRUN_DOCUMENT": "env.html"},
        document=Path("cli.html"),
        workdir=None,
    )

    assert config.document == Path("cli.html")
    assert config.workdir == Path(".")


def test_dotenv_file_is_loaded(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("SNIPPETRUN_LANGUAGE_TAG=d\n")
    monkeypatch.chdir(tmp_path)

    config = RunnerConfig.from_env()

    assert config.language_tag == "d"


def test_document_path_resolution(tmp_path):
    relative = RunnerConfig(workdir=tmp_path)
    absolute = RunnerConfig(workdir=tmp_path, document=Path("/srv/docs/index.html"))

    assert relative.document_path == tmp_path / "index.html"
    assert absolute.document_path == Path("/srv/docs/index.html")
