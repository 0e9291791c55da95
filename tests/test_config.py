"""Tests for configuration loading and the command line."""

import os
from pathlib import Path

import pytest

from docsviewer import cli
from docsviewer.config import Config, validate_config

ENV_VARS = [
	"DOCS_DIR", "DOCS_OUTPUT", "DOCS_TITLE", "DOCS_MENU_LABEL", "DOCS_DARK_MODE",
	"DOCS_VENDOR_URL", "DOCS_PACKAGE_URL", "DOCS_SIDEBAR", "DOCS_HOST", "DOCS_PORT", "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
	# load_dotenv writes straight into os.environ.
	monkeypatch.setattr(os, "environ", dict(os.environ))
	for name in ENV_VARS:
		monkeypatch.delenv(name, raising=False)
	# Keep load_dotenv from finding a stray .env.
	monkeypatch.chdir(tmp_path)


class TestConfig:
	def test_defaults(self):
		config = Config.from_env(dotenv=False)
		assert config.docs_dir == Path("docs")
		assert config.port == 8080
		assert config.dark_mode is False
		assert config.validate() == []

	def test_from_env(self, monkeypatch):
		monkeypatch.setenv("DOCS_TITLE", "Handbook")
		monkeypatch.setenv("DOCS_DARK_MODE", "yes")
		monkeypatch.setenv("DOCS_PORT", "9000")
		monkeypatch.setenv("LOG_LEVEL", "debug")
		config = Config.from_env(dotenv=False)
		assert config.title == "Handbook"
		assert config.dark_mode is True
		assert config.port == 9000
		assert config.log_level == "DEBUG"

	def test_dotenv_file(self, tmp_path):
		(tmp_path / ".env").write_text("DOCS_MENU_LABEL=Pages\n", encoding="utf-8")
		assert Config.from_env().menu_label == "Pages"

	def test_validate(self, tmp_path):
		config = Config(title=" ", port=0, log_level="LOUD", sidebar=tmp_path / "missing.md")
		errors = config.validate()
		assert len(errors) == 4
		with pytest.raises(ValueError):
			validate_config(config)


class TestCli:
	def test_build(self, docs_dir: Path, tmp_path: Path):
		out = tmp_path / "out"
		assert cli.main(["--input", str(docs_dir), "--title", "Handbook", "build", "--output", str(out)]) == 0
		assert "Handbook" in (out / "index.html").read_text(encoding="utf-8")

	def test_empty_input_exits(self, tmp_path: Path):
		empty = tmp_path / "empty"
		empty.mkdir()
		with pytest.raises(SystemExit):
			cli.main(["--input", str(empty), "build"])

	def test_unknown_log_level_exits(self, docs_dir: Path):
		with pytest.raises(SystemExit) as info:
			cli.main(["--input", str(docs_dir), "--log-level", "LOUD", "build"])
		assert "LOUD" in str(info.value)

	def test_undecodable_document_exits(self, tmp_path: Path):
		src = tmp_path / "latin"
		src.mkdir()
		(src / "cafe.md").write_bytes("# Caf\u00e9\n".encode("latin-1"))
		with pytest.raises(SystemExit) as info:
			cli.main(["--input", str(src), "build"])
		assert "Cannot load documents" in str(info.value)

	def test_serve(self, docs_dir: Path, monkeypatch):
		calls = {}

		def fake_serve(viewer, host, port):
			calls.update(viewer=viewer, host=host, port=port)

		monkeypatch.setattr("docsviewer.server.serve", fake_serve)
		assert cli.main(["--input", str(docs_dir), "--dark", "serve", "--port", "9001"]) == 0
		assert calls["port"] == 9001
		assert calls["viewer"].dark_mode is True
