"""Environment-driven configuration."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
	value = os.getenv(name)
	if value is None:
		return default
	return value.strip().lower() in TRUE_VALUES


@dataclass
class Config:
	"""Viewer settings, read from ``DOCS_*`` environment variables and ``.env``."""

	docs_dir: Path = field(default_factory=lambda: Path("docs"))
	output_dir: Path = field(default_factory=lambda: Path("docs/site"))
	title: str = "Documentation"
	menu_label: str = "Available documents"
	dark_mode: bool = False
	vendor_url: str = ""
	package_url: str = ""
	sidebar: Path | None = None
	host: str = "127.0.0.1"
	port: int = 8080
	log_level: str = "INFO"

	@classmethod
	def from_env(cls, dotenv: bool = True) -> "Config":
		if dotenv:
			load_dotenv(find_dotenv(usecwd=True))

		sidebar = os.getenv("DOCS_SIDEBAR")
		return cls(
			docs_dir=Path(os.getenv("DOCS_DIR", "docs")),
			output_dir=Path(os.getenv("DOCS_OUTPUT", "docs/site")),
			title=os.getenv("DOCS_TITLE", "Documentation"),
			menu_label=os.getenv("DOCS_MENU_LABEL", "Available documents"),
			dark_mode=_env_flag("DOCS_DARK_MODE"),
			vendor_url=os.getenv("DOCS_VENDOR_URL", ""),
			package_url=os.getenv("DOCS_PACKAGE_URL", ""),
			sidebar=Path(sidebar) if sidebar else None,
			host=os.getenv("DOCS_HOST", "127.0.0.1"),
			port=int(os.getenv("DOCS_PORT", "8080")),
			log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
		)

	def validate(self) -> list[str]:
		errors = []

		if not self.title.strip():
			errors.append("DOCS_TITLE must not be empty.")

		if not (0 < self.port < 65536):
			errors.append("DOCS_PORT must be between 1 and 65535.")

		if not isinstance(logging.getLevelName(self.log_level), int):
			errors.append(f"LOG_LEVEL {self.log_level!r} is not a logging level.")

		if self.sidebar is not None and not self.sidebar.is_file():
			errors.append(f"DOCS_SIDEBAR {self.sidebar} does not exist.")

		return errors


def validate_config(config: Config) -> None:
	"""
	Raises:
		ValueError: listing every problem found in ``config``
	"""
	errors = config.validate()
	if errors:
		raise ValueError(
			"Invalid configuration:\n" + "\n".join(f"  - {error}" for error in errors)
		)
