"""Command line: build a static docs site or serve it over HTTP."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import Config, validate_config
from .documents import DocumentRepository
from .errors import DocsError
from .viewer import DocsViewer


def build_parser(config: Config) -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="docs-viewer", description=__doc__)
	parser.add_argument("--input", type=Path, default=config.docs_dir, help="Input docs directory")
	parser.add_argument("--title", default=config.title, help="Page title")
	parser.add_argument("--menu-label", default=config.menu_label, help="Label of the document menu")
	parser.add_argument("--sidebar", type=Path, default=config.sidebar, help="Markdown file shown above the heading menu")
	parser.add_argument("--vendor-url", default=config.vendor_url, help="Base URL of Bootstrap/jQuery assets")
	parser.add_argument("--dark", action="store_true", default=config.dark_mode, help="Use the dark theme")
	parser.add_argument("--log-level", default=config.log_level, help="Logging level")

	commands = parser.add_subparsers(dest="command", required=True)

	build = commands.add_parser("build", help="Write one HTML page per document")
	build.add_argument("--output", type=Path, default=config.output_dir, help="Output site directory")

	serve = commands.add_parser("serve", help="Serve the viewer over HTTP")
	serve.add_argument("--host", default=config.host)
	serve.add_argument("--port", type=int, default=config.port)
	return parser


def make_viewer(args: argparse.Namespace, config: Config) -> DocsViewer:
	repository = DocumentRepository.from_directory(args.input)
	viewer = (
		DocsViewer(repository, vendor_url=args.vendor_url)
		.set_title(args.title)
		.set_menu_label(args.menu_label)
		.set_sidebar(args.sidebar)
	)
	if config.package_url:
		viewer.set_package_url(config.package_url)
	if args.dark:
		viewer.make_dark_mode()
	return viewer


def main(argv: list[str] | None = None) -> int:
	try:
		config = Config.from_env()
		validate_config(config)
	except ValueError as exc:
		raise SystemExit(str(exc)) from exc

	args = build_parser(config).parse_args(argv)
	level = args.log_level.upper()
	if not isinstance(logging.getLevelName(level), int):
		raise SystemExit(f"Unknown log level {args.log_level!r}")
	logging.basicConfig(
		level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
	)

	try:
		viewer = make_viewer(args, config)
	except (DocsError, OSError, UnicodeDecodeError) as exc:
		raise SystemExit(f"Cannot load documents: {exc}") from exc

	if args.command == "build":
		from .site import build_site

		build_site(viewer, args.output)
	else:
		from .server import serve

		serve(viewer, host=args.host, port=args.port)
	return 0


if __name__ == "__main__":
	sys.exit(main())
