"""Markdown-to-HTML conversion for document bodies."""
from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Callable, Container

import markdown
from markdown.extensions.toc import TocExtension

from .parser import slugify

# Matches "(target.md)" and "(target.md#anchor)" link destinations.
MD_LINK_RE = re.compile(r"\(([^)\s]+)\.md(#[^)\s]+)?\)")
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")


def make_converter() -> markdown.Markdown:
	# The toc extension must slug with the parser's algorithm so that menu
	# links resolve to the heading ids written into the body.
	return markdown.Markdown(
		extensions=[
			"fenced_code",
			"tables",
			TocExtension(slugify=slugify, separator="-"),
		],
	)


def to_html(markdown_text: str) -> str:
	return make_converter().convert(markdown_text)


def rewrite_md_links(
	markdown_text: str,
	known_ids: Container[str],
	link: Callable[[str], str],
) -> str:
	"""Point local ``.md`` links at the viewer's page for that document.

	Only targets whose stem is a known document id are rewritten; the
	anchor, if any, is preserved.
	"""

	def repl(match: re.Match[str]) -> str:
		path = match.group(1)
		anchor = match.group(2) or ""
		if _SCHEME_RE.match(path):
			return match.group(0)
		doc_id = PurePosixPath(path).name
		if doc_id not in known_ids:
			return match.group(0)
		return f"({link(doc_id)}{anchor})"

	return MD_LINK_RE.sub(repl, markdown_text)
