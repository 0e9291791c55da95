"""Navigation markup: the document switcher and the in-page heading tree.

Both renderers are pure: they return a string and never touch global state,
so rendering the same input twice yields identical markup.
"""
from __future__ import annotations

from html import escape
from typing import Callable, Iterable
from urllib.parse import quote

from .documents import Document
from .parser import HeaderNode


def query_link(doc_id: str) -> str:
	return f"?doc={quote(doc_id)}"


def page_link(doc_id: str) -> str:
	return f"{quote(doc_id)}.html"


def render_document_switcher(
	docs: Iterable[Document],
	link: Callable[[str], str] = query_link,
) -> str:
	items = [
		f'<a class="dropdown-item" href="{escape(link(doc.id))}">{escape(doc.title)}</a>'
		for doc in docs
	]
	return '<div class="dropdown-menu" aria-labelledby="navbarDropdown">' + "".join(items) + "</div>"


def render_header_tree(nodes: Iterable[HeaderNode], depth: int = 0) -> str:
	"""Render ``nodes`` as nested ``<ul>`` lists, one level per tree depth.

	Leaf nodes get no sub-list at all. Depth is bounded by the six heading
	levels.
	"""
	items = []
	for node in nodes:
		sub = render_header_tree(node.children, depth + 1) if node.children else ""
		items.append(
			f'<li class="nav-header level-{node.level}">'
			f'<a href="#{escape(node.anchor)}">{escape(node.text)}</a>{sub}</li>'
		)
	return f'<ul class="nav-level-{depth}">' + "".join(items) + "</ul>"
