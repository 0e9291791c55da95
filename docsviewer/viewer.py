"""Renders the documentation viewer page for the documents in a repository."""
from __future__ import annotations

import copy
import logging
from html import escape
from pathlib import Path
from typing import Callable

from .documents import Document, DocumentID, DocumentRepository, SourceProvider, read_source
from .markup import rewrite_md_links, to_html
from .menu import query_link, render_document_switcher, render_header_tree
from .parser import DocParser

logger = logging.getLogger(__name__)

STYLE = """
:root {
	--bg: #f6f8fa;
	--bg-glow: #ffffff;
	--fg: #1f2328;
	--muted: #656d76;
	--accent: #0969da;
	--card: #ffffff;
	--code: #eff2f5;
	--heading: #1f2328;
}
:root.dark {
	--bg: #0d1117;
	--bg-glow: #1f2937;
	--fg: #e6edf3;
	--muted: #8b949e;
	--accent: #2f81f7;
	--card: #161b22;
	--code: #0b1524;
	--heading: #f0f6fc;
}
* { box-sizing: border-box; }
body {
	margin: 0;
	font-family: "IBM Plex Sans", "Source Sans 3", "Segoe UI", sans-serif;
	background: radial-gradient(circle at top, var(--bg-glow) 0%, var(--bg) 55%);
	color: var(--fg);
	line-height: 1.6;
}
.navbar { display: flex; gap: 24px; align-items: center; padding: 12px 24px; background: var(--card); }
.navbar a { color: var(--fg); text-decoration: none; }
.dropdown-menu { display: flex; flex-wrap: wrap; gap: 12px; }
main {
	display: grid;
	grid-template-columns: minmax(220px, 260px) minmax(0, 1fr);
	gap: 32px;
	max-width: 1100px;
	margin: 0 auto;
	padding: 40px 24px 64px;
}
#sidebar {
	background: var(--card);
	border-radius: 16px;
	padding: 24px;
	position: sticky;
	top: 24px;
	align-self: start;
}
#sidebar ul { list-style: none; padding-left: 12px; margin: 0; }
#sidebar ul.nav-level-0 { padding-left: 0; }
#sidebar a { color: var(--fg); text-decoration: none; }
#sidebar a:hover { color: var(--accent); }
#content {
	background: var(--card);
	border-radius: 20px;
	padding: 32px;
}
#content h1, #content h2, #content h3 { color: var(--heading); }
#content a { color: var(--accent); }
#content code { background: var(--code); padding: 2px 6px; border-radius: 6px; }
#content pre { background: var(--code); padding: 16px; border-radius: 12px; overflow-x: auto; }
@media (max-width: 900px) {
	main { grid-template-columns: 1fr; }
	#sidebar { position: relative; top: 0; }
}
"""


class DocsViewer:
	"""Renders the viewer UI for the documents held by a repository.

	The repository is only read, so one viewer can serve many requests.
	Each render parses the active document afresh.
	"""

	def __init__(
		self,
		repository: DocumentRepository,
		vendor_url: str = "",
		source: SourceProvider = read_source,
		link: Callable[[str], str] = query_link,
	) -> None:
		self.docs = repository
		self.vendor_url = vendor_url.rstrip("/")
		self.source = source
		self.link = link
		self.title = "Documentation"
		self.menu_label = "Available documents"
		self.dark_mode = False
		self.package_url = ""
		self.sidebar: Path | None = None

		# Raises EmptyRepositoryError: a viewer with nothing to show must not start.
		self.docs.get_first()

	def make_dark_mode(self) -> "DocsViewer":
		self.dark_mode = True
		return self

	def set_title(self, title: str) -> "DocsViewer":
		"""Sets the page title, also used as the navigation brand."""
		self.title = title
		return self

	def set_menu_label(self, label: str) -> "DocsViewer":
		"""Sets the label of the menu listing all available documents."""
		self.menu_label = label
		return self

	def set_package_url(self, url: str) -> "DocsViewer":
		self.package_url = url.rstrip("/")
		return self

	def set_sidebar(self, path: Path | str | None) -> "DocsViewer":
		self.sidebar = Path(path) if path else None
		return self

	def with_link(self, link: Callable[[str], str]) -> "DocsViewer":
		"""Return a copy of this viewer that links documents with ``link``."""
		other = copy.copy(self)
		other.link = link
		return other

	def get_package_url(self) -> str:
		if self.package_url:
			return self.package_url
		return f"{self.vendor_url}/mistralys/markdown-viewer"

	def resolve_active_id(self, requested_id: str | None = None) -> DocumentID:
		"""Return ``requested_id`` if it names a document, else the first one's id.

		Unknown ids are not an error: navigation falls back to the default
		document.
		"""
		if requested_id and self.docs.exists(requested_id):
			return DocumentID(requested_id)
		if requested_id:
			logger.debug("Unknown document %r requested, using the default", requested_id)
		return self.docs.get_first().id

	def get_active_document(self, requested_id: str | None = None) -> Document:
		return self.docs.get_by_id(self.resolve_active_id(requested_id))

	def render_body(self, parser: DocParser) -> str:
		known_ids = {doc.id for doc in self.docs}
		return to_html(rewrite_md_links(parser.body, known_ids, self.link))

	def render_sidebar(self) -> str:
		if self.sidebar is None:
			return ""
		return to_html(self.source(self.sidebar)) + "<hr>"

	def render(self, requested_id: str | None = None) -> str:
		"""Render the full page for the requested (or default) document."""
		document = self.get_active_document(requested_id)
		parser = DocParser(document, self.source)

		switcher = render_document_switcher(self.docs, self.link)
		header_menu = render_header_tree(parser.headers)
		body = self.render_body(parser)
		sidebar = self.render_sidebar()
		title = escape(self.title)
		html_class = ' class="dark"' if self.dark_mode else ""

		logger.debug("Rendering page for %s", document.id)

		return f"""<!doctype html>
<html lang="en"{html_class}>
<head>
	<meta charset="utf-8" />
	<meta http-equiv="X-UA-Compatible" content="IE=edge" />
	<meta name="viewport" content="width=device-width, initial-scale=1" />
	<title>{title} - {escape(document.title)}</title>
	{self.render_styles()}
</head>
<body>
	<nav class="navbar">
		<a class="navbar-brand" href="{escape(self.link(self.docs.get_first().id))}">{title}</a>
		<span class="nav-link">{escape(self.menu_label)}</span>
		{switcher}
	</nav>
	<main>
		<aside id="sidebar">
			{sidebar}
			{header_menu}
		</aside>
		<article id="content">
			{body}
		</article>
	</main>
	{self.render_scripts()}
</body>
</html>"""

	def render_styles(self) -> str:
		if not self.vendor_url:
			return f"<style>{STYLE}</style>"

		package_url = escape(self.get_package_url())
		if self.dark_mode:
			links = [f'<link rel="stylesheet" href="{package_url}/css/slate.min.css">']
		else:
			links = [
				f'<link rel="stylesheet" href="{escape(self.vendor_url)}/twbs/bootstrap/dist/css/bootstrap.min.css">'
			]
		links.append(f'<link rel="stylesheet" href="{package_url}/css/styles.css">')
		if self.dark_mode:
			links.append(f'<link rel="stylesheet" href="{package_url}/css/styles-dark.css">')
		return "\n\t".join(links)

	def render_scripts(self) -> str:
		if not self.vendor_url:
			return ""
		vendor_url = escape(self.vendor_url)
		return (
			f'<script src="{vendor_url}/components/jquery/jquery.js"></script>\n\t'
			f'<script src="{vendor_url}/twbs/bootstrap/dist/js/bootstrap.js"></script>'
		)
