"""Static site build: one HTML page per document."""
from __future__ import annotations

import logging
from pathlib import Path

from .menu import page_link
from .viewer import DocsViewer

logger = logging.getLogger(__name__)

INDEX_PAGE = "index"


def build_site(viewer: DocsViewer, output_dir: Path) -> list[Path]:
	"""Write ``<id>.html`` for every document and ``index.html`` for the default one.

	Files are named with the raw id; only the links are URL-quoted. A
	document whose id is ``index`` keeps its own page, and no default
	index is added.
	"""
	viewer = viewer.with_link(page_link)
	output_dir = Path(output_dir)
	output_dir.mkdir(parents=True, exist_ok=True)

	written = []
	for doc in viewer.docs:
		page = output_dir / f"{doc.id}.html"
		page.write_text(viewer.render(doc.id), encoding="utf-8")
		written.append(page)

	if viewer.docs.exists(INDEX_PAGE):
		logger.info("Document %r provides index.html", INDEX_PAGE)
	else:
		index = output_dir / f"{INDEX_PAGE}.html"
		index.write_text(viewer.render(), encoding="utf-8")
		written.append(index)

	logger.info("Wrote %d page(s) to %s", len(written), output_dir)
	return written
