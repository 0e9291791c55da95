"""Markdown documentation viewer: document menu, heading tree and page rendering."""

__version__ = "0.1.0"

from .documents import Document, DocumentID, DocumentRepository, read_source
from .errors import (
	DocsError,
	DuplicateDocumentError,
	EmptyAnchorCollisionOverflow,
	EmptyRepositoryError,
	NotFoundError,
)
from .menu import render_document_switcher, render_header_tree
from .parser import DocParser, HeaderNode, ParseResult, parse, slugify
from .viewer import DocsViewer

__all__ = [
	"__version__",
	"Document",
	"DocumentID",
	"DocumentRepository",
	"read_source",
	"DocsError",
	"DuplicateDocumentError",
	"EmptyAnchorCollisionOverflow",
	"EmptyRepositoryError",
	"NotFoundError",
	"render_document_switcher",
	"render_header_tree",
	"DocParser",
	"HeaderNode",
	"ParseResult",
	"parse",
	"slugify",
	"DocsViewer",
]
