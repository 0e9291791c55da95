"""Document discovery and lookup."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, NewType

from .errors import DuplicateDocumentError, EmptyRepositoryError, NotFoundError

logger = logging.getLogger(__name__)

DocumentID = NewType("DocumentID", str)

# Given a path, returns the full raw text. Raises OSError when unreadable.
SourceProvider = Callable[[Path], str]


def read_source(path: Path) -> str:
	return Path(path).read_text(encoding="utf-8")


def document_id(path: Path | str) -> DocumentID:
	return DocumentID(Path(path).stem)


def extract_title(markdown_text: str, fallback: str) -> str:
	for line in markdown_text.splitlines():
		if line.startswith("# "):
			return line[2:].strip()
	return fallback


@dataclass(frozen=True)
class Document:
	id: DocumentID
	title: str
	path: Path

	@classmethod
	def from_path(cls, path: Path, source: SourceProvider = read_source) -> "Document":
		path = Path(path)
		title = extract_title(source(path), path.stem)
		return cls(id=document_id(path), title=title, path=path)


class DocumentRepository:
	"""Ordered, read-only set of documents.

	Order is discovery order and drives the document menu. The set is fixed
	at construction; build a new repository to pick up changes on disk.
	"""

	def __init__(self, documents: Iterable[Document]) -> None:
		self._documents: list[Document] = []
		self._by_id: dict[DocumentID, Document] = {}

		for doc in documents:
			if doc.id in self._by_id:
				raise DuplicateDocumentError(
					f"Document id {doc.id!r} is used by both {self._by_id[doc.id].path} and {doc.path}"
				)
			self._by_id[doc.id] = doc
			self._documents.append(doc)

		if not self._documents:
			raise EmptyRepositoryError("Cannot start viewer, there are no documents to display.")

	@classmethod
	def from_directory(
		cls,
		input_dir: Path,
		source: SourceProvider = read_source,
		pattern: str = "*.md",
	) -> "DocumentRepository":
		"""Scan ``input_dir`` once for Markdown files, sorted by name.

		Names starting with ``_`` are partials (e.g. ``_sidebar.md``) and are
		skipped.
		"""
		input_dir = Path(input_dir)
		paths = sorted(
			p for p in input_dir.glob(pattern)
			if p.is_file() and not p.name.startswith("_")
		)
		if not paths:
			raise EmptyRepositoryError(f"No markdown files found in {input_dir}")

		repo = cls(Document.from_path(p, source) for p in paths)
		logger.info("Discovered %d document(s) in %s", len(repo), input_dir)
		return repo

	def __len__(self) -> int:
		return len(self._documents)

	def __iter__(self) -> Iterator[Document]:
		return iter(self._documents)

	def list_documents(self) -> list[Document]:
		return list(self._documents)

	def exists(self, doc_id: str) -> bool:
		return doc_id in self._by_id

	def get_by_id(self, doc_id: str) -> Document:
		try:
			return self._by_id[DocumentID(doc_id)]
		except KeyError:
			raise NotFoundError(f"No document with id {doc_id!r}") from None

	def get_first(self) -> Document:
		if not self._documents:
			raise EmptyRepositoryError("Cannot start viewer, there are no documents to display.")
		return self._documents[0]
