"""Tests for document discovery and lookup."""

from pathlib import Path

import pytest

from docsviewer.documents import Document, DocumentID, DocumentRepository, document_id, extract_title
from docsviewer.errors import (
	DocsError,
	DuplicateDocumentError,
	EmptyRepositoryError,
	NotFoundError,
)


def _doc(name: str, title: str | None = None) -> Document:
	return Document(id=DocumentID(name), title=title or name.title(), path=Path(f"{name}.md"))


# ---------------------------------------------------------------------------
# Titles and ids
# ---------------------------------------------------------------------------

class TestExtractTitle:
	def test_first_h1(self):
		assert extract_title("intro\n# Getting Started\n# Later", "fallback") == "Getting Started"

	def test_fallback_without_h1(self):
		assert extract_title("## Only a subheading\ntext", "guide") == "guide"

	def test_id_is_file_stem(self):
		assert document_id("docs/getting-started.md") == "getting-started"


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------

class TestRepository:
	def test_first_is_first_listed(self):
		repo = DocumentRepository([_doc("intro"), _doc("setup"), _doc("faq")])
		assert repo.get_first() == repo.list_documents()[0]
		assert [d.id for d in repo.list_documents()] == ["intro", "setup", "faq"]

	def test_unknown_id(self):
		repo = DocumentRepository([_doc("intro")])
		assert repo.exists("missing") is False
		with pytest.raises(NotFoundError):
			repo.get_by_id("missing")

	def test_not_found_is_lookup_error(self):
		repo = DocumentRepository([_doc("intro")])
		with pytest.raises(LookupError):
			repo.get_by_id("missing")

	def test_get_by_id(self):
		setup = _doc("setup")
		repo = DocumentRepository([_doc("intro"), setup])
		assert repo.exists("setup")
		assert repo.get_by_id("setup") is setup

	def test_empty_fails(self):
		with pytest.raises(EmptyRepositoryError) as info:
			DocumentRepository([])
		assert info.value.code == 82001
		assert isinstance(info.value, DocsError)

	def test_duplicate_ids_rejected(self):
		with pytest.raises(DuplicateDocumentError):
			DocumentRepository([_doc("intro"), _doc("intro", "Again")])

	def test_list_is_a_copy(self):
		repo = DocumentRepository([_doc("intro")])
		repo.list_documents().clear()
		assert len(repo) == 1


class TestFromDirectory:
	def test_discovers_sorted_markdown(self, repository):
		assert [d.id for d in repository] == ["faq", "intro", "setup"]

	def test_skips_partials_and_other_files(self, repository):
		assert not repository.exists("_sidebar")
		assert not repository.exists("notes")

	def test_titles(self, repository):
		assert repository.get_by_id("intro").title == "Introduction"
		assert repository.get_by_id("faq").title == "Questions"

	def test_empty_directory(self, tmp_path: Path):
		with pytest.raises(EmptyRepositoryError):
			DocumentRepository.from_directory(tmp_path)

	def test_uses_source_provider(self, docs_dir: Path):
		seen = []

		def source(path: Path) -> str:
			seen.append(path.name)
			return "# From provider\n"

		repo = DocumentRepository.from_directory(docs_dir, source=source)
		assert repo.get_first().title == "From provider"
		assert sorted(seen) == ["faq.md", "intro.md", "setup.md"]

	def test_unreadable_source_propagates(self, docs_dir: Path):
		def source(path: Path) -> str:
			raise PermissionError(path)

		with pytest.raises(OSError):
			DocumentRepository.from_directory(docs_dir, source=source)
