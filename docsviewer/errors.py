"""Exceptions raised by the documentation viewer."""
from __future__ import annotations


class DocsError(Exception):
	"""Base class for every error raised by the package."""

	code: int | None = None

	def __init__(self, message: str, code: int | None = None) -> None:
		super().__init__(message)
		if code is not None:
			self.code = code


class EmptyRepositoryError(DocsError):
	"""No documents were found; the viewer cannot start."""

	code = 82001


class NotFoundError(DocsError, LookupError):
	"""No document has the requested id."""


class DuplicateDocumentError(DocsError):
	"""Two documents resolved to the same id."""


class EmptyAnchorCollisionOverflow(DocsError):
	"""Too many headings share the same anchor text."""
