"""Heading extraction and table-of-contents tree building.

The parser makes a side pass over a document's Markdown source: body lines
are passed through untouched for the Markdown converter, while ATX heading
lines (``#`` to ``######``) are collected into a tree of :class:`HeaderNode`.

Anchors follow the same conventions as the converter's ``toc`` extension
(see :mod:`docsviewer.markup`), so menu links land on the ids the converter
writes into the body.
"""
from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, NamedTuple

from .documents import Document, SourceProvider, read_source
from .errors import EmptyAnchorCollisionOverflow

logger = logging.getLogger(__name__)

MAX_LEVEL = 6
MAX_ANCHOR_SUFFIX = 1000

# Level markers must not be followed by a seventh '#'. Trailing '#' runs are
# closing markers, as in the converter.
HEADING_RE = re.compile(r"^(?P<marks>#{1,%d})(?!#)(?P<text>.*?)#*$" % MAX_LEVEL)
FENCE_RE = re.compile(r"^(?P<fence>`{3,}|~{3,})")
SUFFIX_RE = re.compile(r"^(.*)_([0-9]+)$")

_IMAGE_RE = re.compile(r"!\[[^\]]*\]\([^)]*\)")
_LINK_RE = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_STAR_RE = re.compile(r"(\*{1,3})(?=\S)(.+?)(?<=\S)\1")
_UNDERSCORE_RE = re.compile(r"(?<!\w)(_{1,3})(?=\S)(.+?)(?<=\S)\1(?!\w)")
_TAG_RE = re.compile(r"<[^>]+>")
_SLUG_STRIP_RE = re.compile(r"[^a-z0-9]+")


def slugify(value: str, separator: str = "-") -> str:
	"""Lower-case ``value`` and collapse non-alphanumeric runs to ``separator``."""
	value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
	value = _SLUG_STRIP_RE.sub(separator, value.lower())
	return value.strip(separator)


def heading_text(raw: str) -> str:
	"""Plain text of a heading: links reduced to their labels, images dropped,
	emphasis and inline tags removed.
	"""
	text = _IMAGE_RE.sub("", raw)
	text = _LINK_RE.sub(r"\1", text)
	text = _STAR_RE.sub(r"\2", text)
	text = _UNDERSCORE_RE.sub(r"\2", text)
	text = _TAG_RE.sub("", text)
	return text.replace("`", "").strip()


class AnchorRegistry:
	"""Hands out anchors that are unique within one document.

	The first occurrence keeps its slug; repeats get ``_1``, ``_2`` and so
	on, the suffix format used by the converter's ``toc`` extension.
	"""

	def __init__(self, max_suffix: int = MAX_ANCHOR_SUFFIX) -> None:
		self.max_suffix = max_suffix
		self._used: set[str] = set()

	def __contains__(self, anchor: str) -> bool:
		return anchor in self._used

	def claim(self, text: str) -> str:
		base = slugify(text)
		anchor = base
		attempts = 0
		while anchor in self._used or not anchor:
			attempts += 1
			if attempts > self.max_suffix:
				raise EmptyAnchorCollisionOverflow(
					f"More than {self.max_suffix} headings share the anchor {base!r}"
				)
			match = SUFFIX_RE.match(anchor)
			if match:
				anchor = f"{match.group(1)}_{int(match.group(2)) + 1}"
			else:
				anchor = f"{anchor}_1"
		self._used.add(anchor)
		return anchor


@dataclass
class HeaderNode:
	level: int
	text: str
	anchor: str
	children: list["HeaderNode"] = field(default_factory=list)

	def walk(self) -> Iterator[HeaderNode]:
		"""Yield this node and all of its descendants in document order."""
		yield self
		for child in self.children:
			yield from child.walk()


class ParseResult(NamedTuple):
	body: str
	headers: list[HeaderNode]


def match_heading(line: str) -> tuple[int, str] | None:
	"""Return ``(level, text)`` for an ATX heading line, else ``None``."""
	match = HEADING_RE.match(line)
	if match is None:
		return None
	text = heading_text(match.group("text"))
	if not text:
		return None
	return len(match.group("marks")), text


def unfenced_lines(lines: Iterable[str]) -> Iterator[str]:
	"""Yield the lines of ``lines`` that are outside fenced code blocks.

	A fence that is never closed is not a code block: once the input runs
	out, the lines held back after it are yielded after all.
	"""
	source = iter(lines)
	held: list[str] = []
	fence: str | None = None

	while True:
		for line in source:
			if fence is not None:
				if line.rstrip() == fence:
					fence = None
					held = []
				else:
					held.append(line)
				continue

			opening = FENCE_RE.match(line)
			if opening:
				fence = opening.group("fence")
				continue
			yield line

		if fence is None:
			return
		fence = None
		source = iter(held)
		held = []


def parse(lines: Iterable[str] | str, anchors: AnchorRegistry | None = None) -> ParseResult:
	"""Split a document into the untouched body and the root heading nodes.

	``lines`` is the document text or its lines, consumed once. Lines inside
	fenced code blocks are never headings. A heading that skips levels (H1
	then H3) is attached to the nearest shallower heading; no placeholder
	nodes are created.
	"""
	if isinstance(lines, str):
		lines = lines.splitlines()

	anchors = anchors or AnchorRegistry()
	body: list[str] = []
	roots: list[HeaderNode] = []
	stack: list[HeaderNode] = []

	def collect(source: Iterable[str]) -> Iterator[str]:
		for line in source:
			line = line.rstrip("\r\n")
			body.append(line)
			yield line

	for line in unfenced_lines(collect(lines)):
		heading = match_heading(line)
		if heading is None:
			if HEADING_RE.match(line):
				# Empty heading: no menu entry, but the converter still gives it an id.
				anchors.claim("")
			continue

		level, text = heading
		node = HeaderNode(level=level, text=text, anchor=anchors.claim(text))

		while stack and stack[-1].level >= level:
			stack.pop()

		if stack:
			stack[-1].children.append(node)
		else:
			roots.append(node)
		stack.append(node)

	return ParseResult("\n".join(body), roots)


class DocParser:
	"""Parses one document, reading its source through ``source``."""

	def __init__(self, document: Document, source: SourceProvider = read_source) -> None:
		self.document = document
		self._source = source
		self._result: ParseResult | None = None

	@property
	def result(self) -> ParseResult:
		if self._result is None:
			text = self._source(Path(self.document.path))
			self._result = parse(text.splitlines())
			logger.debug(
				"Parsed %s: %d root heading(s)", self.document.id, len(self._result.headers)
			)
		return self._result

	@property
	def body(self) -> str:
		return self.result.body

	@property
	def headers(self) -> list[HeaderNode]:
		return self.result.headers
