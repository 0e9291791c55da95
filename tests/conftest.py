from pathlib import Path

import pytest

from docsviewer.documents import DocumentRepository

INTRO = """# Introduction

Welcome. See [setup](setup.md#install) and [elsewhere](https://example.com/x.md).

## Notes

First notes.

## Notes

Second notes.
"""

SETUP = """# Setup

## Install

```bash
# not a heading
pip install docs-viewer
```

### Options
"""

FAQ = """Frequently asked questions without a title heading.

# Questions
"""


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
	root = tmp_path / "docs"
	root.mkdir()
	(root / "intro.md").write_text(INTRO, encoding="utf-8")
	(root / "setup.md").write_text(SETUP, encoding="utf-8")
	(root / "faq.md").write_text(FAQ, encoding="utf-8")
	(root / "_sidebar.md").write_text("* [Home](intro.md)\n", encoding="utf-8")
	(root / "notes.txt").write_text("# ignored\n", encoding="utf-8")
	return root


@pytest.fixture
def repository(docs_dir: Path) -> DocumentRepository:
	return DocumentRepository.from_directory(docs_dir)
