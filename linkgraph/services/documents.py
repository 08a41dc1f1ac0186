"""Read-only Markdown document source."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
import re
from typing import Any, Dict, List, Sequence

import frontmatter

from ..models.document import Document

logger = logging.getLogger(__name__)

H1_PATTERN = re.compile(r"^\s*#\s+(.+)$", re.MULTILINE)
TRUTHY = {"1", "true", "yes", "on"}


def _derive_title(document_id: str, metadata: Dict[str, Any], body: str) -> str:
    title = metadata.get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()
    match = H1_PATTERN.search(body or "")
    if match:
        return match.group(1).strip()
    stem = Path(document_id).stem
    title_from_filename = stem.replace("-", " ").replace("_", " ").strip()
    return title_from_filename or stem


def _is_pinned(metadata: Dict[str, Any]) -> bool:
    value = metadata.get("pinned", False)
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY
    return bool(value)


def fingerprint(documents: Sequence[Document]) -> str:
    """Stable digest of a document set; any id/title/content change alters it."""
    digest = hashlib.sha256()
    for document in documents:
        for part in (document.id, document.title, document.content, str(document.is_pinned)):
            digest.update(part.encode("utf-8"))
            digest.update(b"\0")
    return digest.hexdigest()


class MarkdownDocumentSource:
    """Load every ``*.md`` file below a directory as a Document."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root).expanduser().resolve()

    def load(self) -> List[Document]:
        if not self.root.exists():
            logger.warning(f"Document directory not found: {self.root}")
            return []

        files = sorted(
            (path for path in self.root.rglob("*.md") if path.is_file()),
            key=lambda path: path.relative_to(self.root).as_posix().lower(),
        )

        documents: List[Document] = []
        for file_path in files:
            relative_path = file_path.relative_to(self.root).as_posix()
            try:
                post = frontmatter.load(file_path)
                metadata = dict(post.metadata or {})
                body = post.content or ""
            except Exception as exc:
                logger.warning(
                    "Failed to parse document, using filename title",
                    extra={"path": relative_path, "error": str(exc)},
                )
                metadata, body = {}, ""
            documents.append(
                Document(
                    id=relative_path,
                    title=_derive_title(relative_path, metadata, body),
                    content=body,
                    is_pinned=_is_pinned(metadata),
                )
            )

        logger.info(
            "Documents loaded",
            extra={"root": str(self.root), "documents": len(documents)},
        )
        return documents


__all__ = ["MarkdownDocumentSource", "fingerprint"]
