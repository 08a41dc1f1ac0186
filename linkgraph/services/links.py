"""Wiki-link extraction and resolution against document titles."""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, List, Sequence, Set

from ..models.document import Document
from ..models.graph import Edge, LinkExtraction

logger = logging.getLogger(__name__)

# [[Name]] or [[Name|Alias]]; anything unterminated stays plain text.
WIKILINK_PATTERN = re.compile(r"\[\[([^\]|]+)(?:\|[^\]]+)?\]\]")


def normalize_title(text: str | None) -> str:
    """Fold a title or link name for case-insensitive comparison."""
    if not text:
        return ""
    return text.strip().casefold()


def extract_wikilinks(text: str | None) -> List[str]:
    """Return link names in occurrence order, aliases removed.

    Duplicates are kept because every occurrence counts toward the neighbor
    count of both endpoints.
    """
    links: List[str] = []
    for match in WIKILINK_PATTERN.finditer(text or ""):
        name = match.group(1).strip()
        if name:
            links.append(name)
    return links


class LinkExtractor:
    """Resolve wiki-links between documents into an undirected edge list."""

    def extract(self, documents: Sequence[Document]) -> LinkExtraction:
        titles = self._index_titles(documents)
        edges: List[Edge] = []
        seen: Set[frozenset] = set()
        neighbor_counts: Dict[str, int] = {}
        unresolved = 0

        for document in documents:
            for name in extract_wikilinks(document.content):
                target = titles.get(normalize_title(name))
                if target is None:
                    unresolved += 1
                    continue
                if target.id == document.id:
                    continue

                edge = Edge(source_id=document.id, target_id=target.id)
                if edge.key not in seen:
                    seen.add(edge.key)
                    edges.append(edge)
                neighbor_counts[document.id] = neighbor_counts.get(document.id, 0) + 1
                neighbor_counts[target.id] = neighbor_counts.get(target.id, 0) + 1

        logger.debug(
            "Wiki-links resolved",
            extra={
                "documents": len(documents),
                "edges": len(edges),
                "unresolved": unresolved,
            },
        )
        return LinkExtraction(edges=edges, neighbor_counts=neighbor_counts)

    @staticmethod
    def _index_titles(documents: Iterable[Document]) -> Dict[str, Document]:
        # First document in order wins when titles collide.
        index: Dict[str, Document] = {}
        for document in documents:
            key = normalize_title(document.title)
            if key:
                index.setdefault(key, document)
        return index


__all__ = ["LinkExtractor", "extract_wikilinks", "normalize_title", "WIKILINK_PATTERN"]
