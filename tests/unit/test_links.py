from linkgraph.models.document import Document
from linkgraph.services.links import LinkExtractor, extract_wikilinks, normalize_title


def _doc(doc_id: str, title: str, content: str = "") -> Document:
    return Document(id=doc_id, title=title, content=content)


def test_extract_wikilinks_strips_alias_and_whitespace() -> None:
    text = "See [[ Project ]] and [[Implementation|the impl]] then [[Project]] again."

    assert extract_wikilinks(text) == ["Project", "Implementation", "Project"]


def test_extract_wikilinks_ignores_malformed_links() -> None:
    text = "[[Unclosed and [single] brackets [[]] and [[  ]] only"

    assert extract_wikilinks(text) == []


def test_normalize_title_is_case_insensitive() -> None:
    assert normalize_title("  Café Notes ") == normalize_title("CAFÉ NOTES")
    assert normalize_title(None) == ""


def test_extract_resolves_links_case_insensitively() -> None:
    docs = [
        _doc("a", "Project", "Links to [[implementation]]"),
        _doc("b", "Implementation"),
    ]

    result = LinkExtractor().extract(docs)

    assert [(e.source_id, e.target_id) for e in result.edges] == [("a", "b")]
    assert result.neighbor_counts == {"a": 1, "b": 1}


def test_mutual_links_produce_single_edge_but_count_every_occurrence() -> None:
    docs = [
        _doc("a", "Project", "[[Implementation]] and again [[Implementation|impl]]"),
        _doc("b", "Implementation", "Back to [[Project]]"),
    ]

    result = LinkExtractor().extract(docs)

    assert len(result.edges) == 1
    assert result.neighbor_counts == {"a": 3, "b": 3}


def test_self_links_and_unresolved_links_are_skipped() -> None:
    docs = [
        _doc("a", "Project", "[[Project]] [[Nowhere]]"),
        _doc("b", "Other"),
    ]

    result = LinkExtractor().extract(docs)

    assert result.edges == []
    assert result.neighbor_counts == {}


def test_duplicate_titles_resolve_to_first_document() -> None:
    docs = [
        _doc("first", "Shared"),
        _doc("second", "shared"),
        _doc("linker", "Linker", "[[Shared]]"),
    ]

    result = LinkExtractor().extract(docs)

    assert [(e.source_id, e.target_id) for e in result.edges] == [("linker", "first")]
    assert "second" not in result.neighbor_counts


def test_documents_without_title_cannot_be_linked_to() -> None:
    docs = [
        _doc("blank", ""),
        _doc("linker", "Linker", "[[]] [[ ]]"),
    ]

    result = LinkExtractor().extract(docs)

    assert result.edges == []
