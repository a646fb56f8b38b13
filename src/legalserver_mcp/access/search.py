"""Keyword snippet search over paragraphs."""

import re

_PARAGRAPH_BREAK = re.compile(r"\n{2,}")


def split_paragraphs(text: str) -> list[str]:
    """Split on runs of two or more newlines."""
    return _PARAGRAPH_BREAK.split(text)


def find_snippets(text: str, query: str, max_chars: int) -> list[str]:
    """Collect matching paragraphs with one paragraph of context either side.

    Matching is a case-insensitive substring test against ``query``, which
    is expected to be trimmed and lower-cased already. Paragraphs are
    appended in document order; collection stops at the first paragraph
    that would push the joined output past ``max_chars``. Neighbouring
    matches may repeat a shared context paragraph.

    Args:
        text: Full extracted text
        query: Normalized search term
        max_chars: Budget for the joined snippets

    Returns:
        Paragraphs to be joined with blank lines
    """
    paragraphs = split_paragraphs(text)
    snippets: list[str] = []
    used = 0

    for i, paragraph in enumerate(paragraphs):
        if query not in paragraph.lower():
            continue

        context = paragraphs[max(i - 1, 0) : i + 2]
        for piece in context:
            # each paragraph is followed by a "\n\n" separator
            if used + len(piece) + 2 > max_chars:
                return snippets
            snippets.append(piece)
            used += len(piece) + 2

    return snippets
