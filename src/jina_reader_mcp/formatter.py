"""Render Reader API results as markdown and cut them into pages.

Pagination works on the fully assembled text (title, description, content,
links, warning and usage note), not on the upstream content alone. Every page
that is not the whole document ends with a ``[PAGINATION INFO]`` trailer
telling the caller which ``start_index`` to request next.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jina_reader_mcp.models.extraction import ExtractionResponse, ExtractionResult

DEFAULT_MAX_LENGTH = 20000
NO_CONTENT_MESSAGE = "No content extracted or unexpected response format."


def render_extraction(data: ExtractionResult) -> str:
    """Assemble the markdown document for one extraction result."""
    output = ""

    if data.title:
        output += f"# {data.title}\n\n"

    if data.description and data.description.strip():
        output += f"{data.description}\n\n"

    if data.content:
        output += f"{data.content}\n\n"

    if data.links:
        output += "## Links\n\n"
        for text, url in data.links.items():
            output += f"- [{text}]({url})\n"
        output += "\n"

    if data.warning:
        output += f"> Warning: {data.warning}\n\n"

    if data.usage is not None and data.usage.tokens:
        output += f"*Used {data.usage.tokens} tokens*\n"

    return output


def _clipped_trailer(start: int, end: int, total: int) -> str:
    return (
        "\n\n---\n"
        "[PAGINATION INFO]\n"
        f"- Content clipped: Currently showing characters {start}-{end} "
        f"of approximately {total} total\n"
        f"- To view the next section, use start_index={end} with the same max_length\n"
        "- Complete content can be accessed by making multiple paginated requests\n"
    )


def _end_trailer(start: int, end: int) -> str:
    return (
        "\n\n---\n"
        "[PAGINATION INFO]\n"
        f"- Showing characters {start}-{end} of the document\n"
        "- This appears to be the end of the content\n"
    )


def effective_max_length(max_length: int | None, default: int = DEFAULT_MAX_LENGTH) -> int:
    """Window size for a request. Missing or non-positive values fall back to ``default``."""
    if max_length is None or max_length <= 0:
        return default
    return max_length


def paginate(
    text: str,
    max_length: int | None = None,
    start_index: int = 0,
    *,
    default_max_length: int = DEFAULT_MAX_LENGTH,
    legacy: bool = False,
) -> str:
    """Return the window of ``text`` starting at ``start_index`` plus its trailer.

    With ``legacy=True`` the window always starts at character 0 and
    ``start_index`` only shifts the numbers reported in the trailer. This
    is the slicing used by earlier releases, where every page after the
    first repeated the first page.
    """
    length = effective_max_length(max_length, default_max_length)
    start = start_index
    end = start + length
    total = len(text)

    if legacy:
        if total > length:
            return text[:length] + _clipped_trailer(start, end, total)
        if start > 0:
            return text + _end_trailer(start, start + total)
        return text

    window = text[start:end]
    if end < total:
        return window + _clipped_trailer(start, end, total)
    if start > 0:
        return window + _end_trailer(start, start + len(window))
    return window


def format_extraction(
    response: ExtractionResponse,
    max_length: int | None = None,
    start_index: int = 0,
    *,
    default_max_length: int = DEFAULT_MAX_LENGTH,
    legacy_pagination: bool = False,
) -> str:
    """Render ``response`` and return the requested page of it."""
    if response.data is None:
        return NO_CONTENT_MESSAGE

    return paginate(
        render_extraction(response.data),
        max_length,
        start_index,
        default_max_length=default_max_length,
        legacy=legacy_pagination,
    )
