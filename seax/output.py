"""Render a SearchResponse as JSON or plain text."""

import json
from enum import Enum

from seax.client.models import SearchResponse


class OutputFormat(str, Enum):
    JSON = "json"
    TEXT = "text"


def render_json(response: SearchResponse) -> str:
    """Two-space indented ``{"results": [...]}``; decoding it yields the same records."""
    return json.dumps(response.model_dump(mode="json"), indent=2, ensure_ascii=False)


def render_text(response: SearchResponse, query: str) -> str:
    if not response.results:
        return f"No results for: {query}"

    blocks = [f"Results for: {query}"]
    for i, item in enumerate(response.results, 1):
        lines = [f"{i}. {item.title}", f"   {item.url}"]
        if item.description:
            lines.append(f"   {item.description}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def render(response: SearchResponse, fmt: OutputFormat | str, query: str = "") -> str:
    """Dispatch on ``fmt``; unknown formats raise ValueError."""
    fmt = OutputFormat(fmt)
    if fmt is OutputFormat.JSON:
        return render_json(response)
    return render_text(response, query)
