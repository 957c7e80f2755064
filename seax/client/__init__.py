"""SearXNG search client."""

from seax.client.client import DEFAULT_TIMEOUT, SearchClient, search
from seax.client.models import SearchResponse, SearchResult

__all__ = ["DEFAULT_TIMEOUT", "SearchClient", "SearchResponse", "SearchResult", "search"]
