"""Search-link builder - fills a system's `%s` template with a free-text query."""

import logging
from urllib.parse import quote

logger = logging.getLogger(__name__)

PLACEHOLDER = "%s"

# Characters encodeURIComponent leaves untouched besides alphanumerics
_COMPONENT_SAFE = "-_.!~*'()"


def encode_query(query: str, plus_for_space: bool = True) -> str:
    """Percent-encode a query as a URL component; spaces become '+' by default."""
    encoded = quote(query, safe=_COMPONENT_SAFE)
    if plus_for_space:
        encoded = encoded.replace("%20", "+")
    return encoded


def build_search_link(template: str, query: str, plus_for_space: bool = True) -> str:
    """
    Substitute the encoded query for the first `%s` in template.
    A template without a placeholder is returned unchanged.
    """
    if PLACEHOLDER not in template:
        logger.debug("Search template has no placeholder: %r", template)
        return template
    return template.replace(PLACEHOLDER, encode_query(query, plus_for_space), 1)
