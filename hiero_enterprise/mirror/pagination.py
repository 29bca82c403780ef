"""
Pagination engine: raw list-response bodies to Page[T].

List endpoints put their items under an endpoint-specific key (``nfts``,
``tokens``, ``messages``, ``transactions``) next to a ``links`` object.
Which key holds the items is fixed per query kind, so every typed query
passes its key from PAGE_DATA_KEYS explicitly and never guesses.

Guessing survives only for next links whose endpoint cannot be recognized
(see ``data_key_for_path``). In that case the top-level keys are scanned in
iteration order, skipping ``links``:

    - no list-valued key   -> empty page (not an error)
    - one list-valued key  -> that list
    - several              -> the first one, and a warning is logged
                              naming every candidate

``links.next`` is read permissively: a missing or malformed ``links``
object, a null ``next``, or an empty string all mean "no next page".
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from enum import StrEnum
from typing import Any, TypeVar

from hiero_enterprise.data.page import Page, PageLinks

logger = logging.getLogger(__name__)

T = TypeVar("T")

LINKS_KEY = "links"


class QueryKind(StrEnum):
    """Paginated mirror node queries."""

    NFTS_BY_ACCOUNT = "NFTS_BY_ACCOUNT"
    NFTS_BY_ACCOUNT_AND_TOKEN = "NFTS_BY_ACCOUNT_AND_TOKEN"
    NFTS_BY_TOKEN = "NFTS_BY_TOKEN"
    TOKENS_BY_ACCOUNT = "TOKENS_BY_ACCOUNT"
    TOPIC_MESSAGES = "TOPIC_MESSAGES"
    TRANSACTIONS_BY_ACCOUNT = "TRANSACTIONS_BY_ACCOUNT"
    TRANSACTIONS_BY_ACCOUNT_AND_TYPE = "TRANSACTIONS_BY_ACCOUNT_AND_TYPE"


PAGE_DATA_KEYS: dict[QueryKind, str] = {
    QueryKind.NFTS_BY_ACCOUNT: "nfts",
    QueryKind.NFTS_BY_ACCOUNT_AND_TOKEN: "nfts",
    QueryKind.NFTS_BY_TOKEN: "nfts",
    QueryKind.TOKENS_BY_ACCOUNT: "tokens",
    QueryKind.TOPIC_MESSAGES: "messages",
    QueryKind.TRANSACTIONS_BY_ACCOUNT: "transactions",
    QueryKind.TRANSACTIONS_BY_ACCOUNT_AND_TYPE: "transactions",
}

# Path shapes of next links, most specific first. Matched against the
# path with any query string removed.
_PATH_DATA_KEYS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"/api/v1/accounts/[^/]+/nfts$"), "nfts"),
    (re.compile(r"/api/v1/tokens/[^/]+/nfts$"), "nfts"),
    (re.compile(r"/api/v1/topics/[^/]+/messages$"), "messages"),
    (re.compile(r"/api/v1/transactions$"), "transactions"),
    (re.compile(r"/api/v1/tokens$"), "tokens"),
]


def data_key_for_path(path: str) -> str | None:
    """Return the data key for a relative mirror node path, or None.

    >>> data_key_for_path("/api/v1/tokens/0.0.5/nfts?limit=25&serialnumber=lt:9")
    'nfts'
    """
    bare = path.split("?", 1)[0].rstrip("/")
    for pattern, key in _PATH_DATA_KEYS:
        if pattern.search(bare):
            return key
    return None


def _scan_for_items(raw: dict[str, Any]) -> list[Any]:
    candidates = [k for k, v in raw.items() if k != LINKS_KEY and isinstance(v, list)]
    if not candidates:
        return []
    if len(candidates) > 1:
        logger.warning(
            "Ambiguous page shape: %d array keys %s, using %r",
            len(candidates),
            candidates,
            candidates[0],
        )
    return raw[candidates[0]]


def extract_next_link(raw: dict[str, Any]) -> str | None:
    """Read ``links.next``; None unless it is a non-empty string."""
    links = raw.get(LINKS_KEY)
    if not isinstance(links, dict):
        return None
    next_link = links.get("next")
    if isinstance(next_link, str) and next_link:
        return next_link
    return None


def convert_page(
    raw: dict[str, Any],
    converter: Callable[[Any], T],
    data_key: str | None = None,
) -> Page[T]:
    """Wrap a raw list body and a converter into a Page.

    Args:
        raw: One response body.
        converter: Applied to every item, in order.
        data_key: Key holding the items. When given, a missing or
            non-list value yields an empty page. When None, the body is
            scanned (see module docstring).

    Returns:
        Page with converted items and the next link.
    """
    if data_key is not None:
        items = raw.get(data_key)
        if not isinstance(items, list):
            items = []
    else:
        items = _scan_for_items(raw)

    return Page(
        data=[converter(item) for item in items],
        links=PageLinks(next=extract_next_link(raw)),
    )
