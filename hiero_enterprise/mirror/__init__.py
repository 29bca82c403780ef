"""
Mirror node access for hiero-enterprise.

Public API:

    Client:
        - ``MirrorNodeClient`` — one async method per REST query.

    Pagination (pure):
        - ``convert_page()`` — raw list body + converter → Page.
        - ``QueryKind`` / ``PAGE_DATA_KEYS`` — per-query data key table.
        - ``data_key_for_path()`` — data key of a next-link path.

    Transport:
        - ``MirrorTransport`` — injectable GET protocol.
        - ``HttpxTransport`` — default httpx-based transport.
        - ``MirrorResponse`` — completed exchange (status + body).

Converters live in ``hiero_enterprise.mirror.converters``.
"""

from hiero_enterprise.mirror.client import MirrorNodeClient
from hiero_enterprise.mirror.pagination import (
    PAGE_DATA_KEYS,
    QueryKind,
    convert_page,
    data_key_for_path,
    extract_next_link,
)
from hiero_enterprise.mirror.transport import HttpxTransport, MirrorResponse, MirrorTransport

__all__ = [
    "PAGE_DATA_KEYS",
    "HttpxTransport",
    "MirrorNodeClient",
    "MirrorResponse",
    "MirrorTransport",
    "QueryKind",
    "convert_page",
    "data_key_for_path",
    "extract_next_link",
]
