"""Non-fungible token instances."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Nft:
    """One NFT serial within a collection.

    Attributes:
        token_id: Token ID of the collection.
        serial_number: Serial number within the collection.
        account_id: Current owner.
        metadata: Metadata as delivered by the mirror node (base64).
        created_timestamp: Mint timestamp.
        deleted: Whether this serial has been burned or wiped.
        delegating_spender: Account that granted a delegate spender.
        spender: Approved spender.
    """

    token_id: str
    serial_number: int
    account_id: str | None = None
    metadata: str | None = None
    created_timestamp: str | None = None
    deleted: bool | None = None
    delegating_spender: str | None = None
    spender: str | None = None
