"""Consensus topic messages."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass


@dataclass(frozen=True)
class TopicMessage:
    """A message submitted to a topic.

    ``message`` is kept exactly as the mirror node returns it (base64).
    """

    topic_id: str
    sequence_number: int
    message: str | None = None
    running_hash: str | None = None
    consensus_timestamp: str | None = None
    payer_account_id: str | None = None

    def decoded_message(self) -> bytes | None:
        """Base64-decode the message body. None if absent or undecodable."""
        if self.message is None:
            return None
        try:
            return base64.b64decode(self.message, validate=True)
        except (binascii.Error, ValueError):
            return None
