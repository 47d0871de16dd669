from __future__ import annotations

import uuid
from dataclasses import dataclass

from services.shared.domain import EntityIdentifier


@dataclass(frozen=True)
class BookingId(EntityIdentifier):
    """予約ID"""

    @classmethod
    def generate(cls) -> BookingId:
        """新規予約用の ID を採番する"""
        return cls(value=str(uuid.uuid4()))
