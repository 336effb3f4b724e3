from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class CacheEntry(BaseModel):
    """Raw Reader API payload cached under a request key."""

    key: str  # JSON-serialised request parameters
    payload: Any  # Parsed response body, stored as received
    stored_at: datetime
