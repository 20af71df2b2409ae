"""
Verification token for downstream ledger writers.

The payload embeds the wall-clock time in epoch milliseconds, so two calls
with the same object id and score yield different tokens unless the caller
pins `now`. Token equality therefore says nothing about analysis equality.
"""

import base64
from datetime import datetime, timezone
from typing import Optional

from app.config import settings


def generate_token(object_id: str, score: int, now: Optional[datetime] = None) -> str:
    if now is None:
        now = datetime.now(timezone.utc)
    epoch_ms = int(now.timestamp() * 1000)
    data = f"{settings.token_tag}_{object_id}_{score}_{epoch_ms}"
    encoded = base64.b64encode(data.encode("utf-8")).decode("ascii")
    return f"{settings.token_prefix}{encoded[:settings.token_length]}"
