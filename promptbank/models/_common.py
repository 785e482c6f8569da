"""Column defaults shared by the models."""

import uuid
from datetime import datetime, timezone


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # Python-side timestamps keep microseconds on SQLite, which the
    # most-recently-updated ordering of prompts depends on.
    return datetime.now(timezone.utc)
