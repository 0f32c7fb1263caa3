"""
Utility helpers shared across routers/services.
"""

import uuid
from datetime import datetime, timezone

ORDER_ID_PREFIX = "ORD-"


def utc_now_iso() -> str:
    """
    Current UTC time as ISO-8601 with millisecond precision and a ``Z`` suffix,
    e.g. ``2024-05-01T12:30:00.123Z``.
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_product_id() -> str:
    return uuid.uuid4().hex


def new_order_id() -> str:
    return f"{ORDER_ID_PREFIX}{uuid.uuid4().hex.upper()}"
