"""Value normalization between the relational store and the cache/response layers.

asyncpg hands back NUMERIC columns as Decimal, BIGINT as int, TIMESTAMPTZ as
datetime and UUID columns as uuid.UUID. None of the non-int ones survive a
JSON round trip unchanged, so every value is brought into canonical JSON form
right after it leaves the store. A cache hit then returns exactly what the
original miss returned.
"""

import uuid
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any


def normalize(value: Any) -> Any:
    """Return an equivalent value tree made only of JSON-native types.

    Decimal -> float, datetime/date/time -> ISO-8601 str, UUID -> str.
    Lists/tuples keep their order, mappings keep their key set. Everything
    else (None, bool, int, float, str) passes through unchanged.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, Mapping):
        return {str(k): normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize(v) for v in value]
    return value
