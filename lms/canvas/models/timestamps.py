"""Timestamp field type for Canvas records."""

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import AwareDatetime, BeforeValidator

_NUMBER = re.compile(r"[+-]?\d+(\.\d*)?")


def _rfc3339_or_none(value: Any) -> Any:
    # Some Canvas endpoints send the string "null" instead of JSON null.
    if value is None or value == "null":
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or _NUMBER.fullmatch(value.strip()):
        raise ValueError("timestamp must be an RFC 3339 string")
    return value


# RFC 3339 timestamp with an offset; JSON null, a missing field, or "null" become None.
OptionalTimestamp = Annotated[AwareDatetime | None, BeforeValidator(_rfc3339_or_none)]
