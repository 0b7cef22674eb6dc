# solaredge_api/services/output_formatter.py

from __future__ import annotations

import json
import sys
from datetime import date, datetime
from enum import Enum
from typing import Any, TextIO

from pydantic import BaseModel


def to_jsonable(obj: Any) -> Any:
    """Render response records as JSON-safe structures.

    Model fields keep their Python names, dates become ISO strings and enums
    become their wire tokens. Raw bytes are summarized by length.
    """
    if isinstance(obj, Enum):
        return obj.value
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    if isinstance(obj, datetime):
        return obj.isoformat(sep=" ")
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, (bytes, bytearray)):
        return {"bytes": len(obj)}
    if isinstance(obj, BaseModel):
        return {name: to_jsonable(getattr(obj, name)) for name in type(obj).model_fields}
    if isinstance(obj, dict):
        return {str(k): to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        return [to_jsonable(x) for x in obj]
    return str(obj)


def emit_json(payload: Any, stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    out.write(json.dumps(to_jsonable(payload), indent=2))
    out.write("\n")
