"""JSON formatting utilities for decoded sentences."""

import dataclasses
import datetime
import json
from enum import Enum
from typing import Any

from nmea0183 import Sentence
from nmea0183.units import DBHz, Degree, Knot, Meter, Minute, Second

__all__ = ["format_sentence_message"]

_QUANTITIES = (Degree, Minute, Second, Meter, Knot, DBHz)


def _to_json_value(value: Any) -> Any:
    """Convert a record value into plain JSON types.

    Quantities become floats, enum codes their member name, times and dates
    ISO 8601 strings, tuples lists, and nested records objects.
    """
    if isinstance(value, _QUANTITIES):
        return float(value)
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, (datetime.time, datetime.date)):
        return value.isoformat()
    if isinstance(value, tuple):
        return [_to_json_value(item) for item in value]
    if dataclasses.is_dataclass(value):
        return {field.name: _to_json_value(getattr(value, field.name)) for field in dataclasses.fields(value)}
    return value


def format_sentence_message(sentence: Sentence) -> str:
    """Serialize a decoded sentence into a JSON string for WebSocket transmission."""
    return json.dumps({
        "type": "nmea",
        "frame": sentence.frame.name,
        "talker": sentence.talker.code,
        "user_configured": sentence.talker.is_user_configured,
        "message_code": sentence.message_code,
        "message": _to_json_value(sentence.message),
    })
