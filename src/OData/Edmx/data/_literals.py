# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Text codecs for EDM attribute values.

Each ``decode_*`` function raises :class:`ValueError` on bad input; callers
attach element and attribute context. Each ``encode_*`` function is the exact
inverse of its decoder and raises :class:`ValueError` for values the decoder
would not produce.
"""

from __future__ import annotations

import datetime
import math
import re
from typing import Callable

_INT_RE = re.compile(r"-?[0-9]+")
_OFFSET_RE = re.compile(
    r"(?P<sign>[+-])(?P<hours>[0-9]{2,}):(?P<minutes>[0-9]{2})"
    r"(?::(?P<seconds>[0-9]{2})(?:\.(?P<fraction>[0-9]{1,6}))?)?"
)
_MICROSECOND = datetime.timedelta(microseconds=1)


def decode_bool(value: str) -> bool:
    if value in ("true", "1"):
        return True
    if value in ("false", "0"):
        return False
    raise ValueError(f"not a boolean: {value!r}")


def encode_bool(value: bool) -> str:
    return "true" if value else "false"


def _decode_int(value: str, low: int, high: int) -> int:
    if _INT_RE.fullmatch(value) is None:
        raise ValueError(f"not a decimal integer: {value!r}")
    number = int(value)
    if not low <= number <= high:
        raise ValueError(f"{number} is outside [{low}, {high}]")
    return number


def unsigned(bits: int) -> Callable[[str], int]:
    """Return a decoder for an unsigned integer of width ``bits``."""
    return lambda value: _decode_int(value, 0, 2**bits - 1)


def signed(bits: int) -> Callable[[str], int]:
    """Return a decoder for a signed integer of width ``bits``."""
    return lambda value: _decode_int(value, -(2 ** (bits - 1)), 2 ** (bits - 1) - 1)


def encode_int(value: int) -> str:
    return str(value)


def decode_bytes(value: str) -> bytes:
    """Decode whitespace-separated decimal octets, e.g. ``"0 15 255"``."""
    octets = unsigned(8)
    return bytes(octets(token) for token in value.split())


def encode_bytes(value: bytes) -> str:
    return " ".join(str(octet) for octet in value)


def decode_datetime(value: str) -> datetime.datetime:
    """Decode a naive ISO 8601 timestamp; values carrying an offset are rejected."""
    parsed = datetime.datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        raise ValueError(f"timestamp {value!r} carries an offset")
    return parsed


def encode_datetime(value: datetime.datetime) -> str:
    return value.isoformat()


def decode_offset(value: str) -> datetime.timedelta:
    """
    Decode a UTC offset written as ``Z`` or ``+HH:MM[:SS[.ffffff]]``.

    Hours may run past two digits; minutes and seconds stay below 60.
    """
    if value == "Z":
        return datetime.timedelta(0)
    match = _OFFSET_RE.fullmatch(value)
    if match is None:
        raise ValueError(f"not an offset: {value!r}")
    minutes = int(match.group("minutes"))
    seconds = int(match.group("seconds") or 0)
    if minutes > 59 or seconds > 59:
        raise ValueError(f"not an offset: {value!r}")
    offset = datetime.timedelta(
        hours=int(match.group("hours")),
        minutes=minutes,
        seconds=seconds,
        microseconds=int((match.group("fraction") or "0").ljust(6, "0")),
    )
    return -offset if match.group("sign") == "-" else offset


def encode_offset(value: datetime.timedelta) -> str:
    sign = "-" if value < datetime.timedelta(0) else "+"
    total, microseconds = divmod(abs(value) // _MICROSECOND, 1_000_000)
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if microseconds:
        text += f":{seconds:02d}.{microseconds:06d}"
    elif seconds:
        text += f":{seconds:02d}"
    return text


def decode_float(value: str) -> float:
    """Decode a finite float; ``nan`` and infinities are rejected."""
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {value!r}")
    return number


def encode_float(value: float) -> str:
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {value!r}")
    return repr(value)
