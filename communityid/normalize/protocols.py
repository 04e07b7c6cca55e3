"""
normalize/protocols.py

Protocol resolution: name or number → canonical IANA protocol number.

Names are matched case-insensitively against the five protocols that carry
port (or ICMP type/code) semantics. Anything else must be numeric.
"""

from __future__ import annotations

import re
from types import MappingProxyType

from ..errors import InputError
from ..models import (
    PROTO_ICMP,
    PROTO_ICMP6,
    PROTO_SCTP,
    PROTO_TCP,
    PROTO_UDP,
    ErrorKind,
    ProtoValue,
)

PROTOCOL_NAMES: MappingProxyType[str, int] = MappingProxyType({
    "icmp":  PROTO_ICMP,
    "tcp":   PROTO_TCP,
    "udp":   PROTO_UDP,
    "icmp6": PROTO_ICMP6,
    "sctp":  PROTO_SCTP,
})

PORT_PROTOCOLS: frozenset[int] = frozenset(PROTOCOL_NAMES.values())

# ASCII digits only: int() would also take "1_000" and non-ASCII digits
_DECIMAL = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_int(value: object) -> int | None:
    """
    Coerce an int or a decimal string to int.

    Returns None for anything else, including bools, strings that are not
    entirely ASCII decimal digits, underscore separators and non-ASCII digits.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _DECIMAL.fullmatch(text) is None:
            return None
        return int(text, 10)
    return None


def resolve_protocol(proto: ProtoValue) -> int:
    """
    Resolve a protocol name or number to an integer in [0, 255].

    Raises:
        InputError(INVALID_PROTOCOL) for unknown names, non-numeric input
        and out-of-range numbers.
    """
    if isinstance(proto, str):
        known = PROTOCOL_NAMES.get(proto.strip().lower())
        if known is not None:
            return known

    number = parse_int(proto)
    if number is None or not 0 <= number <= 0xFF:
        raise InputError(ErrorKind.INVALID_PROTOCOL, f'invalid protocol "{proto}"')
    return number


def supports_ports(proto: int) -> bool:
    """True when endpoint swapping is known to be valid for ported tuples of ``proto``."""
    return proto in PORT_PROTOCOLS
