"""
normalize/encoder.py

Fixed-width binary encoding of flow tuple fields.

    address → 4 bytes (IPv4) or 16 bytes (IPv6), network order
    port    → 2 bytes, network order (also used for the seed)
    proto   → 1 byte
"""

from __future__ import annotations

import struct

from .validator import IPAddress

_U16 = struct.Struct("!H")
_U8 = struct.Struct("!B")


def pack_address(addr: IPAddress) -> bytes:
    return addr.packed


def pack_u16(value: int) -> bytes:
    """Big-endian 16-bit encoding for ports, ICMP type/code and the seed."""
    return _U16.pack(value)


def pack_proto(proto: int) -> bytes:
    return _U8.pack(proto)
