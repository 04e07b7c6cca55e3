"""
communityid/models.py

Shared types for every stage of the Community ID computation.

Encoding       — output encoding of the digest
ErrorKind      — taxonomy of rejected inputs
FlowTuple      — caller-facing flow description (pre-validation)
IcmpResolution — result of mapping an ICMP type/code pair
CanonicalTuple — validated, byte-encoded, endpoint-ordered tuple ready to hash
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union

PortValue = Union[int, str, None]
ProtoValue = Union[int, str, None]

# IANA protocol numbers for the protocols with port (or type/code) semantics
PROTO_ICMP = 1
PROTO_TCP = 6
PROTO_UDP = 17
PROTO_ICMP6 = 58
PROTO_SCTP = 132


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Encoding(str, Enum):
    BASE64 = "base64"
    HEX    = "hex"


class ErrorKind(str, Enum):
    INVALID_PROTOCOL           = "InvalidProtocol"
    INVALID_PROTOCOL_FOR_PORTS = "InvalidProtocolForPorts"
    INVALID_PORT_MIX           = "InvalidPortMix"
    INVALID_SOURCE_PORT        = "InvalidSourcePort"
    INVALID_DEST_PORT          = "InvalidDestPort"
    INVALID_SOURCE_ADDRESS     = "InvalidSourceAddress"
    INVALID_DEST_ADDRESS       = "InvalidDestAddress"
    INVALID_SEED               = "InvalidSeed"


# ---------------------------------------------------------------------------
# FlowTuple — what the caller observed
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class FlowTuple:
    """
    A flow as observed by one tool, before any validation.

    For ICMP and ICMPv6, ``sport`` carries the message type and ``dport``
    the message code.
    """

    proto: ProtoValue
    """Protocol name ('tcp', 'UDP', ...) or IANA number (6, '17', ...)."""

    saddr: str
    """Source IP address, IPv4 or IPv6 text."""

    daddr: str
    """Destination IP address, same family as saddr."""

    sport: PortValue = None
    """Source port / ICMP type. None for address-pair-only tuples."""

    dport: PortValue = None
    """Destination port / ICMP code. None for address-pair-only tuples."""

    @classmethod
    def make_tcp(cls, saddr: str, daddr: str, sport: PortValue, dport: PortValue) -> FlowTuple:
        return cls(PROTO_TCP, saddr, daddr, sport, dport)

    @classmethod
    def make_udp(cls, saddr: str, daddr: str, sport: PortValue, dport: PortValue) -> FlowTuple:
        return cls(PROTO_UDP, saddr, daddr, sport, dport)

    @classmethod
    def make_sctp(cls, saddr: str, daddr: str, sport: PortValue, dport: PortValue) -> FlowTuple:
        return cls(PROTO_SCTP, saddr, daddr, sport, dport)

    @classmethod
    def make_icmp(cls, saddr: str, daddr: str, mtype: PortValue, mcode: PortValue) -> FlowTuple:
        return cls(PROTO_ICMP, saddr, daddr, mtype, mcode)

    @classmethod
    def make_icmp6(cls, saddr: str, daddr: str, mtype: PortValue, mcode: PortValue) -> FlowTuple:
        return cls(PROTO_ICMP6, saddr, daddr, mtype, mcode)

    @classmethod
    def make_ip(cls, saddr: str, daddr: str, proto: ProtoValue) -> FlowTuple:
        """Address-pair-only tuple for any IP protocol."""
        return cls(proto, saddr, daddr)

    def __repr__(self) -> str:
        if self.sport is None and self.dport is None:
            return f"FlowTuple({self.saddr}→{self.daddr}/{self.proto})"
        return (
            f"FlowTuple({self.saddr}:{self.sport}"
            f"→{self.daddr}:{self.dport}"
            f"/{self.proto})"
        )


# ---------------------------------------------------------------------------
# IcmpResolution — output of the ICMP type mapper
# ---------------------------------------------------------------------------

class IcmpResolution(NamedTuple):
    mtype: int
    mcode: int
    is_one_way: bool


# ---------------------------------------------------------------------------
# CanonicalTuple — hashable, normalised, byte-encoded tuple
# ---------------------------------------------------------------------------

class CanonicalTuple(NamedTuple):
    """
    Flow tuple in hashing order.

    Addresses are packed network-order bytes (4 or 16 each, never mixed).
    Ports are None for address-pair-only tuples. Built fresh per call.
    """

    saddr: bytes
    daddr: bytes
    proto: int
    sport: int | None
    dport: int | None

    @property
    def has_ports(self) -> bool:
        return self.sport is not None

    def __repr__(self) -> str:
        return (
            f"CanonicalTuple({self.saddr.hex()}:{self.sport}"
            f"→{self.daddr.hex()}:{self.dport}"
            f"/{self.proto})"
        )
