"""
normalize/icmp.py

ICMP and ICMPv6 message-type equivalence.

ICMP has no ports. Community ID hashes the message type in place of the
source port and, for types with a known request/reply counterpart, the
counterpart type in place of the destination port. Both directions of an
exchange then produce the same (type, counterpart) pair and can be ordered
like any other flow.

Types without a counterpart keep their original code and are flagged
one-way: such tuples are hashed exactly as given, with no endpoint ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..models import PROTO_ICMP, PROTO_ICMP6, IcmpResolution

# ICMPv4 message types (RFC 792, RFC 950, RFC 1256)
ICMP_ECHO_REPLY   = 0
ICMP_ECHO         = 8
ICMP_RTR_ADVERT   = 9
ICMP_RTR_SOLICIT  = 10
ICMP_TSTAMP       = 13
ICMP_TSTAMP_REPLY = 14
ICMP_INFO         = 15
ICMP_INFO_REPLY   = 16
ICMP_MASK         = 17
ICMP_MASK_REPLY   = 18

# ICMPv6 message types (RFC 4443, RFC 2710, RFC 4861, RFC 4620, RFC 6275)
ICMP6_ECHO_REQUEST        = 128
ICMP6_ECHO_REPLY          = 129
ICMP6_MLD_LISTENER_QUERY  = 130
ICMP6_MLD_LISTENER_REPORT = 131
ICMP6_ND_ROUTER_SOLICIT   = 133
ICMP6_ND_ROUTER_ADVERT    = 134
ICMP6_ND_NEIGHBOR_SOLICIT = 135
ICMP6_ND_NEIGHBOR_ADVERT  = 136
ICMP6_WRU_REQUEST         = 139
ICMP6_WRU_REPLY           = 140
ICMP6_HAAD_REQUEST        = 144
ICMP6_HAAD_REPLY          = 145


def _symmetric(*pairs: tuple[int, int]) -> Mapping[int, int]:
    table: dict[int, int] = {}
    for a, b in pairs:
        table[a] = b
        table[b] = a
    return MappingProxyType(table)


@dataclass(frozen=True)
class IcmpTypeMap:
    """Read-only request/reply table for one ICMP family."""

    name: str
    pairs: Mapping[int, int]

    def resolve(self, mtype: int, mcode: int) -> IcmpResolution:
        """
        Map (type, code) to the values hashed in the port slots.

        Known types → (type, counterpart type, False).
        Unknown types → (type, code, True): one-way, do not reorder.
        """
        counterpart = self.pairs.get(mtype)
        if counterpart is None:
            return IcmpResolution(mtype, mcode, True)
        return IcmpResolution(mtype, counterpart, False)

    def __repr__(self) -> str:
        return f"<IcmpTypeMap:{self.name} types={len(self.pairs)}>"


ICMP4_TYPES = IcmpTypeMap(
    name="icmp",
    pairs=_symmetric(
        (ICMP_ECHO, ICMP_ECHO_REPLY),
        (ICMP_TSTAMP, ICMP_TSTAMP_REPLY),
        (ICMP_INFO, ICMP_INFO_REPLY),
        (ICMP_RTR_SOLICIT, ICMP_RTR_ADVERT),
        (ICMP_MASK, ICMP_MASK_REPLY),
    ),
)

ICMP6_TYPES = IcmpTypeMap(
    name="icmp6",
    pairs=_symmetric(
        (ICMP6_ECHO_REQUEST, ICMP6_ECHO_REPLY),
        (ICMP6_MLD_LISTENER_QUERY, ICMP6_MLD_LISTENER_REPORT),
        (ICMP6_ND_ROUTER_SOLICIT, ICMP6_ND_ROUTER_ADVERT),
        (ICMP6_ND_NEIGHBOR_SOLICIT, ICMP6_ND_NEIGHBOR_ADVERT),
        (ICMP6_WRU_REQUEST, ICMP6_WRU_REPLY),
        (ICMP6_HAAD_REQUEST, ICMP6_HAAD_REPLY),
    ),
)

_BY_PROTOCOL: Mapping[int, IcmpTypeMap] = MappingProxyType({
    PROTO_ICMP:  ICMP4_TYPES,
    PROTO_ICMP6: ICMP6_TYPES,
})


def type_map_for(proto: int) -> IcmpTypeMap | None:
    """Return the ICMP table for ``proto``, or None for non-ICMP protocols."""
    return _BY_PROTOCOL.get(proto)
