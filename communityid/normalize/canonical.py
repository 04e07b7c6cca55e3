"""
normalize/canonical.py

Endpoint ordering: turns a validated flow into a CanonicalTuple so that both
directions of the same flow produce identical hash input.

Ordering rule:
    - Smaller packed address (byte-wise) → src side
    - Equal addresses with ports: smaller port → src side
    - Otherwise swap endpoints and ports together

ICMP/ICMPv6 "ports" are first replaced via the type map. Tuples whose message
type has no counterpart are one-way and are left in the given order.
"""

from __future__ import annotations

import logging

from ..models import CanonicalTuple
from .encoder import pack_address
from .icmp import type_map_for
from .validator import ValidatedFlow

logger = logging.getLogger(__name__)


def order_endpoints(
    saddr: bytes,
    daddr: bytes,
    sport: int | None,
    dport: int | None,
) -> tuple[bytes, bytes, int | None, int | None]:
    """Return (saddr, daddr, sport, dport) with the lower endpoint first."""
    if saddr < daddr:
        return saddr, daddr, sport, dport
    if saddr == daddr and sport is not None and dport is not None and sport < dport:
        return saddr, daddr, sport, dport
    return daddr, saddr, dport, sport


def canonicalize(flow: ValidatedFlow) -> CanonicalTuple:
    """
    Build the CanonicalTuple for a validated flow.

    Never reorders a one-way ICMP tuple.
    """
    sport, dport = flow.sport, flow.dport
    is_one_way = False

    type_map = type_map_for(flow.proto)
    if type_map is not None and sport is not None and dport is not None:
        sport, dport, is_one_way = type_map.resolve(sport, dport)
        if is_one_way:
            logger.debug("%s type %d has no counterpart; keeping tuple order", type_map.name, sport)

    saddr = pack_address(flow.saddr)
    daddr = pack_address(flow.daddr)
    if not is_one_way:
        saddr, daddr, sport, dport = order_endpoints(saddr, daddr, sport, dport)

    return CanonicalTuple(saddr=saddr, daddr=daddr, proto=flow.proto, sport=sport, dport=dport)
