"""
normalize/validator.py

Input validation for a flow tuple, run before anything is encoded.

Checks run in a fixed order and stop at the first failure:
  protocol → port presence → source port → dest port → protocol-for-ports
  → source address → dest address (incl. family match) → seed

Every failure raises InputError carrying the ErrorKind and a message that
names the offending field and value.
"""

from __future__ import annotations

import ipaddress
from typing import NamedTuple, Union

from ..errors import InputError
from ..models import ErrorKind, PortValue, ProtoValue
from .protocols import parse_int, resolve_protocol, supports_ports

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_MAX_U16 = 0xFFFF


class ValidatedFlow(NamedTuple):
    proto: int
    saddr: IPAddress
    daddr: IPAddress
    sport: int | None
    dport: int | None
    seed: int


def _check_port(value: PortValue, kind: ErrorKind, label: str) -> int:
    number = parse_int(value)
    if number is None or not 0 <= number <= _MAX_U16:
        raise InputError(kind, f'invalid {label} port "{value}"')
    return number


def _check_address(value: object, kind: ErrorKind, label: str) -> IPAddress:
    # ipaddress also accepts ints and bytes; only text literals are valid here
    if not isinstance(value, str) or "%" in value:
        raise InputError(kind, f'invalid {label} IP address "{value}"')
    try:
        return ipaddress.ip_address(value)
    except ValueError:
        raise InputError(kind, f'invalid {label} IP address "{value}"') from None


def validate_seed(seed: object) -> int:
    if isinstance(seed, bool) or not isinstance(seed, int) or not 0 <= seed <= _MAX_U16:
        raise InputError(ErrorKind.INVALID_SEED, f'invalid seed value "{seed}"')
    return seed


def validate_flow(
    proto: ProtoValue,
    saddr: str,
    daddr: str,
    sport: PortValue = None,
    dport: PortValue = None,
    seed: int = 0,
) -> ValidatedFlow:
    """
    Validate and coerce every field of a flow tuple.

    Returns:
        ValidatedFlow with an integer protocol, parsed addresses,
        integer ports (or None for both) and the seed.

    Raises:
        InputError on the first invalid field.
    """
    number = resolve_protocol(proto)

    have_sport = sport is not None
    have_dport = dport is not None
    if have_sport != have_dport:
        raise InputError(ErrorKind.INVALID_PORT_MIX, f'invalid port mix "{sport}"/"{dport}"')

    src_port: int | None = None
    dst_port: int | None = None
    if have_sport:
        src_port = _check_port(sport, ErrorKind.INVALID_SOURCE_PORT, "source")
        dst_port = _check_port(dport, ErrorKind.INVALID_DEST_PORT, "dest")
        if not supports_ports(number):
            raise InputError(
                ErrorKind.INVALID_PROTOCOL_FOR_PORTS,
                f'invalid protocol "{number}" for using ports',
            )

    src = _check_address(saddr, ErrorKind.INVALID_SOURCE_ADDRESS, "source")
    dst = _check_address(daddr, ErrorKind.INVALID_DEST_ADDRESS, "dest")
    if src.version != dst.version:
        raise InputError(
            ErrorKind.INVALID_DEST_ADDRESS,
            f'invalid dest IP address "{daddr}": IPv{dst.version} '
            f"does not match IPv{src.version} source",
        )

    return ValidatedFlow(
        proto=number,
        saddr=src,
        daddr=dst,
        sport=src_port,
        dport=dst_port,
        seed=validate_seed(seed),
    )
