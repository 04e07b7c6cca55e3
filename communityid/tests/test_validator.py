"""
tests/test_validator.py

Tests for normalize/validator.py and normalize/protocols.py — protocol
resolution, port coercion, address parsing and seed range checks.
"""

from __future__ import annotations

import ipaddress

import pytest

from communityid.errors import InputError
from communityid.models import ErrorKind
from communityid.normalize.protocols import parse_int, resolve_protocol, supports_ports
from communityid.normalize.validator import validate_flow, validate_seed


# ---------------------------------------------------------------------------
# Protocol resolution
# ---------------------------------------------------------------------------

class TestResolveProtocol:

    @pytest.mark.parametrize("name,number", [
        ("icmp", 1), ("tcp", 6), ("udp", 17), ("icmp6", 58), ("sctp", 132),
        ("TCP", 6), ("Icmp6", 58),
    ])
    def test_names(self, name, number):
        assert resolve_protocol(name) == number

    @pytest.mark.parametrize("value,number", [(0, 0), (46, 46), (255, 255), ("47", 47)])
    def test_numbers(self, value, number):
        assert resolve_protocol(value) == number

    @pytest.mark.parametrize("value", ["foo", "", None, -1, 256, "300", "6x", True, 6.0, {}])
    def test_invalid(self, value):
        with pytest.raises(InputError) as exc_info:
            resolve_protocol(value)
        assert exc_info.value.kind is ErrorKind.INVALID_PROTOCOL
        assert str(exc_info.value) == f'invalid protocol "{value}"'

    def test_supports_ports(self):
        assert all(supports_ports(p) for p in (1, 6, 17, 58, 132))
        assert not supports_ports(46)


class TestParseInt:

    def test_int_passthrough(self):
        assert parse_int(80) == 80

    def test_decimal_string(self):
        assert parse_int("80") == 80

    def test_rejects_partial_numeric(self):
        assert parse_int("80abc") is None

    def test_rejects_bool(self):
        assert parse_int(True) is None

    def test_rejects_other_types(self):
        assert parse_int([80]) is None

    @pytest.mark.parametrize("text", ["1_000", "8_0", "\uff18\uff10", "\u0668\u0660", "0x50", "8 0", ""])
    def test_rejects_non_ascii_decimal_forms(self, text):
        assert parse_int(text) is None

    def test_accepts_sign_and_whitespace(self):
        assert parse_int(" +80 ") == 80
        assert parse_int("-10") == -10


# ---------------------------------------------------------------------------
# validate_flow — happy path
# ---------------------------------------------------------------------------

class TestValidateFlow:

    def test_full_tuple(self):
        flow = validate_flow("tcp", "10.0.0.1", "10.0.0.2", "1234", 80, seed=7)
        assert flow.proto == 6
        assert flow.saddr == ipaddress.ip_address("10.0.0.1")
        assert flow.daddr == ipaddress.ip_address("10.0.0.2")
        assert flow.sport == 1234
        assert flow.dport == 80
        assert flow.seed == 7

    def test_address_pair_only(self):
        flow = validate_flow(46, "10.1.24.4", "10.1.12.1")
        assert flow.sport is None
        assert flow.dport is None

    def test_any_protocol_without_ports(self):
        flow = validate_flow(250, "10.0.0.1", "10.0.0.2")
        assert flow.proto == 250

    def test_ipv6(self):
        flow = validate_flow("udp", "2001:db8::1", "::ffff:10.0.0.1", 53, 53)
        assert flow.saddr.version == 6
        assert flow.daddr.version == 6

    def test_port_bounds_inclusive(self):
        flow = validate_flow("udp", "10.0.0.1", "10.0.0.2", 0, 65535)
        assert (flow.sport, flow.dport) == (0, 65535)


# ---------------------------------------------------------------------------
# validate_flow — failures
# ---------------------------------------------------------------------------

class TestValidateFlowErrors:

    def _kind(self, *args, **kwargs) -> ErrorKind:
        with pytest.raises(InputError) as exc_info:
            validate_flow(*args, **kwargs)
        return exc_info.value.kind

    def test_port_mix(self):
        assert self._kind("tcp", "1.2.3.4", "2.3.4.5", None, 80) is ErrorKind.INVALID_PORT_MIX
        assert self._kind("tcp", "1.2.3.4", "2.3.4.5", 80, None) is ErrorKind.INVALID_PORT_MIX

    def test_source_port(self):
        assert self._kind("tcp", "1.2.3.4", "2.3.4.5", 65536, 80) is ErrorKind.INVALID_SOURCE_PORT

    def test_dest_port(self):
        assert self._kind("tcp", "1.2.3.4", "2.3.4.5", 80, "http") is ErrorKind.INVALID_DEST_PORT

    def test_source_port_checked_first(self):
        assert self._kind("tcp", "1.2.3.4", "2.3.4.5", -1, -1) is ErrorKind.INVALID_SOURCE_PORT

    def test_protocol_for_ports(self):
        assert self._kind(46, "1.2.3.4", "2.3.4.5", 1, 2) is ErrorKind.INVALID_PROTOCOL_FOR_PORTS

    def test_protocol_checked_before_addresses(self):
        assert self._kind("foo", "bad", "bad") is ErrorKind.INVALID_PROTOCOL

    def test_source_address(self):
        assert self._kind("tcp", "1.2.3", "2.3.4.5", 1, 2) is ErrorKind.INVALID_SOURCE_ADDRESS

    def test_dest_address(self):
        assert self._kind("tcp", "1.2.3.4", "1:2:3", 1, 2) is ErrorKind.INVALID_DEST_ADDRESS

    @pytest.mark.parametrize("addr", [
        "1::2::3",                                  # two compression runs
        "12345::1",                                 # group wider than 4 digits
        "g::1",                                     # non-hex group
        "1:2:3:4:5:6:7:8:9",                        # too many groups
        "fe80::1%eth0",                             # scoped
        "256.1.1.1",
        16909060,                                   # integer, not text
        b"\x01\x02\x03\x04",
    ])
    def test_malformed_addresses(self, addr):
        assert self._kind("tcp", addr, "2.3.4.5", 1, 2) is ErrorKind.INVALID_SOURCE_ADDRESS

    def test_mixed_family(self):
        assert self._kind("tcp", "2001:db8::1", "10.0.0.1", 1, 2) is ErrorKind.INVALID_DEST_ADDRESS

    @pytest.mark.parametrize("seed", [-1, 65536, "1", None, True, 1.0])
    def test_seed(self, seed):
        assert self._kind("tcp", "1.2.3.4", "2.3.4.5", 1, 2, seed=seed) is ErrorKind.INVALID_SEED


class TestValidateSeed:

    @pytest.mark.parametrize("seed", [0, 1, 65535])
    def test_valid(self, seed):
        assert validate_seed(seed) == seed

    def test_message(self):
        with pytest.raises(InputError, match='invalid seed value "70000"'):
            validate_seed(70000)


class TestNumericFormsInFlow:

    def test_underscore_port_rejected(self):
        with pytest.raises(InputError) as exc_info:
            validate_flow("tcp", "1.2.3.4", "2.3.4.5", "1_000", "80")
        assert exc_info.value.kind is ErrorKind.INVALID_SOURCE_PORT

    def test_fullwidth_dest_port_rejected(self):
        with pytest.raises(InputError) as exc_info:
            validate_flow("tcp", "1.2.3.4", "2.3.4.5", "80", "８０")
        assert exc_info.value.kind is ErrorKind.INVALID_DEST_PORT

    def test_non_ascii_protocol_number_rejected(self):
        with pytest.raises(InputError) as exc_info:
            validate_flow("６", "1.2.3.4", "2.3.4.5", "80", "443")
        assert exc_info.value.kind is ErrorKind.INVALID_PROTOCOL
