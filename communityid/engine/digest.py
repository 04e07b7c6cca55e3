"""
engine/digest.py

Hash input assembly, SHA-1 computation and Community ID formatting.

Byte stream fed to SHA-1, in this exact order:

    seed (2B) | saddr (4/16B) | daddr (4/16B) | proto (1B) | 0x00 (1B)
    [ | sport (2B) | dport (2B) ]   ← only when the tuple has ports

Every segment can be handed to an observer (label, bytes) before it is
hashed. Observers only watch; they never change what gets hashed.
"""

from __future__ import annotations

import base64
import hashlib
import logging
from typing import Callable, Iterator

from ..errors import HashUnavailableError
from ..models import CanonicalTuple, Encoding
from ..normalize.encoder import pack_proto, pack_u16

logger = logging.getLogger(__name__)

ID_VERSION = "1"

SegmentObserver = Callable[[str, bytes], None]

_PADDING = b"\x00"


def new_sha1():
    """
    Fresh SHA-1 context. One per calculation, never shared.

    Raises:
        HashUnavailableError if the interpreter cannot provide SHA-1
        (e.g. an OpenSSL build with it disabled).
    """
    try:
        return hashlib.new("sha1", usedforsecurity=False)
    except ValueError as exc:
        raise HashUnavailableError(f"SHA-1 is not available: {exc}") from exc


def iter_segments(tpl: CanonicalTuple, seed: int) -> Iterator[tuple[str, bytes]]:
    """Yield (label, bytes) for each piece of hash input, in hashing order."""
    yield "seed", pack_u16(seed)
    yield "saddr", tpl.saddr
    yield "daddr", tpl.daddr
    yield "proto", pack_proto(tpl.proto)
    yield "padding", _PADDING
    if tpl.has_ports:
        yield "sport", pack_u16(tpl.sport)
        yield "dport", pack_u16(tpl.dport)


def compute_digest(
    tpl: CanonicalTuple,
    seed: int,
    observer: SegmentObserver | None = None,
) -> bytes:
    sha = new_sha1()
    for label, data in iter_segments(tpl, seed):
        if observer is not None:
            observer(label, data)
        sha.update(data)
    return sha.digest()


def format_id(digest: bytes, encoding: Encoding = Encoding.BASE64) -> str:
    """Render a digest as a version-tagged Community ID string."""
    if encoding is Encoding.HEX:
        body = digest.hex()
    else:
        body = base64.b64encode(digest).decode("ascii")
    return f"{ID_VERSION}:{body}"


def hex_dump(data: bytes) -> str:
    """'c0:a8:00:01' style rendering used by the debug dump."""
    return data.hex(":")


def log_segment(label: str, data: bytes) -> None:
    """Observer that writes each hashed segment to the debug log."""
    logger.debug("%7s %s", label, hex_dump(data))
