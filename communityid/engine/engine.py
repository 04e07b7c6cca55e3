"""
engine/engine.py

CommunityIDEngine — validates a flow tuple, canonicalizes it and renders
its Community ID.

Malformed input is an expected condition: calc() reports one message to the
error sink and returns None instead of raising. The engine holds only
immutable configuration, so one instance can serve any number of threads.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Callable

from ..errors import InputError
from ..models import Encoding, FlowTuple, PortValue, ProtoValue
from ..normalize import canonicalize, validate_flow
from .digest import SegmentObserver, compute_digest, format_id, log_segment, new_sha1

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)

ErrorSink = Callable[[str], None]


def log_error(msg: str) -> None:
    """Default error sink."""
    logger.warning("Community ID not computed: %s", msg)


class CommunityIDEngine:
    def __init__(
        self,
        seed: int = 0,
        use_base64: bool = True,
        error_sink: ErrorSink | None = None,
        observer: SegmentObserver | None = None,
        debug: bool = False,
    ) -> None:
        # Fail here rather than on every calc() when SHA-1 is missing
        new_sha1()

        self.seed = seed
        self.encoding = Encoding.BASE64 if use_base64 else Encoding.HEX
        self._error_sink: ErrorSink = error_sink if error_sink is not None else log_error
        if observer is None and debug:
            observer = log_segment
        self._observer = observer
        logger.debug(
            "CommunityIDEngine ready — seed=%r encoding=%s observer=%s",
            seed,
            self.encoding.value,
            getattr(observer, "__name__", observer) if observer else "none",
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> CommunityIDEngine:
        """Build an engine from a Settings instance; kwargs take precedence."""
        kwargs.setdefault("seed", settings.SEED)
        kwargs.setdefault("use_base64", settings.USE_BASE64)
        kwargs.setdefault("debug", settings.DEBUG)
        return cls(**kwargs)

    def calc(
        self,
        proto: ProtoValue,
        saddr: str,
        daddr: str,
        sport: PortValue = None,
        dport: PortValue = None,
        seed: int | None = None,
        use_base64: bool | None = None,
    ) -> str | None:
        """
        Compute the Community ID of one flow tuple.

        Args:
            proto:      Protocol name ('tcp', 'ICMP6', ...) or number (0–255).
            saddr:      Source IPv4/IPv6 address text.
            daddr:      Destination address text, same family as saddr.
            sport:      Source port, or ICMP type. Omit together with dport
                        to hash the address pair only.
            dport:      Destination port, or ICMP code.
            seed:       Per-call override of the engine seed (0–65535).
            use_base64: Per-call override of the engine encoding.

        Returns:
            '1:<digest>' on success, None after reporting an input error.
        """
        if seed is None:
            seed = self.seed
        if use_base64 is None:
            encoding = self.encoding
        else:
            encoding = Encoding.BASE64 if use_base64 else Encoding.HEX

        try:
            flow = validate_flow(proto, saddr, daddr, sport, dport, seed)
        except InputError as exc:
            logger.debug("Rejected tuple (%s): %s", exc.kind.value, exc)
            self._error_sink(str(exc))
            return None

        tpl = canonicalize(flow)
        digest = compute_digest(tpl, flow.seed, self._observer)
        return format_id(digest, encoding)

    def calc_tuple(self, flow: FlowTuple, **kwargs) -> str | None:
        """calc() for a FlowTuple; kwargs are seed / use_base64 overrides."""
        return self.calc(flow.proto, flow.saddr, flow.daddr, flow.sport, flow.dport, **kwargs)

    def __repr__(self) -> str:
        return f"<CommunityIDEngine seed={self.seed!r} encoding={self.encoding.value}>"


@functools.lru_cache(maxsize=1)
def default_engine() -> CommunityIDEngine:
    return CommunityIDEngine()


def calc(
    proto: ProtoValue,
    saddr: str,
    daddr: str,
    sport: PortValue = None,
    dport: PortValue = None,
    seed: int = 0,
    use_base64: bool = True,
    error_sink: ErrorSink | None = None,
) -> str | None:
    """
    Module-level shortcut, e.g.

        >>> calc("tcp", "128.232.110.120", "66.35.250.204", 34855, 80)
        '1:LQU9qZlK+B5F3KDmev6m5PMibrg='
    """
    engine = default_engine() if error_sink is None else CommunityIDEngine(error_sink=error_sink)
    return engine.calc(proto, saddr, daddr, sport, dport, seed=seed, use_base64=use_base64)
