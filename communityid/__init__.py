"""
communityid — Community ID flow hashing.

    >>> import communityid
    >>> communityid.calc("udp", "192.168.1.52", "8.8.8.8", 54585, 53)
    '1:d/FP5EW3wiY1vCndhwleRRKHowQ='
"""

from .engine import CommunityIDEngine, calc
from .errors import HashUnavailableError, InputError
from .models import CanonicalTuple, Encoding, ErrorKind, FlowTuple

__version__ = "1.0.0"

__all__ = [
    "CommunityIDEngine",
    "calc",
    "HashUnavailableError",
    "InputError",
    "CanonicalTuple",
    "Encoding",
    "ErrorKind",
    "FlowTuple",
]
