"""engine/__init__.py"""
from .digest import ID_VERSION, compute_digest, format_id, iter_segments
from .engine import CommunityIDEngine, calc, default_engine

__all__ = [
    "CommunityIDEngine",
    "calc",
    "default_engine",
    "ID_VERSION",
    "compute_digest",
    "format_id",
    "iter_segments",
]
