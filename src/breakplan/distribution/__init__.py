from __future__ import annotations

from .base import Distributor
from .registry import compute_first, default_registry, get_distributor, normalize_registry

__all__ = [
    "Distributor",
    "compute_first",
    "default_registry",
    "get_distributor",
    "normalize_registry",
]
