from __future__ import annotations
from typing import Callable, Dict, Optional, Sequence, Tuple

from ..core.types import Marker, MyanmarDate

MarkerFunc = Callable[[MyanmarDate, int], bool]
_REGISTRY: Dict[Marker, MarkerFunc] = {}

def register_marker(marker: Marker, fn: MarkerFunc) -> None:
    _REGISTRY[marker] = fn

def list_markers() -> Tuple[Marker, ...]:
    return tuple(_REGISTRY)

def compute_markers(d: MyanmarDate, weekday: int, names: Optional[Sequence[Marker]] = None) -> Tuple[Marker, ...]:
    """Markers that hold for the day, in registration order (or in the order of names)."""
    if names is None:
        names = list(_REGISTRY)
    out = []
    for name in names:
        # Enum members hash by member name, so plain strings are normalized first.
        try:
            marker = Marker(name)
        except ValueError:
            marker = None
        if marker is None or marker not in _REGISTRY:
            raise KeyError(f"Unknown marker '{name}'. Available: {sorted(m.value for m in _REGISTRY)}")
        if _REGISTRY[marker](d, weekday):
            out.append(marker)
    return tuple(out)
