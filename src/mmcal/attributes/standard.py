from __future__ import annotations
from typing import Tuple

from ..core.types import Marker, MyanmarDate
from . import astro
from .registry import compute_markers, register_marker

# Registration order is the order markers are reported in.
register_marker(Marker.THAMANYO, lambda d, wd: astro.thamanyo(d.month, wd))
register_marker(Marker.AMYEITTASOTE, lambda d, wd: astro.amyeittasote(d.day, wd))
register_marker(Marker.WARAMEITTUGYI, lambda d, wd: astro.warameittugyi(d.day, wd))
register_marker(Marker.WARAMEITTUNGE, lambda d, wd: astro.warameittunge(d.day, wd))
register_marker(Marker.YATPOTE, lambda d, wd: astro.yatpote(d.day, wd))
register_marker(Marker.THAMAPHYU, lambda d, wd: astro.thamaphyu(d.day, wd))
register_marker(Marker.NAGAPOR, lambda d, wd: astro.nagapor(d.day, wd))
register_marker(Marker.YATYOTEMA, lambda d, wd: astro.yatyotema(d.month, d.day))
register_marker(Marker.MAHAYATKYAN, lambda d, wd: astro.mahayatkyan(d.month, d.day))
register_marker(Marker.SHANYAT, lambda d, wd: astro.shanyat(d.month, d.day))


def astro_markers(d: MyanmarDate, weekday: int) -> Tuple[Marker, ...]:
    return compute_markers(d, weekday)
