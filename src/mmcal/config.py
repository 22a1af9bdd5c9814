"""
mmcal.config
------------
Calendar configuration: which Western calendar civil dates are read and
written in, and where the auto mode switches from Julian to Gregorian.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from mmcal.core.constants import BRITISH_SWITCHOVER_JDN
from mmcal.core.errors import ConfigError
from mmcal.core.types import CalendarType


@dataclass(frozen=True)
class CalendarConfig:
    calendar_type: CalendarType = CalendarType.AUTO
    # First Gregorian JDN in auto mode (British adoption, 1752-09-14)
    switchover_jdn: float = BRITISH_SWITCHOVER_JDN

    def __post_init__(self) -> None:
        try:
            ct = CalendarType(self.calendar_type)
        except ValueError:
            raise ConfigError(f"Unknown calendar type {self.calendar_type!r}") from None
        object.__setattr__(self, "calendar_type", ct)

    @staticmethod
    def named(calendar: str, **kwargs) -> "CalendarConfig":
        """Build from a calendar name: 'auto', 'gregorian' or 'julian'."""
        try:
            ct = CalendarType[calendar.upper()]
        except KeyError:
            raise ConfigError(f"Unknown calendar '{calendar}'. Available: {[c.name.lower() for c in CalendarType]}") from None
        return CalendarConfig(calendar_type=ct, **kwargs)

    def tweak(self, **kwargs) -> "CalendarConfig":
        return replace(self, **kwargs)


DEFAULT_CONFIG = CalendarConfig()
