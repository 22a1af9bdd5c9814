"""
mmcal.core.constants
--------------------
Astronomical and historical constants of the Myanmar calendar (Thandeikta
reckoning as used by the modern Myanmar calendar).
"""

from __future__ import annotations

# Solar year: 1577917828 days per 4320000 years (~365.2587565 days)
SY = 1577917828.0 / 4320000.0

# Lunar month: 1577917828 days per 53433336 months (~29.53058795 days)
LM = 1577917828.0 / 53433336.0

# Julian date of the beginning of Myanmar Era 0
MO = 1954168.050623

# First year of the third era (post-independence reckoning)
SE3 = 1312

# First Myanmar year from which Thingyan days are labelled
BGNTG = 1100

# Atat-to-akya offsets (days) before and from SE3
AKYA_OFFSET_SE3 = 2.169918982
AKYA_OFFSET_OLD = 2.1675

# Myanmar year -> Sasana (Buddhist Era) year
SASANA_OFFSET = 1182

# Julian day of Gregorian adoption in the British Empire (1752-09-14)
BRITISH_SWITCHOVER_JDN = 2361222
