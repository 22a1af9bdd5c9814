"""Diagnostics package.

- pretty_month, new_years_table, round_trip: core only
- watat_years, thingyan_scatter: need numpy + matplotlib (the diagnostics extra)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "watat_years", "thingyan_scatter"]
