"""Diagnostics package.

- round_trip: random Gregorian -> calendar -> Gregorian checks for any served calendar
- leap_months: Chinese leap-month table; --plot needs the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["round_trip", "leap_months"]
