"""Diagnostics package.

Light-weight tables print with the standard library only; the leap barcode
plot needs the diagnostics extras (numpy, matplotlib).
"""

__all__ = ["pretty_month", "new_years_table", "leap_years"]
