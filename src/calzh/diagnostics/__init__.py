"""Diagnostics package.

Light-weight checks and printouts over the registered engines.
"""

__all__ = ["pretty_month", "round_trip"]
