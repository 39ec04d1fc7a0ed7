"""Pricing engine and service-area checks for roll-off dumpster rentals."""

__version__ = "1.0.0"
